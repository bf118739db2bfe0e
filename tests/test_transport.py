import socket

import httpx

from jandi_webhook.incoming.transport import TransportConfig


def test_default_timeout_profile() -> None:
    timeout = TransportConfig().timeout()

    assert timeout.connect == 20.0
    assert timeout.read == 10.0
    assert timeout.write == 10.0
    assert timeout.pool == 10.0


def test_idle_timeout_maps_to_keepalive_expiry() -> None:
    limits = TransportConfig(idle_timeout=45.0).limits()

    assert limits.keepalive_expiry == 45.0


def test_socket_options_enable_keepalive() -> None:
    options = TransportConfig(keep_alive=120.0).socket_options()

    assert (socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1) in options
    if hasattr(socket, "TCP_KEEPIDLE"):
        assert (socket.IPPROTO_TCP, socket.TCP_KEEPIDLE, 120) in options


def test_build_transports() -> None:
    config = TransportConfig()

    assert isinstance(config.build_transport(), httpx.HTTPTransport)
    assert isinstance(config.build_async_transport(), httpx.AsyncHTTPTransport)
