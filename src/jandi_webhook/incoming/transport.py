"""공유 HTTP 트랜스포트 설정.

클라이언트 인스턴스마다 트랜스포트를 한 번만 만들고 모든 전송에서 재사용한다.
호출마다 새로 만들면 커넥션 재사용이 깨진다.
"""

from __future__ import annotations

import socket
from dataclasses import dataclass

import httpx

from jandi_webhook.settings import WebhookSettings


@dataclass(frozen=True)
class TransportConfig:
    """타임아웃/커넥션 풀 프로필 (단위: 초)."""

    connect_timeout: float = 10.0
    tls_handshake_timeout: float = 10.0
    response_header_timeout: float = 10.0
    keep_alive: float = 300.0
    idle_timeout: float = 90.0
    max_connections: int = 100
    max_keepalive_connections: int = 20

    @classmethod
    def from_settings(cls, settings: WebhookSettings) -> TransportConfig:
        return cls(
            connect_timeout=settings.connect_timeout,
            tls_handshake_timeout=settings.tls_handshake_timeout,
            response_header_timeout=settings.response_header_timeout,
            keep_alive=settings.keep_alive,
            idle_timeout=settings.idle_timeout,
        )

    def timeout(self) -> httpx.Timeout:
        # httpx의 connect 단계는 TCP 연결과 TLS 핸드셰이크를 함께 포함한다.
        return httpx.Timeout(
            connect=self.connect_timeout + self.tls_handshake_timeout,
            read=self.response_header_timeout,
            write=self.response_header_timeout,
            pool=self.connect_timeout,
        )

    def limits(self) -> httpx.Limits:
        return httpx.Limits(
            max_connections=self.max_connections,
            max_keepalive_connections=self.max_keepalive_connections,
            keepalive_expiry=self.idle_timeout,
        )

    def socket_options(self) -> list[tuple[int, int, int]]:
        """TCP keep-alive 소켓 옵션.

        TCP_KEEPIDLE/TCP_KEEPINTVL은 플랫폼에 따라 없을 수 있으므로 있는 것만 설정한다.
        """
        options = [(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1)]
        interval = max(int(self.keep_alive), 1)
        for name in ("TCP_KEEPIDLE", "TCP_KEEPINTVL"):
            opt = getattr(socket, name, None)
            if opt is not None:
                options.append((socket.IPPROTO_TCP, opt, interval))
        return options

    def build_transport(self) -> httpx.HTTPTransport:
        return httpx.HTTPTransport(limits=self.limits(), socket_options=self.socket_options())

    def build_async_transport(self) -> httpx.AsyncHTTPTransport:
        return httpx.AsyncHTTPTransport(limits=self.limits(), socket_options=self.socket_options())
