import asyncio
import json

import httpx
import pytest
import respx
from httpx import Response

from jandi_webhook.errors import RemoteError, RequestConstructionError, TransportError
from jandi_webhook.incoming.async_client import AsyncIncomingClient
from jandi_webhook.incoming.protocols import AsyncIncomingSender
from jandi_webhook.schemas import connect_info_from


@pytest.mark.asyncio
@respx.mock
async def test_async_send_success(webhook_url, quiet_logger) -> None:
    route = respx.post(webhook_url).mock(return_value=Response(200, text="ok"))

    async with AsyncIncomingClient(webhook_url, logger=quiet_logger) as client:
        result = await client.send_incoming_with_title(
            "알림", "hello", "#FF0000", connect_info_from("t", "d")
        )

    assert result == "ok"
    assert json.loads(route.calls.last.request.content) == {
        "title": "알림",
        "body": "hello",
        "connectColor": "#FF0000",
        "connectInfo": [{"title": "t", "description": "d"}],
    }


@pytest.mark.asyncio
@respx.mock
async def test_async_remote_error(webhook_url, quiet_logger) -> None:
    respx.post(webhook_url).mock(return_value=Response(404))

    async with AsyncIncomingClient(webhook_url, logger=quiet_logger) as client:
        with pytest.raises(RemoteError, match="^HTTP 404$"):
            await client.send_incoming("hello")


@pytest.mark.asyncio
@respx.mock
async def test_async_transport_error(webhook_url, quiet_logger) -> None:
    respx.post(webhook_url).mock(side_effect=httpx.ConnectError("Connection refused"))

    async with AsyncIncomingClient(webhook_url, logger=quiet_logger) as client:
        with pytest.raises(TransportError) as exc_info:
            await client.send_incoming("hello")

    assert exc_info.value.text == ""


@pytest.mark.asyncio
@respx.mock
async def test_async_concurrent_sends_share_client(webhook_url, quiet_logger) -> None:
    route = respx.post(webhook_url).mock(return_value=Response(200, text="ok"))

    async with AsyncIncomingClient(webhook_url, logger=quiet_logger) as client:
        results = await asyncio.gather(*(client.send_incoming(f"msg {i}") for i in range(5)))

    assert results == ["ok"] * 5
    assert route.call_count == 5


@pytest.mark.asyncio
async def test_async_satisfies_sender_protocol(webhook_url, quiet_logger) -> None:
    async with AsyncIncomingClient(webhook_url, logger=quiet_logger) as client:
        assert isinstance(client, AsyncIncomingSender)


@pytest.mark.asyncio
@pytest.mark.parametrize("url", ["http://a..b/", "https://wh.jandi.com:notaport/webhook"])
async def test_async_malformed_url_is_request_error(url, quiet_logger) -> None:
    async with AsyncIncomingClient(url, logger=quiet_logger) as client:
        with pytest.raises(RequestConstructionError):
            await client.send_incoming("hello", timeout=1)
