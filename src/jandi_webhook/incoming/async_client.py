"""JANDI Incoming Webhook 비동기 클라이언트."""

from __future__ import annotations

from typing import Sequence

import httpx

from jandi_webhook.errors import WebhookError
from jandi_webhook.incoming.base import BaseIncomingClient
from jandi_webhook.incoming.transport import TransportConfig
from jandi_webhook.logging import SimpleLogger
from jandi_webhook.schemas import ConnectInfo
from jandi_webhook.settings import Settings, get_settings


class AsyncIncomingClient(BaseIncomingClient):
    """IncomingClient의 asyncio 버전.

    전송 중인 태스크를 취소하면 요청도 함께 취소된다.
    """

    def __init__(
        self,
        webhook_url: str,
        *,
        transport_config: TransportConfig | None = None,
        logger: SimpleLogger | None = None,
        verbose: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            webhook_url,
            transport_config=transport_config,
            logger=logger,
            verbose=verbose,
        )
        self._client = httpx.AsyncClient(
            timeout=self.transport_config.timeout(),
            transport=transport or self.transport_config.build_async_transport(),
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        logger: SimpleLogger | None = None,
    ) -> AsyncIncomingClient:
        webhook = (settings or get_settings()).webhook
        return cls(
            webhook.url,
            transport_config=TransportConfig.from_settings(webhook),
            logger=logger,
            verbose=webhook.verbose,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> AsyncIncomingClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def send_incoming(
        self,
        body: str,
        color: str = "",
        infos: Sequence[ConnectInfo] = (),
        *,
        title: str = "",
        timeout: float | None = None,
    ) -> str:
        """웹훅 메시지를 전송하고 응답 본문을 그대로 반환한다."""
        try:
            content = self._encode(title, body, color, infos)
            request = self._build_request(self._client, content, timeout)
            try:
                response = await self._client.send(request)
            except httpx.TransportError as e:
                raise self._transport_error(e) from e
            return self._interpret(response)
        except WebhookError as e:
            self._log_failure(e)
            raise

    async def send_incoming_with_title(
        self,
        title: str,
        body: str,
        color: str = "",
        infos: Sequence[ConnectInfo] = (),
        *,
        timeout: float | None = None,
    ) -> str:
        return await self.send_incoming(body, color, infos, title=title, timeout=timeout)
