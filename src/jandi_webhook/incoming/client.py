"""JANDI Incoming Webhook 동기 클라이언트."""

from __future__ import annotations

from typing import Sequence

import httpx

from jandi_webhook.errors import WebhookError
from jandi_webhook.incoming.base import BaseIncomingClient
from jandi_webhook.incoming.transport import TransportConfig
from jandi_webhook.logging import SimpleLogger
from jandi_webhook.schemas import ConnectInfo
from jandi_webhook.settings import Settings, get_settings


class IncomingClient(BaseIncomingClient):
    """웹훅 메시지를 한 번의 POST로 전송하는 클라이언트.

    재시도/백오프는 하지 않는다. 실패는 항상 WebhookError 하위 예외로 올라오며
    클라이언트는 실패 후에도 계속 사용할 수 있다.
    """

    def __init__(
        self,
        webhook_url: str,
        *,
        transport_config: TransportConfig | None = None,
        logger: SimpleLogger | None = None,
        verbose: bool = False,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(
            webhook_url,
            transport_config=transport_config,
            logger=logger,
            verbose=verbose,
        )
        self._client = httpx.Client(
            timeout=self.transport_config.timeout(),
            transport=transport or self.transport_config.build_transport(),
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        logger: SimpleLogger | None = None,
    ) -> IncomingClient:
        webhook = (settings or get_settings()).webhook
        return cls(
            webhook.url,
            transport_config=TransportConfig.from_settings(webhook),
            logger=logger,
            verbose=webhook.verbose,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> IncomingClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def send_incoming(
        self,
        body: str,
        color: str = "",
        infos: Sequence[ConnectInfo] = (),
        *,
        title: str = "",
        timeout: float | None = None,
    ) -> str:
        """웹훅 메시지를 전송하고 응답 본문을 그대로 반환한다.

        Args:
            body: 메시지 본문 (마크다운 지원, 비어 있으면 안 됨)
            color: "#RRGGBB" 형식 색상 (빈 문자열이면 생략)
            infos: connect info 카드 목록
            title: 메시지 제목 (빈 문자열이면 생략)
            timeout: 이번 호출에만 적용할 타임아웃(초)

        Raises:
            SerializationError, RequestConstructionError, TransportError, RemoteError
        """
        try:
            content = self._encode(title, body, color, infos)
            request = self._build_request(self._client, content, timeout)
            try:
                response = self._client.send(request)
            except httpx.TransportError as e:
                raise self._transport_error(e) from e
            return self._interpret(response)
        except WebhookError as e:
            self._log_failure(e)
            raise

    def send_incoming_with_title(
        self,
        title: str,
        body: str,
        color: str = "",
        infos: Sequence[ConnectInfo] = (),
        *,
        timeout: float | None = None,
    ) -> str:
        return self.send_incoming(body, color, infos, title=title, timeout=timeout)
