"""동기/비동기 웹훅 클라이언트가 공유하는 요청 생성·응답 해석 로직."""

from __future__ import annotations

from typing import Sequence

import httpx
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from jandi_webhook.errors import (
    RemoteError,
    RequestConstructionError,
    SerializationError,
    TransportError,
    WebhookError,
)
from jandi_webhook.incoming.transport import TransportConfig
from jandi_webhook.logging import SimpleLogger, get_logger
from jandi_webhook.schemas import ConnectInfo, IncomingMessage

HEADER_ACCEPT = "application/vnd.tosslab.jandi-v2+json"
HEADER_CONTENT_TYPE = "application/json"


class BaseIncomingClient:
    """웹훅 URL, 트랜스포트 프로필, verbose 플래그를 보관한다.

    URL은 검증하지 않고 그대로 저장한다. 잘못된 URL은 전송 시점에
    RequestConstructionError로 드러난다.
    """

    def __init__(
        self,
        webhook_url: str,
        *,
        transport_config: TransportConfig | None = None,
        logger: SimpleLogger | None = None,
        verbose: bool = False,
    ) -> None:
        self.webhook_url = webhook_url
        self.transport_config = transport_config or TransportConfig()
        self._logger = logger or get_logger()
        self._verbose = verbose

    @property
    def verbose(self) -> bool:
        return self._verbose

    def set_verbose(self, enabled: bool) -> None:
        """요청/에러 진단 로그 출력 여부. 전송 결과에는 영향이 없다."""
        self._verbose = enabled

    @staticmethod
    def _headers() -> dict[str, str]:
        return {"Accept": HEADER_ACCEPT, "Content-Type": HEADER_CONTENT_TYPE}

    def _encode(
        self,
        title: str,
        body: str,
        color: str,
        infos: Sequence[ConnectInfo],
    ) -> bytes:
        try:
            message = IncomingMessage(
                title=title,
                body=body,
                connect_color=color,
                connect_info=tuple(infos),
            )
            return message.to_json()
        except (ValidationError, PydanticSerializationError) as e:
            raise SerializationError(f"invalid webhook payload: {e}") from e

    def _build_request(
        self,
        client: httpx.Client | httpx.AsyncClient,
        content: bytes,
        timeout: float | None,
    ) -> httpx.Request:
        extra = {"timeout": timeout} if timeout is not None else {}
        try:
            request = client.build_request(
                "POST",
                self.webhook_url,
                content=content,
                headers=self._headers(),
                **extra,
            )
            # 빈 라벨/63자 초과 라벨은 URL 파싱은 통과하지만 DNS 조회 시 UnicodeError가 난다.
            request.url.host.encode("idna")
        except (httpx.InvalidURL, UnicodeError) as e:
            raise RequestConstructionError(f"invalid webhook URL: {e}") from e
        if self._verbose:
            self._logger.log_request(request.method, str(request.url), self._headers(), content)
        return request

    @staticmethod
    def _transport_error(exc: httpx.TransportError) -> WebhookError:
        # 스킴이 없거나 지원하지 않는 URL은 네트워크 오류가 아니라 요청 생성 오류로 본다.
        if isinstance(exc, httpx.UnsupportedProtocol):
            return RequestConstructionError(str(exc))
        return TransportError(str(exc) or exc.__class__.__name__)

    @staticmethod
    def _interpret(response: httpx.Response) -> str:
        text = response.text
        if response.status_code != 200:
            raise RemoteError(response.status_code, text)
        return text

    def _log_failure(self, error: WebhookError) -> None:
        if self._verbose:
            self._logger.log_send_error(error.kind, error)
