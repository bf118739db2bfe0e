"""웹훅 전송 에러 계층.

호출자가 문자열 파싱 없이 전송 실패 종류(직렬화/요청 생성/네트워크/원격 응답)를
구분할 수 있도록 예외 타입과 ``kind`` 태그를 함께 제공한다.
"""

from __future__ import annotations


class WebhookError(Exception):
    """웹훅 전송 실패의 공통 베이스.

    Attributes:
        kind: 실패 종류 태그
        text: 실패 시점까지 읽은 응답 본문 (응답이 없으면 빈 문자열)
    """

    kind: str = "unknown"

    def __init__(self, message: str, *, text: str = "") -> None:
        super().__init__(message)
        self.text = text


class SerializationError(WebhookError):
    """페이로드를 만들거나 JSON으로 인코딩하지 못함."""

    kind = "serialization"


class RequestConstructionError(WebhookError):
    """웹훅 URL이 잘못되었거나 요청 객체를 만들 수 없음."""

    kind = "request"


class TransportError(WebhookError):
    """응답을 받기 전에 발생한 네트워크/타임아웃/TLS 오류."""

    kind = "transport"


class RemoteError(WebhookError):
    """HTTP 응답은 받았지만 상태 코드가 200이 아님."""

    kind = "remote"

    def __init__(self, status_code: int, text: str = "") -> None:
        message = f"HTTP {status_code}: {text}" if text else f"HTTP {status_code}"
        super().__init__(message, text=text)
        self.status_code = status_code


__all__ = [
    "RemoteError",
    "RequestConstructionError",
    "SerializationError",
    "TransportError",
    "WebhookError",
]
