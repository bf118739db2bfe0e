"""JANDI Incoming Webhook 페이로드 스키마."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

COLOR_PATTERN = r"^(#[0-9A-Fa-f]{6})?$"


class ConnectInfo(BaseModel):
    """메시지 본문 아래에 붙는 'JANDI connect' 카드."""

    title: str
    description: str
    image_url: str = Field(default="", alias="imageUrl")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class IncomingMessage(BaseModel):
    """웹훅으로 전송할 메시지 한 건.

    참고:
    - body는 비어 있지 않아야 의미가 있다 (타입으로 강제하지는 않음).
    - 비어 있는 title/connectColor/connectInfo는 전송 페이로드에서 생략된다.
    """

    title: str = ""
    body: str
    connect_color: str = Field(default="", alias="connectColor", pattern=COLOR_PATTERN)
    connect_info: tuple[ConnectInfo, ...] = Field(default=(), alias="connectInfo")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """와이어 포맷 딕셔너리로 변환한다."""
        return self.model_dump(mode="json", by_alias=True, exclude_defaults=True)

    def to_json(self) -> bytes:
        """요청 본문으로 쓸 UTF-8 JSON 바이트."""
        return self.model_dump_json(by_alias=True, exclude_defaults=True).encode("utf-8")

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> IncomingMessage:
        return cls.model_validate(payload)


def connect_info_from(title: str, description: str, image_url: str = "") -> tuple[ConnectInfo, ...]:
    """카드 한 장짜리 connect info 시퀀스를 만든다."""
    return (ConnectInfo(title=title, description=description, image_url=image_url),)


def connect_info_none() -> tuple[ConnectInfo, ...]:
    return ()
