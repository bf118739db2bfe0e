from typing import Protocol, Sequence, runtime_checkable

from jandi_webhook.schemas import ConnectInfo


@runtime_checkable
class IncomingSender(Protocol):
    """동기 웹훅 전송 프로토콜."""

    def send_incoming(
        self,
        body: str,
        color: str = "",
        infos: Sequence[ConnectInfo] = (),
        *,
        title: str = "",
        timeout: float | None = None,
    ) -> str:
        ...

    def set_verbose(self, enabled: bool) -> None:
        ...


@runtime_checkable
class AsyncIncomingSender(Protocol):
    """비동기 웹훅 전송 프로토콜."""

    async def send_incoming(
        self,
        body: str,
        color: str = "",
        infos: Sequence[ConnectInfo] = (),
        *,
        title: str = "",
        timeout: float | None = None,
    ) -> str:
        ...

    def set_verbose(self, enabled: bool) -> None:
        ...
