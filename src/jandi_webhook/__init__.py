"""JANDI Incoming Webhook 클라이언트 라이브러리."""

from jandi_webhook.errors import (
    RemoteError,
    RequestConstructionError,
    SerializationError,
    TransportError,
    WebhookError,
)
from jandi_webhook.incoming import AsyncIncomingClient, IncomingClient, TransportConfig
from jandi_webhook.schemas import ConnectInfo, IncomingMessage, connect_info_from, connect_info_none

__all__ = [
    "AsyncIncomingClient",
    "ConnectInfo",
    "IncomingClient",
    "IncomingMessage",
    "RemoteError",
    "RequestConstructionError",
    "SerializationError",
    "TransportConfig",
    "TransportError",
    "WebhookError",
    "connect_info_from",
    "connect_info_none",
]
