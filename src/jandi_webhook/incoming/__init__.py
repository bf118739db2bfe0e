"""JANDI Incoming Webhook 전송 패키지."""

from jandi_webhook.incoming.async_client import AsyncIncomingClient
from jandi_webhook.incoming.client import IncomingClient
from jandi_webhook.incoming.transport import TransportConfig
from jandi_webhook.incoming import protocols

__all__ = ["AsyncIncomingClient", "IncomingClient", "TransportConfig", "protocols"]
