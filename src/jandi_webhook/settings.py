from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WebhookSettings(BaseSettings):
    """JANDI Incoming Webhook 관련 설정."""

    url: str = Field(default="", alias="JANDI_WEBHOOK_URL")
    verbose: bool = Field(default=False, alias="JANDI_WEBHOOK_VERBOSE")
    connect_timeout: float = Field(default=10.0, alias="JANDI_CONNECT_TIMEOUT")
    tls_handshake_timeout: float = Field(default=10.0, alias="JANDI_TLS_HANDSHAKE_TIMEOUT")
    response_header_timeout: float = Field(default=10.0, alias="JANDI_RESPONSE_HEADER_TIMEOUT")
    keep_alive: float = Field(
        default=300.0,
        alias="JANDI_KEEP_ALIVE",
        description="TCP keep-alive 프로브 간격(초)",
    )
    idle_timeout: float = Field(
        default=90.0,
        alias="JANDI_IDLE_TIMEOUT",
        description="유휴 커넥션을 풀에 유지하는 시간(초)",
    )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class Settings(BaseSettings):
    """애플리케이션 전역 설정."""

    env: str = Field(default="local", alias="ENV")
    webhook: WebhookSettings = Field(default_factory=WebhookSettings)

    model_config = SettingsConfigDict(env_file=".env", env_nested_delimiter="__", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """설정을 캐싱해 로드한다."""
    return Settings()
