import pytest

from jandi_webhook.logging import SimpleLogger
from jandi_webhook.settings import get_settings

WEBHOOK_URL = "https://wh.jandi.com/connect-api/webhook/12345/abcdef"


@pytest.fixture
def webhook_url() -> str:
    return WEBHOOK_URL


@pytest.fixture
def quiet_logger() -> SimpleLogger:
    return SimpleLogger(name="jandi_webhook.test", console_output=False)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
