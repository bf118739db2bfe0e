import logging
import sys

from jandi_webhook.incoming.client import IncomingClient
from jandi_webhook.logging import SimpleLogger, get_logger


def test_default_logger_keeps_host_level(webhook_url) -> None:
    package_logger = logging.getLogger("jandi_webhook")
    saved_level = package_logger.level
    saved_handlers = list(package_logger.handlers)
    try:
        get_logger()
        package_logger.setLevel(logging.WARNING)

        with IncomingClient(webhook_url):
            pass
        get_logger()

        assert package_logger.level == logging.WARNING
    finally:
        package_logger.handlers[:] = saved_handlers
        package_logger.setLevel(saved_level)


def test_stream_receives_structured_extras(capsys) -> None:
    logger_name = "jandi_webhook.test.stream"
    logging.getLogger(logger_name).handlers.clear()
    try:
        logger = SimpleLogger(name=logger_name, stream=sys.stderr)
        logger.warning(">>> ERROR", kind="remote", error="HTTP 500")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert ">>> ERROR | kind=remote | error=HTTP 500" in captured.err
    finally:
        logging.getLogger(logger_name).handlers.clear()
