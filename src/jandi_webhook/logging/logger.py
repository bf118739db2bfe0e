"""간단한 콘솔 로거."""

import logging
import sys
from typing import Any, TextIO


class SimpleLogger:
    """간단한 콘솔 로거."""

    def __init__(
        self,
        name: str = "jandi_webhook",
        console_output: bool = True,
        log_level: int = logging.INFO,
        stream: TextIO | None = None,
    ) -> None:
        """로거 초기화.

        레벨과 핸들러는 해당 이름의 로거에 핸들러가 처음 붙을 때만 설정한다.
        호스트 애플리케이션이 정한 레벨은 덮어쓰지 않는다.

        Args:
            name: 로거 이름
            console_output: 콘솔 출력 여부
            log_level: 로그 레벨
            stream: 출력 스트림 (기본값: stdout)
        """
        self.name = name
        self.console_output = console_output
        self.log_level = log_level

        self.logger = logging.getLogger(name)

        if console_output and not self.logger.handlers:
            self.logger.setLevel(log_level)
            console_handler = logging.StreamHandler(stream or sys.stdout)
            console_handler.setLevel(log_level)
            console_format = logging.Formatter(
                "[%(asctime)s] %(levelname)s | %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
            console_handler.setFormatter(console_format)
            self.logger.addHandler(console_handler)

    def info(self, message: str, **extra: Any) -> None:
        """INFO 레벨 로그."""
        self._log(logging.INFO, message, extra)

    def warning(self, message: str, **extra: Any) -> None:
        """WARNING 레벨 로그."""
        self._log(logging.WARNING, message, extra)

    def _log(
        self,
        level: int,
        message: str,
        extra: dict[str, Any],
    ) -> None:
        """로그 메시지 출력."""
        # 구조화된 데이터를 메시지에 포함
        if extra:
            extra_str = " | ".join(f"{k}={v}" for k, v in extra.items())
            full_message = f"{message} | {extra_str}"
        else:
            full_message = message

        self.logger.log(level, full_message)

    # ─────────────────────────────────────────────────────────────────
    # 웹훅 전용 이벤트 메서드
    # ─────────────────────────────────────────────────────────────────

    def log_request(self, method: str, url: str, headers: dict[str, str], body: bytes) -> None:
        """송신 요청 로그 (verbose 모드 전용)."""
        self.info(
            "<<< REQUEST",
            method=method,
            url=url,
            headers=headers,
            body=body.decode("utf-8", errors="replace"),
        )

    def log_send_error(self, kind: str, error: Exception) -> None:
        """전송 실패 로그 (verbose 모드 전용)."""
        self.warning(">>> ERROR", kind=kind, error=error)


def get_logger(name: str = "jandi_webhook") -> SimpleLogger:
    """로거 인스턴스 반환."""
    return SimpleLogger(name=name)
