"""웹훅 메시지 전송 CLI."""

import sys
from typing import Optional

import typer

from jandi_webhook.errors import WebhookError
from jandi_webhook.incoming.client import IncomingClient
from jandi_webhook.incoming.transport import TransportConfig
from jandi_webhook.logging import SimpleLogger
from jandi_webhook.schemas import connect_info_from, connect_info_none
from jandi_webhook.settings import get_settings

app = typer.Typer(help="JANDI Incoming Webhook 전송 도구")


@app.callback()
def main() -> None:
    """JANDI Incoming Webhook 전송 도구."""


@app.command()
def send(
    body: str = typer.Argument(..., help="메시지 본문 (마크다운 지원)"),
    title: str = typer.Option("", "--title", "-t", help="메시지 제목"),
    color: str = typer.Option("", "--color", "-c", help="#RRGGBB 형식 색상"),
    info_title: Optional[str] = typer.Option(None, "--info-title", help="connect 카드 제목"),
    info_description: str = typer.Option("", "--info-description", help="connect 카드 설명"),
    info_image: str = typer.Option("", "--info-image", help="connect 카드 이미지 URL"),
    url: Optional[str] = typer.Option(None, "--url", help="웹훅 URL (기본값: JANDI_WEBHOOK_URL)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="요청/에러 로그 출력"),
) -> None:
    """웹훅 메시지 한 건을 전송한다."""
    settings = get_settings()
    webhook_url = url or settings.webhook.url
    if not webhook_url:
        typer.echo("Error: webhook URL not set (use --url or JANDI_WEBHOOK_URL)", err=True)
        raise typer.Exit(1)

    infos = (
        connect_info_from(info_title, info_description, info_image)
        if info_title is not None
        else connect_info_none()
    )

    with IncomingClient(
        webhook_url,
        transport_config=TransportConfig.from_settings(settings.webhook),
        logger=SimpleLogger(name="jandi_webhook.cli", stream=sys.stderr),
        verbose=verbose or settings.webhook.verbose,
    ) as client:
        try:
            result = client.send_incoming(body, color, infos, title=title)
        except WebhookError as e:
            typer.echo(f"Error ({e.kind}): {e}", err=True)
            raise typer.Exit(1) from e

    typer.echo(result)


def run() -> None:
    """콘솔 스크립트 엔트리포인트."""
    app()


if __name__ == "__main__":
    run()
