"""Serve command - Slack events server."""

import typer
from rich import box
from rich.panel import Panel

from toolbridge.cli.console import Icons, console


def serve(
    host: str = typer.Option(None, "--host", "-h", help="Host to bind to (defaults to config)"),
    port: int = typer.Option(None, "--port", "-p", help="Port to bind to (defaults to config)"),
    reload: bool = typer.Option(False, "--reload/--no-reload", help="Enable auto-reload on changes"),
):
    """Start the Slack events server."""
    import uvicorn

    from toolbridge.config import settings

    host = host or settings.server_host
    port = port or settings.server_port

    console.print()
    console.print(Panel.fit(
        f"[bold green]{Icons.ROCKET} Toolbridge Server[/bold green]\n\n"
        f"[dim]Events URL:[/dim] http://{host}:{port}/slack/events\n"
        f"[dim]Channel:[/dim]    {settings.slack_workspace}/{settings.slack_channel}\n"
        f"[dim]Trigger:[/dim]    {settings.trigger_word}\n"
        f"[dim]Press Ctrl+C to stop[/dim]",
        border_style="green",
        box=box.ROUNDED,
    ))

    uvicorn.run(
        "toolbridge.server:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )
