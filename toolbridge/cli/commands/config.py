"""Config commands - settings, model listing and health checks."""

import typer
from rich import box
from rich.panel import Panel
from rich.table import Table

from toolbridge.cli.console import (
    Icons,
    console,
    mask_secret,
    print_error,
    print_info,
    print_success,
)


def check_connection() -> bool:
    """Check Ollama connection with helpful error."""
    from toolbridge.llm.client import check_ollama_health

    with console.status("[cyan]Checking Ollama connection...[/cyan]", spinner="dots"):
        healthy, error = check_ollama_health()

    if not healthy:
        print_error("Cannot connect to Ollama", error)
        console.print()
        console.print("[dim]Troubleshooting:[/dim]")
        console.print("  1. Is Ollama running? [cyan]ollama serve[/cyan]")
        console.print("  2. Check TOOLBRIDGE_OLLAMA_URL")
        return False

    return True


def models():
    """List available Ollama models."""
    from toolbridge.config import settings
    from toolbridge.llm.client import list_models

    if not check_connection():
        raise typer.Exit(code=1)

    available = list_models()
    if not available:
        print_info("No models installed. Pull one with: [cyan]ollama pull llama3.1[/cyan]")
        raise typer.Exit(code=0)

    table = Table(title=f"{Icons.ROBOT} Available Models", box=box.ROUNDED)
    table.add_column("Model", style="cyan")
    table.add_column("Status", width=10)
    for model in sorted(available):
        status = f"[green]{Icons.SUCCESS} active[/green]" if model == settings.ollama_model else ""
        table.add_row(model, status)

    console.print()
    console.print(table)


def config():
    """Show current configuration."""
    from toolbridge.config import settings

    console.print()
    console.print(Panel(
        f"[bold]Current Configuration[/bold]\n\n"
        f"[dim]Workspace:[/dim]      {settings.slack_workspace}\n"
        f"[dim]Channel:[/dim]        {settings.slack_channel}\n"
        f"[dim]Trigger word:[/dim]   {settings.trigger_word}\n"
        f"[dim]Bot token:[/dim]      {mask_secret(settings.slack_bot_token)}\n"
        f"[dim]Signing secret:[/dim] {mask_secret(settings.slack_signing_secret)}\n"
        f"[dim]Ollama URL:[/dim]     {settings.ollama_url}\n"
        f"[dim]Model:[/dim]          {settings.ollama_model}\n"
        f"[dim]Max Tokens:[/dim]     {settings.max_tokens}\n"
        f"[dim]Weather key:[/dim]    {mask_secret(settings.weather_api_key)}\n"
        f"[dim]Sessions:[/dim]       {settings.session_backend}",
        title=f"{Icons.GEAR} Config",
        border_style="cyan",
        box=box.ROUNDED,
    ))


def doctor():
    """Check model server health and bridge configuration."""
    from toolbridge.config import settings
    from toolbridge.llm.client import check_model_exists, check_ollama_health

    checks = []

    console.print()
    console.print("[dim]Checking Ollama connection...[/dim]")
    healthy, error = check_ollama_health()
    checks.append(("Ollama connection", healthy, "Connected" if healthy else error or "Not running"))

    if healthy:
        model = settings.ollama_model
        exists = check_model_exists(model)
        checks.append((f"Model ({model})", exists, "Available" if exists else "Not found"))

    checks.append((
        "Slack bot token",
        settings.slack_bot_token is not None,
        "Configured" if settings.slack_bot_token else "Replies cannot be posted",
    ))
    checks.append((
        "Weather API key",
        settings.weather_api_key != "fake_api_key",
        "Configured" if settings.weather_api_key != "fake_api_key" else "Using placeholder key",
    ))

    table = Table(box=box.ROUNDED, show_header=True)
    table.add_column("Check", style="cyan", width=25)
    table.add_column("Status", width=10)
    table.add_column("Details", style="dim", max_width=40)

    all_passed = True
    for name, passed, detail in checks:
        status = f"[green]{Icons.SUCCESS}[/green]" if passed else f"[red]{Icons.ERROR}[/red]"
        all_passed = all_passed and passed
        table.add_row(name, status, detail)

    console.print()
    console.print(table)
    console.print()

    if all_passed:
        print_success("All checks passed! Toolbridge is ready to use.")
    else:
        console.print("[yellow]Some checks failed. See details above.[/yellow]")

    raise typer.Exit(code=0 if all_passed else 1)
