"""Chat command - drive the bridge from the terminal."""

import asyncio

import typer

from toolbridge.cli.console import Icons, console


def chat(
    model: str = typer.Option(None, "--model", "-m", help="Model to use (overrides default)"),
):
    """Talk to the bridge locally, with the same trigger word and tools as Slack.

    Examples:
        toolbridge chat
        toolbridge chat -m qwen2.5
    """
    from toolbridge.cli.commands.config import check_connection
    from toolbridge.config import get_settings

    s = get_settings()
    if model:
        s.ollama_model = model

    if not check_connection():
        raise typer.Exit(code=1)

    asyncio.run(_chat_loop(s))


async def _chat_loop(s):
    from toolbridge.channels.console import ConsoleChannel
    from toolbridge.deps import build_bridge

    bridge = build_bridge(ConsoleChannel(console, title=f"{Icons.ROBOT} {s.ollama_model}"), s)

    console.print()
    console.print(f"  [dim]Model:[/dim] [cyan]{s.ollama_model}[/cyan]")
    console.print(
        f"  [dim]Start a message with[/dim] [cyan]{s.trigger_word}[/cyan] "
        f"[dim]to open a session, /quit to exit[/dim]"
    )
    console.print()

    while True:
        try:
            text = await asyncio.to_thread(console.input, "[input.prompt]❯[/input.prompt] ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        text = text.strip()
        if not text:
            continue
        if text in ("/quit", "/exit", "/q"):
            break

        with console.status("[cyan]Thinking...[/cyan]", spinner="dots"):
            reply = await bridge.handle_message(text)

        if reply is None and not bridge.flag.is_active:
            console.print(
                f"  [dim]No reply. Session is idle; start with {s.trigger_word!r}.[/dim]"
            )

    console.print("  [dim]Goodbye! 👋[/dim]")
    console.print()
