"""Toolbridge CLI.

Usage:
    toolbridge serve               # Run the Slack events server
    toolbridge chat                # Talk to the bridge from the terminal
    toolbridge config              # Show effective settings
    toolbridge doctor              # Check model server and credentials
"""

import logging

import typer

from toolbridge.cli.app import APP_NAME, APP_VERSION, app, version_callback
from toolbridge.cli.commands import chat, config, doctor, models, serve
from toolbridge.cli.console import console
from toolbridge.config import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


@app.callback()
def main_callback(
    version: bool = typer.Option(
        None, "--version", "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """🤖 Toolbridge - Slack bridge to a tool-calling language model."""


# Register commands
app.command()(serve)
app.command()(chat)
app.command()(config)
app.command()(models)
app.command()(doctor)


def main():
    """Entry point for the CLI."""
    app()


__all__ = ["APP_NAME", "APP_VERSION", "app", "main", "console"]
