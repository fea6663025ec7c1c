"""Main Typer application and shared utilities."""

import typer

from toolbridge.cli.console import Icons, print_header
from toolbridge.version import __version__

# App metadata
APP_NAME = "Toolbridge"
APP_VERSION = __version__
APP_DESCRIPTION = "Slack bridge to a tool-calling language model"

# Main Typer app
app = typer.Typer(
    name="toolbridge",
    help=f"{Icons.ROBOT} {APP_DESCRIPTION}",
    add_completion=False,
    pretty_exceptions_show_locals=False,
    no_args_is_help=True,
)


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        print_header(f"{APP_NAME} v{APP_VERSION}", APP_DESCRIPTION)
        raise typer.Exit()
