"""Console utilities and theming for the Toolbridge CLI."""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.theme import Theme

# Custom theme for consistent styling
THEME = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "dim": "dim",
        "highlight": "bold cyan",
        "muted": "bright_black",
        "input.prompt": "bold green",
    }
)

# Global console instance
console = Console(theme=THEME)


# Status icons
class Icons:
    """Consistent icons across the CLI."""

    SUCCESS = "✓"
    ERROR = "✗"
    ARROW = "→"
    ROBOT = "🤖"
    ROCKET = "🚀"
    GEAR = "⚙"
    WARNING = "⚠"


def print_header(title: str, subtitle: str | None = None):
    """Print a styled header."""
    content = f"[bold]{title}[/bold]"
    if subtitle:
        content += f"\n[dim]{subtitle}[/dim]"
    console.print(Panel(content, box=box.ROUNDED, border_style="cyan", padding=(0, 2)))


def print_success(message: str):
    """Print a success message."""
    console.print(f"[success]{Icons.SUCCESS}[/success] {message}")


def print_error(message: str, detail: str | None = None):
    """Print an error message."""
    console.print(f"[error]{Icons.ERROR}[/error] {message}")
    if detail:
        console.print(f"  [dim]{detail}[/dim]")


def print_info(message: str):
    """Print an info message."""
    console.print(f"[info]{Icons.ARROW}[/info] {message}")


def mask_secret(value: str | None) -> str:
    """Show only the last four characters of a secret."""
    if not value:
        return "[dim]not set[/dim]"
    if len(value) <= 4:
        return "****"
    return f"****{value[-4:]}"
