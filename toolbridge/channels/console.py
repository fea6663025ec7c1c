"""Terminal adapter used by ``toolbridge chat``."""

from rich import box
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel


class ConsoleChannel:
    """Prints replies as panels on a rich console."""

    def __init__(self, console: Console, title: str = "toolbridge"):
        self.console = console
        self.title = title
        self.sent: list[str] = []

    async def send(self, text: str) -> None:
        self.sent.append(text)
        self.console.print(
            Panel(Markdown(text), title=self.title, border_style="cyan", box=box.ROUNDED)
        )
