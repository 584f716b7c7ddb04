"""Rich console front end for the conversation loop.

Supplies the read/render/report callables that ConversationLoop expects.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule

from ..errors import ApiError
from .config import BANNER, INPUT_PROMPT, REPLY_TITLE, TAGLINE
from .formatting import render_markdown


def configure_logging(level: int, console: Console | None = None) -> None:
    """Route standard logging through Rich, once per process."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console or Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


class ChatConsole:
    """Terminal rendering for IngredientIQ."""

    def __init__(self, console: Console | None = None):
        self._console = console or Console()

    @property
    def console(self) -> Console:
        return self._console

    def show_banner(self) -> None:
        self._console.print(Panel.fit(f"[bold green]{BANNER}[/bold green]\n[dim]{TAGLINE}[/dim]"))

    def read_input(self) -> str:
        return self._console.input(INPUT_PROMPT)

    def render_reply(self, text: str) -> None:
        self._console.print(Rule(f"[bold cyan]{REPLY_TITLE}[/bold cyan]"))
        self._console.print(render_markdown(text))

    def report_error(self, error: ApiError) -> None:
        self._console.print(f"[red]Error sending request to API: {escape(str(error))}[/red]")

    def info(self, message: str) -> None:
        self._console.print(f"[dim]{escape(message)}[/dim]")

    def error(self, message: str) -> None:
        self._console.print(f"[red]Error: {escape(message)}[/red]")

    def goodbye(self) -> None:
        self._console.print("[dim]Goodbye![/dim]")
