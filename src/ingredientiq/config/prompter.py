"""Interactive line input, with and without echo.

Hides the platform-dependent part of reading secrets so that the rest of
the application can be driven by a scripted prompter in tests.
"""

import sys
from typing import Protocol

from rich.console import Console


class Prompter(Protocol):
    """Capability to read one line of user input."""

    def read_visible(self, prompt: str) -> str:
        """Read a line with terminal echo."""
        ...

    def read_hidden(self, prompt: str) -> str:
        """Read a line with terminal echo suppressed where possible."""
        ...


class ConsolePrompter:
    """Prompter backed by a Rich console.

    Echo is only suppressed when stdin is an interactive terminal; piped
    input is read as a plain line.
    """

    def __init__(self, console: Console | None = None):
        self._console = console or Console()

    def read_visible(self, prompt: str) -> str:
        return self._console.input(prompt)

    def read_hidden(self, prompt: str) -> str:
        return self._console.input(prompt, password=sys.stdin.isatty())
