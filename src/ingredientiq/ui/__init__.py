"""Terminal presentation for IngredientIQ.

Module structure (each module hides a design decision):
- config.py: Display strings and log level names
- formatting.py: Markdown rendering and reply cleanup
- console.py: Rich console front end and logging setup
"""

from .config import log_level_from_string
from .console import ChatConsole, configure_logging
from .formatting import render_markdown, strip_reasoning

__all__ = [
    "ChatConsole",
    "configure_logging",
    "log_level_from_string",
    "render_markdown",
    "strip_reasoning",
]
