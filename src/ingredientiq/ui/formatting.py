"""Text formatting utilities for the terminal.

Hides the details of markdown rendering and reply cleanup.
"""

import re

from rich.markdown import Markdown

from .config import REASONING_TAGS

_REASONING_RE = re.compile(
    r"<(?P<tag>" + "|".join(REASONING_TAGS) + r")>.*?</(?P=tag)>",
    re.DOTALL | re.IGNORECASE,
)


def strip_reasoning(text: str) -> str:
    """Remove <think>...</think> blocks emitted by reasoning models.

    An unterminated opening tag hides everything after it, since the
    model never finished reasoning.
    """
    text = _REASONING_RE.sub("", text)
    for tag in REASONING_TAGS:
        start = text.lower().find(f"<{tag}>")
        if start != -1:
            text = text[:start]
    return text.strip()


def render_markdown(text: str) -> Markdown:
    """Render a reply as markdown with reasoning blocks removed."""
    return Markdown(strip_reasoning(text))
