"""UI configuration constants.

Centralizes display strings and log level names for the terminal UI.
"""

import logging

BANNER = r"""
 ___                          _ _            _   ___ ___
|_ _|_ __   __ _ _ __ ___  __| (_) ___ _ __ | |_|_ _/ _ \
 | || '_ \ / _` | '__/ _ \/ _` | |/ _ \ '_ \| __|| | | | |
 | || | | | (_| | | |  __/ (_| | |  __/ | | | |_ | | |_| |
|___|_| |_|\__, |_|  \___|\__,_|_|\___|_| |_|\__|___\__\_\
           |___/
"""

TAGLINE = "Food log analysis and preventative health chat"

INPUT_PROMPT = "\n[bold yellow]Enter your message (or 'quit' to exit):[/bold yellow] "
REPLY_TITLE = "AI Response"

# Reasoning models wrap their chain of thought in these tags
REASONING_TAGS = ("think", "thinking")

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def log_level_from_string(level_str: str) -> int:
    """Convert a level name to a logging level. Unknown names map to WARNING."""
    return LOG_LEVELS.get(level_str.lower(), logging.WARNING)
