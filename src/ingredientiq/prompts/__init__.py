"""Prompt management module.

Externalizes prompts to text files for easy customization.
Prompts can be overridden by placing files in the working directory.
"""

from functools import lru_cache
from pathlib import Path

from ..errors import PromptFileError

# Default prompts directory (package location)
_PROMPTS_DIR = Path(__file__).parent

ANALYSIS_REQUEST = "Analyze this food log and provide insights: "


@lru_cache(maxsize=16)
def load_prompt(name: str) -> str:
    """Load a prompt from file.

    Search order:
    1. Current working directory: ./prompts/{name}.txt
    2. Package prompts directory: ingredientiq/prompts/{name}.txt

    Args:
        name: Prompt name (without .txt extension)

    Returns:
        Prompt text content with surrounding whitespace removed

    Raises:
        FileNotFoundError: If prompt file not found in any location
    """
    filename = f"{name}.txt"

    local_path = Path.cwd() / "prompts" / filename
    if local_path.exists():
        return local_path.read_text(encoding="utf-8").strip()

    package_path = _PROMPTS_DIR / filename
    if package_path.exists():
        return package_path.read_text(encoding="utf-8").strip()

    raise FileNotFoundError(
        f"Prompt '{name}' not found. Searched:\n"
        f"  - {local_path}\n"
        f"  - {package_path}"
    )


def load_system_prompt(path: str | Path | None = None) -> str:
    """Get the system instruction.

    Args:
        path: Optional system-prompt file; the packaged default is used if None

    Raises:
        PromptFileError: If the given file cannot be read
    """
    if path is None:
        return load_prompt("system")

    try:
        return Path(path).read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        raise PromptFileError(str(path), "file not found") from None
    except UnicodeDecodeError as e:
        raise PromptFileError(str(path), f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise PromptFileError(str(path), e.strerror or str(e)) from e


def analysis_request(food_log: str) -> str:
    """First user message asking for the food log analysis."""
    return f"{ANALYSIS_REQUEST}{food_log}"


def clear_cache() -> None:
    """Clear the prompt cache (useful after modifying prompt files)."""
    load_prompt.cache_clear()


__all__ = [
    "ANALYSIS_REQUEST",
    "analysis_request",
    "clear_cache",
    "load_prompt",
    "load_system_prompt",
]
