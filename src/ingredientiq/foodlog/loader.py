"""Food log loading.

The food log is opaque: whatever the file holds is passed to the model
verbatim, so no parsing or newline translation happens here.
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from ..config.models import DEFAULT_FOOD_LOG, FOOD_LOG_PATH_KEY
from ..config.prompter import Prompter
from ..config.store import ConfigStore
from ..errors import ConfigError, FoodLogError

logger = logging.getLogger(__name__)


def read_text_file(path: str | Path) -> str:
    """Read a whole UTF-8 file exactly as stored.

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the content is not valid UTF-8
    """
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def load_food_log(path: str | Path) -> str:
    """Load a food log file.

    Args:
        path: Path to the food log

    Returns:
        The file content, unmodified

    Raises:
        FoodLogError: If the file is missing, unreadable or not UTF-8
    """
    try:
        return read_text_file(path)
    except FileNotFoundError:
        raise FoodLogError(str(path), "file not found") from None
    except PermissionError:
        raise FoodLogError(str(path), "permission denied") from None
    except IsADirectoryError:
        raise FoodLogError(str(path), "is a directory") from None
    except UnicodeDecodeError as e:
        raise FoodLogError(str(path), f"not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise FoodLogError(str(path), e.strerror or str(e)) from e


class FoodLogLoader:
    """Interactive food log loading with one retry.

    The path defaults to the one used last time. If it cannot be read, the
    user gets one chance to type another path before the error propagates.
    """

    def __init__(
        self,
        prompter: Prompter,
        store: ConfigStore,
        default_path: str = DEFAULT_FOOD_LOG,
        console: Console | None = None,
    ):
        self._prompter = prompter
        self._store = store
        self._default_path = default_path
        self._console = console or Console()

    def default_path(self) -> str:
        """Last successfully used path, or the built-in default."""
        return self._store.get(FOOD_LOG_PATH_KEY) or self._default_path

    def load(self, path: str | Path | None = None) -> tuple[str, str]:
        """Load the food log, asking for another path on failure.

        Args:
            path: Path to try first (default: last used path)

        Returns:
            Tuple of (path actually read, file content)

        Raises:
            FoodLogError: If both the initial and the re-entered path fail
        """
        candidate = str(path) if path is not None else self.default_path()
        try:
            content = load_food_log(candidate)
        except FoodLogError as e:
            logger.debug("%s", e)
            self._console.print(f"[yellow]{escape(str(e))}[/yellow]")
            try:
                candidate = self._prompter.read_visible("Enter the path to your food log: ").strip()
            except EOFError:
                raise e from None
            if not candidate:
                raise e
            content = load_food_log(candidate)

        self._remember(str(Path(candidate).resolve()))
        return candidate, content

    def _remember(self, path: str) -> None:
        try:
            self._store.set(FOOD_LOG_PATH_KEY, path)
        except ConfigError as e:
            logger.warning("Could not remember food log path: %s", e)
