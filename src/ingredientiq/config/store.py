"""On-disk key/value store for credentials and the last food-log path.

Uses the dotenv file format so the file can be edited by hand.
"""

import logging
from pathlib import Path

from dotenv import dotenv_values, set_key

from ..errors import ConfigError

logger = logging.getLogger(__name__)


class ConfigStore:
    """Read and write single keys in a dotenv-formatted file."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key or file is missing.

        Values are returned verbatim; ${VAR} references are not expanded.

        Raises:
            ConfigError: If the file exists but cannot be read
        """
        if not self._path.is_file():
            return None
        try:
            value = dotenv_values(self._path, interpolate=False).get(key)
        except OSError as e:
            raise ConfigError(f"Cannot read {self._path}: {e}") from e
        return value or None

    def set(self, key: str, value: str) -> None:
        """Persist a value, creating the file (owner-only) if needed.

        Raises:
            ConfigError: If the file cannot be written
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.touch(mode=0o600, exist_ok=True)
            set_key(self._path, key, value)
        except OSError as e:
            raise ConfigError(f"Cannot write {key} to {self._path}: {e}") from e
        logger.debug("Saved %s to %s", key, self._path)
