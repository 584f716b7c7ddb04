"""Credential resolution.

Each value is looked up in the process environment, then in the config
store, and only then requested from the user. Values the user typed are
written back to the store so the next run does not ask again.
"""

import logging
import os
from collections.abc import Mapping

from ..errors import ConfigError
from .models import API_KEY_VAR, BASE_URL_VAR, DEFAULT_BASE_URL, Credentials
from .prompter import Prompter
from .store import ConfigStore

logger = logging.getLogger(__name__)


class CredentialResolver:
    """Resolve the API key and base URL for the chat service."""

    def __init__(
        self,
        store: ConfigStore,
        prompter: Prompter,
        environ: Mapping[str, str] | None = None,
        default_base_url: str = DEFAULT_BASE_URL,
    ):
        """Initialize resolver.

        Args:
            store: Key/value store used for lookup and persistence
            prompter: Source of interactive input
            environ: Environment mapping (default: os.environ)
            default_base_url: Used when the user enters a blank base URL
        """
        self._store = store
        self._prompter = prompter
        self._environ = os.environ if environ is None else environ
        self._default_base_url = default_base_url

    def resolve(self) -> Credentials:
        """Resolve both credentials.

        Returns:
            Credentials ready to hand to the chat client

        Raises:
            ConfigError: If no API key is entered, or a freshly entered key
                cannot be saved
        """
        api_key = self._lookup(API_KEY_VAR)
        if api_key is None:
            api_key = self._prompt_api_key()
            # The user must not be asked twice, so a failed save is fatal
            self._store.set(API_KEY_VAR, api_key)

        base_url = self._lookup(BASE_URL_VAR)
        if base_url is None:
            base_url = self._prompt_base_url()
            try:
                self._store.set(BASE_URL_VAR, base_url)
            except ConfigError as e:
                logger.warning("%s", e)

        return Credentials(api_key=api_key, base_url=base_url)

    def _lookup(self, key: str) -> str | None:
        value = self._environ.get(key)
        if value:
            logger.debug("%s taken from environment", key)
            return value

        value = self._store.get(key)
        if value:
            logger.debug("%s taken from %s", key, self._store.path)
            return value

        return None

    def _prompt_api_key(self) -> str:
        try:
            api_key = self._prompter.read_hidden("Enter your API key: ").strip()
        except EOFError:
            api_key = ""
        if not api_key:
            raise ConfigError(f"API key not found: set {API_KEY_VAR} or enter it when asked")
        return api_key

    def _prompt_base_url(self) -> str:
        try:
            base_url = self._prompter.read_visible(
                f"Enter the API base URL [{self._default_base_url}]: "
            ).strip()
        except EOFError:
            base_url = ""
        return base_url or self._default_base_url
