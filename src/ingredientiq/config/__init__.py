"""Configuration and credential handling for IngredientIQ."""

from .models import (
    API_KEY_VAR,
    BASE_URL_VAR,
    DEFAULT_BASE_URL,
    DEFAULT_MODEL,
    FOOD_LOG_PATH_KEY,
    Credentials,
    Settings,
)
from .prompter import ConsolePrompter, Prompter
from .resolver import CredentialResolver
from .store import ConfigStore

__all__ = [
    "API_KEY_VAR",
    "BASE_URL_VAR",
    "DEFAULT_BASE_URL",
    "DEFAULT_MODEL",
    "FOOD_LOG_PATH_KEY",
    "ConfigStore",
    "ConsolePrompter",
    "CredentialResolver",
    "Credentials",
    "Prompter",
    "Settings",
]
