"""Configuration models.

Credentials are resolved once at startup and never change afterwards;
Settings gathers the non-secret knobs that can come from the environment.
"""

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

API_KEY_VAR = "OPENROUTER_API_KEY"
BASE_URL_VAR = "OPENROUTER_BASE_URL"
FOOD_LOG_PATH_KEY = "FOOD_LOG_PATH"
MODEL_VAR = "INGREDIENTIQ_MODEL"
CONFIG_PATH_VAR = "INGREDIENTIQ_CONFIG"

DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "deepseek/deepseek-r1-distill-llama-70b"
DEFAULT_FOOD_LOG = "sample_food_log.json"
DEFAULT_TIMEOUT = 120.0


def default_config_path() -> Path:
    """Location of the on-disk key/value store."""
    return Path.home() / ".ingredientiq" / "config.env"


class Credentials(BaseModel):
    """API key and base URL for the chat service."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(repr=False, description="Bearer token for the chat API")
    base_url: str = Field(description="Base URL of the OpenAI-compatible API")


class Settings(BaseModel):
    """Runtime settings that are not secrets."""

    model_config = ConfigDict(frozen=True)

    model: str = Field(default=DEFAULT_MODEL, description="Chat model identifier")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Request deadline in seconds")
    config_path: Path = Field(default_factory=default_config_path)
    default_food_log: str = Field(default=DEFAULT_FOOD_LOG)
    default_base_url: str = Field(default=DEFAULT_BASE_URL)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> "Settings":
        """Build settings from environment variables.

        Keyword overrides that are None are ignored, so CLI options can be
        passed straight through.
        """
        env = os.environ if environ is None else environ
        values: dict = {}
        if env.get(MODEL_VAR):
            values["model"] = env[MODEL_VAR]
        if env.get(CONFIG_PATH_VAR):
            values["config_path"] = Path(env[CONFIG_PATH_VAR]).expanduser()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
