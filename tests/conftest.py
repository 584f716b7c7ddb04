"""Pytest configuration and shared fixtures."""
import os
from typing import Any

import pytest

from ingredientiq.config import ConfigStore
from ingredientiq.llm import ChatClient, ChatMessage, LLMResponse


class ScriptedChatClient(ChatClient):
    """Chat client that replays canned replies and records every request.

    A reply that is an exception instance is raised instead of returned.
    """

    def __init__(self, replies: list[Any]):
        self._replies = list(replies)
        self.calls: list[list[ChatMessage]] = []
        self.models: list[str | None] = []
        self.closed = False

    @property
    def model(self) -> str:
        return "test-model"

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        self.calls.append(list(messages))
        self.models.append(model)
        if not self._replies:
            raise AssertionError("Unexpected chat completion call")
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return LLMResponse(content=reply, model=model or self.model)

    async def close(self) -> None:
        self.closed = True


class ScriptedPrompter:
    """Prompter returning queued answers; EOFError once a queue runs dry."""

    def __init__(self, visible: list[str] | None = None, hidden: list[str] | None = None):
        self._visible = list(visible or [])
        self._hidden = list(hidden or [])
        self.prompts: list[str] = []

    def read_visible(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._visible:
            raise EOFError
        return self._visible.pop(0)

    def read_hidden(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._hidden:
            raise EOFError
        return self._hidden.pop(0)


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {"openrouter": os.getenv("OPENROUTER_API_KEY")}


@pytest.fixture
def make_client():
    """Factory for scripted chat clients."""
    return ScriptedChatClient


@pytest.fixture
def make_prompter():
    """Factory for scripted prompters."""
    return ScriptedPrompter


@pytest.fixture
def config_store(tmp_path):
    """Config store in a fresh temporary directory."""
    return ConfigStore(tmp_path / "config" / "config.env")


@pytest.fixture
def sample_food_log():
    """Return a small food log in the JSON shape users typically keep."""
    return (
        '[{"date": "2025-01-23", "meals": [{"type": "Breakfast", '
        '"items": [{"name": "Oatmeal", "quantity": "1 cup"}]}]}]'
    )


@pytest.fixture
def sample_food_log_file(tmp_path, sample_food_log):
    """Create a temporary food log file."""
    path = tmp_path / "test_food_log.json"
    path.write_text(sample_food_log, encoding="utf-8")
    return path
