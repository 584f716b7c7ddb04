"""Conversation data structures.

The conversation is the literal context window sent on every call, so it
only ever grows: messages are appended and never edited or removed.
"""

from collections.abc import Iterator
from enum import Enum

from ..llm.models import ChatMessage, Role
from ..prompts import analysis_request


class LoopState(str, Enum):
    """States of the interactive conversation loop."""

    INIT = "init"
    FIRST_ANALYSIS = "first_analysis"
    IDLE = "idle"
    AWAITING_REPLY = "awaiting_reply"
    TERMINATED = "terminated"


class Conversation:
    """Append-only ordered list of chat messages."""

    def __init__(self, messages: list[ChatMessage] | None = None):
        self._messages: list[ChatMessage] = list(messages or [])

    @classmethod
    def seed(cls, system_prompt: str | None, food_log: str) -> "Conversation":
        """Start a conversation asking for an analysis of the food log.

        Args:
            system_prompt: System instruction; omitted when empty
            food_log: Raw food log text

        Returns:
            Conversation of [system, user] (or [user] without a system prompt)
        """
        conversation = cls()
        if system_prompt:
            conversation.append(Role.SYSTEM, system_prompt)
        conversation.append(Role.USER, analysis_request(food_log))
        return conversation

    def append(self, role: Role, content: str) -> ChatMessage:
        message = ChatMessage(role=role, content=content)
        self._messages.append(message)
        return message

    @property
    def messages(self) -> list[ChatMessage]:
        """Copy of the messages, safe to hand to a client."""
        return list(self._messages)

    @property
    def last(self) -> ChatMessage | None:
        return self._messages[-1] if self._messages else None

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(list(self._messages))
