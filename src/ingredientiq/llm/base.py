from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage, LLMResponse


class ChatClient(ABC):
    """Abstract base class for chat completion clients.

    This module hides the design decision of how the chat API is reached.
    Implementations must handle:
    - API client setup and authentication
    - Request/response format conversion
    - Mapping transport and HTTP failures onto ApiError subclasses

    Supports async context manager protocol for proper resource cleanup:
        async with client:
            response = await client.chat_completion(messages)
        # Automatically cleaned up
    """

    @property
    @abstractmethod
    def model(self) -> str:
        """Default model identifier."""

    @abstractmethod
    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a chat completion.

        Args:
            messages: Full ordered conversation to send
            model: Model to use (None uses the client's default)
            **kwargs: Provider-specific parameters

        Returns:
            LLMResponse built from the first returned choice

        Raises:
            RequestFailedError: The API answered with a non-success status
            EmptyResponseError: The API returned no choices or no message
            MalformedResponseError: A success status with an unusable body
            ApiConnectionError: No HTTP response was received
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    async def __aenter__(self) -> "ChatClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
