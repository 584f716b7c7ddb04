from typing import Any

from ..config.models import Credentials
from .base import ChatClient
from .providers import OpenRouterClient


def create_chat_client(
    credentials: Credentials,
    provider: str = "openrouter",
    **config: Any
) -> ChatClient:
    """Create a chat client instance.

    This factory function hides the instantiation logic for the client.

    Args:
        credentials: Resolved API key and base URL
        provider: Provider type (only 'openrouter' is supported)
        **config: Client configuration
            - model: str (default: 'deepseek/deepseek-r1-distill-llama-70b')
            - timeout: float (default: 120.0)
            - transport: httpx.AsyncBaseTransport | None

    Returns:
        Initialized chat client

    Raises:
        ValueError: If provider type is not supported

    Examples:
        >>> client = create_chat_client(
        ...     Credentials(api_key="sk-or-...", base_url="https://openrouter.ai/api/v1"),
        ...     model="deepseek/deepseek-r1-distill-llama-70b"
        ... )
    """
    if provider.lower() == "openrouter":
        return OpenRouterClient(
            api_key=credentials.api_key,
            base_url=credentials.base_url,
            **config
        )

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'openrouter'"
    )
