from .base import ChatClient
from .factory import create_chat_client
from .models import ChatMessage, LLMResponse, Role
from .providers import OpenRouterClient
from .transport import AttributionTransport, apply_attribution_headers

__all__ = [
    "AttributionTransport",
    "ChatClient",
    "ChatMessage",
    "LLMResponse",
    "OpenRouterClient",
    "Role",
    "apply_attribution_headers",
    "create_chat_client",
]
