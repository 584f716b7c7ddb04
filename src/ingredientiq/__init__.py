"""
IngredientIQ: food log analysis and follow-up chat with an LLM.

Each subpackage hides one design decision: credentials (config), the HTTP
path to the chat API (llm), food log access (foodlog), the conversation
state machine (conversation) and terminal rendering (ui).
"""

__version__ = "0.1.0"

from .config import Credentials, Settings
from .conversation import Conversation, ConversationLoop, LoopState
from .errors import (
    ApiConnectionError,
    ApiError,
    ConfigError,
    EmptyResponseError,
    FileError,
    FoodLogError,
    IngredientIQError,
    MalformedResponseError,
    PromptFileError,
    RequestFailedError,
)
from .foodlog import load_food_log
from .llm import ChatClient, ChatMessage, Role, create_chat_client

__all__ = [
    "ApiConnectionError",
    "ApiError",
    "ChatClient",
    "ChatMessage",
    "ConfigError",
    "Conversation",
    "ConversationLoop",
    "Credentials",
    "EmptyResponseError",
    "FileError",
    "FoodLogError",
    "IngredientIQError",
    "LoopState",
    "MalformedResponseError",
    "PromptFileError",
    "RequestFailedError",
    "Role",
    "Settings",
    "create_chat_client",
    "load_food_log",
]
