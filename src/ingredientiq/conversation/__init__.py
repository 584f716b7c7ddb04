"""Conversation state and the interactive chat loop."""

from .loop import QUIT_SENTINEL, ConversationLoop
from .models import Conversation, LoopState

__all__ = ["QUIT_SENTINEL", "Conversation", "ConversationLoop", "LoopState"]
