"""Conversation messages and the shared conversation log."""

from toolbridge.conversation.models import (
    AssistantMessage,
    ChatCompletion,
    ChatMessage,
    Choice,
    FinishReason,
    FunctionMessage,
    SystemMessage,
    ToolCallIntent,
    UserMessage,
)
from toolbridge.conversation.state import ConversationState

__all__ = [
    "AssistantMessage",
    "ChatCompletion",
    "ChatMessage",
    "Choice",
    "ConversationState",
    "FinishReason",
    "FunctionMessage",
    "SystemMessage",
    "ToolCallIntent",
    "UserMessage",
]
