from .base import ChatMessage, ChatModel
from .factory import build_chat_model
from .mock import MockChatModel
from .openai_chat import CHAT_COMPLETIONS_URL, OpenAIChatModel, new_gpt4o_model

__all__ = [
    "CHAT_COMPLETIONS_URL",
    "ChatMessage",
    "ChatModel",
    "MockChatModel",
    "OpenAIChatModel",
    "build_chat_model",
    "new_gpt4o_model",
]
