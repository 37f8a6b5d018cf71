from __future__ import annotations

from convogen.config import Settings
from convogen.errors import ConfigError

from .base import ChatModel
from .mock import MockChatModel
from .openai_chat import new_gpt4o_model


def build_chat_model(settings: Settings, api_key: str | None, *system_messages: str) -> ChatModel:
    backend = settings.backend
    if backend == "mock":
        return MockChatModel(*system_messages)
    if backend == "openai":
        if not api_key:
            raise ConfigError(f"openai.apiKey is not set in {settings.secrets_path}, but CONVOGEN_BACKEND=openai")
        return new_gpt4o_model(api_key, *system_messages)
    raise ConfigError(f"unknown CONVOGEN_BACKEND={backend!r}, choose one of: openai|mock")
