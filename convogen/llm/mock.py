from __future__ import annotations

from .base import ChatMessage


class MockChatModel:
    """Deterministic mock backend: useful to verify control-flow without a network call."""

    def __init__(self, *system_messages: str) -> None:
        self.system_messages = tuple(system_messages)
        self.last_messages: list[ChatMessage] = []

    def generate(self, user_prompt: str) -> str:
        self.last_messages = [ChatMessage("system", s) for s in self.system_messages]
        self.last_messages.append(ChatMessage("user", user_prompt))
        return f"[MOCK] {user_prompt}"
