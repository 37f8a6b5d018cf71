from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class ChatMessage:
    role: str  # "system" | "user"
    content: str


class ChatModel(Protocol):
    def generate(self, user_prompt: str) -> str:
        """Return the model's reply to a single user prompt."""
        raise NotImplementedError
