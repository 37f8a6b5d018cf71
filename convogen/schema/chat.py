from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OpenAIMessage(BaseModel):
    role: str
    content: str

    @field_validator("role")
    @classmethod
    def validate_role(cls, v: str) -> str:
        if v not in ("system", "user", "assistant"):
            raise ValueError(f"unsupported message role: {v!r}")
        return v


class OpenAIChatRequest(BaseModel):
    """Body of a POST to the chat-completions endpoint."""

    model: str
    messages: list[OpenAIMessage] = Field(default_factory=list)


# Response side: the provider keeps adding fields, so unknown keys are ignored
# and everything except choices[].message.content is optional.


class _Lenient(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ChoiceMessage(_Lenient):
    role: str = "assistant"
    content: str | None = None


class Choice(_Lenient):
    index: int = 0
    message: ChoiceMessage
    logprobs: Any = None
    finish_reason: str | None = None


class CompletionTokensDetails(_Lenient):
    reasoning_tokens: int = 0


class Usage(_Lenient):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    completion_tokens_details: CompletionTokensDetails = Field(default_factory=CompletionTokensDetails)


class OpenAIChatResponse(_Lenient):
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    system_fingerprint: str | None = None
    choices: list[Choice] = Field(default_factory=list)
    usage: Usage = Field(default_factory=Usage)
