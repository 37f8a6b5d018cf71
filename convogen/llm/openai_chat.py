from __future__ import annotations

import logging

import httpx

from convogen.errors import EmptyResponseError
from convogen.schema import OpenAIChatRequest, OpenAIChatResponse, OpenAIMessage
from convogen.transport import bearer_http_request

from .base import ChatMessage

logger = logging.getLogger(__name__)

CHAT_COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"
GPT_4O = "gpt-4o"


class OpenAIChatModel:
    """
    Minimal OpenAI ChatCompletions client via raw HTTP.
    Every call is single-shot: system messages + one user prompt, no history kept.
    """

    def __init__(
        self,
        api_key: str,
        *system_messages: str,
        model: str,
        url: str = CHAT_COMPLETIONS_URL,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.system_messages = tuple(system_messages)
        self.url = url
        self.http_client = http_client

    def build_messages(self, user_prompt: str) -> list[ChatMessage]:
        msgs = [ChatMessage("system", s) for s in self.system_messages]
        msgs.append(ChatMessage("user", user_prompt))
        return msgs

    def generate(self, user_prompt: str) -> str:
        req = OpenAIChatRequest(
            model=self.model,
            messages=[OpenAIMessage(role=m.role, content=m.content) for m in self.build_messages(user_prompt)],
        )
        # Transport errors are already logged and propagate as-is.
        res = bearer_http_request(
            self.api_key,
            self.url,
            "POST",
            req,
            OpenAIChatResponse,
            client=self.http_client,
        )

        # OpenAI returns: choices[0].message.content
        if not res.choices:
            logger.error("empty choices in response url=%s id=%s", self.url, res.id)
            raise EmptyResponseError(f"no choices in response from {self.url}")
        return res.choices[0].message.content or ""


def new_gpt4o_model(
    api_key: str,
    *system_messages: str,
    http_client: httpx.Client | None = None,
) -> OpenAIChatModel:
    return OpenAIChatModel(api_key, *system_messages, model=GPT_4O, http_client=http_client)
