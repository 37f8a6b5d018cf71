from convogen.errors import (
    ConfigError,
    ConvogenError,
    DecodeError,
    EmptyResponseError,
    HTTPStatusError,
    NetworkError,
    SerializationError,
    TransportError,
)
from convogen.llm import ChatMessage, ChatModel, MockChatModel, OpenAIChatModel, new_gpt4o_model
from convogen.transport import bearer_http_request

__all__ = [
    "ChatMessage",
    "ChatModel",
    "ConfigError",
    "ConvogenError",
    "DecodeError",
    "EmptyResponseError",
    "HTTPStatusError",
    "MockChatModel",
    "NetworkError",
    "OpenAIChatModel",
    "SerializationError",
    "TransportError",
    "bearer_http_request",
    "new_gpt4o_model",
]
