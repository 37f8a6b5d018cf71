from .chat import Choice, ChoiceMessage, OpenAIChatRequest, OpenAIChatResponse, OpenAIMessage, Usage

__all__ = [
    "Choice",
    "ChoiceMessage",
    "OpenAIChatRequest",
    "OpenAIChatResponse",
    "OpenAIMessage",
    "Usage",
]
