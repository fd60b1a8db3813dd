"""Single-shot command-line client for an OpenAI-style chat-completions API.

Design goals:
- One prompt in, one reply out. No history, no streaming, no retries.
- Keep the HTTP layer behind a small transport interface so it can be faked.
- Surface every failure as a distinct, human-readable error.
"""

from .client import ChatCompletionClient
from .errors import (
    APIError,
    ChatCLIError,
    ConfigError,
    DecodeError,
    EmptyResponseError,
    EncodeError,
    TransportError,
)
from .types import ChatCompletionRequest, ChatCompletionResponse, Message

__all__ = [
    "APIError",
    "ChatCLIError",
    "ChatCompletionClient",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ConfigError",
    "DecodeError",
    "EmptyResponseError",
    "EncodeError",
    "Message",
    "TransportError",
]
