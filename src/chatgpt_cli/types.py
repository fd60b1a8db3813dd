from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Literal, Union

from .errors import DecodeError, EncodeError

Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class Message:
    role: Role
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class ChatCompletionRequest:
    model: str
    messages: tuple[Message, ...]

    @classmethod
    def for_prompt(cls, model: str, prompt: str) -> "ChatCompletionRequest":
        """A request carrying ``prompt`` as its only (user) message."""
        return cls(model=model, messages=(Message(role="user", content=prompt),))

    def to_dict(self) -> dict[str, Any]:
        return {"model": self.model, "messages": [m.to_dict() for m in self.messages]}

    def to_json(self) -> bytes:
        try:
            return json.dumps(self.to_dict(), ensure_ascii=False).encode("utf-8")
        except UnicodeEncodeError as e:
            raise EncodeError(f"failed to encode request: {e}") from e


@dataclass(frozen=True)
class Choice:
    message: Message


@dataclass(frozen=True)
class ChatCompletionResponse:
    """Only ``choices[*].message`` is read; everything else is ignored."""

    choices: tuple[Choice, ...]

    @classmethod
    def from_json(cls, body: Union[bytes, str]) -> "ChatCompletionResponse":
        try:
            data = json.loads(body)
        except (ValueError, RecursionError) as e:
            raise DecodeError(f"failed to decode response: {e}") from e

        if not isinstance(data, dict):
            raise DecodeError(
                f"failed to decode response: expected a JSON object, got {type(data).__name__}"
            )

        raw_choices = data.get("choices")
        if raw_choices is None:
            raw_choices = []
        if not isinstance(raw_choices, list):
            raise DecodeError("failed to decode response: 'choices' is not a list")

        return cls(choices=tuple(_parse_choice(c, i) for i, c in enumerate(raw_choices)))


def _parse_choice(raw: Any, index: int) -> Choice:
    if not isinstance(raw, dict):
        raise DecodeError(f"failed to decode response: choice {index} is not an object")

    msg = raw.get("message") or {}
    if not isinstance(msg, dict):
        raise DecodeError(
            f"failed to decode response: choice {index} message is not an object"
        )

    role = msg.get("role") or ""
    content = msg.get("content") or ""
    if not isinstance(role, str) or not isinstance(content, str):
        raise DecodeError(
            f"failed to decode response: choice {index} message fields must be strings"
        )
    return Choice(message=Message(role=role, content=content))  # type: ignore[arg-type]
