from __future__ import annotations

from typing import Optional

from chatgpt_cli import config
from chatgpt_cli import logger as logger_mod

from .base import Transport
from .errors import APIError, EmptyResponseError
from .transport import RequestsTransport
from .types import ChatCompletionRequest, ChatCompletionResponse

log = logger_mod.get_logger()


class ChatCompletionClient:
    """Performs one chat-completion exchange and returns the reply text.

    Exactly one request per ``complete`` call: no retries, no streaming and
    no partial results. Each failure mode maps to its own error type:

    - ``TransportError``: no HTTP response (DNS, TCP, TLS, timeout)
    - ``APIError``: status other than 200; carries status line and raw body
    - ``DecodeError``: 200 but the body is not a chat-completion document
    - ``EmptyResponseError``: 200 with an empty ``choices`` list
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        *,
        endpoint: str = config.OPENAI_ENDPOINT,
        model: str = config.MODEL,
        timeout_s: float = config.REQUEST_TIMEOUT_S,
    ):
        self._transport = transport or RequestsTransport()
        self._endpoint = endpoint
        self._model = model
        self._timeout_s = timeout_s

    @property
    def model(self) -> str:
        return self._model

    def build_request(self, prompt: str) -> ChatCompletionRequest:
        return ChatCompletionRequest.for_prompt(self._model, prompt)

    def complete(self, api_key: str, prompt: str) -> str:
        request = self.build_request(prompt)
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

        log.debug(f"Sending chat completion request (model={self._model})")
        resp = self._transport.send(
            self._endpoint,
            headers=headers,
            body=request.to_json(),
            timeout_s=self._timeout_s,
        )

        if resp.status_code != 200:
            log.debug(f"Chat completion rejected with {resp.status_line}")
            raise APIError(resp.status_line, resp.text)

        parsed = ChatCompletionResponse.from_json(resp.body)
        if not parsed.choices:
            raise EmptyResponseError()

        return parsed.choices[0].message.content
