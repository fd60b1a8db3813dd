from __future__ import annotations

import time
from typing import Mapping

import requests

from chatgpt_cli import logger as logger_mod

from .base import HttpResponse, Transport
from .errors import TransportError

log = logger_mod.get_logger()

# Single-byte reads return as soon as any data is buffered, so a slow sender
# cannot keep one read open past the deadline.
_READ_CHUNK = 1


def _arm_socket(resp: requests.Response, remaining_s: float) -> None:
    sock = getattr(getattr(resp.raw, "connection", None), "sock", None)
    if sock is not None:
        sock.settimeout(max(remaining_s, 0.001))


class RequestsTransport(Transport):
    """HTTPS POST over a short-lived ``requests.Session``.

    ``timeout_s`` bounds the whole exchange: connecting, sending, and reading
    the full response body. The session (and its pooled connection) is closed
    when ``send`` returns, whether the exchange succeeded or failed.
    """

    def _read_body(
        self, resp: requests.Response, deadline: float, timeout_s: float
    ) -> bytes:
        chunks: list[bytes] = []
        body = resp.iter_content(chunk_size=_READ_CHUNK)
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise TransportError(f"request failed: timed out after {timeout_s:g}s")
            _arm_socket(resp, remaining)
            try:
                chunk = next(body)
            except StopIteration:
                return b"".join(chunks)
            chunks.append(chunk)

    def send(
        self,
        url: str,
        *,
        headers: Mapping[str, str],
        body: bytes,
        timeout_s: float,
    ) -> HttpResponse:
        started = time.monotonic()
        deadline = started + timeout_s
        with requests.Session() as session:
            try:
                resp = session.post(
                    url, headers=dict(headers), data=body, timeout=timeout_s, stream=True
                )
                try:
                    content = self._read_body(resp, deadline, timeout_s)
                finally:
                    resp.close()
            except requests.exceptions.RequestException as e:
                log.debug(f"POST {url} failed after {time.monotonic() - started:.2f}s: {e}")
                raise TransportError(f"request failed: {e}") from e

        log.debug(
            f"POST {url} -> {resp.status_code} in {time.monotonic() - started:.2f}s "
            f"({len(content)} bytes)"
        )
        return HttpResponse(
            status_code=resp.status_code, reason=resp.reason or "", body=content
        )
