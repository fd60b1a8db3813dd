import sys
from pathlib import Path

import pytest

# This repo uses a src/ layout; make the package importable without an
# editable install.
_SRC = str(Path(__file__).resolve().parents[2] / "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from chatgpt_cli.base import HttpResponse  # noqa: E402


class FakeTransport:
    """Records every send() and replays a canned response or error."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    def send(self, url, *, headers, body, timeout_s):
        self.calls.append(
            {"url": url, "headers": dict(headers), "body": body, "timeout_s": timeout_s}
        )
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_transport():
    """Factory: fake_transport(status=200, body=b"...", reason="OK")."""

    def _factory(*, status: int = 200, body=b"", reason: str = "OK", error=None):
        if isinstance(body, str):
            body = body.encode("utf-8")
        return FakeTransport(
            response=HttpResponse(status_code=status, reason=reason, body=body),
            error=error,
        )

    return _factory


@pytest.fixture
def hello_body() -> bytes:
    return b'{"choices":[{"message":{"role":"assistant","content":"Hello"}}]}'
