from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    reason: str
    body: bytes

    @property
    def status_line(self) -> str:
        if self.reason:
            return f"{self.status_code} {self.reason}"
        return str(self.status_code)

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class Transport(Protocol):
    """One HTTP POST. Raises TransportError when no response was received."""

    def send(
        self,
        url: str,
        *,
        headers: Mapping[str, str],
        body: bytes,
        timeout_s: float,
    ) -> HttpResponse:
        raise NotImplementedError
