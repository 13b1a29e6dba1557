"""Typed errors for the shared HTTP client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping


@dataclass(frozen=True)
class HttpError(Exception):
    """Base error type for shared HTTP helper failures."""

    message: str

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message


@dataclass(frozen=True)
class HttpClientError(HttpError):
    """Base error for outbound HTTP client call failures."""

    method: str
    url: str


@dataclass(frozen=True)
class HttpRequestError(HttpClientError):
    """Connection could not be established, was reset, or timed out."""

    cause: Exception | None = None


@dataclass(frozen=True)
class HttpStatusError(HttpClientError):
    """Remote answered with a status outside the accepted set."""

    status_code: int = 0
    reason_phrase: str = ""
    response_body: str = ""
    response_headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def status_text(self) -> str:
        """Return ``"<code> <reason>"``, e.g. ``500 Internal Server Error``."""
        return f"{self.status_code} {self.reason_phrase}".strip()
