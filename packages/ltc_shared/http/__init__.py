"""Public shared HTTP API for ltc packages."""

from .client import HttpClient
from .errors import (
    HttpClientError,
    HttpError,
    HttpRequestError,
    HttpStatusError,
)

__all__ = [
    "HttpClient",
    "HttpClientError",
    "HttpError",
    "HttpRequestError",
    "HttpStatusError",
]
