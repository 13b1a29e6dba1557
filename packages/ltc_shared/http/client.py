"""Minimal shared HTTP client wrapper over httpx."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from .errors import HttpRequestError, HttpStatusError


def _response_text(response: httpx.Response) -> str:
    """Return response text without raising secondary decode errors."""
    try:
        return response.text
    except Exception:
        return ""


def _status_error(response: httpx.Response) -> HttpStatusError:
    """Build a typed status error from one HTTP response."""
    request = response.request
    status_text = f"{response.status_code} {response.reason_phrase}".strip()
    return HttpStatusError(
        message=f"{status_text} for {request.method} {request.url}",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
        reason_phrase=response.reason_phrase,
        response_body=_response_text(response),
        response_headers=dict(response.headers.items()),
    )


def _request_error(
    exc: httpx.RequestError, *, method: str, url: str
) -> HttpRequestError:
    """Build a typed transport error from one httpx request failure."""
    try:
        request: httpx.Request | None = exc.request
    except RuntimeError:
        # httpx raises when the exception was created without a request.
        request = None
    request_url = str(request.url) if request is not None else url
    request_method = request.method if request is not None else method.upper()
    return HttpRequestError(
        message=f"HTTP request failed for {request_method} {request_url}: {exc}",
        method=request_method,
        url=request_url,
        cause=exc,
    )


def _is_accepted(response: httpx.Response, expected_status: int | None) -> bool:
    """Return True when the response status satisfies the caller contract."""
    if expected_status is not None:
        return response.status_code == expected_status
    return response.is_success


class HttpClient:
    """Thin synchronous wrapper over ``httpx.Client``.

    Every request is issued exactly once. Connection failures surface as
    ``HttpRequestError`` and unaccepted statuses as ``HttpStatusError``.
    """

    def __init__(
        self,
        *,
        base_url: str = "",
        timeout_seconds: float = 10.0,
        auth: tuple[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
        follow_redirects: bool = False,
        transport: httpx.BaseTransport | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        """Create a new shared HTTP client wrapper."""
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=base_url,
            timeout=timeout_seconds,
            auth=auth,
            headers=dict(headers or {}),
            follow_redirects=follow_redirects,
            transport=transport,
        )

    def close(self) -> None:
        """Close underlying transport resources when owned."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpClient:
        """Enter context manager scope."""
        return self

    def __exit__(self, *_: object) -> None:
        """Exit context manager scope and close client."""
        self.close()

    def request(
        self,
        method: str,
        url: str,
        *,
        raise_for_status: bool = True,
        expected_status: int | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Issue one request and map transport/status failures to typed errors.

        When ``expected_status`` is given only that exact status is accepted;
        otherwise any 2xx status is.
        """
        try:
            response = self._client.request(method=method, url=url, **kwargs)
        except httpx.RequestError as exc:
            raise _request_error(exc, method=method, url=url) from exc

        if raise_for_status and not _is_accepted(response, expected_status):
            raise _status_error(response)
        return response

    def stream(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Issue one request and return the response with its body unread.

        The caller owns the returned response and must close it. Non-2xx
        responses are drained and closed before ``HttpStatusError`` is raised.
        """
        request = self._client.build_request(method=method, url=url, **kwargs)
        try:
            response = self._client.send(request, stream=True)
        except httpx.RequestError as exc:
            raise _request_error(exc, method=method, url=url) from exc

        if not response.is_success:
            try:
                response.read()
            except httpx.RequestError:
                pass
            finally:
                response.close()
            raise _status_error(response)
        return response

    def get(self, url: str, **kwargs: Any) -> httpx.Response:
        """Issue one GET request."""
        return self.request("GET", url, **kwargs)

    def put(self, url: str, **kwargs: Any) -> httpx.Response:
        """Issue one PUT request."""
        return self.request("PUT", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        """Issue one DELETE request."""
        return self.request("DELETE", url, **kwargs)

    def propfind(self, url: str, *, depth: str = "1", **kwargs: Any) -> httpx.Response:
        """Issue one WebDAV PROPFIND request with the given ``Depth`` header."""
        headers = dict(kwargs.pop("headers", None) or {})
        headers["Depth"] = depth
        return self.request("PROPFIND", url, headers=headers, **kwargs)
