"""Blob store adapter implementation over WebDAV."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from time import perf_counter

import httpx

from packages.ltc_shared.http import HttpClient, HttpRequestError, HttpStatusError
from packages.ltc_shared.logging import fields, get_logger, log_context
from resources.adapters.dav_blob_store import actions
from resources.adapters.dav_blob_store.adapter import (
    Blob,
    BlobContent,
    BlobStore,
    BlobStoreError,
    BlobStoreErrorKind,
)
from resources.adapters.dav_blob_store.component import RESOURCE_COMPONENT_ID
from resources.adapters.dav_blob_store.config import BlobStoreConfig
from resources.adapters.dav_blob_store.multistatus import parse_multistatus

_LOGGER = get_logger(__name__)

_MULTI_STATUS = 207
_READ_CHUNK_SIZE = 64 * 1024


class HttpBlobReader:
    """Streaming body of one GET response; the caller must close it."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response
        self._chunks = response.iter_bytes(_READ_CHUNK_SIZE)
        self._buffer = bytearray()

    @property
    def closed(self) -> bool:
        """Return True once the underlying response has been closed."""
        return self._response.is_closed

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes, or everything left when negative."""
        with _transport_errors(self._response.request):
            if size < 0:
                for chunk in self._chunks:
                    self._buffer += chunk
                size = len(self._buffer)
            while len(self._buffer) < size:
                chunk = next(self._chunks, None)
                if chunk is None:
                    break
                self._buffer += chunk
        data = bytes(self._buffer[:size])
        del self._buffer[:size]
        return data

    def iter_bytes(self) -> Iterator[bytes]:
        """Yield the remaining body in chunks."""
        if self._buffer:
            buffered = bytes(self._buffer)
            self._buffer.clear()
            yield buffered
        with _transport_errors(self._response.request):
            yield from self._chunks

    def close(self) -> None:
        """Release the underlying connection."""
        self._response.close()

    def __enter__(self) -> HttpBlobReader:
        """Enter context manager scope."""
        return self

    def __exit__(self, *_: object) -> None:
        """Exit context manager scope and close the stream."""
        self.close()


class DavBlobStore(BlobStore):
    """Blob store backed by one WebDAV ``/blobs`` collection.

    Every operation performs exactly one HTTP round trip with Basic Auth and
    raises ``BlobStoreError`` classified as transport, protocol, or parse.
    """

    def __init__(
        self,
        *,
        config: BlobStoreConfig,
        client: HttpClient | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config
        self._client = client or HttpClient(
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
            auth=(config.username, config.password),
            transport=transport,
        )

    @property
    def config(self) -> BlobStoreConfig:
        """Return the immutable store configuration."""
        return self._config

    def close(self) -> None:
        """Close the owned HTTP client."""
        self._client.close()

    def __enter__(self) -> DavBlobStore:
        """Enter context manager scope."""
        return self

    def __exit__(self, *_: object) -> None:
        """Exit context manager scope and close the client."""
        self.close()

    def list(self) -> list[Blob]:
        """List objects directly under ``/blobs`` with a depth-1 PROPFIND."""
        response = self._exchange(
            "PROPFIND",
            actions.BLOBS_PATH,
            lambda: self._client.propfind(
                actions.BLOBS_PATH, depth="1", expected_status=_MULTI_STATUS
            ),
        )
        return parse_multistatus(response.content)

    def upload(self, name: str, content: BlobContent) -> None:
        """PUT ``content`` to ``/blobs/<name>``; any 2xx status succeeds."""
        path = _object_path(name)
        self._exchange(
            "PUT",
            path,
            lambda: self._client.put(path, content=content),
            blob_name=name,
        )

    def download(self, name: str) -> HttpBlobReader:
        """GET ``/blobs/<name>`` and return its body as an open stream."""
        path = _object_path(name)
        response = self._exchange(
            "GET",
            path,
            lambda: self._client.stream("GET", path),
            blob_name=name,
        )
        return HttpBlobReader(response)

    def delete(self, name: str) -> None:
        """DELETE ``/blobs/<name>``; any 2xx status succeeds."""
        path = _object_path(name)
        self._exchange(
            "DELETE", path, lambda: self._client.delete(path), blob_name=name
        )

    def download_app_bits_action(self, name: str) -> actions.DownloadAction:
        """Describe fetching ``<name>-bits.zip`` on a worker."""
        return actions.download_app_bits_action(self._config, name)

    def delete_app_bits_action(self, name: str) -> actions.RunAction:
        """Describe deleting ``<name>-bits.zip`` from a worker."""
        return actions.delete_app_bits_action(self._config, name)

    def upload_droplet_action(self, name: str) -> actions.RunAction:
        """Describe pushing a staged droplet from a worker."""
        return actions.upload_droplet_action(self._config, name)

    def download_droplet_action(self, name: str) -> actions.DownloadAction:
        """Describe fetching ``<name>-droplet.tgz`` on a worker."""
        return actions.download_droplet_action(self._config, name)

    def _exchange(
        self,
        method: str,
        path: str,
        send: Callable[[], httpx.Response],
        *,
        blob_name: str | None = None,
    ) -> httpx.Response:
        """Send one request traced at DEBUG level and translate HTTP failures.

        Credentials never enter the log context.
        """
        context = {
            fields.COMPONENT_ID: RESOURCE_COMPONENT_ID,
            fields.HTTP_METHOD: method,
            fields.HTTP_PATH: path,
            fields.BLOB_NAME: blob_name,
        }
        with log_context(context):
            with log_context({fields.EVENT: fields.BLOB_STORE_REQUEST_EVENT}):
                _LOGGER.debug("Blob store request")

            started = perf_counter()
            try:
                response = send()
            except HttpRequestError as exc:
                raise BlobStoreError(
                    kind=BlobStoreErrorKind.TRANSPORT,
                    message=str(exc),
                    cause=exc.cause,
                ) from exc.cause
            except HttpStatusError as exc:
                raise BlobStoreError(
                    kind=BlobStoreErrorKind.PROTOCOL,
                    message=f"{method} {path} failed: {exc.status_text}",
                    status_code=exc.status_code,
                ) from exc

            elapsed_ms = round((perf_counter() - started) * 1000.0, 3)
            with log_context(
                {
                    fields.EVENT: fields.BLOB_STORE_RESPONSE_EVENT,
                    fields.HTTP_STATUS: response.status_code,
                    fields.DURATION_MS: elapsed_ms,
                }
            ):
                _LOGGER.debug("Blob store response")
        return response


def _object_path(name: str) -> str:
    return f"{actions.BLOBS_PATH}/{name.lstrip('/')}"


@contextmanager
def _transport_errors(request: httpx.Request) -> Iterator[None]:
    """Translate connection failures raised while streaming a body."""
    try:
        yield
    except httpx.RequestError as exc:
        raise BlobStoreError(
            kind=BlobStoreErrorKind.TRANSPORT,
            message=f"HTTP request failed for {request.method} {request.url}: {exc}",
            cause=exc,
        ) from exc
