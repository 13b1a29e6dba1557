"""Transport-agnostic blob store contracts, DTOs, and errors."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import BinaryIO, Protocol, Union

from pydantic import BaseModel, ConfigDict

BlobContent = Union[bytes, BinaryIO, Iterable[bytes]]


class BlobStoreErrorKind(StrEnum):
    """Failure classification shared by every blob store operation."""

    TRANSPORT = "transport"
    PROTOCOL = "protocol"
    PARSE = "parse"


@dataclass(frozen=True)
class BlobStoreError(Exception):
    """One blob store failure, discriminated by ``kind``.

    ``TRANSPORT`` carries the underlying network exception as ``cause``,
    ``PROTOCOL`` carries the rejected HTTP ``status_code``, and ``PARSE``
    names the offending syntax position or literal in ``message``.
    """

    kind: BlobStoreErrorKind
    message: str
    status_code: int = 0
    cause: Exception | None = None

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message


class Blob(BaseModel):
    """One object listed in the blob store collection."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str
    size: int
    created: datetime


class BlobReader(Protocol):
    """Readable, closable body of one downloaded blob."""

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes, or the remainder when negative."""

    def iter_bytes(self) -> Iterator[bytes]:
        """Yield the remaining body in chunks."""

    def close(self) -> None:
        """Release the underlying connection."""


class BlobStore(Protocol):
    """Protocol for WebDAV-backed blob store operations."""

    def list(self) -> list[Blob]:
        """List objects directly under the blob collection."""

    def upload(self, name: str, content: BlobContent) -> None:
        """Store ``content`` under ``name``."""

    def download(self, name: str) -> BlobReader:
        """Open the stored object ``name`` for reading."""

    def delete(self, name: str) -> None:
        """Remove the stored object ``name``."""
