"""Decode WebDAV ``multistatus`` PROPFIND bodies into blob records.

A PROPFIND body has the shape (namespace ``DAV:``)::

    <D:multistatus xmlns:D="DAV:">
      <D:response>
        <D:href>http://host:port/blobs/a-droplet.tgz</D:href>
        <D:propstat>
          <D:prop>
            <D:getcontentlength>4096</D:getcontentlength>
            <D:getlastmodified>Wed, 29 Jul 2015 18:43:36 GMT</D:getlastmodified>
          </D:prop>
          <D:status>HTTP/1.1 200 OK</D:status>
        </D:propstat>
      </D:response>
      ...
    </D:multistatus>

Only the trailing segment of each ``href`` is kept as the blob path.
"""

from __future__ import annotations

from datetime import UTC, datetime
from urllib.parse import unquote, urlsplit
from xml.etree import ElementTree as ET

from resources.adapters.dav_blob_store.adapter import (
    Blob,
    BlobStoreError,
    BlobStoreErrorKind,
)

_DAV = "{DAV:}"
_MULTISTATUS = f"{_DAV}multistatus"
_RESPONSE = f"./{_DAV}response"
_HREF = f"./{_DAV}href"
_PROP = f"./{_DAV}propstat/{_DAV}prop"
_CONTENT_LENGTH = f"./{_DAV}getcontentlength"
_LAST_MODIFIED = f"./{_DAV}getlastmodified"

_RFC1123 = "%a, %d %b %Y %H:%M:%S %Z"


def parse_multistatus(body: bytes | str) -> list[Blob]:
    """Parse one multistatus document into unordered ``Blob`` records.

    Byte bodies go to the XML parser undecoded so the document's own
    encoding declaration applies.
    """
    try:
        root = ET.fromstring(body.strip())
    except (ET.ParseError, ValueError) as exc:
        raise _parse_error(f"XML syntax error: {exc}") from exc

    if root.tag != _MULTISTATUS:
        raise _parse_error(f"expected DAV: multistatus root element, got {root.tag}")

    return [_blob_from_response(response) for response in root.findall(_RESPONSE)]


def parse_rfc1123(value: str) -> datetime:
    """Parse an HTTP-date such as ``Wed, 29 Jul 2015 18:43:36 GMT``.

    Only the GMT zone is accepted; the result is aware UTC.
    """
    text = value.strip()
    try:
        parsed = datetime.strptime(text, _RFC1123)
    except ValueError as exc:
        raise _timestamp_error(value) from exc
    if not text.endswith(" GMT"):
        raise _timestamp_error(value)
    return parsed.replace(tzinfo=UTC)


def blob_name_from_href(href: str) -> str:
    """Reduce an absolute or relative ``href`` to its last path segment."""
    path = urlsplit(href.strip()).path.rstrip("/")
    return unquote(path.rsplit("/", maxsplit=1)[-1])


def _blob_from_response(response: ET.Element) -> Blob:
    href = response.find(_HREF)
    if href is None or not (href.text or "").strip():
        raise _parse_error("multistatus response is missing href")

    size_text: str | None = None
    modified_text: str | None = None
    for prop in response.findall(_PROP):
        if size_text is None:
            size_text = _child_text(prop, _CONTENT_LENGTH)
        if modified_text is None:
            modified_text = _child_text(prop, _LAST_MODIFIED)

    return Blob(
        path=blob_name_from_href(href.text or ""),
        size=_parse_size(size_text),
        created=parse_rfc1123(modified_text or ""),
    )


def _child_text(prop: ET.Element, path: str) -> str | None:
    element = prop.find(path)
    if element is None:
        return None
    return element.text or ""


def _parse_size(value: str | None) -> int:
    # Servers omit getcontentlength for some collections.
    if value is None:
        return 0
    try:
        return int(value.strip())
    except ValueError as exc:
        raise _parse_error(
            f'cannot parse "{value}" as a content length'
        ) from exc


def _parse_error(message: str) -> BlobStoreError:
    return BlobStoreError(kind=BlobStoreErrorKind.PARSE, message=message)


def _timestamp_error(value: str) -> BlobStoreError:
    return _parse_error(f'cannot parse "{value}" as an RFC 1123 timestamp')
