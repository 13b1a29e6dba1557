"""Component declaration for the WebDAV blob store adapter resource."""

from __future__ import annotations

from typing import TYPE_CHECKING

from packages.ltc_shared.config import LtcSettings

if TYPE_CHECKING:
    from resources.adapters.dav_blob_store.dav_blob_store import DavBlobStore

RESOURCE_COMPONENT_ID = "adapter_dav_blob_store"


def build_component(*, settings: LtcSettings) -> DavBlobStore:
    """Build the runtime blob store instance for resolved settings."""
    from resources.adapters.dav_blob_store.config import resolve_blob_store_config
    from resources.adapters.dav_blob_store.dav_blob_store import DavBlobStore

    return DavBlobStore(config=resolve_blob_store_config(settings))
