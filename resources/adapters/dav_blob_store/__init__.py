"""WebDAV blob store adapter resource exports."""

from resources.adapters.dav_blob_store.actions import (
    Action,
    DownloadAction,
    RunAction,
    blob_url,
    delete_app_bits_action,
    download_app_bits_action,
    download_droplet_action,
    upload_droplet_action,
    wrap_action,
)
from resources.adapters.dav_blob_store.adapter import (
    Blob,
    BlobContent,
    BlobReader,
    BlobStore,
    BlobStoreError,
    BlobStoreErrorKind,
)
from resources.adapters.dav_blob_store.component import (
    RESOURCE_COMPONENT_ID,
    build_component,
)
from resources.adapters.dav_blob_store.config import (
    BlobStoreConfig,
    resolve_blob_store_config,
)
from resources.adapters.dav_blob_store.dav_blob_store import (
    DavBlobStore,
    HttpBlobReader,
)
from resources.adapters.dav_blob_store.multistatus import parse_multistatus

__all__ = [
    "Action",
    "Blob",
    "BlobContent",
    "BlobReader",
    "BlobStore",
    "BlobStoreConfig",
    "BlobStoreError",
    "BlobStoreErrorKind",
    "DavBlobStore",
    "DownloadAction",
    "HttpBlobReader",
    "RESOURCE_COMPONENT_ID",
    "RunAction",
    "blob_url",
    "build_component",
    "delete_app_bits_action",
    "download_app_bits_action",
    "download_droplet_action",
    "parse_multistatus",
    "resolve_blob_store_config",
    "upload_droplet_action",
    "wrap_action",
]
