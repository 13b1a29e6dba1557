"""Pydantic settings for the WebDAV blob store adapter resource."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from packages.ltc_shared.config import LtcSettings, resolve_component_settings
from resources.adapters.dav_blob_store.component import RESOURCE_COMPONENT_ID


class BlobStoreConfig(BaseModel):
    """Address and credentials of one WebDAV blob store."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    host: str = "127.0.0.1"
    port: str = "8444"
    username: str = ""
    password: str = ""
    timeout_seconds: float = Field(default=30.0, gt=0)

    @field_validator("port", mode="before")
    @classmethod
    def _coerce_port(cls, value: object) -> object:
        """Accept integer ports from YAML or environment sources."""
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def base_url(self) -> str:
        """Return the credential-free ``http://host:port`` origin."""
        return f"http://{self.host}:{self.port}"


def resolve_blob_store_config(settings: LtcSettings) -> BlobStoreConfig:
    """Resolve adapter settings from ``components.adapter.dav_blob_store``."""
    return resolve_component_settings(
        settings=settings,
        component_id=RESOURCE_COMPONENT_ID,
        model=BlobStoreConfig,
    )
