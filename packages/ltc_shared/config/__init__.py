"""Public API for shared ltc configuration utilities."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    ComponentNamespaceSettings,
    ComponentsSettings,
    LoggingSettings,
    LtcSettings,
    resolve_component_settings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ComponentNamespaceSettings",
    "ComponentsSettings",
    "LoggingSettings",
    "LtcSettings",
    "load_settings",
    "resolve_component_settings",
]
