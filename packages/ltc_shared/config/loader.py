"""Settings loading with deterministic precedence.

The cascade is always:
1) CLI params
2) Environment variables
3) ~/.config/ltc/ltc.yaml (or an explicit ``config_path``)
4) Built-in defaults

Environment variable format:
- Prefix: ``LTC_``
- Nested keys: ``__`` separator
- Example: ``LTC_LOGGING__LEVEL=DEBUG`` -> ``logging.level = "DEBUG"``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Mapping

from .models import LtcSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> LtcSettings:
    """Load root settings, optionally reading YAML from ``config_path``."""
    settings_cls = LtcSettings if config_path is None else _scoped(Path(config_path))
    return settings_cls(**dict(cli_params or {}))


def _scoped(path: Path) -> type[LtcSettings]:
    """Return a settings class reading its YAML source from ``path``."""

    class _ScopedLtcSettings(LtcSettings):
        _config_path: ClassVar[Path] = path

    return _ScopedLtcSettings
