"""ltc blob store CLI actor implemented with Typer."""

from __future__ import annotations

import json
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable

import typer

from packages.ltc_shared.config import LtcSettings, load_settings
from packages.ltc_shared.logging import configure_logging
from packages.ltc_shared.terminal import colors
from resources.adapters.dav_blob_store import (
    Blob,
    BlobStoreError,
    BlobStoreErrorKind,
    DavBlobStore,
    actions,
    build_component,
    resolve_blob_store_config,
    wrap_action,
)

SUCCESS_EXIT_CODE = 0
PROTOCOL_ERROR_EXIT_CODE = 3
TRANSPORT_ERROR_EXIT_CODE = 4
PARSE_ERROR_EXIT_CODE = 5

_EXIT_CODES = {
    BlobStoreErrorKind.PROTOCOL: PROTOCOL_ERROR_EXIT_CODE,
    BlobStoreErrorKind.TRANSPORT: TRANSPORT_ERROR_EXIT_CODE,
    BlobStoreErrorKind.PARSE: PARSE_ERROR_EXIT_CODE,
}


class ActionKind(str, Enum):
    """Execution engine actions the CLI can describe."""

    DOWNLOAD_APP_BITS = "download-app-bits"
    DELETE_APP_BITS = "delete-app-bits"
    UPLOAD_DROPLET = "upload-droplet"
    DOWNLOAD_DROPLET = "download-droplet"


_ACTION_BUILDERS = {
    ActionKind.DOWNLOAD_APP_BITS: actions.download_app_bits_action,
    ActionKind.DELETE_APP_BITS: actions.delete_app_bits_action,
    ActionKind.UPLOAD_DROPLET: actions.upload_droplet_action,
    ActionKind.DOWNLOAD_DROPLET: actions.download_droplet_action,
}


@dataclass(frozen=True)
class CliConfig:
    """Global CLI runtime options shared by every command."""

    settings: LtcSettings
    as_json: bool


def _build_store(settings: LtcSettings) -> DavBlobStore:
    """Return one blob store built from resolved settings."""
    return build_component(settings=settings)


def _decorate(cfg: CliConfig, color: str, text: str) -> str:
    """Apply terminal color only for human output."""
    enabled = colors.DECORATION_ENABLED and not cfg.as_json
    return colors.colorize(color, text, enabled=enabled)


def _emit_error(cfg: CliConfig, exc: BlobStoreError) -> None:
    """Render one blob store failure to stderr."""
    if cfg.as_json:
        typer.echo(json.dumps({"error": str(exc), "kind": exc.kind.value}), err=True)
        return
    typer.echo(f"{_decorate(cfg, colors.BRIGHT_RED, 'error:')} {exc}", err=True)


def _run_command(cfg: CliConfig, invoke: Callable[[DavBlobStore], Any]) -> Any:
    """Execute one store call and map failures to process exit codes."""
    try:
        with _build_store(cfg.settings) as store:
            return invoke(store)
    except BlobStoreError as exc:
        _emit_error(cfg, exc)
        raise typer.Exit(code=_EXIT_CODES[exc.kind]) from exc


def _blob_payload(blob: Blob) -> dict[str, Any]:
    return {
        "path": blob.path,
        "size": blob.size,
        "created": blob.created.isoformat(),
    }


def _render_blobs(cfg: CliConfig, blobs: list[Blob]) -> str:
    """Render a listing sorted by path for human scanning."""
    if len(blobs) == 0:
        return "No blobs found."
    lines: list[str] = []
    for blob in sorted(blobs, key=lambda item: item.path):
        name = _decorate(cfg, colors.CYAN, blob.path)
        created = _decorate(cfg, colors.GRAY, blob.created.isoformat())
        lines.append(f"- {name} ({blob.size} bytes, {created})")
    return "\n".join(lines)


def _require_config(ctx: typer.Context) -> CliConfig:
    """Return required CLI config from Typer context."""
    config = ctx.obj
    if not isinstance(config, CliConfig):
        raise RuntimeError("CLI configuration not initialized")
    return config


app = typer.Typer(no_args_is_help=True, help="ltc blob store command-line interface")
blobs_app = typer.Typer(help="WebDAV blob store commands")
actions_app = typer.Typer(help="Execution engine action descriptors")


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None,
        "--config",
        envvar="LTC_CONFIG_PATH",
        help="YAML settings file",
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON output"),
    log_level: str | None = typer.Option(None, help="Override logging level"),
) -> None:
    """Load settings and configure logging for all commands."""
    settings = load_settings(config_path=config)
    configure_logging(
        level=log_level or settings.logging.level,
        json_output=settings.logging.json_output,
        service=settings.logging.service,
        environment=settings.logging.environment,
    )
    ctx.obj = CliConfig(settings=settings, as_json=as_json)


@blobs_app.command("list")
def blobs_list(ctx: typer.Context) -> None:
    """List blobs in the store."""
    cfg = _require_config(ctx)
    blobs = _run_command(cfg, lambda store: store.list())
    if cfg.as_json:
        ordered = sorted(blobs, key=lambda blob: blob.path)
        payload = [_blob_payload(blob) for blob in ordered]
        typer.echo(json.dumps(payload, sort_keys=True, separators=(",", ":")))
        return
    typer.echo(_render_blobs(cfg, blobs))


@blobs_app.command("upload")
def blobs_upload(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Object name under /blobs"),
    source: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="File to upload"
    ),
) -> None:
    """Upload one local file."""
    cfg = _require_config(ctx)

    def _upload(store: DavBlobStore) -> None:
        with source.open("rb") as handle:
            store.upload(name, handle)

    _run_command(cfg, _upload)
    typer.echo(f"Uploaded {_decorate(cfg, colors.CYAN, name)}")


@blobs_app.command("download")
def blobs_download(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Object name under /blobs"),
    destination: Path = typer.Argument(..., dir_okay=False, help="Local file to write"),
) -> None:
    """Download one blob to a local file."""
    cfg = _require_config(ctx)

    def _download(store: DavBlobStore) -> None:
        with store.download(name) as reader, destination.open("wb") as handle:
            shutil.copyfileobj(reader, handle)

    _run_command(cfg, _download)
    typer.echo(f"Downloaded {_decorate(cfg, colors.CYAN, name)} to {destination}")


@blobs_app.command("delete")
def blobs_delete(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Object name under /blobs"),
) -> None:
    """Delete one blob."""
    cfg = _require_config(ctx)
    _run_command(cfg, lambda store: store.delete(name))
    typer.echo(f"Deleted {_decorate(cfg, colors.CYAN, name)}")


@actions_app.command("build")
def actions_build(
    ctx: typer.Context,
    kind: ActionKind = typer.Argument(..., help="Action to describe"),
    name: str = typer.Argument(..., help="Application or droplet base name"),
) -> None:
    """Print one execution engine action as JSON."""
    cfg = _require_config(ctx)
    store_config = resolve_blob_store_config(cfg.settings)
    action = wrap_action(_ACTION_BUILDERS[kind](store_config, name))
    indent = None if cfg.as_json else 2
    typer.echo(json.dumps(action.to_payload(), indent=indent, sort_keys=True))


app.add_typer(blobs_app, name="blobs")
app.add_typer(actions_app, name="actions")


if __name__ == "__main__":
    app()
