"""Typer CLI driving a configuration session."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping, Sequence
from functools import lru_cache
from pathlib import Path
from typing import Any

import typer

from pc_builder.config import AppSettings
from pc_builder.configuration import ConfigurationStore
from pc_builder.container import ServiceContainer, build_container
from pc_builder.exceptions import ConfiguratorError
from pc_builder.persistence import PersistenceFailure
from pc_builder.submission import describe_snapshot
from pc_builder.validation import ValidationFailed

app = typer.Typer(help="PC builder command-line interface")

_DERIVED_KEYS = {"totalPrice", "total_price"}


@lru_cache(maxsize=1)
def get_container() -> ServiceContainer:
    """Container shared by every command in this process, built from the environment."""

    return build_container(AppSettings.from_env())


def reset_container() -> None:
    get_container.cache_clear()


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelNamesMapping().get(level_name.strip().upper())
    if level is None:
        raise typer.BadParameter(f"Unknown log level: {level_name}")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


@app.callback()
def main(
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level override"),
) -> None:
    """Assemble, validate and save custom computer configurations."""

    _configure_logging(log_level or AppSettings.from_env().log_level)


def parse_component_option(raw: str) -> dict[str, str]:
    """Parse ``type=ram,name=Corsair,price=80,capacity=16`` into a field mapping."""

    fields: dict[str, str] = {}
    for part in raw.split(","):
        if not part.strip():
            continue
        key, sep, value = part.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Expected key=value pairs, got {part!r}")
        fields[key.strip()] = value.strip()
    return fields


def _load_file(path: Path) -> tuple[str, list[Mapping[str, Any]]]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise typer.BadParameter(f"Cannot read configuration file {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise typer.BadParameter("Configuration file must contain a JSON object")
    components = payload.get("components", [])
    if not isinstance(components, list) or not all(isinstance(c, dict) for c in components):
        raise typer.BadParameter("'components' must be a list of objects")
    base_model = payload.get("baseModel", payload.get("base_model", ""))
    return str(base_model or ""), components


def apply_component(store: ConfigurationStore, fields: Mapping[str, Any]) -> int:
    """Append a component and write its fields, type first."""

    index = store.append_component()
    if "type" in fields:
        store.update_component_field(index, "type", fields["type"])
    for name, value in fields.items():
        if name == "type" or name in _DERIVED_KEYS:
            continue
        store.update_component_field(index, name, value)
    return index


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    container = get_container()
    settings = container.settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Storage Backend:\t" + settings.storage_backend)
    typer.echo("Database URL:\t" + settings.database_url)
    typer.echo("Snapshot Key:\t" + settings.snapshot_key)


@app.command("submit")
def submit(
    base_model: str | None = typer.Option(None, "--base-model", help="Base model name"),
    component: list[str] | None = typer.Option(
        None,
        "--component",
        "-c",
        help='Component fields, e.g. "type=ram,name=Corsair,price=80,capacity=16"',
    ),
    from_file: Path | None = typer.Option(
        None, "--from-file", help="JSON configuration with baseModel and components"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Validate without saving"),
) -> None:
    """Build a configuration, submit it and save it when valid."""

    container = get_container()
    session = container.new_session()
    store = session.store

    entries: list[Mapping[str, Any]] = []
    model = ""
    if from_file is not None:
        model, entries = _load_file(from_file)
    if base_model is not None:
        model = base_model
    entries.extend(parse_component_option(raw) for raw in component or [])

    try:
        store.set_base_model(model)
        for fields in entries:
            apply_component(store, fields)
    except ConfiguratorError as exc:
        typer.echo(f"Invalid component: {exc}")
        raise typer.Exit(code=1) from exc

    typer.echo(f"Total Components: {store.component_count}")
    typer.echo(f"Total Price: ${store.total_price}")

    result = session.submit()
    if isinstance(result, ValidationFailed):
        typer.echo("Validation failed:")
        for path, message in result.errors.items():
            typer.echo(f"  {path}: {message}")
        raise typer.Exit(code=1)

    if dry_run:
        typer.echo("Dry run: configuration not saved")
    else:
        try:
            asyncio.run(session.save())
        except PersistenceFailure as exc:
            typer.echo(f"Save failed: {exc}")
            raise typer.Exit(code=1) from exc
        typer.echo(f"Saved configuration under {session.pipeline.snapshot_key!r}")
    _echo_lines(describe_snapshot(result))


@app.command("show")
def show() -> None:
    """Display the saved configuration."""

    container = get_container()
    session = container.new_session()
    try:
        snapshot = asyncio.run(session.load())
    except PersistenceFailure as exc:
        typer.echo(f"Load failed: {exc}")
        raise typer.Exit(code=1) from exc
    if snapshot is None:
        typer.echo("No saved configuration found")
        raise typer.Exit(code=1)
    _echo_lines(describe_snapshot(snapshot))


def _echo_lines(lines: Sequence[str]) -> None:
    for line in lines:
        typer.echo(line)
