"""CLI commands for managing journalcorr settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import typer

from journalcorr.configuration.settings import (
    DEFAULT_CONFIG_PATH,
    Settings,
    bootstrap_settings,
    load_settings,
    save_settings,
)
from journalcorr.errors import ConfigurationError, InvalidConfigError, format_error_for_cli


config_app = typer.Typer(help="Manage journalcorr configuration")


@config_app.command("init")
def init_config(
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to config file"),
    journal_path: Optional[Path] = typer.Option(None, help="Default journal file"),
    threshold: Optional[float] = typer.Option(None, help="Default |phi| threshold"),
) -> None:
    """Initialize the journalcorr settings file."""

    overrides: dict[str, Any] = {}
    if journal_path:
        overrides["journal_path"] = str(journal_path)
    if threshold is not None:
        overrides.setdefault("analysis", {})["threshold"] = threshold

    try:
        settings = bootstrap_settings(path=config_path, overrides=overrides)
    except ConfigurationError as e:
        typer.echo(format_error_for_cli(e), err=True)
        raise typer.Exit(code=1)

    save_settings(settings, config_path)
    typer.echo(f"Configuration initialized at {config_path}")
    typer.echo(_summarize_settings(settings))


@config_app.command("show")
def show_config(
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to config"),
) -> None:
    """Display the stored configuration."""

    try:
        settings = load_settings(config_path)
    except ConfigurationError as e:
        typer.echo(format_error_for_cli(e), err=True)
        raise typer.Exit(code=1)
    typer.echo(_summarize_settings(settings))


@config_app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key, e.g. analysis.threshold"),
    value: str = typer.Argument(..., help="New value"),
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to config"),
) -> None:
    """Update a configuration value."""

    try:
        settings = load_settings(config_path)
        payload = settings.model_dump(mode="python")
        _assign(payload, key.split("."), value)
        updated = Settings.model_validate(payload)
    except ConfigurationError as e:
        typer.echo(format_error_for_cli(e), err=True)
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.echo(f"Invalid value for {key}: {e}", err=True)
        raise typer.Exit(code=1)

    save_settings(updated, config_path)
    typer.echo(f"Updated {key}")


@config_app.command("validate")
def validate_config(
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to config file"),
) -> None:
    """Validate configuration file for correctness."""

    try:
        settings = load_settings(config_path)
        typer.echo(f"✅ Configuration valid at {config_path}")
        typer.echo(f"   Journal: {settings.journal_path or 'reference journal'}")
        typer.echo(f"   Threshold: {settings.analysis.threshold}")
    except ConfigurationError as e:
        typer.echo(f"❌ Configuration invalid: {e}", err=True)
        raise typer.Exit(code=1)


def _summarize_settings(settings: Settings) -> str:
    payload = settings.model_dump(mode="json")
    return json.dumps(payload, indent=2)


def _assign(payload: dict, path: List[str], value: str) -> None:
    target = payload
    for key in path[:-1]:
        if key not in target or not isinstance(target[key], dict):
            raise InvalidConfigError(f"Unknown configuration section '{key}'")
        target = target[key]
    if path[-1] not in target:
        raise InvalidConfigError(f"Unknown configuration key '{'.'.join(path)}'")
    target[path[-1]] = value
