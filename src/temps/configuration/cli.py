"""CLI commands for managing temps settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from temps.configuration.settings import (
    DEFAULT_CONFIG_PATH,
    Settings,
    bootstrap_settings,
    load_settings,
)
from temps.resolution.calendar import WeekdayPolicy


config_app = typer.Typer(help="Manage temps configuration")


@config_app.command("init")
def init_config(
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, help="Path to config file"),
    language: Optional[str] = typer.Option(None, help="Default parser language"),
    allow_partial: Optional[bool] = typer.Option(
        None, "--allow-partial/--no-allow-partial", help="Accept trailing input by default"
    ),
    utc_offset_minutes: Optional[int] = typer.Option(None, help="Reference clock UTC offset"),
    policy: Optional[WeekdayPolicy] = typer.Option(None, help="Rule for bare weekdays"),
) -> None:
    """Initialize the temps settings file."""

    overrides = {}
    if language is not None:
        overrides["parser.default_language"] = language
    if allow_partial is not None:
        overrides["parser.allow_partial"] = allow_partial
    if utc_offset_minutes is not None:
        overrides["resolver.utc_offset_minutes"] = utc_offset_minutes
    if policy is not None:
        overrides["resolver.bare_weekday_policy"] = policy.value

    try:
        settings = bootstrap_settings(path=config_path, overrides=overrides)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)
    typer.echo(f"Configuration initialized at {config_path}")
    typer.echo(_summarize_settings(settings))


@config_app.command("show")
def show_config(config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, help="Path to config")) -> None:
    """Display the stored configuration."""

    try:
        settings = load_settings(config_path)
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)
    typer.echo(_summarize_settings(settings))


def _summarize_settings(settings: Settings) -> str:
    return json.dumps(settings.model_dump(mode="json"), indent=2)
