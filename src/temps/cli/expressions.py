"""CLI commands for parsing and resolving time expressions."""

from __future__ import annotations

import json
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from temps.api import parse, parse_prefix
from temps.configuration.settings import DEFAULT_CONFIG_PATH, Settings, load_settings
from temps.errors import ParseError, TempsError
from temps.expression.models import Language, TimeExpression
from temps.formatting import format_hhmmss, format_hhmmssxxx
from temps.language import get_lexicon, supported_languages
from temps.resolution.calendar import WeekdayPolicy
from temps.resolution.resolver import resolve

console = Console()


def _load_defaults(config_path: Optional[Path] = None) -> Settings:
    """Stored settings when a config file exists, built-in defaults otherwise."""
    try:
        return load_settings(config_path or DEFAULT_CONFIG_PATH)
    except FileNotFoundError:
        return Settings()
    except ValueError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1)


def _language(value: Optional[str], settings: Settings) -> Language:
    if value is None:
        return settings.parser.default_language
    try:
        return Language.from_code(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--language") from exc


def _reference(value: Optional[str], settings: Settings) -> datetime:
    zone = settings.reference_timezone()
    if value is None:
        return datetime.now(zone)
    try:
        reference = datetime.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(f"Not an ISO-8601 timestamp: {value!r}", param_hint="--reference") from exc
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=zone)
    return reference


def _parse(text: str, language: Language, partial: bool) -> TimeExpression:
    if not partial:
        return parse(text, language)
    result = parse_prefix(text, language)
    if result.remaining.strip():
        console.print(f"[yellow]Ignored trailing input:[/yellow] {escape(result.remaining.strip())}")
    return result.expression


def _report_error(exc: TempsError) -> None:
    console.print(f"[red]Error:[/red] {escape(exc.user_message)}")
    console.print(escape(str(exc)), style="dim")
    if isinstance(exc, ParseError) and exc.position is not None:
        console.print(exc.excerpt(), markup=False, highlight=False)
    console.print(f"[yellow]Suggestion:[/yellow] {escape(exc.recovery_suggestion)}")


def _signed_distance(delta: timedelta) -> str:
    formatted = format_hhmmssxxx(delta) if delta.microseconds else format_hhmmss(delta)
    return formatted if formatted.startswith("-") else f"+{formatted}"


def parse_command(
    text: str = typer.Argument(..., help="Expression to parse, e.g. 'next monday at 9:00'"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Language code (en, de)"),
    partial: bool = typer.Option(False, "--partial", help="Ignore text after the expression"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
    config_path: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Parse an expression and show its structure."""

    settings = _load_defaults(config_path)
    selected = _language(language, settings)
    try:
        expression = _parse(text, selected, partial or settings.parser.allow_partial)
    except TempsError as exc:
        _report_error(exc)
        raise typer.Exit(1)

    payload = expression.to_dict()
    if as_json:
        typer.echo(json.dumps(payload, indent=2))
        return

    table = Table(title=f"{type(expression).__name__} ({selected.value})")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    for key, value in payload.items():
        if key == "type":
            continue
        table.add_row(key, escape(json.dumps(value) if isinstance(value, dict) else str(value)))
    console.print(table)


def resolve_command(
    text: str = typer.Argument(..., help="Expression to resolve, e.g. 'in 3 hours'"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Language code (en, de)"),
    reference: Optional[str] = typer.Option(
        None, "--reference", help="ISO-8601 reference instant (default: now)"
    ),
    policy: Optional[WeekdayPolicy] = typer.Option(None, "--policy", help="Rule for bare weekdays"),
    partial: bool = typer.Option(False, "--partial", help="Ignore text after the expression"),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
    config_path: Optional[Path] = typer.Option(None, help="Path to config file"),
) -> None:
    """Resolve an expression to a concrete timestamp."""

    settings = _load_defaults(config_path)
    selected = _language(language, settings)
    instant = _reference(reference, settings)
    weekday_policy = policy or settings.resolver.bare_weekday_policy
    try:
        expression = _parse(text, selected, partial or settings.parser.allow_partial)
        moment = resolve(expression, instant, weekday_policy=weekday_policy)
    except TempsError as exc:
        _report_error(exc)
        raise typer.Exit(1)

    distance = _signed_distance(moment - instant)
    if as_json:
        typer.echo(json.dumps({
            "expression": expression.to_dict(),
            "reference": instant.isoformat(),
            "resolved": moment.isoformat(),
            "distance": distance,
        }, indent=2))
        return

    console.print(f"[bold]{moment.isoformat()}[/bold]")
    console.print(f"[dim]{distance} from {instant.isoformat()}[/dim]")


def languages_command() -> None:
    """List supported languages."""

    table = Table(title="Supported languages")
    table.add_column("Code", style="cyan")
    table.add_column("Name")
    table.add_column("Now")
    table.add_column("Connector")
    for language in supported_languages():
        lexicon = get_lexicon(language)
        table.add_row(
            language.value,
            language.name.title(),
            ", ".join(keyword.spelling for keyword in lexicon.now),
            ", ".join(keyword.spelling for keyword in lexicon.connectors),
        )
    console.print(table)
