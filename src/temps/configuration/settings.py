"""Typed settings for the temps command line and library defaults.

Settings are Pydantic models persisted as JSON. Environment variables take
precedence over the file when settings are bootstrapped:

- ``TEMPS_LANGUAGE``: default parser language ("en", "de", "german", ...)
- ``TEMPS_ALLOW_PARTIAL``: accept trailing input after an expression
- ``TEMPS_UTC_OFFSET_MINUTES``: fixed offset of the reference clock
- ``TEMPS_BARE_WEEKDAY_POLICY``: "next" or "upcoming"
"""

from __future__ import annotations

import json
import os
from datetime import timedelta, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from temps.expression.models import Language
from temps.resolution.calendar import WeekdayPolicy


DEFAULT_CONFIG_PATH = Path.home() / ".temps" / "config.json"

MAX_OFFSET_MINUTES = 24 * 60 - 1


class ParserSettings(BaseModel):
    """Defaults for parsing."""

    default_language: Language = Field(Language.ENGLISH, description="Language used when none is given")
    allow_partial: bool = Field(False, description="Ignore text after a complete expression")

    @field_validator("default_language", mode="before")
    def _validate_language(cls, value: Any) -> Language:
        return Language.from_code(value)


class ResolverSettings(BaseModel):
    """Defaults for resolution."""

    utc_offset_minutes: int = Field(0, ge=-MAX_OFFSET_MINUTES, le=MAX_OFFSET_MINUTES)
    bare_weekday_policy: WeekdayPolicy = Field(
        WeekdayPolicy.STRICTLY_FUTURE, description="Rule for weekdays without next/last"
    )


class Settings(BaseModel):
    """Root configuration state."""

    parser: ParserSettings = Field(default_factory=ParserSettings)
    resolver: ResolverSettings = Field(default_factory=ResolverSettings)

    def reference_timezone(self) -> timezone:
        """Fixed-offset timezone for the reference clock."""
        offset = self.resolver.utc_offset_minutes
        if offset == 0:
            return timezone.utc
        return timezone(timedelta(minutes=offset))


def load_settings(path: Path = DEFAULT_CONFIG_PATH) -> Settings:
    """Load settings from disk or raise if invalid."""

    if not path.exists():
        raise FileNotFoundError(f"Settings file not found at {path}")
    try:
        payload = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
    try:
        return Settings.model_validate(payload)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc


def save_settings(settings: Settings, path: Path = DEFAULT_CONFIG_PATH) -> None:
    """Persist settings to disk."""

    payload = settings.model_dump(mode="json")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2))


def bootstrap_settings(
    *,
    path: Path = DEFAULT_CONFIG_PATH,
    overrides: Optional[Dict[str, Any]] = None,
) -> Settings:
    """Create or load settings, apply overrides, persist and return them.

    ``overrides`` uses dotted keys such as ``{"parser.default_language": "de"}``.
    Environment variables are applied after ``overrides``.
    """

    overrides = overrides or {}

    if path.exists():
        settings = load_settings(path)
    else:
        settings = Settings()
        save_settings(settings, path)

    merged = settings.model_dump(mode="json")
    merged = _apply_overrides(merged, overrides)
    merged = _apply_env_overrides(merged)

    try:
        resolved = Settings.model_validate(merged)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
    save_settings(resolved, path)
    return resolved


def _apply_overrides(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = {section: dict(values) for section, values in base.items()}
    for key, value in overrides.items():
        section, _, name = key.partition(".")
        if not name:
            raise ValueError(f"Override keys must look like 'section.name', got {key!r}")
        merged.setdefault(section, {})[name] = value
    return merged


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    parser = data.setdefault("parser", {})
    _set_env_override(parser, "default_language", "TEMPS_LANGUAGE")
    _set_env_override(parser, "allow_partial", "TEMPS_ALLOW_PARTIAL", cast_bool=True)

    resolver = data.setdefault("resolver", {})
    _set_env_override(resolver, "utc_offset_minutes", "TEMPS_UTC_OFFSET_MINUTES", cast_int=True)
    _set_env_override(resolver, "bare_weekday_policy", "TEMPS_BARE_WEEKDAY_POLICY")
    return data


def _set_env_override(
    mapping: Dict[str, Any],
    key: str,
    env_name: str,
    *,
    cast_bool: bool = False,
    cast_int: bool = False,
) -> None:
    raw = os.getenv(env_name)
    if raw is None:
        return
    if cast_bool:
        mapping[key] = raw.lower() in {"1", "true", "yes"}
    elif cast_int:
        try:
            mapping[key] = int(raw)
        except ValueError as exc:
            raise ValueError(f"{env_name} must be an integer, got {raw!r}") from exc
    else:
        mapping[key] = raw
