"""Tests for temps configuration settings."""

from __future__ import annotations

import json
from datetime import timedelta, timezone
from pathlib import Path

import pytest

from temps.configuration.settings import (
    ParserSettings,
    ResolverSettings,
    Settings,
    bootstrap_settings,
    load_settings,
    save_settings,
)
from temps.expression import Language
from temps.resolution import WeekdayPolicy


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TEMPS_LANGUAGE",
        "TEMPS_ALLOW_PARTIAL",
        "TEMPS_UTC_OFFSET_MINUTES",
        "TEMPS_BARE_WEEKDAY_POLICY",
    ):
        monkeypatch.delenv(name, raising=False)


def test_bootstrap_creates_default_config(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    settings = bootstrap_settings(path=config_path)

    assert config_path.exists()
    data = json.loads(config_path.read_text())
    assert data["parser"]["default_language"] == "en"
    assert data["resolver"]["bare_weekday_policy"] == "next"
    assert settings == Settings()


def test_load_settings_round_trip(tmp_path: Path) -> None:
    config_path = tmp_path / "nested" / "config.json"
    settings = Settings(
        parser=ParserSettings(default_language=Language.GERMAN, allow_partial=True),
        resolver=ResolverSettings(utc_offset_minutes=120, bare_weekday_policy=WeekdayPolicy.UPCOMING),
    )
    save_settings(settings, config_path)

    loaded = load_settings(config_path)
    assert loaded == settings
    assert loaded.reference_timezone() == timezone(timedelta(hours=2))


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        json.dumps({"resolver": {"utc_offset_minutes": 1440}}),
        json.dumps({"parser": {"default_language": "fr"}}),
        json.dumps({"resolver": {"bare_weekday_policy": "sometimes"}}),
    ],
)
def test_load_invalid_content(tmp_path: Path, content: str) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(content)
    with pytest.raises(ValueError, match="Invalid configuration"):
        load_settings(config_path)


def test_language_accepts_names() -> None:
    assert ParserSettings(default_language="German").default_language is Language.GERMAN


def test_reference_timezone_defaults_to_utc() -> None:
    assert Settings().reference_timezone() is timezone.utc


def test_bootstrap_applies_overrides(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    settings = bootstrap_settings(
        path=config_path,
        overrides={"parser.default_language": "de", "resolver.utc_offset_minutes": -300},
    )
    assert settings.parser.default_language is Language.GERMAN
    assert settings.resolver.utc_offset_minutes == -300
    assert load_settings(config_path) == settings


def test_bootstrap_rejects_malformed_override_key(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="section.name"):
        bootstrap_settings(path=tmp_path / "config.json", overrides={"language": "de"})


def test_environment_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEMPS_LANGUAGE", "german")
    monkeypatch.setenv("TEMPS_ALLOW_PARTIAL", "yes")
    monkeypatch.setenv("TEMPS_UTC_OFFSET_MINUTES", "60")
    monkeypatch.setenv("TEMPS_BARE_WEEKDAY_POLICY", "upcoming")

    settings = bootstrap_settings(
        path=tmp_path / "config.json", overrides={"parser.default_language": "en"}
    )
    assert settings.parser.default_language is Language.GERMAN
    assert settings.parser.allow_partial is True
    assert settings.resolver.utc_offset_minutes == 60
    assert settings.resolver.bare_weekday_policy is WeekdayPolicy.UPCOMING


def test_environment_integer_must_parse(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEMPS_UTC_OFFSET_MINUTES", "ninety")
    with pytest.raises(ValueError, match="TEMPS_UTC_OFFSET_MINUTES"):
        bootstrap_settings(path=tmp_path / "config.json")


def test_bootstrap_loads_existing_file(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    save_settings(Settings(parser=ParserSettings(allow_partial=True)), config_path)
    assert bootstrap_settings(path=config_path).parser.allow_partial is True
