"""Configuration loading utilities for temps."""

from .settings import (
    DEFAULT_CONFIG_PATH,
    ParserSettings,
    ResolverSettings,
    Settings,
    bootstrap_settings,
    load_settings,
    save_settings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ParserSettings",
    "ResolverSettings",
    "Settings",
    "bootstrap_settings",
    "load_settings",
    "save_settings",
]
