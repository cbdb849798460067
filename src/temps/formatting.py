"""Duration formatting for display."""

from __future__ import annotations

from datetime import timedelta


def _split(delta: timedelta) -> tuple:
    sign = "-" if delta < timedelta(0) else ""
    total_microseconds = abs(delta) // timedelta(microseconds=1)
    seconds, microseconds = divmod(total_microseconds, 1_000_000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return sign, hours, minutes, seconds, microseconds


def format_hhmmss(delta: timedelta) -> str:
    """Format as ``hh:mm:ss``; hours keep counting past 24.

    >>> format_hhmmss(timedelta(days=1, minutes=5))
    '24:05:00'
    """
    sign, hours, minutes, seconds, _ = _split(delta)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_hhmmssxxx(delta: timedelta) -> str:
    """Format as ``hh:mm:ss.xxx`` (milliseconds, truncated)."""
    sign, hours, minutes, seconds, microseconds = _split(delta)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}.{microseconds // 1000:03d}"
