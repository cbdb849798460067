"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest


@pytest.fixture
def reference() -> datetime:
    """Saturday 2024-06-01 10:00 UTC."""
    return datetime(2024, 6, 1, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def wednesday() -> datetime:
    """Wednesday 2024-06-05 14:30:15 UTC."""
    return datetime(2024, 6, 5, 14, 30, 15, tzinfo=timezone.utc)


@pytest.fixture
def berlin_summer() -> timezone:
    """Fixed +02:00 offset."""
    return timezone(timedelta(hours=2))
