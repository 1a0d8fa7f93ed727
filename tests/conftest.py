"""Shared fixtures for timeregions tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from timeregions import QueryWindow


@pytest.fixture
def monday() -> datetime:
    """Midnight UTC on Monday 2024-01-01."""
    return datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def week_window(monday: datetime) -> QueryWindow:
    """One calendar week, Monday 2024-01-01 00:00 to Monday 2024-01-08 00:00."""
    return QueryWindow(monday, datetime(2024, 1, 8, tzinfo=timezone.utc))


@pytest.fixture
def day_window(monday: datetime) -> QueryWindow:
    """Monday 2024-01-01 from 00:00:00 to 23:59:59."""
    return QueryWindow(monday, datetime(2024, 1, 1, 23, 59, 59, tzinfo=timezone.utc))
