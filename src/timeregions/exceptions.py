"""Custom exceptions for timeregions."""

from __future__ import annotations

from datetime import datetime


class TimeRegionsError(Exception):
    """Base exception for all timeregions errors."""

    pass


class InvalidWindowError(TimeRegionsError, ValueError):
    """Raised when a query window ends before it starts."""

    def __init__(self, start: datetime, end: datetime) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Query window start {start.isoformat()} is after its end {end.isoformat()}")


class ConfigurationError(TimeRegionsError):
    """Raised when time region configuration cannot be loaded."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        self.source = source
        msg = message
        if source:
            msg += f" (in {source})"
        super().__init__(msg)
