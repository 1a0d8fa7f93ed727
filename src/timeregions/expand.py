"""Recurring interval expansion.

Expands a normalized time region into the concrete occurrences that
overlap a query window by stepping one day at a time from the window's
first midnight. All arithmetic is done on UTC datetimes.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Iterator
from datetime import datetime, timedelta

from timeregions.normalize import RegionInput, normalize
from timeregions.types import ClockTime, NormalizedRegion, Occurrence, QueryWindow

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(hours=24)
_ONE_HOUR = timedelta(hours=1)


def _unix(value: datetime) -> int:
    """Whole seconds since the epoch."""
    return math.floor(value.timestamp())


def _align_weekday(value: datetime, day_of_week: int | None) -> datetime:
    """Advance *value* by whole days until it falls on *day_of_week*."""
    if day_of_week is None:
        return value
    while value.isoweekday() != day_of_week:
        value += _ONE_DAY
    return value


def _occurrence_end(start_at: datetime, start: ClockTime, end: ClockTime) -> datetime:
    """Resolve the end of the occurrence that begins at *start_at*."""
    start_hour = start.hour or 0
    end_hour = end.hour or 0

    if end_hour >= start_hour:
        end_at = start_at + timedelta(hours=end_hour - start_hour)
    else:
        # Overnight: walk forward until the clock shows the end hour.
        end_at = start_at
        while end_at.hour != end_hour:
            end_at += _ONE_HOUR

    end_at = end_at.replace(minute=end.minute or 0, second=end.second)
    return _align_weekday(end_at, end.day_of_week)


def expand(region: NormalizedRegion | RegionInput, window: QueryWindow) -> Iterator[Occurrence]:
    """Yield every occurrence of *region* that overlaps *window*.

    Occurrences come out in chronological order of their start. An
    occurrence is skipped only when it lies entirely before or entirely
    after the window; partial overlaps are yielded unclipped.

    The generator keeps no state between calls, so expanding the same
    inputs twice gives the same sequence.

    Args:
        region: A normalized rule, or a raw rule which is normalized first.
        window: The absolute query window.

    Yields:
        Occurrences overlapping the window.
    """
    if not isinstance(region, NormalizedRegion):
        region = normalize(region)

    if region.is_inert:
        logger.debug("Skipping inert time region %r", region)
        return

    window_start = _unix(window.start)
    window_end = _unix(window.end)

    midnight = window.start.replace(hour=0, minute=0, second=0, microsecond=0)
    start_at = midnight + region.start.offset()

    while _unix(start_at) <= window_end:
        start_at = _align_weekday(start_at, region.start.day_of_week)
        if _unix(start_at) > window_end:
            break

        end_at = _occurrence_end(start_at, region.start, region.end)

        first, last = _unix(start_at), _unix(end_at)
        before = first < window_start and last < window_start
        after = first > window_end and last > window_end
        if not (before or after):
            yield Occurrence(start=start_at, end=end_at)

        start_at += _ONE_DAY


def expand_all(
    regions: Iterable[NormalizedRegion | RegionInput],
    window: QueryWindow,
) -> list[tuple[NormalizedRegion, list[Occurrence]]]:
    """Normalize and expand several rules against one window.

    Inert rules are dropped from the result.

    Args:
        regions: Raw or normalized rules.
        window: The absolute query window.

    Returns:
        ``(normalized_region, occurrences)`` pairs in input order.
    """
    results: list[tuple[NormalizedRegion, list[Occurrence]]] = []
    for region in regions:
        normalized = region if isinstance(region, NormalizedRegion) else normalize(region)
        if normalized.is_inert:
            logger.debug("Skipping inert time region %r", normalized)
            continue
        occurrences = list(expand(normalized, window))
        logger.debug("Expanded %d occurrence(s) for %s -> %s", len(occurrences), normalized.start, normalized.end)
        results.append((normalized, occurrences))
    return results
