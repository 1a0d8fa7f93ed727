"""Time region rule normalization.

Turns a raw :class:`~timeregions.types.TimeRegion` into a
:class:`~timeregions.types.NormalizedRegion` with every default filled in.
Malformed field values never raise; they degrade to an unspecified
endpoint, which makes the rule inert.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Union

from timeregions.types import ClockTime, NormalizedRegion, TimeRegion, parse_color_mode

_TIME_PATTERN = re.compile(r"^(\d+):?(\d{2})?")

#: Clock time assumed for a weekday-only start.
START_OF_DAY = ClockTime(hour=0, minute=0, second=0)

#: Clock time assumed for a weekday-only end.
END_OF_DAY = ClockTime(hour=23, minute=59, second=59)

RegionInput = Union[TimeRegion, Mapping[str, Any]]


def parse_clock_time(value: object) -> ClockTime:
    """Parse a time-of-day string such as ``"9"``, ``"9:30"`` or ``"22:00"``.

    Hours above 23 and minutes above 59 are clamped. When only hours are
    given the minute is 0. Anything that does not start with digits gives
    an unspecified clock time.

    Args:
        value: Time string (numbers are converted with ``str``).

    Returns:
        The parsed clock time, without a weekday.
    """
    if value is None:
        return ClockTime()

    match = _TIME_PATTERN.match(str(value).strip())
    if not match:
        return ClockTime()

    hour = min(int(match[1]), 23)
    minute = min(int(match[2]), 59) if match[2] is not None else 0
    return ClockTime(hour=hour, minute=minute)


def parse_day_of_week(value: object) -> int | None:
    """Parse an ISO weekday number (1=Monday .. 7=Sunday).

    Whole-valued floats such as ``5.0`` or ``"5.0"`` are accepted. Returns
    None for missing, non-numeric, fractional or out-of-range values.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        day = float(str(value).strip())
    except ValueError:
        return None
    if day.is_integer() and 1 <= day <= 7:
        return int(day)
    return None


def _present(value: object) -> bool:
    return value is not None and str(value).strip() != ""


def _with_weekday(clock: ClockTime, day_of_week: int | None, default: ClockTime) -> ClockTime:
    if day_of_week is None:
        return clock
    if not clock.has_time:
        return ClockTime(hour=default.hour, minute=default.minute, second=default.second, day_of_week=day_of_week)
    return ClockTime(hour=clock.hour, minute=clock.minute, second=clock.second, day_of_week=day_of_week)


def normalize(region: RegionInput) -> NormalizedRegion:
    """Fill in the defaults of a time region rule.

    - A missing start or end time copies the other one.
    - A missing start or end weekday copies the other one.
    - A weekday-anchored start without a time starts at ``00:00:00``.
    - A weekday-anchored end without a time ends at ``23:59:59``.

    The input is only read; a new value is returned.

    Args:
        region: A :class:`TimeRegion` or its configuration mapping.

    Returns:
        The normalized rule. Check :attr:`NormalizedRegion.is_inert` to see
        whether it can produce occurrences.
    """
    if not isinstance(region, TimeRegion):
        region = TimeRegion.from_dict(region)

    from_time = region.from_time if _present(region.from_time) else None
    to_time = region.to_time if _present(region.to_time) else None
    if from_time is not None and to_time is None:
        to_time = from_time
    elif to_time is not None and from_time is None:
        from_time = to_time

    from_day = parse_day_of_week(region.from_day_of_week)
    to_day = parse_day_of_week(region.to_day_of_week)
    if from_day is None:
        from_day = to_day
    if to_day is None:
        to_day = from_day

    start = _with_weekday(parse_clock_time(from_time), from_day, START_OF_DAY)
    end = _with_weekday(parse_clock_time(to_time), to_day, END_OF_DAY)

    return NormalizedRegion(
        start=start,
        end=end,
        fill=bool(region.fill),
        line=bool(region.line),
        color_mode=parse_color_mode(region.color_mode),
        fill_color=region.fill_color or None,
        line_color=region.line_color or None,
    )
