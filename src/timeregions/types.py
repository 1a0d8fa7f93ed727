"""Core data types for time region expansion.

Provides the raw rule (:class:`TimeRegion`), its normalized form
(:class:`NormalizedRegion`), clock anchors, query windows, occurrences and
renderer markings.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Union

from timeregions.exceptions import ConfigurationError, InvalidWindowError

#: Mapping from configuration keys to :class:`TimeRegion` attributes.
_CONFIG_KEYS = {
    "from": "from_time",
    "to": "to_time",
    "fromDayOfWeek": "from_day_of_week",
    "toDayOfWeek": "to_day_of_week",
    "fill": "fill",
    "line": "line",
    "colorMode": "color_mode",
    "fillColor": "fill_color",
    "lineColor": "line_color",
}


class ColorMode(Enum):
    """Color presets a time region can be painted with."""

    GRAY = "gray"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    CUSTOM = "custom"

    @property
    def title(self) -> str:
        """Display name for pickers."""
        return self.value.capitalize()


class Theme(Enum):
    """Chart theme used to pick theme-dependent colors."""

    DARK = "dark"
    LIGHT = "light"


#: Color mode used when a rule names no mode or an unknown one.
DEFAULT_COLOR_MODE = ColorMode.RED

ColorModeInput = Union[ColorMode, str]
ThemeInput = Union[Theme, str]


def parse_color_mode(value: ColorModeInput | None) -> ColorMode:
    """Convert a color mode string to a :class:`ColorMode`.

    Unknown or missing values fall back to :data:`DEFAULT_COLOR_MODE`.

    Args:
        value: Enum member or case-insensitive mode name.

    Returns:
        The matching color mode.
    """
    if isinstance(value, ColorMode):
        return value
    if value is None:
        return DEFAULT_COLOR_MODE
    try:
        return ColorMode(str(value).strip().lower())
    except ValueError:
        return DEFAULT_COLOR_MODE


def parse_theme(value: ThemeInput | None) -> Theme:
    """Convert a theme string to a :class:`Theme`, defaulting to dark."""
    if isinstance(value, Theme):
        return value
    if value is not None and str(value).strip().lower() == Theme.LIGHT.value:
        return Theme.LIGHT
    return Theme.DARK


@dataclass(frozen=True, slots=True)
class ClockTime:
    """A time-of-day anchor, optionally pinned to an ISO weekday.

    Attributes:
        hour: Hour 0-23, or None when the endpoint is unspecified.
        minute: Minute 0-59, or None when the endpoint is unspecified.
        second: Second 0-59.
        day_of_week: ISO weekday (1=Monday .. 7=Sunday) or None.
    """

    hour: int | None = None
    minute: int | None = None
    second: int = 0
    day_of_week: int | None = None

    @property
    def has_time(self) -> bool:
        """True when an hour or minute was given."""
        return self.hour is not None or self.minute is not None

    @property
    def is_specified(self) -> bool:
        """True when the endpoint can anchor an occurrence."""
        return self.hour is not None and self.minute is not None

    def offset(self) -> timedelta:
        """Offset of this clock time from midnight."""
        return timedelta(hours=self.hour or 0, minutes=self.minute or 0, seconds=self.second)

    def __str__(self) -> str:
        if not self.is_specified:
            return "--:--"
        text = f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        if self.day_of_week is not None:
            text += f" (day {self.day_of_week})"
        return text


@dataclass(frozen=True, slots=True)
class TimeRegion:
    """A raw time region rule as supplied by the user.

    Field values are kept as given; :func:`timeregions.normalize.normalize`
    interprets them without ever failing.

    Attributes:
        from_time: Start time-of-day string (``"H"``, ``"H:MM"`` or ``"HH:MM"``).
        to_time: End time-of-day string.
        from_day_of_week: ISO weekday of the start, as a number or string.
        to_day_of_week: ISO weekday of the end, as a number or string.
        fill: Paint a shaded band for each occurrence.
        line: Paint boundary lines at each occurrence's start and end.
        color_mode: One of the :class:`ColorMode` names.
        fill_color: Fill color for the ``custom`` mode.
        line_color: Line color for the ``custom`` mode.
    """

    from_time: str | None = None
    to_time: str | None = None
    from_day_of_week: int | str | None = None
    to_day_of_week: int | str | None = None
    fill: bool = True
    line: bool = False
    color_mode: ColorModeInput | None = None
    fill_color: str | None = None
    line_color: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TimeRegion:
        """Create a rule from its configuration mapping.

        Accepts the camelCase keys of panel configuration (``from``, ``to``,
        ``fromDayOfWeek``, ``toDayOfWeek``, ``fill``, ``line``, ``colorMode``,
        ``fillColor``, ``lineColor``) as well as the attribute names.
        Unknown keys are ignored.

        Raises:
            ConfigurationError: If *data* is not a mapping.
        """
        if not isinstance(data, Mapping):
            msg = f"Time region must be a mapping, got {type(data).__name__}"
            raise ConfigurationError(msg)

        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            attr = _CONFIG_KEYS.get(key, key)
            if attr in _CONFIG_KEYS.values():
                kwargs[attr] = value

        for flag in ("fill", "line"):
            if flag in kwargs:
                kwargs[flag] = bool(kwargs[flag])
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the camelCase configuration mapping."""
        result: dict[str, Any] = {}
        for key, attr in _CONFIG_KEYS.items():
            value = getattr(self, attr)
            if isinstance(value, ColorMode):
                value = value.value
            if value is not None:
                result[key] = value
        return result


@dataclass(frozen=True, slots=True)
class NormalizedRegion:
    """A time region with every default filled in.

    Attributes:
        start: Clock anchor where each occurrence begins.
        end: Clock anchor where each occurrence ends.
        fill: Paint a shaded band.
        line: Paint boundary lines.
        color_mode: Resolved color mode.
        fill_color: Custom fill color, if any.
        line_color: Custom line color, if any.
    """

    start: ClockTime
    end: ClockTime
    fill: bool = True
    line: bool = False
    color_mode: ColorMode = DEFAULT_COLOR_MODE
    fill_color: str | None = None
    line_color: str | None = None

    @property
    def is_inert(self) -> bool:
        """True when the rule cannot produce any occurrence."""
        return not (self.start.is_specified and self.end.is_specified)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True, slots=True)
class QueryWindow:
    """The absolute time range a chart is displaying.

    Naive datetimes are taken to be UTC; aware ones are converted to UTC.

    Raises:
        InvalidWindowError: If *start* is after *end*.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        start = _as_utc(self.start)
        end = _as_utc(self.end)
        if start > end:
            raise InvalidWindowError(start, end)
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    @classmethod
    def from_epoch_ms(cls, start_ms: float, end_ms: float) -> QueryWindow:
        """Create a window from epoch milliseconds, as charts report them."""
        return cls(
            start=datetime.fromtimestamp(start_ms / 1000, tz=timezone.utc),
            end=datetime.fromtimestamp(end_ms / 1000, tz=timezone.utc),
        )

    @property
    def duration(self) -> timedelta:
        """Length of the window."""
        return self.end - self.start


def _epoch_ms(value: datetime) -> int:
    return int(value.timestamp() * 1000)


@dataclass(frozen=True, slots=True)
class Occurrence:
    """One concrete realization of a time region.

    *end* can precede *start* for rules whose start and end share an hour
    but not a minute ordering.
    """

    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def start_ms(self) -> int:
        """Start as epoch milliseconds."""
        return _epoch_ms(self.start)

    @property
    def end_ms(self) -> int:
        """End as epoch milliseconds."""
        return _epoch_ms(self.end)


@dataclass(frozen=True, slots=True)
class ColorPair:
    """Fill and line colors; None for a color that should not be drawn."""

    fill: str | None = None
    line: str | None = None


@dataclass(frozen=True, slots=True)
class Marking:
    """A single drawable primitive on the time axis.

    *kind* is ``"band"`` for a shaded span or ``"line"`` for a boundary
    line, whose start equals its end.
    """

    start: datetime
    end: datetime
    color: str | None
    kind: str = "band"

    def to_flot(self) -> dict[str, Any]:
        """Render as a grid marking dict with epoch-millisecond bounds."""
        return {
            "xaxis": {"from": _epoch_ms(self.start), "to": _epoch_ms(self.end)},
            "color": self.color,
        }
