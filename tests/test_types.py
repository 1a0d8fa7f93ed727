"""Tests for the types module."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from timeregions.exceptions import InvalidWindowError
from timeregions.types import (
    DEFAULT_COLOR_MODE,
    ClockTime,
    ColorMode,
    Marking,
    Occurrence,
    QueryWindow,
    Theme,
    TimeRegion,
    parse_color_mode,
    parse_theme,
)


class TestColorMode:
    """Tests for ColorMode and parse_color_mode."""

    def test_values(self) -> None:
        assert [mode.value for mode in ColorMode] == ["gray", "red", "green", "blue", "yellow", "custom"]

    def test_titles(self) -> None:
        assert ColorMode.GRAY.title == "Gray"
        assert ColorMode.CUSTOM.title == "Custom"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (ColorMode.BLUE, ColorMode.BLUE),
            ("green", ColorMode.GREEN),
            (" YELLOW ", ColorMode.YELLOW),
            ("background6", DEFAULT_COLOR_MODE),
            (None, DEFAULT_COLOR_MODE),
        ],
    )
    def test_parse(self, value: object, expected: ColorMode) -> None:
        assert parse_color_mode(value) is expected  # type: ignore[arg-type]

    def test_default_is_red(self) -> None:
        assert DEFAULT_COLOR_MODE is ColorMode.RED


class TestParseTheme:
    """Tests for parse_theme."""

    def test_light(self) -> None:
        assert parse_theme("Light") is Theme.LIGHT
        assert parse_theme(Theme.LIGHT) is Theme.LIGHT

    def test_anything_else_is_dark(self) -> None:
        assert parse_theme(None) is Theme.DARK
        assert parse_theme("solarized") is Theme.DARK


class TestClockTime:
    """Tests for ClockTime."""

    def test_unspecified(self) -> None:
        clock = ClockTime()
        assert not clock.is_specified
        assert not clock.has_time
        assert str(clock) == "--:--"

    def test_offset(self) -> None:
        assert ClockTime(hour=23, minute=59, second=59).offset() == timedelta(hours=23, minutes=59, seconds=59)

    def test_str(self) -> None:
        assert str(ClockTime(hour=9, minute=5)) == "09:05:00"
        assert str(ClockTime(hour=9, minute=5, day_of_week=3)) == "09:05:00 (day 3)"

    def test_frozen(self) -> None:
        clock = ClockTime(hour=1, minute=0)
        with pytest.raises(AttributeError):
            clock.hour = 2  # type: ignore[misc]


class TestTimeRegion:
    """Tests for TimeRegion configuration mapping."""

    def test_from_dict_camel_case(self) -> None:
        region = TimeRegion.from_dict({
            "from": "09:00",
            "to": "17:00",
            "fromDayOfWeek": 1,
            "toDayOfWeek": 5,
            "fill": 1,
            "line": 0,
            "colorMode": "custom",
            "fillColor": "#ff0000",
            "lineColor": "blue",
            "op": "time",
        })
        assert region.from_time == "09:00"
        assert region.to_time == "17:00"
        assert region.from_day_of_week == 1
        assert region.to_day_of_week == 5
        assert region.fill is True
        assert region.line is False
        assert region.color_mode == "custom"
        assert region.fill_color == "#ff0000"
        assert region.line_color == "blue"

    def test_from_dict_attribute_names(self) -> None:
        region = TimeRegion.from_dict({"from_time": "22:00", "to_time": "06:00"})
        assert region.from_time == "22:00"
        assert region.to_time == "06:00"

    def test_defaults(self) -> None:
        region = TimeRegion()
        assert region.fill is True
        assert region.line is False

    def test_to_dict_skips_none(self) -> None:
        region = TimeRegion(from_time="09:00", color_mode=ColorMode.BLUE)
        assert region.to_dict() == {"from": "09:00", "fill": True, "line": False, "colorMode": "blue"}

    def test_round_trip(self) -> None:
        region = TimeRegion(from_time="1", to_time="2", from_day_of_week="3", line=True, line_color="red")
        assert TimeRegion.from_dict(region.to_dict()) == region


class TestQueryWindow:
    """Tests for QueryWindow."""

    def test_naive_is_utc(self) -> None:
        window = QueryWindow(datetime(2024, 1, 1), datetime(2024, 1, 2))
        assert window.start.tzinfo == timezone.utc
        assert window.duration == timedelta(days=1)

    def test_start_after_end_raises(self) -> None:
        with pytest.raises(InvalidWindowError):
            QueryWindow(datetime(2024, 1, 2), datetime(2024, 1, 1))

    def test_invalid_window_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="is after its end"):
            QueryWindow(datetime(2024, 1, 2), datetime(2024, 1, 1))

    def test_from_epoch_ms(self) -> None:
        window = QueryWindow.from_epoch_ms(1704067200000, 1704153600000)
        assert window.start == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert window.end == datetime(2024, 1, 2, tzinfo=timezone.utc)


class TestOccurrenceAndMarking:
    """Tests for Occurrence and Marking."""

    def test_epoch_ms(self) -> None:
        occ = Occurrence(datetime(2024, 1, 1, 9, tzinfo=timezone.utc), datetime(2024, 1, 1, 17, tzinfo=timezone.utc))
        assert occ.start_ms == 1704099600000
        assert occ.end_ms == 1704128400000
        assert occ.duration == timedelta(hours=8)

    def test_marking_to_flot(self) -> None:
        at = datetime(2024, 1, 1, 9, tzinfo=timezone.utc)
        marking = Marking(start=at, end=at, color="#fff", kind="line")
        assert marking.to_flot() == {"xaxis": {"from": 1704099600000, "to": 1704099600000}, "color": "#fff"}

    def test_marking_default_kind(self) -> None:
        at = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert Marking(start=at, end=at, color=None).kind == "band"
