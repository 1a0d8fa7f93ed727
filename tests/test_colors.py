"""Tests for the colors module."""

from __future__ import annotations

import pytest

from timeregions.colors import (
    COLOR_MODES,
    NAMED_COLORS,
    color_mode_options,
    resolve_color_name,
    resolve_colors,
)
from timeregions.normalize import normalize
from timeregions.types import ColorMode, ColorPair, Theme

# ---------------------------------------------------------------------------
# resolve_colors
# ---------------------------------------------------------------------------


class TestResolvePresetColors:
    """Preset color modes."""

    def test_red_fill_only(self) -> None:
        region = normalize({"from": "1", "colorMode": "red", "fill": True, "line": False})
        assert resolve_colors(region) == ColorPair(fill="rgba(234, 112, 112, 0.12)", line=None)

    def test_blue_fill_and_line(self) -> None:
        region = normalize({"from": "1", "colorMode": "blue", "fill": True, "line": True})
        assert resolve_colors(region) == ColorPair(fill="rgba(11, 125, 238, 0.12)", line="rgba(11, 125, 238, 0.60)")

    def test_line_only_uses_line_flag(self) -> None:
        region = normalize({"from": "1", "colorMode": "yellow", "fill": False, "line": True})
        assert resolve_colors(region) == ColorPair(fill=None, line="rgba(247, 149, 32, 0.60)")

    def test_unknown_mode_uses_red(self) -> None:
        region = normalize({"from": "1", "colorMode": "background6"})
        assert resolve_colors(region).fill == COLOR_MODES[ColorMode.RED].dark.fill

    def test_gray_depends_on_theme(self) -> None:
        region = normalize({"from": "1", "colorMode": "gray", "fill": True, "line": True})
        assert resolve_colors(region, Theme.DARK) == ColorPair(
            fill="rgba(255, 255, 255, 0.09)", line="rgba(255, 255, 255, 0.2)"
        )
        assert resolve_colors(region, "light") == ColorPair(fill="rgba(0, 0, 0, 0.09)", line="rgba(0, 0, 0, 0.2)")

    def test_theme_does_not_change_colored_modes(self) -> None:
        region = normalize({"from": "1", "colorMode": "green", "line": True})
        assert resolve_colors(region, Theme.DARK) == resolve_colors(region, Theme.LIGHT)


class TestResolveCustomColors:
    """The custom color mode."""

    def test_missing_fill_color_is_none(self) -> None:
        region = normalize({"from": "1", "colorMode": "custom", "fill": True})
        assert resolve_colors(region) == ColorPair(fill=None, line=None)

    def test_named_and_hex_colors(self) -> None:
        region = normalize({
            "from": "1",
            "colorMode": "custom",
            "fill": True,
            "line": True,
            "fillColor": "semi-dark-green",
            "lineColor": "#abcdef",
        })
        assert resolve_colors(region) == ColorPair(fill="#56A64B", line="#abcdef")

    def test_flags_off_suppress_custom_colors(self) -> None:
        region = normalize({
            "from": "1",
            "colorMode": "custom",
            "fill": False,
            "line": False,
            "fillColor": "red",
            "lineColor": "red",
        })
        assert resolve_colors(region) == ColorPair()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestResolveColorName:
    """Tests for resolve_color_name."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, None),
            ("", None),
            ("   ", None),
            ("#FF0000", "#FF0000"),
            ("rgba(1, 2, 3, 0.5)", "rgba(1, 2, 3, 0.5)"),
            ("RGB(1, 2, 3)", "RGB(1, 2, 3)"),
            ("green", "#73BF69"),
            ("Dark-Red", "#C4162A"),
            ("super-light-purple", "#DEB6F2"),
            ("chartreuse", "chartreuse"),
        ],
    )
    def test_resolution(self, value: str | None, expected: str | None) -> None:
        assert resolve_color_name(value) == expected

    def test_named_custom_colors_ignore_theme(self) -> None:
        region = normalize(
            {"from": "09:00", "line": True, "colorMode": "custom", "fillColor": "blue", "lineColor": "dark-blue"}
        )
        expected = ColorPair(fill=resolve_color_name("blue"), line=resolve_color_name("dark-blue"))
        assert resolve_colors(region, Theme.DARK) == expected
        assert resolve_colors(region, Theme.LIGHT) == expected

    def test_palette_size(self) -> None:
        assert len(NAMED_COLORS) == 30


class TestColorModeTable:
    def test_every_preset_mode_present(self) -> None:
        assert set(COLOR_MODES) == set(ColorMode) - {ColorMode.CUSTOM}

    def test_only_gray_is_theme_dependent(self) -> None:
        assert [mode for mode, d in COLOR_MODES.items() if d.theme_dependent] == [ColorMode.GRAY]

    def test_options(self) -> None:
        options = color_mode_options()
        assert options[0] == ("gray", "Gray")
        assert options[-1] == ("custom", "Custom")
        assert len(options) == 6
