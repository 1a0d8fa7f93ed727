"""Color resolution for time regions.

Maps a rule's :class:`~timeregions.types.ColorMode` and the chart
:class:`~timeregions.types.Theme` to the fill and line colors the renderer
should use. Resolution never fails: missing colors come back as None.
"""

from __future__ import annotations

from dataclasses import dataclass

from timeregions.types import (
    ColorMode,
    ColorPair,
    NormalizedRegion,
    Theme,
    ThemeInput,
    parse_color_mode,
    parse_theme,
)


@dataclass(frozen=True, slots=True)
class ColorModeDefinition:
    """Preset colors for one color mode.

    Theme-dependent modes carry a ``dark`` and a ``light`` pair; the others
    carry a single pair used for both themes.
    """

    dark: ColorPair
    light: ColorPair

    @classmethod
    def single(cls, fill: str, line: str) -> ColorModeDefinition:
        pair = ColorPair(fill=fill, line=line)
        return cls(dark=pair, light=pair)

    @property
    def theme_dependent(self) -> bool:
        return self.dark != self.light

    def for_theme(self, theme: Theme) -> ColorPair:
        return self.light if theme is Theme.LIGHT else self.dark


#: Preset colors for every mode except ``custom``.
COLOR_MODES: dict[ColorMode, ColorModeDefinition] = {
    ColorMode.GRAY: ColorModeDefinition(
        dark=ColorPair(fill="rgba(255, 255, 255, 0.09)", line="rgba(255, 255, 255, 0.2)"),
        light=ColorPair(fill="rgba(0, 0, 0, 0.09)", line="rgba(0, 0, 0, 0.2)"),
    ),
    ColorMode.RED: ColorModeDefinition.single("rgba(234, 112, 112, 0.12)", "rgba(237, 46, 24, 0.60)"),
    ColorMode.GREEN: ColorModeDefinition.single("rgba(11, 237, 50, 0.090)", "rgba(6,163,69, 0.60)"),
    ColorMode.BLUE: ColorModeDefinition.single("rgba(11, 125, 238, 0.12)", "rgba(11, 125, 238, 0.60)"),
    ColorMode.YELLOW: ColorModeDefinition.single("rgba(235, 138, 14, 0.12)", "rgba(247, 149, 32, 0.60)"),
}

# Named palette: five shades per hue, lightest first.
_PALETTE_SHADES = ("super-light-", "light-", "", "semi-dark-", "dark-")
_PALETTE_HUES = {
    "red": ("#FFA6B0", "#FF7383", "#F2495C", "#E02F44", "#C4162A"),
    "orange": ("#FFCB7D", "#FFB357", "#FF9830", "#FF780A", "#FA6400"),
    "yellow": ("#FFF899", "#FFEE52", "#FADE2A", "#F2CC0C", "#E0B400"),
    "green": ("#C8F2C2", "#96D98D", "#73BF69", "#56A64B", "#37872D"),
    "blue": ("#C0D8FF", "#8AB8FF", "#5794F2", "#3274D9", "#1F60C4"),
    "purple": ("#DEB6F2", "#CA95E5", "#B877D9", "#A352CC", "#8F3BB8"),
}

#: Palette color name to hex code, e.g. ``"semi-dark-green"``.
NAMED_COLORS: dict[str, str] = {
    f"{shade}{hue}": code
    for hue, codes in _PALETTE_HUES.items()
    for shade, code in zip(_PALETTE_SHADES, codes, strict=True)
}


def resolve_color_name(value: object) -> str | None:
    """Resolve a palette name to its hex code.

    Hex codes, ``rgb()``/``rgba()`` strings and unknown names are returned
    unchanged. Empty values give None.
    """
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    if text.startswith("#") or text.lower().startswith("rgb"):
        return text
    return NAMED_COLORS.get(text.lower(), text)


def resolve_colors(region: NormalizedRegion, theme: ThemeInput = Theme.DARK) -> ColorPair:
    """Resolve the fill and line colors for a rule.

    The ``custom`` mode uses the rule's own ``fill_color`` and
    ``line_color``; every other mode reads :data:`COLOR_MODES`. A color is
    None when its flag is off or no custom color was given.

    Args:
        region: The normalized rule.
        theme: Chart theme, for theme-dependent modes.

    Returns:
        The resolved color pair.
    """
    mode = parse_color_mode(region.color_mode)

    if mode is ColorMode.CUSTOM:
        return ColorPair(
            fill=resolve_color_name(region.fill_color) if region.fill else None,
            line=resolve_color_name(region.line_color) if region.line else None,
        )

    preset = COLOR_MODES[mode].for_theme(parse_theme(theme))
    return ColorPair(
        fill=resolve_color_name(preset.fill) if region.fill else None,
        line=resolve_color_name(preset.line) if region.line else None,
    )


def color_mode_options() -> list[tuple[str, str]]:
    """List ``(key, title)`` pairs for every color mode, in display order."""
    return [(mode.value, mode.title) for mode in ColorMode]
