"""
timeregions: recurring time region expansion for time-series charts.

This package turns a few declarative rules ("weekdays 9:00-17:00",
"Saturdays", "22:00-06:00 nightly") into the concrete UTC intervals that
overlap a chart's visible range, ready to be shaded or outlined.

Basic usage:
    from datetime import datetime
    from timeregions import QueryWindow, TimeRegion, expand, normalize

    window = QueryWindow(datetime(2024, 1, 1), datetime(2024, 1, 8))
    rule = normalize(TimeRegion(from_time="22:00", to_time="06:00"))

    for occurrence in expand(rule, window):
        print(occurrence.start, occurrence.end)

    # Renderer-ready bands and lines
    from timeregions import build_markings
    markings = build_markings([{"from": "09:00", "to": "17:00", "line": True}], window)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Color resolution
from .colors import COLOR_MODES, color_mode_options, resolve_color_name, resolve_colors

# Configuration
from .config import load_time_regions, parse_time_regions, save_time_regions

# Exceptions
from .exceptions import ConfigurationError, InvalidWindowError, TimeRegionsError

# Expansion
from .expand import expand, expand_all

# Markings
from .markings import build_markings, region_markings, to_flot_markings

# Normalization
from .normalize import normalize, parse_clock_time, parse_day_of_week

# Types
from .types import (
    ClockTime,
    ColorMode,
    ColorPair,
    Marking,
    NormalizedRegion,
    Occurrence,
    QueryWindow,
    Theme,
    TimeRegion,
    parse_color_mode,
    parse_theme,
)

__all__ = [
    "COLOR_MODES",
    "ClockTime",
    "ColorMode",
    "ColorPair",
    "ConfigurationError",
    "InvalidWindowError",
    "Marking",
    "NormalizedRegion",
    "Occurrence",
    "QueryWindow",
    "Theme",
    "TimeRegion",
    "TimeRegionsError",
    "__version__",
    "build_markings",
    "color_mode_options",
    "expand",
    "expand_all",
    "load_time_regions",
    "normalize",
    "parse_clock_time",
    "parse_color_mode",
    "parse_day_of_week",
    "parse_theme",
    "parse_time_regions",
    "region_markings",
    "resolve_color_name",
    "resolve_colors",
    "save_time_regions",
    "to_flot_markings",
]
