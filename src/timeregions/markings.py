"""Renderer markings for time regions.

Combines normalization, expansion and color resolution into the flat list
of shaded bands and boundary lines a chart draws.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from timeregions.colors import resolve_colors
from timeregions.expand import expand_all
from timeregions.normalize import RegionInput
from timeregions.types import ColorPair, Marking, NormalizedRegion, Occurrence, QueryWindow, Theme, ThemeInput

logger = logging.getLogger(__name__)


def region_markings(
    region: NormalizedRegion,
    occurrences: Iterable[Occurrence],
    colors: ColorPair,
) -> list[Marking]:
    """Build the markings for one rule's occurrences.

    Each occurrence gives one band when ``region.fill`` is set, and a line
    at its start and another at its end when ``region.line`` is set.

    Args:
        region: The normalized rule.
        occurrences: Its occurrences.
        colors: Its resolved colors.

    Returns:
        Markings in occurrence order.
    """
    markings: list[Marking] = []
    for occ in occurrences:
        if region.fill:
            markings.append(Marking(start=occ.start, end=occ.end, color=colors.fill, kind="band"))
        if region.line:
            markings.append(Marking(start=occ.start, end=occ.start, color=colors.line, kind="line"))
            markings.append(Marking(start=occ.end, end=occ.end, color=colors.line, kind="line"))
    return markings


def build_markings(
    regions: Iterable[NormalizedRegion | RegionInput] | None,
    window: QueryWindow,
    theme: ThemeInput = Theme.DARK,
) -> list[Marking]:
    """Build markings for every rule over a query window.

    Args:
        regions: Raw or normalized rules. None or empty gives no markings.
        window: The absolute query window.
        theme: Chart theme, for theme-dependent colors.

    Returns:
        Markings grouped by rule, in input order.
    """
    rules = list(regions or ())
    if not rules:
        return []

    markings: list[Marking] = []
    for region, occurrences in expand_all(rules, window):
        markings.extend(region_markings(region, occurrences, resolve_colors(region, theme)))

    logger.debug("Built %d marking(s) from %d time region(s)", len(markings), len(rules))
    return markings


def to_flot_markings(markings: Iterable[Marking]) -> list[dict[str, Any]]:
    """Convert markings to grid marking dicts with epoch-millisecond bounds."""
    return [marking.to_flot() for marking in markings]
