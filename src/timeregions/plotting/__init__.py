"""Pluggable painting layer for time region markings.

Provides a :class:`PlotBackend` protocol so that markings can be drawn on
either a matplotlib or a plotly chart (or a custom renderer). Users can
choose their preferred library without requiring both as dependencies.

Example:
    >>> from datetime import datetime
    >>> from timeregions import QueryWindow, TimeRegion
    >>> from timeregions.plotting import draw_time_regions
    >>>
    >>> window = QueryWindow(datetime(2024, 1, 1), datetime(2024, 1, 8))
    >>> regions = [TimeRegion(from_time="09:00", to_time="17:00", line=True)]
    >>> draw_time_regions(ax, regions, window)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from timeregions.markings import build_markings
from timeregions.types import Marking, QueryWindow, Theme, ThemeInput

if TYPE_CHECKING:
    from timeregions.normalize import RegionInput
    from timeregions.types import NormalizedRegion

logger = logging.getLogger(__name__)


@runtime_checkable
class PlotBackend(Protocol):
    """Protocol for backends that paint markings onto an existing chart.

    *target* is the backend's native drawing surface (a matplotlib ``Axes``
    or a plotly ``Figure``).
    """

    def band(self, target: Any, start: datetime, end: datetime, *, color: str | None = None) -> Any:
        """Shade the span between *start* and *end*.

        Args:
            target: Native drawing surface.
            start: Left edge of the band.
            end: Right edge of the band.
            color: Fill color, or None for the backend default.

        Returns:
            The created artist or shape.
        """
        ...

    def vline(self, target: Any, at: datetime, *, color: str | None = None) -> Any:
        """Draw a vertical line at *at*.

        Args:
            target: Native drawing surface.
            at: Position of the line.
            color: Line color, or None for the backend default.

        Returns:
            The created artist or shape.
        """
        ...


#: Backends tried by :func:`get_default_backend`, in order.
BACKEND_NAMES = ("matplotlib", "plotly")

_EXTRAS = {"matplotlib": "plot", "plotly": "plotly"}


def _load_backend(name: str) -> PlotBackend:
    if name == "matplotlib":
        from .matplotlib import MatplotlibBackend

        return MatplotlibBackend()
    from .plotly import PlotlyBackend

    return PlotlyBackend()


def get_default_backend(prefer: str | None = None) -> PlotBackend:
    """Return a backend for painting time region markings.

    Backends are tried in :data:`BACKEND_NAMES` order, with *prefer* moved
    to the front. A backend whose library is not installed is skipped.

    Args:
        prefer: ``"matplotlib"`` or ``"plotly"`` to try first.

    Returns:
        A PlotBackend instance.

    Raises:
        ValueError: If *prefer* names an unknown backend.
        ImportError: If none of the backends can be loaded.
    """
    if prefer is not None and prefer not in BACKEND_NAMES:
        msg = f"Unknown plotting backend {prefer!r}, expected one of {', '.join(BACKEND_NAMES)}"
        raise ValueError(msg)

    order = [prefer] if prefer else []
    order += [name for name in BACKEND_NAMES if name != prefer]
    for name in order:
        try:
            return _load_backend(name)
        except ImportError:
            logger.debug("Plotting backend %s is not available", name)

    hints = " or ".join(f"pip install timeregions[{_EXTRAS[name]}]" for name in order)
    msg = f"No plotting backend available for time region markings. Install one with: {hints}"
    raise ImportError(msg)


def draw_markings(target: Any, markings: Iterable[Marking], *, backend: PlotBackend | None = None) -> Any:
    """Paint markings onto *target*.

    Args:
        target: Native drawing surface of *backend*.
        markings: Bands and lines to draw.
        backend: Plotting backend to use. Auto-detects if not provided.

    Returns:
        *target*, for chaining.
    """
    if backend is None:
        backend = get_default_backend()

    for marking in markings:
        if marking.kind == "line":
            backend.vline(target, marking.start, color=marking.color)
        else:
            backend.band(target, marking.start, marking.end, color=marking.color)
    return target


def draw_time_regions(
    target: Any,
    regions: Iterable[NormalizedRegion | RegionInput],
    window: QueryWindow,
    *,
    theme: ThemeInput = Theme.DARK,
    backend: PlotBackend | None = None,
) -> Any:
    """Expand *regions* over *window* and paint them onto *target*.

    Args:
        target: Native drawing surface of *backend*.
        regions: Raw or normalized rules.
        window: The window the chart displays.
        theme: Chart theme, for theme-dependent colors.
        backend: Plotting backend to use. Auto-detects if not provided.

    Returns:
        *target*, for chaining.
    """
    return draw_markings(target, build_markings(regions, window, theme), backend=backend)


__all__ = [
    "BACKEND_NAMES",
    "PlotBackend",
    "draw_markings",
    "draw_time_regions",
    "get_default_backend",
]
