"""Matplotlib plotting backend for time region markings.

Provides :class:`MatplotlibBackend` which implements the :class:`PlotBackend`
protocol using matplotlib. Requires matplotlib to be installed.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Union

_RGB_PATTERN = re.compile(r"^rgba?\(\s*([^)]*)\)$", re.IGNORECASE)

MplColor = Union[str, tuple[float, float, float, float], None]


def to_mpl_color(color: str | None) -> MplColor:
    """Convert a CSS ``rgb()``/``rgba()`` string to a matplotlib RGBA tuple.

    Other strings (hex codes, names) and None are returned unchanged.
    """
    if color is None:
        return None
    match = _RGB_PATTERN.match(color.strip())
    if not match:
        return color
    parts = [p.strip() for p in match[1].split(",")]
    if len(parts) not in (3, 4):
        return color
    try:
        r, g, b = (float(p) / 255 for p in parts[:3])
        alpha = float(parts[3]) if len(parts) == 4 else 1.0
    except ValueError:
        return color
    return (r, g, b, alpha)


class MatplotlibBackend:
    """Plotting backend using matplotlib.

    The drawing target is a matplotlib ``Axes`` whose x axis holds dates.

    Raises:
        ImportError: If matplotlib is not installed.
    """

    def __init__(self) -> None:
        """Initialize the backend, verifying matplotlib is available."""
        try:
            import matplotlib.pyplot  # type: ignore[import-not-found]  # noqa: F401
        except ImportError:
            msg = "matplotlib is required for MatplotlibBackend. Install it with: pip install timeregions[plot]"
            raise ImportError(msg) from None

    def band(self, target: Any, start: datetime, end: datetime, *, color: str | None = None) -> Any:
        """Shade a span with ``Axes.axvspan``.

        Returns:
            The matplotlib ``Polygon`` patch.
        """
        return target.axvspan(start, end, facecolor=to_mpl_color(color), edgecolor="none", zorder=0)

    def vline(self, target: Any, at: datetime, *, color: str | None = None) -> Any:
        """Draw a line with ``Axes.axvline``.

        Returns:
            The matplotlib ``Line2D``.
        """
        return target.axvline(at, color=to_mpl_color(color), linewidth=1)
