"""Plotly plotting backend for time region markings.

Provides :class:`PlotlyBackend` which implements the :class:`PlotBackend`
protocol using plotly. Requires plotly to be installed.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any


class PlotlyBackend:
    """Plotting backend using plotly.

    The drawing target is a plotly ``Figure`` with a date x axis. Shapes are
    added below the traces. CSS color strings are passed through as plotly
    accepts them directly.

    Raises:
        ImportError: If plotly is not installed.
    """

    def __init__(self) -> None:
        """Initialize the backend, verifying plotly is available."""
        try:
            import plotly.graph_objects  # type: ignore[import-not-found]  # noqa: F401
        except ImportError:
            msg = "plotly is required for PlotlyBackend. Install it with: pip install timeregions[plotly]"
            raise ImportError(msg) from None

    def band(self, target: Any, start: datetime, end: datetime, *, color: str | None = None) -> Any:
        """Shade a span with ``Figure.add_vrect``.

        Returns:
            The plotly Figure.
        """
        kwargs: dict[str, Any] = {"x0": start, "x1": end, "line_width": 0, "layer": "below"}
        if color is not None:
            kwargs["fillcolor"] = color
            kwargs["opacity"] = 1
        return target.add_vrect(**kwargs)

    def vline(self, target: Any, at: datetime, *, color: str | None = None) -> Any:
        """Draw a line with ``Figure.add_vline``.

        Returns:
            The plotly Figure.
        """
        kwargs: dict[str, Any] = {"x": at, "line_width": 1}
        if color is not None:
            kwargs["line_color"] = color
        return target.add_vline(**kwargs)
