"""Pandas integration for time region occurrences.

Provides :func:`to_dataframe` to tabulate occurrences and :func:`region_mask`
to flag which timestamps of a time series fall inside a region.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from timeregions.types import Occurrence


def _import_pandas(func_name: str) -> Any:
    try:
        import pandas
    except ImportError:
        msg = f"pandas is required for {func_name}(). Install with: pip install timeregions[dataframes]"
        raise ImportError(msg) from None
    return pandas


def to_dataframe(occurrences: Iterable[Occurrence]) -> Any:  # pd.DataFrame, typed as Any for optional dependency
    """Convert occurrences to a DataFrame with ``start``, ``end`` and ``duration`` columns.

    Args:
        occurrences: Occurrences, typically from :func:`timeregions.expand`.

    Returns:
        pandas DataFrame with one row per occurrence, in input order.

    Raises:
        ImportError: If pandas is not installed.
    """
    pd: Any = _import_pandas("to_dataframe")

    rows = [{"start": occ.start, "end": occ.end, "duration": occ.duration} for occ in occurrences]
    frame = pd.DataFrame(rows, columns=["start", "end", "duration"])
    if not rows:
        frame["start"] = pd.to_datetime(frame["start"], utc=True)
        frame["end"] = pd.to_datetime(frame["end"], utc=True)
        frame["duration"] = pd.to_timedelta(frame["duration"])
    return frame


def region_mask(index: Any, occurrences: Iterable[Occurrence]) -> Any:
    """Flag the timestamps of *index* that fall inside any occurrence.

    Occurrence bounds are inclusive. Naive indexes are taken to be UTC.
    Degenerate occurrences (end before start) flag nothing.

    Args:
        index: A pandas ``DatetimeIndex``.
        occurrences: Occurrences to test against.

    Returns:
        Boolean pandas Series aligned with *index*.

    Raises:
        ImportError: If pandas is not installed.
    """
    pd: Any = _import_pandas("region_mask")

    stamps = pd.DatetimeIndex(index)
    stamps = stamps.tz_localize("UTC") if stamps.tz is None else stamps.tz_convert("UTC")

    mask = pd.Series(False, index=index)
    for occ in occurrences:
        inside = (stamps >= pd.Timestamp(occ.start)) & (stamps <= pd.Timestamp(occ.end))
        mask |= inside
    return mask
