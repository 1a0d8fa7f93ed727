"""Loading and saving time region configuration.

Time regions are stored as JSON, either as a bare list of rule objects or
as an object holding a ``timeRegions`` list (the shape of a panel
definition):

    {"timeRegions": [{"from": "09:00", "to": "17:00", "fromDayOfWeek": 1}]}
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from timeregions.exceptions import ConfigurationError
from timeregions.types import TimeRegion

#: Key holding the rule list inside a panel definition.
TIME_REGIONS_KEY = "timeRegions"


def parse_time_regions(data: Any, *, source: str | None = None) -> list[TimeRegion]:
    """Build rules from decoded configuration data.

    Args:
        data: A list of rule mappings, or a mapping with a ``timeRegions`` list.
        source: Optional name of where *data* came from, for error messages.

    Returns:
        The rules in configuration order.

    Raises:
        ConfigurationError: If *data* has the wrong shape.
    """
    if isinstance(data, Mapping):
        if TIME_REGIONS_KEY not in data:
            msg = f"Expected a '{TIME_REGIONS_KEY}' key"
            raise ConfigurationError(msg, source=source)
        data = data[TIME_REGIONS_KEY]

    if data is None:
        return []
    if not isinstance(data, list):
        msg = f"Expected a list of time regions, got {type(data).__name__}"
        raise ConfigurationError(msg, source=source)

    regions: list[TimeRegion] = []
    for i, item in enumerate(data):
        if not isinstance(item, Mapping):
            msg = f"Time region {i} must be an object, got {type(item).__name__}"
            raise ConfigurationError(msg, source=source)
        regions.append(TimeRegion.from_dict(item))
    return regions


def load_time_regions(path: str | Path) -> list[TimeRegion]:
    """Load rules from a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        The rules in file order.

    Raises:
        ConfigurationError: If the file is missing, is not valid JSON, or
            has the wrong shape.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        msg = f"Cannot read time regions: {e}"
        raise ConfigurationError(msg, source=str(path)) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}"
        raise ConfigurationError(msg, source=str(path)) from e

    return parse_time_regions(data, source=str(path))


def save_time_regions(regions: Iterable[TimeRegion], path: str | Path) -> Path:
    """Write rules to a JSON file under a ``timeRegions`` key.

    Returns:
        The path written.
    """
    path = Path(path)
    payload = {TIME_REGIONS_KEY: [region.to_dict() for region in regions]}
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    return path
