"""Points of interest read from a local JSON file.

The file holds a list of objects::

    [{"title": "Old Quarry", "extract": "The quarry was abandoned.", "lat": 41.2, "lon": -105.4}]

``extract``, ``lat`` and ``lon`` are optional.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from spectral_drift.adapters.point_source import PointSource, PointSourceError
from spectral_drift.models import Coordinate, PointOfInterest


@dataclass(slots=True)
class JsonFilePointSource(PointSource):
    """Fixture-style source: returns the file's points regardless of position."""

    path: Path

    def fetch(self, position: Coordinate, radius_meters: int) -> list[PointOfInterest]:
        try:
            payload = json.loads(Path(self.path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PointSourceError(f"Unable to read points file {self.path}: {exc}") from exc

        if not isinstance(payload, list):
            raise PointSourceError(f"Points file must contain a JSON list: {self.path}")
        try:
            return [_parse_point(item) for item in payload if isinstance(item, dict) and item.get("title")]
        except (TypeError, ValueError, KeyError) as exc:
            raise PointSourceError(f"Malformed point in {self.path}: {exc}") from exc


def _parse_point(item: dict) -> PointOfInterest:
    position = None
    if item.get("lat") is not None and item.get("lon") is not None:
        position = Coordinate(latitude=float(item["lat"]), longitude=float(item["lon"]))
    return PointOfInterest(title=str(item["title"]), extract=item.get("extract"), position=position)
