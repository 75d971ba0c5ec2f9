"""Nearby Wikipedia articles via the MediaWiki geosearch generator.

One request returns titles, coordinates and plain-text intro extracts::

    action=query&generator=geosearch&prop=coordinates|extracts&exintro&explaintext
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from spectral_drift.adapters.point_source import PointSource, PointSourceError
from spectral_drift.models import Coordinate, PointOfInterest

MAX_GEOSEARCH_RADIUS_METERS = 10_000


class WikipediaGeoSearchSource(PointSource):
    """Point source backed by the public Wikipedia API."""

    def __init__(
        self,
        *,
        endpoint: str = "https://en.wikipedia.org/w/api.php",
        limit: int = 50,
        timeout_seconds: float = 10.0,
        user_agent: str = "spectral-drift/0.1",
        client: httpx.Client | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._limit = limit
        self._client = client or httpx.Client(timeout=timeout_seconds, headers={"User-Agent": user_agent})
        self._logger = logger or logging.getLogger("spectral_drift.adapters.wikipedia")

    def close(self) -> None:
        self._client.close()

    def fetch(self, position: Coordinate, radius_meters: int) -> list[PointOfInterest]:
        radius = max(10, min(MAX_GEOSEARCH_RADIUS_METERS, int(radius_meters)))
        params = {
            "action": "query",
            "format": "json",
            "generator": "geosearch",
            "ggscoord": f"{position.latitude}|{position.longitude}",
            "ggsradius": str(radius),
            "ggslimit": str(self._limit),
            "prop": "coordinates|extracts",
            "exintro": "1",
            "explaintext": "1",
            "exlimit": "max",
            "colimit": "max",
        }
        try:
            response = self._client.get(self._endpoint, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as exc:
            raise PointSourceError(f"Wikipedia geosearch failed: {exc}") from exc
        except ValueError as exc:
            raise PointSourceError(f"Wikipedia returned malformed JSON: {exc}") from exc

        try:
            points = parse_geosearch_pages(payload)
        except (TypeError, ValueError, KeyError) as exc:
            raise PointSourceError(f"Wikipedia returned a malformed page: {exc}") from exc
        self._logger.info("points_fetched", extra={"count": len(points), "radius_meters": radius})
        return points


def parse_geosearch_pages(payload: Any) -> list[PointOfInterest]:
    """Convert a ``generator=geosearch`` response into points, nearest first."""
    if not isinstance(payload, dict):
        raise PointSourceError("Unexpected Wikipedia payload")
    pages = (payload.get("query") or {}).get("pages") or {}
    if isinstance(pages, dict):
        pages = list(pages.values())

    ordered = sorted(
        (page for page in pages if isinstance(page, dict) and page.get("title")),
        key=lambda page: page.get("index", 0),
    )
    points: list[PointOfInterest] = []
    for page in ordered:
        coordinates = page.get("coordinates") or []
        position = None
        if coordinates and "lat" in coordinates[0] and "lon" in coordinates[0]:
            position = Coordinate(latitude=float(coordinates[0]["lat"]), longitude=float(coordinates[0]["lon"]))
        points.append(
            PointOfInterest(
                title=page["title"],
                extract=page.get("extract") or None,
                position=position,
                page_id=page.get("pageid"),
            )
        )
    return points
