"""Boundary for services that supply nearby points of interest."""

from typing import Protocol

from spectral_drift.models import Coordinate, PointOfInterest


class PointSourceError(RuntimeError):
    """Raised when a point source cannot produce points (network, parse or file errors)."""


class PointSource(Protocol):
    """Fetches points of interest around a position."""

    def fetch(self, position: Coordinate, radius_meters: int) -> list[PointOfInterest]:
        """Return points within ``radius_meters`` of ``position``."""
