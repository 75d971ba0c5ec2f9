"""Geodesic helpers: initial bearing, haversine distance and angular deltas."""

from __future__ import annotations

from math import asin, atan2, cos, degrees, radians, sin, sqrt

from .models import Coordinate

EARTH_RADIUS_METERS = 6_371_000.0


def bearing(origin: Coordinate, target: Coordinate) -> float:
    """Initial great-circle bearing from ``origin`` to ``target`` in [0, 360)."""
    lat1 = radians(origin.latitude)
    lat2 = radians(target.latitude)
    dlon = radians(target.longitude - origin.longitude)

    y = sin(dlon) * cos(lat2)
    x = cos(lat1) * sin(lat2) - sin(lat1) * cos(lat2) * cos(dlon)
    result = (degrees(atan2(y, x)) + 360.0) % 360.0
    # float rounding can land exactly on 360
    return 0.0 if result >= 360.0 else result


def distance(origin: Coordinate, target: Coordinate) -> float:
    """Haversine distance in meters."""
    lat1 = radians(origin.latitude)
    lat2 = radians(target.latitude)
    dlat = lat2 - lat1
    dlon = radians(target.longitude - origin.longitude)

    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_METERS * asin(sqrt(min(1.0, h)))


def angular_delta(a: float, b: float) -> float:
    """Smallest unsigned angle between two bearings, in [0, 180]."""
    diff = abs(a - b) % 360.0
    return 360.0 - diff if diff > 180.0 else diff
