from __future__ import annotations

import random

from spectral_drift.models import Coordinate, PointOfInterest, SelectionOutcome
from spectral_drift.selection import CandidateSelector

USER = Coordinate(latitude=41.0, longitude=-105.0)


def _poi(title: str, lat: float | None, lon: float | None) -> PointOfInterest:
    position = Coordinate(latitude=lat, longitude=lon) if lat is not None and lon is not None else None
    return PointOfInterest(title=title, extract=f"{title} stands quietly.", position=position)


def test_selector_picks_nearest_two_inside_heading_cone() -> None:
    points = [
        _poi("Far North", 41.05, -105.0),
        _poi("Behind", 40.999, -105.0),
        _poi("Near North", 41.01, -105.0),
        _poi("Mid North East", 41.02, -104.99),
        _poi("Due East", 41.0, -104.99),
    ]
    selector = CandidateSelector(rng=random.Random(0))

    selection = selector.select(points, USER, heading=0.0)

    assert selection.outcome == SelectionOutcome.pair
    assert selection.strategy == "cone"
    assert [poi.title for poi in selection.points] == ["Near North", "Mid North East"]


def test_selector_falls_back_to_random_when_cone_is_sparse() -> None:
    points = [
        _poi("Ahead", 41.01, -105.0),
        _poi("Behind", 40.99, -105.0),
        _poi("West", 41.0, -105.01),
    ]
    selector = CandidateSelector(rng=random.Random(1))

    selection = selector.select(points, USER, heading=0.0)

    assert selection.strategy == "random"
    assert selection.outcome == SelectionOutcome.pair
    assert len(selection.points) == 2
    assert len({poi.title for poi in selection.points}) == 2


def test_selector_random_fallback_covers_all_pairs() -> None:
    points = [_poi(f"Point {i}", 41.0 + i / 100, -105.0) for i in range(1, 5)]
    selector = CandidateSelector(rng=random.Random(5))

    seen = {frozenset(poi.title for poi in selector.select(points, USER).points) for _ in range(300)}

    assert len(seen) == 6


def test_selector_never_returns_more_than_two() -> None:
    rng = random.Random(9)
    selector = CandidateSelector(rng=random.Random(2))
    for size in range(0, 12):
        points = [_poi(f"P{i}", rng.uniform(40.9, 41.1), rng.uniform(-105.1, -104.9)) for i in range(size)]
        for heading in (None, 0.0, 123.0):
            assert len(selector.select(points, USER, heading).points) <= 2


def test_selector_reports_empty_and_single_outcomes() -> None:
    selector = CandidateSelector(rng=random.Random(0))

    empty = selector.select([], USER, heading=90.0)
    single = selector.select([_poi("Ames Monument", 41.13, -105.39)], USER, heading=90.0)

    assert empty.outcome == SelectionOutcome.none
    assert empty.points == ()
    assert single.outcome == SelectionOutcome.single
    assert single.points[0].title == "Ames Monument"


def test_selector_ignores_points_without_position() -> None:
    points = [_poi("Unplaced", None, None), _poi("Placed", 41.01, -105.0)]
    selector = CandidateSelector(rng=random.Random(0))

    selection = selector.select(points, USER)

    assert selection.outcome == SelectionOutcome.single
    assert selection.points[0].title == "Placed"


def test_score_reports_distance_bearing_and_delta() -> None:
    selector = CandidateSelector()

    [scored] = selector.score([_poi("East", 41.0, -104.99)], USER, heading=0.0)

    assert 800 < scored.distance_meters < 900
    assert abs(scored.bearing_degrees - 90.0) < 0.1
    assert abs(scored.heading_delta_degrees - 90.0) < 0.1
