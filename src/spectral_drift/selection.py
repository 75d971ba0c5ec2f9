"""Heading-aware choice of the points of interest a whisper combines."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .geo import angular_delta, bearing, distance
from .models import Coordinate, PointOfInterest, ScoredCandidate, Selection, SelectionOutcome
from .randomness import RandomSource, make_random

MAX_CANDIDATES = 2
DEFAULT_CONE_HALF_ANGLE = 60.0


class CandidateSelector:
    """Picks up to two points: the nearest two ahead of the user, else two at random."""

    def __init__(
        self,
        *,
        cone_half_angle: float = DEFAULT_CONE_HALF_ANGLE,
        rng: RandomSource | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._cone_half_angle = cone_half_angle
        self._rng = rng or make_random()
        self._logger = logger or logging.getLogger("spectral_drift.selection")

    def score(
        self,
        points: Sequence[PointOfInterest],
        user_position: Coordinate,
        heading: float | None = None,
    ) -> list[ScoredCandidate]:
        """Distance, bearing and heading delta for every point that has a position."""
        scored: list[ScoredCandidate] = []
        for poi in points:
            if poi.position is None:
                continue
            poi_bearing = bearing(user_position, poi.position)
            scored.append(
                ScoredCandidate(
                    poi=poi,
                    distance_meters=distance(user_position, poi.position),
                    bearing_degrees=poi_bearing,
                    heading_delta_degrees=angular_delta(heading, poi_bearing) if heading is not None else 0.0,
                )
            )
        return scored

    def select(
        self,
        points: Sequence[PointOfInterest],
        user_position: Coordinate,
        heading: float | None = None,
    ) -> Selection:
        located = [poi for poi in points if poi.position is not None]

        if heading is not None and len(located) >= MAX_CANDIDATES:
            in_cone = [
                candidate
                for candidate in self.score(located, user_position, heading)
                if candidate.heading_delta_degrees <= self._cone_half_angle
            ]
            if len(in_cone) >= MAX_CANDIDATES:
                in_cone.sort(key=lambda candidate: candidate.distance_meters)
                chosen = tuple(candidate.poi for candidate in in_cone[:MAX_CANDIDATES])
                self._logger.debug(
                    "candidates_selected",
                    extra={"strategy": "cone", "titles": [poi.title for poi in chosen], "in_cone": len(in_cone)},
                )
                return Selection(outcome=SelectionOutcome.pair, points=chosen, strategy="cone")

            self._logger.debug(
                "cone_fallback",
                extra={"heading": heading, "in_cone": len(in_cone), "located": len(located)},
            )

        shuffled = self._rng.sample(located, len(located))
        chosen = tuple(shuffled[:MAX_CANDIDATES])
        if not chosen:
            outcome = SelectionOutcome.none
        elif len(chosen) == 1:
            outcome = SelectionOutcome.single
        else:
            outcome = SelectionOutcome.pair
        self._logger.debug(
            "candidates_selected",
            extra={"strategy": "random", "titles": [poi.title for poi in chosen]},
        )
        return Selection(outcome=outcome, points=chosen, strategy="random")
