from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class DriftState(str, Enum):
    idle = "idle"
    scanning = "scanning"
    drifting = "drifting"


class SelectionOutcome(str, Enum):
    none = "none"
    single = "single"
    pair = "pair"


@dataclass(frozen=True, slots=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class PointOfInterest:
    title: str
    extract: str | None = None
    position: Coordinate | None = None
    page_id: int | None = None

    @property
    def fragment(self) -> str:
        """Descriptive text used for generation, falling back to the title."""
        if self.extract and self.extract.strip():
            return self.extract
        return self.title


@dataclass(frozen=True, slots=True)
class ScoredCandidate:
    poi: PointOfInterest
    distance_meters: float
    bearing_degrees: float
    heading_delta_degrees: float


@dataclass(frozen=True, slots=True)
class Selection:
    outcome: SelectionOutcome
    points: tuple[PointOfInterest, ...] = ()
    strategy: str = "random"


@dataclass(frozen=True, slots=True)
class WhisperResult:
    text: str
    source_titles: tuple[str, ...] = ()
    technique: str | None = None


@dataclass(slots=True)
class DriftEntry:
    id: str
    text: str
    coords: Coordinate
    anchors: tuple[str, ...] = ()
    voice: str = ""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
