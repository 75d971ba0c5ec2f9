"""Drift session: decides when to whisper and keeps the entry log."""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from dataclasses import dataclass, field
from uuid import uuid4

from spectral_drift.adapters.point_source import PointSource, PointSourceError
from spectral_drift.generator import WhisperGenerator
from spectral_drift.models import Coordinate, DriftEntry, DriftState, PointOfInterest
from spectral_drift.telemetry import Telemetry
from spectral_drift.voice import VoiceOutputService


@dataclass(slots=True)
class SessionState:
    state: DriftState = DriftState.idle
    last_drift_coords: Coordinate | None = None
    points: list[PointOfInterest] = field(default_factory=list)
    generating: bool = False


class DriftSession:
    """Whispers whenever the user has moved far enough from the last drift."""

    def __init__(
        self,
        *,
        source: PointSource,
        generator: WhisperGenerator,
        radius_meters: int = 2000,
        threshold_degrees: float = 0.00015,
        voice_output: VoiceOutputService | None = None,
        voice_name: str = "Charon",
        telemetry: Telemetry | None = None,
        max_entries: int = 100,
        logger: logging.Logger | None = None,
    ) -> None:
        self._source = source
        self._generator = generator
        self._radius_meters = radius_meters
        self._threshold_degrees = threshold_degrees
        self._voice_output = voice_output
        self._voice_name = voice_output.voice_name if voice_output else voice_name
        self._telemetry = telemetry
        self._entries: deque[DriftEntry] = deque(maxlen=max_entries)
        self._logger = logger or logging.getLogger("spectral_drift.session")
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def entries(self) -> list[DriftEntry]:
        """Recorded whispers, newest first."""
        return list(self._entries)

    def should_drift(self, coords: Coordinate) -> bool:
        last = self._state.last_drift_coords
        if last is None:
            return True
        return (
            abs(coords.latitude - last.latitude) > self._threshold_degrees
            or abs(coords.longitude - last.longitude) > self._threshold_degrees
        )

    async def update_position(self, coords: Coordinate, heading: float | None = None) -> DriftEntry | None:
        if self._state.state == DriftState.idle:
            self._state.state = DriftState.scanning
        if not self.should_drift(coords):
            return None
        return await self.perform_drift(coords, heading)

    async def perform_drift(self, coords: Coordinate, heading: float | None = None) -> DriftEntry | None:
        """Fetch nearby points, whisper about them and record the entry."""
        if self._state.generating:
            self._logger.debug("drift_skipped_busy")
            return None

        self._state.generating = True
        self._state.state = DriftState.drifting
        self._state.last_drift_coords = coords
        try:
            points = await self._fetch_points(coords)
            self._state.points = points
            if not points:
                self._logger.info("drift_no_points", extra={"radius_meters": self._radius_meters})
                return None

            result = self._generator.generate(points, coords, heading)
            entry = DriftEntry(
                id=uuid4().hex,
                text=result.text,
                coords=coords,
                anchors=result.source_titles,
                voice=self._voice_name,
            )
            self._entries.appendleft(entry)
            self._logger.info(
                "drift_recorded",
                extra={"entry_id": entry.id, "point_count": len(points), "technique": result.technique},
            )
            if self._telemetry:
                self._telemetry.emit(
                    "drift_recorded",
                    {"entry_id": entry.id, "anchors": list(entry.anchors), "technique": result.technique},
                )
            if self._voice_output:
                try:
                    await asyncio.to_thread(self._voice_output.speak, entry.text)
                except Exception:  # noqa: BLE001 - a failed playback keeps the recorded entry.
                    self._logger.exception("whisper_speech_failed", extra={"entry_id": entry.id})
            return entry
        finally:
            self._state.generating = False
            self._state.state = DriftState.scanning

    async def _fetch_points(self, coords: Coordinate) -> list[PointOfInterest]:
        try:
            return await asyncio.to_thread(self._source.fetch, coords, self._radius_meters)
        except PointSourceError:
            self._logger.warning("point_fetch_failed", exc_info=True, extra={"radius_meters": self._radius_meters})
            return []
