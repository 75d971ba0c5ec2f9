"""Whisper orchestration: selection, technique choice and fallbacks."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping, Sequence

from .models import Coordinate, PointOfInterest, SelectionOutcome, WhisperResult
from .phrasebook import FALLBACK_WHISPER, NO_SIGNAL_WHISPER, SINGLE_SUBJECT_WHISPER
from .randomness import RandomSource, make_random
from .selection import CandidateSelector
from .techniques import TECHNIQUES, Technique

CharacterSink = Callable[[str, str], None]


def capitalize_first(text: str) -> str:
    """Uppercase the first character only, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


class WhisperStream:
    """Lazy, single-use iterator over ``(character, accumulated_so_far)`` pairs.

    The whisper is fully computed before the first character is produced;
    stopping iteration early is how a consumer cancels.
    """

    def __init__(self, result: WhisperResult) -> None:
        self._result = result
        self._characters = self._emit(result.text)

    @property
    def result(self) -> WhisperResult:
        return self._result

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return self

    def __next__(self) -> tuple[str, str]:
        return next(self._characters)

    @staticmethod
    def _emit(text: str) -> Iterator[tuple[str, str]]:
        for index, char in enumerate(text):
            yield char, text[: index + 1]


class WhisperGenerator:
    """Turns nearby points of interest into a single whisper sentence.

    Holds collaborators only. Every call builds its own candidate state, so one
    instance can serve concurrent requests.
    """

    def __init__(
        self,
        *,
        selector: CandidateSelector | None = None,
        techniques: Mapping[str, Technique] = TECHNIQUES,
        rng: RandomSource | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if not techniques:
            raise ValueError("At least one generation technique is required")
        self._rng = rng or make_random()
        self._selector = selector or CandidateSelector(rng=self._rng)
        self._techniques = dict(techniques)
        self._logger = logger or logging.getLogger("spectral_drift.generator")

    @property
    def technique_names(self) -> list[str]:
        return list(self._techniques)

    def generate(
        self,
        points: Sequence[PointOfInterest],
        user_position: Coordinate,
        heading: float | None = None,
    ) -> WhisperResult:
        """Return one whisper for the user's surroundings. Never raises for bad data."""
        selection = self._selector.select(points, user_position, heading)

        if selection.outcome == SelectionOutcome.none:
            self._logger.info("whisper_no_candidates", extra={"point_count": len(points)})
            return WhisperResult(text=NO_SIGNAL_WHISPER)

        if selection.outcome == SelectionOutcome.single:
            only = selection.points[0]
            return WhisperResult(
                text=SINGLE_SUBJECT_WHISPER.format(title=only.title),
                source_titles=(only.title,),
            )

        first, second = selection.points
        titles = (first.title, second.title)
        name = self._rng.choice(list(self._techniques))
        try:
            text = self._techniques[name](first, second, self._rng).strip()
            if not text:
                raise ValueError(f"technique {name!r} produced no text")
        except Exception:  # noqa: BLE001 - generation must always yield a sentence.
            self._logger.exception("whisper_technique_failed", extra={"technique": name, "titles": titles})
            return WhisperResult(text=FALLBACK_WHISPER.format(a=first.title, b=second.title), source_titles=titles)

        self._logger.info(
            "whisper_generated",
            extra={"technique": name, "titles": titles, "strategy": selection.strategy},
        )
        return WhisperResult(text=capitalize_first(text), source_titles=titles, technique=name)

    def stream(
        self,
        points: Sequence[PointOfInterest],
        user_position: Coordinate,
        heading: float | None = None,
    ) -> WhisperStream:
        return WhisperStream(self.generate(points, user_position, heading))

    def generate_streaming(
        self,
        points: Sequence[PointOfInterest],
        user_position: Coordinate,
        on_character: CharacterSink,
        heading: float | None = None,
    ) -> WhisperResult:
        """Generate a whisper and hand it to ``on_character`` one character at a time."""
        stream = self.stream(points, user_position, heading)
        for char, accumulated in stream:
            on_character(char, accumulated)
        return stream.result
