"""Paced, cancellable character emission for whisper playback."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from .generator import CharacterSink, WhisperStream
from .models import WhisperResult
from .randomness import RandomSource, make_random


class PacedEmitter:
    """Feeds one sink a character at a time with a small random delay.

    Streams sent through the same emitter never interleave. Cancelling the
    emitting task stops output at the current character.
    """

    def __init__(
        self,
        sink: CharacterSink,
        *,
        min_delay_ms: int = 20,
        max_delay_ms: int = 70,
        rng: RandomSource | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        logger: logging.Logger | None = None,
    ) -> None:
        if min_delay_ms < 0 or max_delay_ms < min_delay_ms:
            raise ValueError(f"Invalid delay range: {min_delay_ms}-{max_delay_ms} ms")
        self._sink = sink
        self._min_delay = min_delay_ms / 1000
        self._max_delay = max_delay_ms / 1000
        self._rng = rng or make_random()
        self._sleep = sleep
        self._logger = logger or logging.getLogger("spectral_drift.streaming")
        self._lock = asyncio.Lock()

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    async def emit(self, result: WhisperResult) -> WhisperResult:
        """Emit ``result.text`` to the sink and return ``result`` once done."""
        async with self._lock:
            emitted = 0
            try:
                for char, accumulated in WhisperStream(result):
                    self._sink(char, accumulated)
                    emitted += 1
                    if emitted < len(result.text):
                        await self._sleep(self._rng.uniform(self._min_delay, self._max_delay))
            except asyncio.CancelledError:
                self._logger.info(
                    "whisper_stream_cancelled",
                    extra={"emitted": emitted, "total": len(result.text)},
                )
                raise
        return result
