"""Text-to-speech playback of generated whispers."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .interfaces import AudioOutputDevice, SpeechSynthesizer


@dataclass(slots=True)
class VoiceOutputConfig:
    """Configurable controls for whisper speech."""

    enabled: bool = True
    voice_name: str = "Charon"
    max_chars: int = 280


class VoiceOutputService:
    """Synthesizes whispers and sends them to an audio device."""

    def __init__(
        self,
        synthesizer: SpeechSynthesizer,
        output_device: AudioOutputDevice,
        config: VoiceOutputConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._synthesizer = synthesizer
        self._output_device = output_device
        self._config = config or VoiceOutputConfig()
        self._logger = logger or logging.getLogger("spectral_drift.voice")

    @property
    def voice_name(self) -> str:
        return self._config.voice_name

    def speak(self, text: str) -> bytes | None:
        """Synthesize and play a whisper when output is enabled."""
        if not self._config.enabled:
            return None

        normalized = " ".join(text.split())
        if not normalized:
            return None

        audio = self._synthesizer.synthesize(normalized[: self._config.max_chars])
        self._output_device.play(audio)
        self._logger.debug("whisper_spoken", extra={"voice": self._config.voice_name, "chars": len(normalized)})
        return audio
