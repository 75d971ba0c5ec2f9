"""Local whisper speech powered by ``pyttsx3``."""

from __future__ import annotations

from dataclasses import dataclass

from .interfaces import AudioOutputDevice, SpeechSynthesizer

_INSTALL_HINT = "Install extras with: pip install 'spectral-drift[voice]'"

# pyttsx3 defaults to ~200 wpm; whispers read better slower and quieter.
WHISPER_RATE = 140
WHISPER_VOLUME = 0.8


def _import_pyttsx3(purpose: str):
    try:
        import pyttsx3
    except ImportError as exc:  # pragma: no cover - import guard
        raise RuntimeError(f"{purpose} unavailable. {_INSTALL_HINT}") from exc
    return pyttsx3


@dataclass(slots=True)
class Pyttsx3SpeechSynthesizer(SpeechSynthesizer):
    """Prepare whisper text for local pyttsx3 playback."""

    def __post_init__(self) -> None:
        _import_pyttsx3("Voice TTS backend")

    def synthesize(self, text: str) -> bytes:
        return text.encode("utf-8")


class Pyttsx3AudioOutputDevice(AudioOutputDevice):
    """Speaker playback using a local pyttsx3 engine instance."""

    def __init__(
        self,
        *,
        voice_id: str | None = None,
        rate: int | None = WHISPER_RATE,
        volume: float | None = WHISPER_VOLUME,
    ) -> None:
        pyttsx3 = _import_pyttsx3("Audio output backend")

        self._engine = pyttsx3.init()
        if voice_id:
            self._engine.setProperty("voice", voice_id)
        if rate is not None:
            self._engine.setProperty("rate", rate)
        if volume is not None:
            self._engine.setProperty("volume", max(0.0, min(1.0, volume)))

    def play(self, audio_bytes: bytes) -> None:
        text = audio_bytes.decode("utf-8", errors="ignore").strip()
        if not text:
            return
        self._engine.say(text)
        self._engine.runAndWait()
