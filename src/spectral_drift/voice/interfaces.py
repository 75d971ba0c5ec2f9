"""Contracts for whisper speech synthesis and playback."""

from typing import Protocol


class SpeechSynthesizer(Protocol):
    """Converts whisper text into audio."""

    def synthesize(self, text: str) -> bytes:
        """Return playable audio bytes for the given text."""


class AudioOutputDevice(Protocol):
    """Interface for a speaker/audio sink."""

    def play(self, audio_bytes: bytes) -> None:
        """Play synthesized audio bytes."""
