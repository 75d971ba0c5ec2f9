"""Spoken whisper output."""

from .interfaces import AudioOutputDevice, SpeechSynthesizer
from .output import VoiceOutputConfig, VoiceOutputService

__all__ = [
    "AudioOutputDevice",
    "SpeechSynthesizer",
    "VoiceOutputConfig",
    "VoiceOutputService",
]
