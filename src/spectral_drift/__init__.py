"""Spectral Drift: location-driven whisper generation."""

from .generator import WhisperGenerator, WhisperStream
from .models import Coordinate, PointOfInterest, WhisperResult

__all__ = ["Coordinate", "PointOfInterest", "WhisperGenerator", "WhisperResult", "WhisperStream"]
