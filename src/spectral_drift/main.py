"""CLI startup entrypoint for Spectral Drift."""

from __future__ import annotations

import asyncio
from dataclasses import asdict
from pathlib import Path

import typer
from rich import print
from rich.console import Console

from spectral_drift.adapters import JsonFilePointSource, PointSource, PointSourceError, WikipediaGeoSearchSource
from spectral_drift.config import settings
from spectral_drift.generator import WhisperGenerator
from spectral_drift.models import Coordinate, DriftEntry
from spectral_drift.randomness import make_random
from spectral_drift.selection import CandidateSelector
from spectral_drift.session import DriftSession
from spectral_drift.streaming import PacedEmitter
from spectral_drift.telemetry import LoggingTelemetry, configure_logging
from spectral_drift.voice import VoiceOutputConfig, VoiceOutputService

app = typer.Typer(help="Spectral Drift: whispers from the places around you")
console = Console()


@app.callback()
def _main(log_level: str = typer.Option(None, help="Override SPECTRAL_DRIFT_LOG_LEVEL")) -> None:
    configure_logging(log_level or settings.log_level)


def _build_source(points_file: str | None) -> PointSource:
    if points_file:
        return JsonFilePointSource(Path(points_file).expanduser())
    return WikipediaGeoSearchSource(
        endpoint=settings.wiki_api_endpoint,
        limit=settings.geosearch_limit,
        timeout_seconds=settings.http_timeout_seconds,
        user_agent=settings.user_agent,
    )


def _build_generator(seed: int | None) -> WhisperGenerator:
    rng = make_random(seed if seed is not None else settings.random_seed)
    selector = CandidateSelector(cone_half_angle=settings.cone_half_angle_degrees, rng=rng)
    return WhisperGenerator(selector=selector, rng=rng)


def _build_voice_output() -> VoiceOutputService:
    try:
        from spectral_drift.voice.tts_pyttsx3 import Pyttsx3AudioOutputDevice, Pyttsx3SpeechSynthesizer

        synthesizer = Pyttsx3SpeechSynthesizer()
        device = Pyttsx3AudioOutputDevice()
    except RuntimeError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)
    return VoiceOutputService(
        synthesizer=synthesizer,
        output_device=device,
        config=VoiceOutputConfig(enabled=settings.voice_enabled, voice_name=settings.voice_name),
    )


def _fetch(source: PointSource, position: Coordinate):
    try:
        return source.fetch(position, settings.drift_radius_meters)
    except PointSourceError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)


def _check_heading(heading: float | None) -> float | None:
    if heading is not None and not 0 <= heading < 360:
        raise typer.BadParameter("Heading must be in [0, 360)")
    return heading


def _format_entry(entry: DriftEntry) -> dict:
    payload = asdict(entry)
    payload["timestamp"] = entry.timestamp.isoformat()
    payload["anchors"] = list(entry.anchors)
    return payload


@app.command()
def start() -> None:
    """Show runtime configuration."""
    print(
        {
            "app_name": settings.app_name,
            "drift_radius_meters": settings.drift_radius_meters,
            "wiki_api_endpoint": settings.wiki_api_endpoint,
            "cone_half_angle_degrees": settings.cone_half_angle_degrees,
            "voice_enabled": settings.voice_enabled,
        }
    )


@app.command()
def nearby(
    lat: float = typer.Option(..., help="Current latitude"),
    lon: float = typer.Option(..., help="Current longitude"),
    heading: float = typer.Option(None, help="Compass heading in degrees, [0, 360)", callback=_check_heading),
    points_file: str = typer.Option(None, help="JSON file of points instead of Wikipedia"),
) -> None:
    """List nearby points with distance, bearing and heading delta."""
    position = Coordinate(latitude=lat, longitude=lon)
    points = _fetch(_build_source(points_file), position)
    scored = CandidateSelector().score(points, position, heading)
    scored.sort(key=lambda candidate: candidate.distance_meters)
    print(
        {
            "nearby": [
                {
                    "title": candidate.poi.title,
                    "distance_m": round(candidate.distance_meters, 1),
                    "bearing": round(candidate.bearing_degrees, 1),
                    "heading_delta": round(candidate.heading_delta_degrees, 1) if heading is not None else None,
                }
                for candidate in scored
            ]
        }
    )


@app.command()
def whisper(
    lat: float = typer.Option(..., help="Current latitude"),
    lon: float = typer.Option(..., help="Current longitude"),
    heading: float = typer.Option(None, help="Compass heading in degrees, [0, 360)", callback=_check_heading),
    points_file: str = typer.Option(None, help="JSON file of points instead of Wikipedia"),
    seed: int = typer.Option(None, help="Seed for reproducible whispers"),
    stream: bool = typer.Option(False, help="Reveal the whisper one character at a time"),
    speak: bool = typer.Option(False, help="Speak the whisper with pyttsx3"),
) -> None:
    """Generate one whisper for a position."""

    position = Coordinate(latitude=lat, longitude=lon)
    voice_output = _build_voice_output() if speak else None
    points = _fetch(_build_source(points_file), position)
    result = _build_generator(seed).generate(points, position, heading)

    if stream:
        emitter = PacedEmitter(
            lambda char, _accumulated: console.print(char, end="", markup=False, highlight=False),
            min_delay_ms=settings.stream_min_delay_ms,
            max_delay_ms=settings.stream_max_delay_ms,
        )
        asyncio.run(emitter.emit(result))
        console.print()
    else:
        print({"whisper": result.text, "anchors": list(result.source_titles), "technique": result.technique})

    if voice_output:
        voice_output.speak(result.text)


@app.command()
def drift(
    lat: float = typer.Option(..., help="Current latitude"),
    lon: float = typer.Option(..., help="Current longitude"),
    heading: float = typer.Option(None, help="Compass heading in degrees, [0, 360)", callback=_check_heading),
    points_file: str = typer.Option(None, help="JSON file of points instead of Wikipedia"),
    seed: int = typer.Option(None, help="Seed for reproducible whispers"),
    speak: bool = typer.Option(False, help="Speak the whisper with pyttsx3"),
) -> None:
    """Run one drift-session step and print the recorded entry."""
    session = DriftSession(
        source=_build_source(points_file),
        generator=_build_generator(seed),
        radius_meters=settings.drift_radius_meters,
        threshold_degrees=settings.drift_threshold_degrees,
        voice_output=_build_voice_output() if speak else None,
        voice_name=settings.voice_name,
        telemetry=LoggingTelemetry() if settings.telemetry_enabled else None,
    )
    entry = asyncio.run(session.update_position(Coordinate(latitude=lat, longitude=lon), heading))
    if entry is None:
        print({"drift": None})
        raise typer.Exit(code=1)
    print({"drift": _format_entry(entry)})


if __name__ == "__main__":
    app()
