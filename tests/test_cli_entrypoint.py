from __future__ import annotations

import importlib
import json
import sys
import types
from pathlib import Path

import pytest

POINTS = [
    {"title": "Lighthouse Point", "extract": "A lighthouse stood for a century.", "lat": 41.01, "lon": -105.0},
    {"title": "Old Quarry", "extract": "The quarry was abandoned in silence.", "lat": 41.02, "lon": -105.0},
]


@pytest.fixture
def points_file(tmp_path: Path) -> Path:
    path = tmp_path / "points.json"
    path.write_text(json.dumps(POINTS), encoding="utf-8")
    return path


def test_console_entrypoint_exposes_app() -> None:
    pytest.importorskip("typer")

    module = importlib.import_module("spectral_drift.main")

    assert hasattr(module, "app")
    assert module.app is not None


def test_whisper_command_prints_whisper_and_anchors(points_file: Path) -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from spectral_drift.main import app

    result = typer_testing.CliRunner().invoke(
        app,
        ["whisper", "--lat", "41.0", "--lon", "-105.0", "--heading", "0", "--points-file", str(points_file), "--seed", "3"],
        catch_exceptions=False,
    )

    assert result.exit_code == 0
    assert "whisper" in result.stdout
    assert "Lighthouse Point" in result.stdout


def test_whisper_command_rejects_out_of_range_heading(points_file: Path) -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from spectral_drift.main import app

    result = typer_testing.CliRunner().invoke(
        app,
        ["whisper", "--lat", "41.0", "--lon", "-105.0", "--heading", "400", "--points-file", str(points_file)],
    )

    assert result.exit_code != 0


def test_nearby_command_lists_points_by_distance(points_file: Path) -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from spectral_drift.main import app

    result = typer_testing.CliRunner().invoke(
        app,
        ["nearby", "--lat", "41.0", "--lon", "-105.0", "--points-file", str(points_file)],
        catch_exceptions=False,
    )

    assert result.exit_code == 0
    assert result.stdout.index("Lighthouse Point") < result.stdout.index("Old Quarry")


def test_drift_command_prints_entry(points_file: Path) -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from spectral_drift.main import app

    result = typer_testing.CliRunner().invoke(
        app,
        ["drift", "--lat", "41.0", "--lon", "-105.0", "--points-file", str(points_file), "--seed", "1"],
        catch_exceptions=False,
    )

    assert result.exit_code == 0
    assert "anchors" in result.stdout


def test_speak_reports_actionable_error_when_voice_backend_missing(monkeypatch, points_file: Path) -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from spectral_drift.main import app

    fake_tts = types.ModuleType("spectral_drift.voice.tts_pyttsx3")

    class _MissingBackend:
        def __init__(self, *args, **kwargs) -> None:
            raise RuntimeError("Voice TTS backend unavailable. Install extras with: pip install 'spectral-drift[voice]'")

    fake_tts.Pyttsx3SpeechSynthesizer = _MissingBackend
    fake_tts.Pyttsx3AudioOutputDevice = _MissingBackend
    monkeypatch.setitem(sys.modules, "spectral_drift.voice.tts_pyttsx3", fake_tts)

    result = typer_testing.CliRunner().invoke(
        app,
        ["whisper", "--lat", "41.0", "--lon", "-105.0", "--points-file", str(points_file), "--speak"],
        catch_exceptions=False,
    )

    assert result.exit_code == 1
    assert "spectral-drift[voice]" in result.stdout


@pytest.mark.parametrize("command", ["nearby", "drift"])
def test_commands_reject_out_of_range_heading(command: str, points_file: Path) -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from spectral_drift.main import app

    result = typer_testing.CliRunner().invoke(
        app,
        [command, "--lat", "41.0", "--lon", "-105.0", "--heading", "400", "--points-file", str(points_file)],
    )

    assert result.exit_code != 0
