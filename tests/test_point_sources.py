from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from spectral_drift.adapters import JsonFilePointSource, PointSourceError, WikipediaGeoSearchSource
from spectral_drift.models import Coordinate

HERE = Coordinate(latitude=41.1315, longitude=-105.3988)

GEOSEARCH_PAYLOAD = {
    "batchcomplete": "",
    "query": {
        "pages": {
            "200": {
                "pageid": 200,
                "title": "Sherman, Wyoming",
                "index": 2,
                "coordinates": [{"lat": 41.13, "lon": -105.40, "primary": ""}],
            },
            "100": {
                "pageid": 100,
                "title": "Ames Monument",
                "index": 1,
                "coordinates": [{"lat": 41.1316, "lon": -105.3990, "primary": ""}],
                "extract": "The Ames Monument is a pyramid built in 1882.",
            },
            "300": {"pageid": 300, "title": "Unplaced Article", "index": 3},
        }
    },
}


def _source(handler) -> WikipediaGeoSearchSource:
    return WikipediaGeoSearchSource(client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_wikipedia_source_parses_pages_in_index_order() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=GEOSEARCH_PAYLOAD)

    points = _source(handler).fetch(HERE, 2000)

    assert [point.title for point in points] == ["Ames Monument", "Sherman, Wyoming", "Unplaced Article"]
    assert points[0].extract.startswith("The Ames Monument")
    assert points[0].position == Coordinate(latitude=41.1316, longitude=-105.3990)
    assert points[1].extract is None
    assert points[2].position is None
    assert seen[0].url.params["generator"] == "geosearch"
    assert seen[0].url.params["ggsradius"] == "2000"
    assert seen[0].url.params["ggscoord"] == "41.1315|-105.3988"


def test_wikipedia_source_returns_empty_list_without_query() -> None:
    points = _source(lambda request: httpx.Response(200, json={"batchcomplete": ""})).fetch(HERE, 2000)

    assert points == []


def test_wikipedia_source_wraps_http_errors() -> None:
    with pytest.raises(PointSourceError):
        _source(lambda request: httpx.Response(503, text="unavailable")).fetch(HERE, 2000)


def test_wikipedia_source_wraps_malformed_json() -> None:
    with pytest.raises(PointSourceError):
        _source(lambda request: httpx.Response(200, text="<html>")).fetch(HERE, 2000)


def test_wikipedia_source_wraps_malformed_coordinates() -> None:
    payload = {"query": {"pages": {"1": {"pageid": 1, "title": "Ames Monument", "coordinates": [{"lat": "x", "lon": 0}]}}}}

    with pytest.raises(PointSourceError):
        _source(lambda request: httpx.Response(200, json=payload)).fetch(HERE, 2000)


def test_json_file_source_reads_points(tmp_path: Path) -> None:
    path = tmp_path / "points.json"
    path.write_text(
        json.dumps(
            [
                {"title": "Old Quarry", "extract": "The quarry was abandoned.", "lat": 41.0, "lon": -105.0},
                {"title": "No Coordinates"},
                {"extract": "untitled entries are skipped"},
            ]
        ),
        encoding="utf-8",
    )

    points = JsonFilePointSource(path).fetch(HERE, 2000)

    assert [point.title for point in points] == ["Old Quarry", "No Coordinates"]
    assert points[0].position == Coordinate(latitude=41.0, longitude=-105.0)
    assert points[1].position is None


def test_json_file_source_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(PointSourceError):
        JsonFilePointSource(tmp_path / "missing.json").fetch(HERE, 2000)


def test_json_file_source_wraps_non_numeric_coordinates(tmp_path: Path) -> None:
    path = tmp_path / "points.json"
    path.write_text(json.dumps([{"title": "Old Quarry", "lat": "north", "lon": 1}]), encoding="utf-8")

    with pytest.raises(PointSourceError):
        JsonFilePointSource(path).fetch(HERE, 2000)
