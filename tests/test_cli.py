from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from current_router.cli.main import app

FIXTURES = Path(__file__).parent / "fixtures"
runner = CliRunner()


def test_plan_prints_geojson_feature() -> None:
    result = runner.invoke(app, ["route", "plan", "0,0", "1,1"])
    assert result.exit_code == 0
    feature = json.loads(result.stdout)
    assert feature["geometry"]["type"] == "LineString"
    coords = feature["geometry"]["coordinates"]
    assert coords[0] == [0.0, 0.0]
    assert len(coords) == 5
    assert feature["properties"]["planned"] is True


def test_plan_with_currents_writes_file(tmp_path: Path) -> None:
    out = tmp_path / "route.geojson"
    result = runner.invoke(
        app,
        ["route", "plan", "10,80", "10.6,80.6", "--currents", str(FIXTURES / "currents.json"), "-o", str(out)],
    )
    assert result.exit_code == 0
    feature = json.loads(out.read_text())["features"][0]
    assert feature["properties"]["date"] == "2024-03-02"
    assert feature["properties"]["samples"] == 1
    assert feature["geometry"]["coordinates"][0] == [80.0, 10.0]


def test_plan_unknown_date_exits() -> None:
    result = runner.invoke(
        app,
        ["route", "plan", "10,80", "11,81", "--currents", str(FIXTURES / "currents.json"), "--date", "2000-01-01"],
    )
    assert result.exit_code == 1


def test_plan_rejects_bad_coordinates() -> None:
    result = runner.invoke(app, ["route", "plan", "north", "1,1"])
    assert result.exit_code != 0


def test_currents_summary() -> None:
    result = runner.invoke(app, ["currents", "summary", str(FIXTURES / "currents.json")])
    assert result.exit_code == 0
    assert "2024-03-01: 2 samples" in result.stdout
    assert "2024-03-02: 1 samples, peak 1.20 m/s" in result.stdout


def test_currents_summary_tolerates_stray_rows(tmp_path: Path) -> None:
    path = tmp_path / "currents.json"
    path.write_text(
        json.dumps([1, {"latitude": 1, "longitude": 2, "uo": 0.3, "vo": 0.4, "time": "2024-03-05 00:00:00 UTC"}])
    )
    result = runner.invoke(app, ["currents", "summary", str(path)])
    assert result.exit_code == 0
    assert "2024-03-05: 1 samples, peak 0.50 m/s" in result.stdout


def test_currents_summary_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["currents", "summary", str(tmp_path / "nope.json")])
    assert result.exit_code == 1


def test_info() -> None:
    result = runner.invoke(app, ["info"])
    assert result.exit_code == 0
    assert "Grid size" in result.stdout
