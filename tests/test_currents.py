from __future__ import annotations

import json
from pathlib import Path

import pytest

from current_router.data.currents import (
    UNDATED,
    CurrentSample,
    group_by_date,
    latest_date,
    load_current_samples,
    parse_sample,
    subsample,
)

FIXTURES = Path(__file__).parent / "fixtures"


def test_parse_sample_accepts_strings_and_wrapped_time() -> None:
    sample = parse_sample(
        {"latitude": "10.5", "longitude": 80, "uo": "0.3", "vo": -0.4, "time": {"value": "2024-03-01T06:00:00Z"}}
    )
    assert sample == CurrentSample(10.5, 80.0, 0.3, -0.4, depth=None, time="2024-03-01T06:00:00Z")
    assert sample.date == "2024-03-01"
    assert sample.magnitude == pytest.approx(0.5)


@pytest.mark.parametrize(
    "record",
    [
        {"latitude": 1, "longitude": 2, "vo": 0.1},
        {"latitude": "NaN", "longitude": 2, "uo": 0.1, "vo": 0.1},
        {"latitude": 1, "longitude": "east", "uo": 0.1, "vo": 0.1},
        {"latitude": 1, "longitude": 2, "uo": None, "vo": 0.1},
        1,
        None,
        ["10.0", "80.0", "0.3", "0.4"],
    ],
)
def test_parse_sample_rejects_unusable_rows(record) -> None:
    assert parse_sample(record) is None


@pytest.mark.parametrize(
    "time",
    ["2024-03-01T00:00:00Z", "2024-03-01 00:00:00 UTC", "2024-03-01", " 2024-03-01 06:30:00"],
)
def test_date_is_calendar_day_for_common_timestamp_formats(time) -> None:
    sample = parse_sample({"latitude": 1, "longitude": 2, "uo": 0.1, "vo": 0.1, "time": time})
    assert sample.date == "2024-03-01"


def test_load_json_skips_non_object_rows(tmp_path: Path) -> None:
    path = tmp_path / "currents.json"
    path.write_text(json.dumps([1, "row", None, {"latitude": 1, "longitude": 2, "uo": 0.1, "vo": 0.1}]))
    samples = load_current_samples(path)
    assert [(s.lat, s.lng) for s in samples] == [(1.0, 2.0)]


def test_load_json_drops_invalid_rows() -> None:
    samples = load_current_samples(FIXTURES / "currents.json")
    assert len(samples) == 3
    assert samples[0].time == "2024-03-01T00:00:00Z"
    assert samples[1].u == pytest.approx(-0.2)
    assert samples[1].depth == pytest.approx(0.49)


def test_load_csv() -> None:
    samples = load_current_samples(FIXTURES / "currents.csv")
    assert [(s.lat, s.lng) for s in samples] == [(10.0, 80.0), (10.5, 80.5), (10.2, 80.2)]
    assert sorted(group_by_date(samples)) == ["2024-03-01", "2024-03-02"]


def test_load_rejects_bad_files(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_current_samples(tmp_path / "missing.json")

    txt = tmp_path / "currents.txt"
    txt.write_text("latitude,longitude\n")
    with pytest.raises(ValueError):
        load_current_samples(txt)

    not_a_list = tmp_path / "currents.json"
    not_a_list.write_text(json.dumps({"latitude": 1}))
    with pytest.raises(ValueError):
        load_current_samples(not_a_list)


def test_group_by_date_and_latest() -> None:
    samples = load_current_samples(FIXTURES / "currents.json") + [CurrentSample(0, 0, 0, 0)]
    grouped = group_by_date(samples)
    assert sorted(grouped) == ["2024-03-01", "2024-03-02", UNDATED]
    assert len(grouped["2024-03-01"]) == 2
    assert latest_date(grouped) == "2024-03-02"
    assert latest_date({UNDATED: []}) == UNDATED
    assert latest_date({}) is None


def test_subsample_keeps_every_nth() -> None:
    samples = [CurrentSample(float(i), 0.0, 0.0, 0.0) for i in range(5)]
    assert [s.lat for s in subsample(samples, 2)] == [0.0, 2.0, 4.0]
    assert subsample(samples, 1) == samples
    with pytest.raises(ValueError):
        subsample(samples, 0)
