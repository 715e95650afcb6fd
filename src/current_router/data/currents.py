"""Ocean current samples and loaders for exported current tables."""
from __future__ import annotations

import csv
import json
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

UNDATED = "undated"


@dataclass(frozen=True, slots=True)
class CurrentSample:
    """A single current measurement.

    Attributes:
        lat: Latitude of the measurement in decimal degrees.
        lng: Longitude of the measurement in decimal degrees.
        u: Eastward velocity component (m/s).
        v: Northward velocity component (m/s).
        depth: Measurement depth in meters, if known.
        time: ISO timestamp of the measurement, if known.
    """

    lat: float
    lng: float
    u: float
    v: float
    depth: Optional[float] = None
    time: Optional[str] = None

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.u * self.u + self.v * self.v)

    @property
    def date(self) -> str:
        if not self.time:
            return UNDATED
        # Exports use either ISO "2024-03-01T00:00:00Z" or "2024-03-01 00:00:00 UTC"
        return re.split(r"[T\s]", self.time.strip(), maxsplit=1)[0]


def _to_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        out = float(value)
    except (TypeError, ValueError):
        return None
    return out if math.isfinite(out) else None


def parse_sample(record: Any) -> Optional[CurrentSample]:
    """Build a sample from an exported row, or None if the row is unusable.

    Rows carry ``latitude``, ``longitude``, ``uo`` and ``vo`` and optionally ``depth`` and
    ``time``. Warehouse exports wrap timestamps as ``{"value": "..."}``. Anything that is
    not a mapping is unusable.
    """
    if not isinstance(record, Mapping):
        return None
    lat = _to_float(record.get("latitude"))
    lng = _to_float(record.get("longitude"))
    u = _to_float(record.get("uo"))
    v = _to_float(record.get("vo"))
    if lat is None or lng is None or u is None or v is None:
        return None

    time = record.get("time")
    if isinstance(time, Mapping):
        time = time.get("value")
    return CurrentSample(
        lat=lat,
        lng=lng,
        u=u,
        v=v,
        depth=_to_float(record.get("depth")),
        time=str(time) if time else None,
    )


def parse_samples(records: Iterable[Any]) -> List[CurrentSample]:
    samples: List[CurrentSample] = []
    for record in records:
        sample = parse_sample(record)
        if sample is not None:
            samples.append(sample)
    return samples


def load_current_samples(path: str | Path) -> List[CurrentSample]:
    """Load samples from a JSON array or a CSV file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Current sample file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        with open(path, "r", encoding="utf-8") as f:
            records = json.load(f)
        if not isinstance(records, list):
            raise ValueError(f"{path}: expected a JSON array of current records")
    elif suffix == ".csv":
        with open(path, "r", encoding="utf-8", newline="") as f:
            records = list(csv.DictReader(f))
    else:
        raise ValueError(f"Unsupported current sample format '{suffix}' (use .json or .csv)")

    samples = parse_samples(records)
    dropped = len(records) - len(samples)
    print(f"[CURRENTS] Loaded {len(samples)} samples from {path.name} ({dropped} invalid rows dropped)")
    return samples


def group_by_date(samples: Iterable[CurrentSample]) -> Dict[str, List[CurrentSample]]:
    grouped: Dict[str, List[CurrentSample]] = {}
    for sample in samples:
        grouped.setdefault(sample.date, []).append(sample)
    return grouped


def latest_date(grouped: Mapping[str, Sequence[CurrentSample]]) -> Optional[str]:
    """Most recent dated key, or the undated bucket when nothing carries a date."""
    dated = sorted(k for k in grouped if k != UNDATED)
    if dated:
        return dated[-1]
    return UNDATED if UNDATED in grouped else None


def subsample(samples: Sequence[CurrentSample], factor: int) -> List[CurrentSample]:
    """Keep every ``factor``-th sample."""
    if factor < 1:
        raise ValueError(f"Subsample factor must be >= 1, got {factor}")
    return list(samples[::factor])
