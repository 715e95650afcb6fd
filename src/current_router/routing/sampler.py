"""Nearest-neighbour lookup over an irregular current sample set."""
from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from current_router.core.grid import LatLng
from current_router.data.currents import CurrentSample


class CurrentField:
    """Read-only view over current samples for one planning call.

    Distances are squared Euclidean in (lat, lng) degree space. When several samples are
    equally close, the earliest one in input order wins.
    """

    def __init__(self, samples: Sequence[CurrentSample]):
        self.samples: List[CurrentSample] = list(samples)
        self._lat = np.array([s.lat for s in self.samples], dtype=np.float64)
        self._lng = np.array([s.lng for s in self.samples], dtype=np.float64)

    def __len__(self) -> int:
        return len(self.samples)

    def nearest(self, point: LatLng) -> Optional[CurrentSample]:
        if not self.samples:
            return None
        d2 = (self._lat - point.lat) ** 2 + (self._lng - point.lng) ** 2
        d2 = np.where(np.isnan(d2), np.inf, d2)
        # argmin returns the first occurrence of the minimum
        idx = int(np.argmin(d2))
        if not np.isfinite(d2[idx]):
            return None
        return self.samples[idx]


def as_field(samples: "Sequence[CurrentSample] | CurrentField") -> CurrentField:
    if isinstance(samples, CurrentField):
        return samples
    return CurrentField(samples)
