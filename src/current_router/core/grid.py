"""Lattice utilities for stepping through geographic space."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True, slots=True)
class LatLng:
    """A point in decimal degrees."""

    lat: float
    lng: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "lat", float(self.lat))
        object.__setattr__(self, "lng", float(self.lng))

    def as_tuple(self) -> tuple[float, float]:
        return self.lat, self.lng


def point_key(point: LatLng) -> str:
    """Stable identity for a lattice point.

    Uses the exact float repr so two points share a key only when they were generated
    by identical arithmetic.
    """
    return f"{point.lat!r},{point.lng!r}"


@dataclass(slots=True)
class LatticeSpec:
    """Uniform 8-connected lattice.

    Attributes:
        step: Spacing in degrees applied to both latitude and longitude.
    """

    step: float = 0.2

    def neighbors(self, point: LatLng) -> List[LatLng]:
        out: List[LatLng] = []
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                out.append(LatLng(point.lat + dy * self.step, point.lng + dx * self.step))
        return out

    def in_goal_region(self, point: LatLng, goal: LatLng) -> bool:
        return abs(point.lat - goal.lat) < self.step and abs(point.lng - goal.lng) < self.step
