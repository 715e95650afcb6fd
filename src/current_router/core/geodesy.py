"""Lightweight distance helpers."""
from __future__ import annotations

import math
from typing import Sequence

from current_router.core.grid import LatLng


def lattice_distance(a: LatLng, b: LatLng) -> float:
    """Planar distance in degree space.

    The search steps are small, so this stands in for a geodesic measure.
    """
    return math.sqrt((b.lat - a.lat) ** 2 + (b.lng - a.lng) ** 2)


def shortest_dlng(lng1: float, lng2: float) -> float:
    """Return the shortest longitudinal delta from lng1 to lng2 in degrees."""
    return (lng2 - lng1 + 180) % 360 - 180


def rhumb_distance_nm(a: LatLng, b: LatLng) -> float:
    """Return rhumb line distance in nautical miles."""
    dlat = b.lat - a.lat
    dlng = shortest_dlng(a.lng, b.lng)
    lat_avg = (a.lat + b.lat) / 2
    # Adjust longitude for convergence
    dlng_adjusted = dlng * math.cos(math.radians(lat_avg))
    return math.sqrt(dlat**2 + dlng_adjusted**2) * 60  # 1 degree ≈ 60 NM


def path_length_nm(path: Sequence[LatLng]) -> float:
    total = 0.0
    for i in range(len(path) - 1):
        total += rhumb_distance_nm(path[i], path[i + 1])
    return total
