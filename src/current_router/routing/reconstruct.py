"""Utilities to reconstruct paths from predecessor maps."""
from __future__ import annotations

from typing import Dict, List

from current_router.core.grid import LatLng


def reconstruct_path(came_from: Dict[str, str], points: Dict[str, LatLng], current: str) -> List[LatLng]:
    keys = [current]
    while current in came_from:
        current = came_from[current]
        keys.append(current)
    keys.reverse()
    return [points[k] for k in keys]


def fallback_path(start: LatLng, end: LatLng) -> List[LatLng]:
    """Direct two-point line used when the search does not converge."""
    return [start, end]
