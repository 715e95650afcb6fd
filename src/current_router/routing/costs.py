"""Edge costs from step length and current alignment."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from current_router.core.config import CostConfig
from current_router.core.geodesy import lattice_distance
from current_router.core.grid import LatLng
from current_router.data.currents import CurrentSample
from current_router.routing.sampler import CurrentField


@dataclass
class CostWeights:
    distance_scale: float = 150.0  # Geometric step length weight
    opposing_weight: float = 50.0  # Penalty per unit of head current
    aiding_weight: float = 30.0  # Discount per unit of following current

    @classmethod
    def from_config(cls, config: CostConfig) -> "CostWeights":
        return cls(
            distance_scale=config.distance_scale,
            opposing_weight=config.opposing_weight,
            aiding_weight=config.aiding_weight,
        )


def edge_cost(
    frm: LatLng,
    to: LatLng,
    current: Optional[CurrentSample],
    weights: Optional[CostWeights] = None,
) -> float:
    """Cost of moving from ``frm`` to ``to`` under ``current``.

    The alignment factor is the cosine of the angle between the movement and the current.
    Opposing currents add ``strength * |alignment| * opposing_weight``; aiding currents
    subtract ``strength * alignment * aiding_weight``. The result is not clamped, so a strong
    following current can in principle make a step cost negative.

    Args:
        current: Sample governing the step. None prices the step as still water.
    """
    if weights is None:
        weights = CostWeights()
    distance_cost = lattice_distance(frm, to) * weights.distance_scale
    if current is None:
        return distance_cost

    movement_angle = math.atan2(to.lat - frm.lat, to.lng - frm.lng)
    current_angle = math.atan2(current.v, current.u)
    angle_diff = abs(movement_angle - current_angle)
    strength = math.sqrt(current.u**2 + current.v**2)
    alignment = math.cos(angle_diff)

    if alignment < 0:
        penalty = strength * abs(alignment) * weights.opposing_weight
    else:
        penalty = -strength * alignment * weights.aiding_weight
    return distance_cost + penalty


def path_cost(
    path: Sequence[LatLng],
    field: CurrentField,
    weights: Optional[CostWeights] = None,
) -> float:
    """Accumulated edge cost along ``path``, each hop priced at its origin's current."""
    total = 0.0
    for i in range(len(path) - 1):
        total += edge_cost(path[i], path[i + 1], field.nearest(path[i]), weights)
    return total
