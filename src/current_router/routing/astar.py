"""A* search over a uniform lattice priced by local ocean currents."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from current_router.core.config import PlannerConfig, RouterConfig
from current_router.core.geodesy import lattice_distance
from current_router.core.grid import LatLng, LatticeSpec, point_key
from current_router.data.currents import CurrentSample
from current_router.routing.costs import CostWeights, edge_cost
from current_router.routing.reconstruct import fallback_path, reconstruct_path
from current_router.routing.sampler import CurrentField, as_field


@dataclass
class AStarResult:
    path: List[LatLng]
    explored: int
    cost: float
    success: bool
    expansion_order: List[str] = field(default_factory=list)


class CurrentAwareAStar:
    """Best-first lattice search that trades step length against current alignment.

    The heuristic is the straight-line distance scaled by ``heuristic_scale``. Aiding
    currents can push true step costs below it, so the result is a good route rather than
    a provably shortest one. Expanded points are final: they are never reopened even if a
    cheaper approach turns up later.
    """

    def __init__(
        self,
        lattice: LatticeSpec,
        weights: CostWeights,
        max_iterations: int = 2000,
        heuristic_scale: float = 100.0,
    ):
        self.lattice = lattice
        self.weights = weights
        self.max_iterations = max_iterations
        self.heuristic_scale = heuristic_scale

    @classmethod
    def from_config(cls, config: RouterConfig) -> "CurrentAwareAStar":
        return cls(
            LatticeSpec(step=config.planner.grid_size),
            CostWeights.from_config(config.cost),
            max_iterations=config.planner.max_iterations,
            heuristic_scale=config.planner.heuristic_scale,
        )

    def heuristic(self, a: LatLng, b: LatLng) -> float:
        return lattice_distance(a, b) * self.heuristic_scale

    def search(self, start: LatLng, end: LatLng, currents: CurrentField) -> AStarResult:
        start_key = point_key(start)
        # Insertion-ordered dict doubles as the open set; the scan below depends on that order.
        open_set: Dict[str, LatLng] = {start_key: start}
        closed: set[str] = set()
        points: Dict[str, LatLng] = {start_key: start}
        came_from: Dict[str, str] = {}
        g_score: Dict[str, float] = {start_key: 0.0}
        f_score: Dict[str, float] = {start_key: self.heuristic(start, end)}
        expansion_order: List[str] = []
        explored = 0

        while open_set and explored < self.max_iterations:
            explored += 1

            current_key: Optional[str] = None
            lowest_f = math.inf
            for key in open_set:
                f = f_score.get(key, math.inf)
                if f < lowest_f:
                    lowest_f = f
                    current_key = key
            if current_key is None:
                # Only non-finite scores left (NaN coordinates); nothing can be ranked.
                break
            current = open_set[current_key]

            if self.lattice.in_goal_region(current, end):
                return AStarResult(
                    path=reconstruct_path(came_from, points, current_key),
                    explored=explored,
                    cost=g_score[current_key],
                    success=True,
                    expansion_order=expansion_order,
                )

            del open_set[current_key]
            closed.add(current_key)
            expansion_order.append(current_key)

            sample = currents.nearest(current)
            current_g = g_score[current_key]
            for neighbor in self.lattice.neighbors(current):
                neighbor_key = point_key(neighbor)
                if neighbor_key in closed:
                    continue
                tentative_g = current_g + edge_cost(current, neighbor, sample, self.weights)
                if neighbor_key not in open_set:
                    open_set[neighbor_key] = neighbor
                    points[neighbor_key] = neighbor
                elif tentative_g >= g_score.get(neighbor_key, math.inf):
                    continue
                came_from[neighbor_key] = current_key
                g_score[neighbor_key] = tentative_g
                f_score[neighbor_key] = tentative_g + self.heuristic(neighbor, end)

        return AStarResult(
            path=fallback_path(start, end),
            explored=explored,
            cost=math.inf,
            success=False,
            expansion_order=expansion_order,
        )


def plan_route(
    start: LatLng,
    end: LatLng,
    samples: "Sequence[CurrentSample] | CurrentField",
    config: Optional[PlannerConfig] = None,
    weights: Optional[CostWeights] = None,
) -> List[LatLng]:
    """Plan a current-aware route from ``start`` to ``end``.

    Returns the lattice path on success. If the search runs out of frontier or iterations
    the literal ``[start, end]`` is returned instead; a two-point result therefore means
    "direct line", not an error.
    """
    return plan_route_detailed(start, end, samples, config, weights).path


def plan_route_detailed(
    start: LatLng,
    end: LatLng,
    samples: "Sequence[CurrentSample] | CurrentField",
    config: Optional[PlannerConfig] = None,
    weights: Optional[CostWeights] = None,
) -> AStarResult:
    if config is None:
        config = PlannerConfig()
    planner = CurrentAwareAStar(
        LatticeSpec(step=config.grid_size),
        weights if weights is not None else CostWeights(),
        max_iterations=config.max_iterations,
        heuristic_scale=config.heuristic_scale,
    )
    return planner.search(start, end, as_field(samples))
