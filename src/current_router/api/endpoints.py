"""API routers."""
from __future__ import annotations

import time
from dataclasses import replace
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException

from current_router.api.dependencies import get_current_samples_by_date, get_router_config
from current_router.api.schemas import DatesResponse, RouteRequest, RouteResponse
from current_router.core.config import RouterConfig
from current_router.core.geodesy import path_length_nm
from current_router.core.grid import LatLng
from current_router.data.currents import CurrentSample, latest_date, parse_samples
from current_router.routing.astar import CurrentAwareAStar
from current_router.routing.sampler import CurrentField

router = APIRouter()


def _select_samples(
    req: RouteRequest,
    by_date: Dict[str, List[CurrentSample]],
) -> tuple[List[CurrentSample], Optional[str]]:
    if req.samples is not None:
        return parse_samples(s.model_dump() for s in req.samples), req.date
    if not by_date:
        return [], None
    if req.date is not None:
        if req.date not in by_date:
            raise HTTPException(status_code=404, detail=f"No current data for date {req.date}.")
        return by_date[req.date], req.date
    date = latest_date(by_date)
    return by_date[date], date


@router.get("/currents/dates", response_model=DatesResponse)
def current_dates(
    by_date: Dict[str, List[CurrentSample]] = Depends(get_current_samples_by_date),
) -> DatesResponse:
    return DatesResponse(dates=sorted(by_date), latest=latest_date(by_date))


@router.post("/route", response_model=RouteResponse)
def route(
    req: RouteRequest,
    cfg: RouterConfig = Depends(get_router_config),
    by_date: Dict[str, List[CurrentSample]] = Depends(get_current_samples_by_date),
) -> RouteResponse:
    """Plan a current-aware route between two points.

    Coordinates are expected as [lat, lng].
    """
    t_start = time.perf_counter()
    samples, date = _select_samples(req, by_date)

    planner_cfg = cfg.planner
    if req.grid_size is not None:
        planner_cfg = replace(planner_cfg, grid_size=req.grid_size)
    if req.max_iterations is not None:
        planner_cfg = replace(planner_cfg, max_iterations=req.max_iterations)
    planner = CurrentAwareAStar.from_config(replace(cfg, planner=planner_cfg))

    start = LatLng(*req.start)
    end = LatLng(*req.end)
    result = planner.search(start, end, CurrentField(samples))

    warnings: List[str] = []
    if not samples:
        warnings.append("No current samples available; route assumes still water.")
    if not result.success:
        warnings.append(
            f"Search did not converge within {planner.max_iterations} iterations; returning direct line."
        )

    print(
        f"[ROUTE] {len(samples)} samples, {result.explored} expansions, "
        f"{len(result.path)} points, planned={result.success}"
    )
    print(f"[TIMING] Route request: {(time.perf_counter() - t_start)*1000:.1f}ms")

    return RouteResponse(
        path=[p.as_tuple() for p in result.path],
        distance_nm=path_length_nm(result.path),
        explored=result.explored,
        planned=result.success,
        date=date,
        warnings=warnings,
    )
