"""Route command backed by the current-aware A* planner."""
from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer

from current_router.cli.currents_cmd import load_samples_or_exit
from current_router.core.config import get_config
from current_router.core.geodesy import path_length_nm
from current_router.core.grid import LatLng
from current_router.data.currents import group_by_date, latest_date
from current_router.routing.astar import CurrentAwareAStar
from current_router.routing.sampler import CurrentField

app = typer.Typer(help="Plan routes over a current sample file")


def parse_latlng(value: str) -> LatLng:
    try:
        lat, lng = map(float, value.split(","))
    except ValueError:
        raise typer.BadParameter(f"expected 'lat,lng', got '{value}'")
    return LatLng(lat, lng)


@app.command()
def plan(
    start: str = typer.Argument(..., help="start lat,lng"),
    end: str = typer.Argument(..., help="end lat,lng"),
    currents: Optional[Path] = typer.Option(None, "--currents", "-c", help="Current samples (.json or .csv)"),
    date: Optional[str] = typer.Option(None, help="YYYY-MM-DD slice to use (default: latest)"),
    grid_size: Optional[float] = typer.Option(None, help="Lattice step in degrees"),
    max_iterations: Optional[int] = typer.Option(None, help="Search expansion budget"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Path to save GeoJSON"),
) -> None:
    """Plan a route and emit it as a GeoJSON feature."""
    start_pt = parse_latlng(start)
    end_pt = parse_latlng(end)

    cfg = get_config()
    samples = []
    if currents is not None:
        by_date = group_by_date(load_samples_or_exit(currents))
        if date is None:
            date = latest_date(by_date)
        elif date not in by_date:
            typer.echo(f"No samples for {date}. Available: {', '.join(sorted(by_date))}")
            raise typer.Exit(1)
        samples = by_date.get(date, []) if date else []

    planner_cfg = cfg.planner
    if grid_size is not None:
        planner_cfg = replace(planner_cfg, grid_size=grid_size)
    if max_iterations is not None:
        planner_cfg = replace(planner_cfg, max_iterations=max_iterations)
    planner = CurrentAwareAStar.from_config(replace(cfg, planner=planner_cfg))

    result = planner.search(start_pt, end_pt, CurrentField(samples))
    if not result.success:
        typer.echo("Search did not converge; falling back to the direct line.", err=True)

    feature = {
        "type": "Feature",
        "properties": {
            "distance_nm": path_length_nm(result.path),
            "planned": result.success,
            "explored": result.explored,
            "samples": len(samples),
            "date": date,
        },
        "geometry": {
            "type": "LineString",
            "coordinates": [[p.lng, p.lat] for p in result.path],
        },
    }
    if output:
        output.write_text(json.dumps({"type": "FeatureCollection", "features": [feature]}, indent=2))
        typer.echo(f"Saved route to {output}")
    else:
        typer.echo(json.dumps(feature, indent=2))
