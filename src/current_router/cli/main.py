"""Typer CLI for current-aware routing."""
from __future__ import annotations

import os
import typer

from current_router.cli import currents_cmd, route_cmd

app = typer.Typer(help="Current-aware route planning over sparse ocean-current samples")
app.add_typer(route_cmd.app, name="route")
app.add_typer(currents_cmd.app, name="currents")


@app.command()
def info() -> None:
    """Show the active configuration and the configured current source."""
    from current_router.api.dependencies import CURRENTS_ENV
    from current_router.core.config import get_config

    cfg = get_config()
    typer.echo("=== Current Router Configuration ===")
    typer.echo(f"Grid size:       {cfg.planner.grid_size}°")
    typer.echo(f"Max iterations:  {cfg.planner.max_iterations}")
    typer.echo(f"Heuristic scale: {cfg.planner.heuristic_scale}")
    typer.echo(
        f"Cost weights:    distance={cfg.cost.distance_scale}, "
        f"opposing={cfg.cost.opposing_weight}, aiding={cfg.cost.aiding_weight}"
    )

    typer.echo("")
    typer.echo("=== Data ===")
    path = os.environ.get(CURRENTS_ENV) or str(cfg.resolve_currents_path())
    typer.echo(f"Currents: {path} ({'✓ found' if os.path.exists(path) else '✗ not found'})")


if __name__ == "__main__":
    app()
