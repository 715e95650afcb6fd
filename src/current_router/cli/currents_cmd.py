"""Inspection commands for current sample files."""
from __future__ import annotations

from pathlib import Path
from typing import List

import typer

from current_router.data.currents import CurrentSample, group_by_date, load_current_samples

app = typer.Typer(help="Inspect current sample files")


def load_samples_or_exit(path: Path) -> List[CurrentSample]:
    try:
        return load_current_samples(path)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)


@app.command()
def summary(path: Path = typer.Argument(..., help="Current samples (.json or .csv)")) -> None:
    """List the dates in a sample file with counts and peak current speed."""
    by_date = group_by_date(load_samples_or_exit(path))
    if not by_date:
        typer.echo("No usable samples.")
        return
    for date in sorted(by_date):
        samples = by_date[date]
        peak = max(s.magnitude for s in samples)
        typer.echo(f"{date}: {len(samples)} samples, peak {peak:.2f} m/s")
