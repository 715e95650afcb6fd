#!/usr/bin/env python3
"""Plot a planned route over the current field it was planned on."""
from __future__ import annotations

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

import argparse
from typing import List, Sequence

import numpy as np
import matplotlib.pyplot as plt

from current_router.core.config import get_config
from current_router.core.grid import LatLng
from current_router.data.currents import CurrentSample, group_by_date, latest_date, load_current_samples
from current_router.routing.astar import CurrentAwareAStar
from current_router.routing.sampler import CurrentField


def visualize_route(
    path: Sequence[LatLng],
    samples: Sequence[CurrentSample],
    title: str = "Current-Aware Route",
    output_path: Path | None = None,
    margin: float = 1.0,
):
    """Draw current arrows coloured by speed with the route on top."""
    lats = [p.lat for p in path]
    lngs = [p.lng for p in path]
    lat_min, lat_max = min(lats) - margin, max(lats) + margin
    lng_min, lng_max = min(lngs) - margin, max(lngs) + margin

    fig, ax = plt.subplots(1, 1, figsize=(12, 9))

    # Only draw arrows inside the plotted window
    window: List[CurrentSample] = [
        s for s in samples if lat_min <= s.lat <= lat_max and lng_min <= s.lng <= lng_max
    ]
    if window:
        x = np.array([s.lng for s in window])
        y = np.array([s.lat for s in window])
        u = np.array([s.u for s in window])
        v = np.array([s.v for s in window])
        speed = np.hypot(u, v)
        q = ax.quiver(x, y, u, v, speed, cmap="viridis", angles="xy", zorder=5)
        fig.colorbar(q, ax=ax, label="Current speed (m/s)")

    ax.plot(lngs, lats, 'w-', linewidth=3, label='Route', zorder=10)
    ax.plot(lngs, lats, 'r-', linewidth=1.5, zorder=11)
    ax.scatter([lngs[0]], [lats[0]], c='blue', s=80, zorder=12, label='Start')
    ax.scatter([lngs[-1]], [lats[-1]], c='red', s=80, zorder=12, label='End')

    ax.set_xlim(lng_min, lng_max)
    ax.set_ylim(lat_min, lat_max)
    ax.set_xlabel('Longitude')
    ax.set_ylabel('Latitude')
    ax.set_title(title)
    ax.legend(loc='upper right')
    ax.set_facecolor('#1a3a5c')

    plt.tight_layout()
    if output_path:
        plt.savefig(output_path, dpi=150)
        print(f"Saved to {output_path}")
    else:
        plt.show()
    plt.close(fig)


def main():
    parser = argparse.ArgumentParser(description="Plan and plot a current-aware route")
    parser.add_argument("start", help="start lat,lng")
    parser.add_argument("end", help="end lat,lng")
    parser.add_argument("--currents", type=Path, required=True, help="Current samples (.json or .csv)")
    parser.add_argument("--date", help="YYYY-MM-DD slice (default: latest)")
    parser.add_argument("--output", "-o", type=Path, help="Save the figure instead of showing it")
    args = parser.parse_args()

    start = LatLng(*map(float, args.start.split(",")))
    end = LatLng(*map(float, args.end.split(",")))

    by_date = group_by_date(load_current_samples(args.currents))
    date = args.date or latest_date(by_date)
    samples = by_date.get(date, []) if date else []

    planner = CurrentAwareAStar.from_config(get_config())
    result = planner.search(start, end, CurrentField(samples))
    status = "planned" if result.success else "direct fallback"
    print(f"{len(result.path)} points, {result.explored} expansions ({status})")

    visualize_route(result.path, samples, title=f"Route {date or ''} ({status})", output_path=args.output)


if __name__ == "__main__":
    main()
