"""Dependency wiring for API service."""
from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Dict, List

from current_router.core.config import RouterConfig, get_config
from current_router.data.currents import CurrentSample, group_by_date, load_current_samples, subsample


# Point the service at another export: CURRENT_ROUTER_CURRENTS=/path/to/currents.json
CURRENTS_ENV = "CURRENT_ROUTER_CURRENTS"


def get_router_config() -> RouterConfig:
    return get_config()


def _currents_path() -> Path:
    override = os.environ.get(CURRENTS_ENV)
    if override:
        return Path(override)
    return get_config().resolve_currents_path()


@lru_cache(maxsize=1)
def get_current_samples_by_date() -> Dict[str, List[CurrentSample]]:
    path = _currents_path()
    if not path.exists():
        print(f"[WARNING] Current sample file {path} not found; routing over still water")
        return {}
    samples = load_current_samples(path)
    factor = get_config().data.subsample_factor
    if factor > 1:
        samples = subsample(samples, factor)
        print(f"[CURRENTS] Subsampled to {len(samples)} samples (factor {factor})")
    return group_by_date(samples)


def clear_caches() -> None:
    """Drop cached samples so the next request reloads from disk."""
    get_current_samples_by_date.cache_clear()
