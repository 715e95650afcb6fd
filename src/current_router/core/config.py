"""Configuration loader and dataclasses for current router settings."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import yaml


@dataclass
class PlannerConfig:
    """Search configuration."""
    grid_size: float = 0.2
    max_iterations: int = 2000
    heuristic_scale: float = 100.0


@dataclass
class CostConfig:
    """Edge cost weights."""
    distance_scale: float = 150.0
    opposing_weight: float = 50.0
    aiding_weight: float = 30.0


@dataclass
class DataConfig:
    """Current sample source configuration."""
    currents_path: str = "data/currents.json"
    subsample_factor: int = 1


@dataclass
class RouterConfig:
    """Complete router configuration."""
    planner: PlannerConfig = field(default_factory=PlannerConfig)
    cost: CostConfig = field(default_factory=CostConfig)
    data: DataConfig = field(default_factory=DataConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "RouterConfig":
        """Load configuration from a YAML file."""
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}

        return cls(
            planner=PlannerConfig(**data.get('planner', {})),
            cost=CostConfig(**data.get('cost', {})),
            data=DataConfig(**data.get('data', {})),
        )

    def resolve_currents_path(self) -> Path:
        path = Path(self.data.currents_path)
        if not path.is_absolute():
            path = project_root() / path
        return path


def project_root() -> Path:
    """Get project root (4 levels up from this file)."""
    return Path(__file__).resolve().parents[3]


# Global config instance - lazily loaded
_config: Optional[RouterConfig] = None


def get_config(config_path: Optional[Path] = None) -> RouterConfig:
    """Get the global configuration, loading from file if not already loaded.

    Args:
        config_path: Path to the config file. If None, uses configs/routing_defaults.yaml.

    Returns:
        The RouterConfig instance.
    """
    global _config

    if _config is None or config_path is not None:
        if config_path is None:
            config_path = project_root() / "configs" / "routing_defaults.yaml"

        if config_path.exists():
            _config = RouterConfig.from_yaml(config_path)
        else:
            # Use defaults if config file not found
            _config = RouterConfig()

    return _config


def reload_config(config_path: Optional[Path] = None) -> RouterConfig:
    """Force reload of configuration from file."""
    global _config
    _config = None
    return get_config(config_path)
