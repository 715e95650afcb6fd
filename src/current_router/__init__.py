"""Current-aware route planning over a sparse ocean-current field."""

__all__ = [
    "core",
    "data",
    "routing",
    "api",
    "cli",
]
