"""CLI commands for gymflow."""

from .catalog import exercises, ranking
from .init import init, seed
from .serve import serve

__all__ = [
    "exercises",
    "init",
    "ranking",
    "seed",
    "serve",
]
