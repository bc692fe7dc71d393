"""Data loading utilities."""

from .exercise_loader import load_exercises, seed_exercises_from_json

__all__ = ["load_exercises", "seed_exercises_from_json"]
