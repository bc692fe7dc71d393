"""Database layer for gymflow."""

from .engine import connect, get_db_path, init_db, seed_exercises
from .repositories import (
    ExerciseRepository,
    PointsRepository,
    RankingRepository,
    UserRepository,
    WorkoutExerciseRepository,
    WorkoutRepository,
)

__all__ = [
    "connect",
    "ExerciseRepository",
    "get_db_path",
    "init_db",
    "PointsRepository",
    "RankingRepository",
    "seed_exercises",
    "UserRepository",
    "WorkoutExerciseRepository",
    "WorkoutRepository",
]
