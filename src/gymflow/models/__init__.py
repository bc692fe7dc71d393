"""Data models for gymflow."""

from .exercises import Exercise
from .ranking import RankingEntry
from .user import User, UserChanges
from .workout import (
    CardioDetails,
    CardioExerciseEntry,
    GymDetails,
    GymExerciseEntry,
    Workout,
    WorkoutExerciseEntry,
    WorkoutKind,
)

__all__ = [
    "CardioDetails",
    "CardioExerciseEntry",
    "Exercise",
    "GymDetails",
    "GymExerciseEntry",
    "RankingEntry",
    "User",
    "UserChanges",
    "Workout",
    "WorkoutExerciseEntry",
    "WorkoutKind",
]
