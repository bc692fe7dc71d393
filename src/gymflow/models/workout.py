"""Workout plans and the exercises logged inside them."""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from ..errors import ValidationError

# SQLite INTEGER is a signed 64-bit value
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


class WorkoutKind(str, Enum):
    """Which pair of tables a workout and its exercises live in."""

    GYM = "gym"
    CARDIO = "cardio"

    @classmethod
    def parse(cls, value: "str | WorkoutKind | None") -> "WorkoutKind":
        """Parse a kind string, raising ValidationError for anything else."""
        if isinstance(value, cls):
            return value
        if not value:
            raise ValidationError("Workout kind is required")
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Invalid workout kind: {value}") from None


@dataclass
class Workout:
    """A named workout plan owned by a user."""

    user_id: int
    name: str
    kind: WorkoutKind
    id: int | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "kind": self.kind.value,
        }


def parse_weight(value) -> float:
    """Parse a logged weight as a finite decimal."""
    if isinstance(value, bool) or value is None:
        raise ValidationError("Weight, reps and sets must be numeric")
    try:
        weight = float(str(value).strip().replace(",", "."))
    except ValueError:
        raise ValidationError("Weight, reps and sets must be numeric") from None
    if not math.isfinite(weight):
        raise ValidationError("Weight, reps and sets must be numeric")
    return weight


def parse_count(value) -> int:
    """Parse reps/sets as an integer. Integral floats such as 10.0 are accepted."""
    if isinstance(value, bool) or value is None:
        raise ValidationError("Weight, reps and sets must be numeric")
    if isinstance(value, int):
        count = value
    elif isinstance(value, float):
        if not value.is_integer():
            raise ValidationError("Reps and sets must be whole numbers")
        count = int(value)
    else:
        try:
            count = int(str(value).strip())
        except ValueError:
            raise ValidationError("Weight, reps and sets must be numeric") from None
    if not SQLITE_INT_MIN <= count <= SQLITE_INT_MAX:
        raise ValidationError("Reps and sets are out of range")
    return count


@dataclass
class GymDetails:
    """Weight/reps/sets logged for a gym exercise. Always written together."""

    weight: float
    reps: int
    sets: int

    @classmethod
    def parse(cls, weight, reps, sets) -> "GymDetails":
        return cls(
            weight=parse_weight(weight),
            reps=parse_count(reps),
            sets=parse_count(sets),
        )


@dataclass
class CardioDetails:
    """Description/distance/type logged for a cardio exercise."""

    description: str | None = None
    distance: float | None = None
    type: str | None = None

    @classmethod
    def parse(cls, description=None, distance=None, type=None) -> "CardioDetails":
        parsed_distance = None
        if distance is not None and distance != "":
            try:
                parsed_distance = parse_weight(distance)
            except ValidationError:
                raise ValidationError("Distance must be numeric") from None
            if parsed_distance < 0:
                raise ValidationError("Distance cannot be negative")
        return cls(
            description=description or None,
            distance=parsed_distance,
            type=type or None,
        )


@dataclass
class GymExerciseEntry:
    """An exercise inside a gym workout, with its logged load."""

    workout_id: int
    exercise_id: int
    user_id: int | None = None
    weight: float | None = None
    reps: int | None = None
    sets: int | None = None
    exercise_name: str | None = None
    exercise_photo: str | None = None
    id: int | None = None

    kind = WorkoutKind.GYM

    def to_dict(self) -> dict:
        return {
            "associationId": self.id,
            "kind": self.kind.value,
            "workoutId": self.workout_id,
            "exerciseId": self.exercise_id,
            "exerciseName": self.exercise_name,
            "exercisePhoto": self.exercise_photo,
            "weight": self.weight,
            "reps": self.reps,
            "sets": self.sets,
        }


@dataclass
class CardioExerciseEntry:
    """An exercise inside a cardio workout."""

    workout_id: int
    exercise_id: int
    description: str | None = None
    distance: float | None = None
    type: str | None = None
    exercise_name: str | None = None
    exercise_photo: str | None = None
    id: int | None = None

    kind = WorkoutKind.CARDIO

    def to_dict(self) -> dict:
        return {
            "associationId": self.id,
            "kind": self.kind.value,
            "workoutId": self.workout_id,
            "exerciseId": self.exercise_id,
            "exerciseName": self.exercise_name,
            "exercisePhoto": self.exercise_photo,
            "description": self.description,
            "distance": self.distance,
            "type": self.type,
        }


WorkoutExerciseEntry = GymExerciseEntry | CardioExerciseEntry
