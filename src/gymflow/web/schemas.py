"""Request bodies accepted by the API.

Field names follow the mobile client's camelCase wire format. Kinds stay
plain strings here and are parsed into WorkoutKind by the handlers.
"""

from typing import Annotated, Any

from fastapi import Path
from pydantic import AliasChoices, BaseModel, Field, StringConstraints

from ..models.workout import SQLITE_INT_MAX

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Password = Annotated[str, Field(min_length=1)]

# Row ids are positive SQLite integers
RowId = Annotated[int, Field(ge=1, le=SQLITE_INT_MAX)]
PathId = Annotated[int, Path(ge=1, le=SQLITE_INT_MAX)]


class RegisterRequest(BaseModel):
    userName: NonEmptyStr
    email: NonEmptyStr
    password: Password
    profilePictureUrl: str | None = Field(
        default=None, validation_alias=AliasChoices("profilePictureUrl", "image")
    )


class LoginRequest(BaseModel):
    identifier: NonEmptyStr
    password: Password


class EditUserRequest(BaseModel):
    userName: str | None = None
    email: str | None = None
    password: str | None = None
    profilePictureUrl: str | None = Field(
        default=None, validation_alias=AliasChoices("profilePictureUrl", "image")
    )


class CreateWorkoutRequest(BaseModel):
    name: NonEmptyStr
    kind: str
    userId: RowId


class UpdateWorkoutRequest(BaseModel):
    name: NonEmptyStr
    kind: str


class AddExerciseRequest(BaseModel):
    workoutId: RowId
    kind: str
    exerciseId: RowId
    userId: RowId


class GymDetailsRequest(BaseModel):
    # Older clients send the gym table's id field name
    associationId: RowId = Field(
        validation_alias=AliasChoices("associationId", "gymWorkoutExerciseId")
    )
    # Left untyped so GymDetails.parse sees the raw JSON value (true stays a bool)
    weight: Any
    reps: Any
    sets: Any


class CardioDetailsRequest(BaseModel):
    associationId: RowId = Field(
        validation_alias=AliasChoices("associationId", "cardioExerciseId")
    )
    description: str | None = None
    distance: Any = None
    type: str | None = None


class AddPointRequest(BaseModel):
    userId: RowId
