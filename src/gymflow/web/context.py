"""Per-application dependencies handed to request handlers."""

from dataclasses import dataclass
from pathlib import Path

from fastapi import Header, Request

from ..auth import Authenticator
from ..config import Settings
from ..db.repositories import (
    ExerciseRepository,
    PointsRepository,
    RankingRepository,
    UserRepository,
    WorkoutExerciseRepository,
    WorkoutRepository,
)


@dataclass
class AppContext:
    """Everything a handler needs, built once per application."""

    settings: Settings
    db_path: Path
    authenticator: Authenticator
    users: UserRepository
    exercises: ExerciseRepository
    workouts: WorkoutRepository
    workout_exercises: WorkoutExerciseRepository
    points: PointsRepository
    ranking: RankingRepository

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        db_path = settings.DB_PATH
        db_path.parent.mkdir(parents=True, exist_ok=True)
        return cls(
            settings=settings,
            db_path=db_path,
            authenticator=Authenticator(
                secret=settings.JWT_SECRET,
                algorithm=settings.JWT_ALGORITHM,
                expires_days=settings.JWT_EXPIRES_DAYS,
            ),
            users=UserRepository(db_path),
            exercises=ExerciseRepository(db_path),
            workouts=WorkoutRepository(db_path),
            workout_exercises=WorkoutExerciseRepository(db_path),
            points=PointsRepository(db_path),
            ranking=RankingRepository(db_path),
        )


def get_context(request: Request) -> AppContext:
    """Get the application context from app state."""
    return request.app.state.context


async def require_session(
    request: Request,
    authorization: str | None = Header(None),
) -> int | None:
    """Check the bearer token when the deployment requires authentication.

    Returns the authenticated user id, or None when authentication is off.
    """
    ctx = get_context(request)
    if not ctx.settings.REQUIRE_AUTH:
        return None
    return ctx.authenticator.verify_header(authorization)
