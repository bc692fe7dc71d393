"""Data access layer for gymflow."""

import logging
from datetime import datetime
from pathlib import Path

import aiosqlite

from ..errors import ConflictError, InternalError, NotFoundError, ValidationError
from ..models.exercises import Exercise, normalize_photo
from ..models.ranking import RankingEntry, rank_rows
from ..models.user import User, UserChanges
from ..models.workout import (
    CardioDetails,
    CardioExerciseEntry,
    GymDetails,
    GymExerciseEntry,
    Workout,
    WorkoutExerciseEntry,
    WorkoutKind,
)
from .engine import connect, get_db_path

logger = logging.getLogger(__name__)

WORKOUT_TABLES = {
    WorkoutKind.GYM: "gym_workouts",
    WorkoutKind.CARDIO: "cardio_workouts",
}

ENTRY_TABLES = {
    WorkoutKind.GYM: "gym_workout_exercises",
    WorkoutKind.CARDIO: "cardio_workout_exercises",
}


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def _integrity_error(
    exc: aiosqlite.IntegrityError, conflict: str, missing: str
) -> Exception:
    """Translate a constraint violation into the matching domain error."""
    text = str(exc)
    if "UNIQUE" in text:
        return ConflictError(conflict)
    if "FOREIGN KEY" in text:
        return NotFoundError(missing)
    return InternalError(f"Constraint violation: {text}")


class UserRepository:
    """Repository for user accounts."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, user: User) -> int:
        """Create a new user. Email and user name must both be unused."""
        async with connect(self.db_path) as db:
            try:
                cursor = await db.execute(
                    """
                    INSERT INTO users (user_name, email, password, profile_picture_url)
                    VALUES (?, ?, ?, ?)
                    """,
                    (user.user_name, user.email, user.password_hash, user.profile_picture_url),
                )
            except aiosqlite.IntegrityError as e:
                raise self._conflict(e) from e
            await db.commit()
            return cursor.lastrowid

    async def get(self, user_id: int) -> User | None:
        """Get a user by ID."""
        async with connect(self.db_path) as db:
            cursor = await db.execute("SELECT * FROM users WHERE id = ?", (user_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_user(row)

    async def find_by_identifier(self, identifier: str) -> User | None:
        """Find a user by email or user name (login accepts either)."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT * FROM users WHERE email = ? OR user_name = ? ORDER BY id LIMIT 1",
                (identifier, identifier),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_user(row)

    async def update(self, user_id: int, changes: UserChanges) -> None:
        """Apply a partial profile update."""
        columns = changes.columns()
        if not columns:
            if await self.get(user_id) is None:
                raise NotFoundError("User not found")
            raise ValidationError("No changes submitted")

        assignments = ", ".join(f"{col} = ?" for col in columns)
        async with connect(self.db_path) as db:
            try:
                cursor = await db.execute(
                    f"UPDATE users SET {assignments} WHERE id = ?",
                    (*columns.values(), user_id),
                )
            except aiosqlite.IntegrityError as e:
                raise self._conflict(e) from e
            await db.commit()
            if cursor.rowcount == 0:
                raise NotFoundError("User not found")

    async def delete(self, user_id: int) -> None:
        """Delete a user together with everything they own."""
        async with connect(self.db_path) as db:
            cursor = await db.execute("DELETE FROM users WHERE id = ?", (user_id,))
            await db.commit()
            if cursor.rowcount == 0:
                raise NotFoundError("User not found")

    def _conflict(self, exc: aiosqlite.IntegrityError) -> Exception:
        if "users.user_name" in str(exc):
            return ConflictError("User name already taken")
        return _integrity_error(exc, "Email already registered", "User not found")

    def _row_to_user(self, row: aiosqlite.Row) -> User:
        """Convert a database row to a User."""
        return User(
            id=row["id"],
            user_name=row["user_name"],
            email=row["email"],
            password_hash=row["password"],
            profile_picture_url=row["profile_picture_url"],
            created_at=_parse_timestamp(row["created_at"]),
        )


class ExerciseRepository:
    """Repository for the exercise catalog."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def list_all(self) -> list[Exercise]:
        """List all exercises alphabetically."""
        async with connect(self.db_path) as db:
            cursor = await db.execute("SELECT * FROM exercises ORDER BY name ASC")
            rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    async def get(self, exercise_id: int) -> Exercise | None:
        """Get an exercise by ID."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE id = ?", (exercise_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_exercise(row)

    async def add(self, exercise: Exercise) -> int:
        """Add a new exercise."""
        async with connect(self.db_path) as db:
            try:
                cursor = await db.execute(
                    "INSERT INTO exercises (name, photo) VALUES (?, ?)",
                    (exercise.name, exercise.photo),
                )
            except aiosqlite.IntegrityError as e:
                raise _integrity_error(e, f"Exercise '{exercise.name}' already exists", "Exercise not found") from e
            await db.commit()
            return cursor.lastrowid

    def _row_to_exercise(self, row: aiosqlite.Row) -> Exercise:
        return Exercise(id=row["id"], name=row["name"], photo=row["photo"])


class WorkoutRepository:
    """Repository for gym and cardio workouts."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, workout: Workout) -> int:
        """Create a workout in the table for its kind."""
        table = WORKOUT_TABLES[workout.kind]
        async with connect(self.db_path) as db:
            try:
                cursor = await db.execute(
                    f"INSERT INTO {table} (user_id, name) VALUES (?, ?)",
                    (workout.user_id, workout.name),
                )
            except aiosqlite.IntegrityError as e:
                raise _integrity_error(e, "Workout already exists", "User not found") from e
            await db.commit()
            return cursor.lastrowid

    async def get(self, workout_id: int, kind: WorkoutKind) -> Workout | None:
        """Get a workout by ID and kind."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                f"SELECT * FROM {WORKOUT_TABLES[kind]} WHERE id = ?", (workout_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_workout(row, kind)

    async def list_for_user(self, user_id: int) -> list[Workout]:
        """List a user's gym and cardio workouts as one listing."""
        workouts = []
        async with connect(self.db_path) as db:
            for kind, table in WORKOUT_TABLES.items():
                cursor = await db.execute(
                    f"SELECT * FROM {table} WHERE user_id = ? ORDER BY id",
                    (user_id,),
                )
                rows = await cursor.fetchall()
                workouts.extend(self._row_to_workout(row, kind) for row in rows)
        return workouts

    async def rename(self, workout_id: int, kind: WorkoutKind, name: str) -> None:
        """Rename a workout. The kind only selects the table; it never changes."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                f"UPDATE {WORKOUT_TABLES[kind]} SET name = ? WHERE id = ?",
                (name, workout_id),
            )
            await db.commit()
            if cursor.rowcount == 0:
                logger.debug("Rename of missing %s workout %s", kind.value, workout_id)
                raise NotFoundError("Workout not found")

    async def delete(self, workout_id: int, kind: WorkoutKind) -> None:
        """Delete a workout after removing its exercises."""
        async with connect(self.db_path) as db:
            await db.execute(
                f"DELETE FROM {ENTRY_TABLES[kind]} WHERE workout_id = ?", (workout_id,)
            )
            cursor = await db.execute(
                f"DELETE FROM {WORKOUT_TABLES[kind]} WHERE id = ?", (workout_id,)
            )
            await db.commit()
            if cursor.rowcount == 0:
                logger.debug("Delete of missing %s workout %s", kind.value, workout_id)
                raise NotFoundError("Workout not found")

    def _row_to_workout(self, row: aiosqlite.Row, kind: WorkoutKind) -> Workout:
        return Workout(
            id=row["id"],
            user_id=row["user_id"],
            name=row["name"],
            kind=kind,
            created_at=_parse_timestamp(row["created_at"]),
        )


class WorkoutExerciseRepository:
    """Repository for exercises added to workouts and their logged data."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def add(
        self,
        workout_id: int,
        kind: WorkoutKind,
        exercise_id: int,
        user_id: int | None = None,
    ) -> int:
        """Add an exercise to a workout.

        Raises:
            ConflictError: the exercise is already in this workout
            NotFoundError: the workout (of this kind), the exercise or the gym owner does not exist
        """
        async with connect(self.db_path) as db:
            try:
                if kind is WorkoutKind.GYM:
                    cursor = await db.execute(
                        """
                        INSERT INTO gym_workout_exercises (workout_id, exercise_id, user_id)
                        VALUES (?, ?, ?)
                        """,
                        (workout_id, exercise_id, user_id),
                    )
                else:
                    cursor = await db.execute(
                        """
                        INSERT INTO cardio_workout_exercises (workout_id, exercise_id)
                        VALUES (?, ?)
                        """,
                        (workout_id, exercise_id),
                    )
            except aiosqlite.IntegrityError as e:
                logger.debug("Rejected exercise %s for %s workout %s: %s", exercise_id, kind.value, workout_id, e)
                raise _integrity_error(
                    e,
                    "Exercise already added to this workout",
                    "Workout, exercise or user not found",
                ) from e
            await db.commit()
            return cursor.lastrowid

    async def list_for_workout(
        self, workout_id: int, kind: WorkoutKind
    ) -> list[WorkoutExerciseEntry]:
        """List a workout's exercises, most recently added first."""
        if kind is WorkoutKind.GYM:
            query = """
                SELECT gwe.id, gwe.workout_id, gwe.exercise_id, gwe.user_id,
                       gwe.weight, gwe.reps, gwe.sets,
                       e.name AS exercise_name, e.photo AS exercise_photo
                FROM gym_workout_exercises gwe
                INNER JOIN exercises e ON gwe.exercise_id = e.id
                WHERE gwe.workout_id = ?
                ORDER BY gwe.id DESC
            """
        else:
            query = """
                SELECT ce.id, ce.workout_id, ce.exercise_id,
                       ce.description, ce.distance, ce.type,
                       e.name AS exercise_name, e.photo AS exercise_photo
                FROM cardio_workout_exercises ce
                INNER JOIN exercises e ON ce.exercise_id = e.id
                WHERE ce.workout_id = ?
                ORDER BY ce.id DESC
            """
        async with connect(self.db_path) as db:
            cursor = await db.execute(query, (workout_id,))
            rows = await cursor.fetchall()
            return [self._row_to_entry(row, kind) for row in rows]

    async def get(self, association_id: int, kind: WorkoutKind) -> WorkoutExerciseEntry | None:
        """Get a single entry with its exercise details."""
        table = ENTRY_TABLES[kind]
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                f"""
                SELECT t.*, e.name AS exercise_name, e.photo AS exercise_photo
                FROM {table} t
                INNER JOIN exercises e ON t.exercise_id = e.id
                WHERE t.id = ?
                """,
                (association_id,),
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_entry(row, kind)

    async def update_gym_details(self, association_id: int, details: GymDetails) -> int:
        """Overwrite weight, reps and sets of a gym entry.

        Returns:
            Number of affected rows (always 1 on success)
        """
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                """
                UPDATE gym_workout_exercises
                SET weight = ?, reps = ?, sets = ?
                WHERE id = ?
                """,
                (details.weight, details.reps, details.sets, association_id),
            )
            await db.commit()
            if cursor.rowcount == 0:
                raise NotFoundError("Exercise not found")
            return cursor.rowcount

    async def update_cardio_details(self, association_id: int, details: CardioDetails) -> int:
        """Overwrite description, distance and type of a cardio entry."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                """
                UPDATE cardio_workout_exercises
                SET description = ?, distance = ?, type = ?
                WHERE id = ?
                """,
                (details.description, details.distance, details.type, association_id),
            )
            await db.commit()
            if cursor.rowcount == 0:
                raise NotFoundError("Exercise not found")
            return cursor.rowcount

    async def delete(self, association_id: int, kind: WorkoutKind) -> None:
        """Remove a single exercise from a workout."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                f"DELETE FROM {ENTRY_TABLES[kind]} WHERE id = ?", (association_id,)
            )
            await db.commit()
            if cursor.rowcount == 0:
                raise NotFoundError("Exercise not found")

    def _row_to_entry(self, row: aiosqlite.Row, kind: WorkoutKind) -> WorkoutExerciseEntry:
        """Convert a joined row into the entry type for its kind."""
        if kind is WorkoutKind.GYM:
            return GymExerciseEntry(
                id=row["id"],
                workout_id=row["workout_id"],
                exercise_id=row["exercise_id"],
                user_id=row["user_id"],
                weight=row["weight"],
                reps=row["reps"],
                sets=row["sets"],
                exercise_name=row["exercise_name"],
                exercise_photo=normalize_photo(row["exercise_photo"]),
            )
        return CardioExerciseEntry(
            id=row["id"],
            workout_id=row["workout_id"],
            exercise_id=row["exercise_id"],
            description=row["description"],
            distance=row["distance"],
            type=row["type"],
            exercise_name=row["exercise_name"],
            exercise_photo=normalize_photo(row["exercise_photo"]),
        )


class PointsRepository:
    """Repository for per-user gamification points."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def award(self, user_id: int) -> int:
        """Add one point to a user, creating their record on first award.

        Returns:
            The user's new point total
        """
        async with connect(self.db_path) as db:
            try:
                await db.execute(
                    """
                    INSERT INTO points (user_id, points) VALUES (?, 1)
                    ON CONFLICT(user_id) DO UPDATE SET points = points + 1
                    """,
                    (user_id,),
                )
            except aiosqlite.IntegrityError as e:
                raise _integrity_error(e, "Points already recorded", "User not found") from e
            cursor = await db.execute(
                "SELECT points FROM points WHERE user_id = ?", (user_id,)
            )
            row = await cursor.fetchone()
            await db.commit()
            return row["points"]

    async def get(self, user_id: int) -> int:
        """Get a user's points (0 when they never scored)."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                "SELECT points FROM points WHERE user_id = ?", (user_id,)
            )
            row = await cursor.fetchone()
            return row["points"] if row else 0


class RankingRepository:
    """Leaderboard aggregation over users and points."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def compute(self, limit: int = 100) -> list[RankingEntry]:
        """Rank every user by points (desc), then user name (asc)."""
        async with connect(self.db_path) as db:
            cursor = await db.execute(
                """
                SELECT u.id, u.user_name, u.profile_picture_url,
                       COALESCE(p.points, 0) AS points
                FROM users u
                LEFT JOIN points p ON u.id = p.user_id
                ORDER BY points DESC, u.user_name ASC
                LIMIT ?
                """,
                (limit,),
            )
            rows = await cursor.fetchall()
            return rank_rows(
                [
                    (row["id"], row["user_name"], row["profile_picture_url"], row["points"])
                    for row in rows
                ]
            )
