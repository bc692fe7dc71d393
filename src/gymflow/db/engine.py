"""Database engine setup and initialization."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import aiosqlite

from ..config import settings

logger = logging.getLogger(__name__)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    db_path = settings.DB_PATH if data_dir is None else data_dir / "gymflow.db"
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return db_path


@asynccontextmanager
async def connect(db_path: Path) -> AsyncIterator[aiosqlite.Connection]:
    """Open a connection with foreign keys enforced and dict-like rows."""
    async with aiosqlite.connect(db_path) as db:
        db.row_factory = aiosqlite.Row
        await db.execute("PRAGMA foreign_keys = ON")
        yield db


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with connect(db_path) as db:
        await db.execute("""
            CREATE TABLE IF NOT EXISTS users (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_name TEXT NOT NULL UNIQUE,
                email TEXT NOT NULL UNIQUE,
                password TEXT NOT NULL,
                profile_picture_url TEXT,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        # Exercise catalog (seeded, read-only through the API)
        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercises (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL UNIQUE,
                photo TEXT
            )
        """)

        # Workouts: one table per kind
        await db.execute("""
            CREATE TABLE IF NOT EXISTS gym_workouts (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                name TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE
            )
        """)
        await db.execute("""
            CREATE TABLE IF NOT EXISTS cardio_workouts (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                name TEXT NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE
            )
        """)

        # Exercises inside workouts, with the kind-specific logged data
        await db.execute("""
            CREATE TABLE IF NOT EXISTS gym_workout_exercises (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                workout_id INTEGER NOT NULL,
                exercise_id INTEGER NOT NULL,
                user_id INTEGER,
                weight REAL,
                reps INTEGER,
                sets INTEGER,
                UNIQUE (workout_id, exercise_id),
                FOREIGN KEY (workout_id) REFERENCES gym_workouts(id) ON DELETE CASCADE,
                FOREIGN KEY (exercise_id) REFERENCES exercises(id),
                FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE
            )
        """)
        await db.execute("""
            CREATE TABLE IF NOT EXISTS cardio_workout_exercises (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                workout_id INTEGER NOT NULL,
                exercise_id INTEGER NOT NULL,
                description TEXT,
                distance REAL,
                type TEXT,
                UNIQUE (workout_id, exercise_id),
                FOREIGN KEY (workout_id) REFERENCES cardio_workouts(id) ON DELETE CASCADE,
                FOREIGN KEY (exercise_id) REFERENCES exercises(id)
            )
        """)

        # Gamification points
        await db.execute("""
            CREATE TABLE IF NOT EXISTS points (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL UNIQUE,
                points INTEGER NOT NULL DEFAULT 0 CHECK (points >= 0),
                FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE
            )
        """)

        # Create indexes for common queries
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_gym_workouts_user
            ON gym_workouts(user_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_cardio_workouts_user
            ON cardio_workouts(user_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_gym_workout_exercises_workout
            ON gym_workout_exercises(workout_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_cardio_workout_exercises_workout
            ON cardio_workout_exercises(workout_id)
        """)

        await db.commit()

    logger.info("Database schema ready at %s", db_path)


async def seed_exercises(exercises: list, db_path: Path | None = None) -> int:
    """Insert catalog exercises, skipping names that already exist.

    Returns:
        Number of exercises actually inserted
    """
    if db_path is None:
        db_path = get_db_path()

    count = 0
    async with connect(db_path) as db:
        for exercise in exercises:
            cursor = await db.execute(
                "INSERT OR IGNORE INTO exercises (name, photo) VALUES (?, ?)",
                (exercise.name, exercise.photo),
            )
            count += cursor.rowcount
        await db.commit()

    return count
