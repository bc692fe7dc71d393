"""Pytest configuration and fixtures."""

import asyncio
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from gymflow.auth import Authenticator
from gymflow.config import Settings
from gymflow.db import (
    ExerciseRepository,
    PointsRepository,
    RankingRepository,
    UserRepository,
    WorkoutExerciseRepository,
    WorkoutRepository,
    init_db,
    seed_exercises,
)
from gymflow.models import Exercise
from gymflow.web import create_app

# Inserted in this order, so ids are 1..4
SAMPLE_EXERCISES = [
    Exercise(name="Bench Press", photo="/server/uploads/bench_press.png"),
    Exercise(name="Squat", photo="/uploads/squat.png"),
    Exercise(name="Deadlift"),
    Exercise(name="Running", photo="/uploads/running.png"),
]


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def db_path(temp_db_path):
    """A fresh database with the schema and a small exercise catalog."""
    asyncio.run(init_db(temp_db_path))
    asyncio.run(seed_exercises(SAMPLE_EXERCISES, temp_db_path))
    return temp_db_path


@pytest.fixture
def settings(db_path):
    return Settings(
        db_path=db_path,
        data_dir=db_path.parent,
        jwt_secret="test-secret",
        require_auth=False,
    )


@pytest.fixture
def client(settings):
    """FastAPI TestClient bound to the temporary database."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def authenticator():
    return Authenticator(secret="test-secret", expires_days=14)


@pytest.fixture
def users(db_path):
    return UserRepository(db_path)


@pytest.fixture
def exercises(db_path):
    return ExerciseRepository(db_path)


@pytest.fixture
def workouts(db_path):
    return WorkoutRepository(db_path)


@pytest.fixture
def workout_exercises(db_path):
    return WorkoutExerciseRepository(db_path)


@pytest.fixture
def points(db_path):
    return PointsRepository(db_path)


@pytest.fixture
def ranking(db_path):
    return RankingRepository(db_path)
