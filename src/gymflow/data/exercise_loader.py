"""Exercise catalog loader from JSON."""

import json
import logging
from pathlib import Path

from ..db.engine import get_db_path, seed_exercises
from ..models.exercises import Exercise

logger = logging.getLogger(__name__)


def get_exercises_json_path() -> Path:
    """Get the path to the bundled exercise catalog JSON file."""
    return Path(__file__).parent / "exercises.json"


def load_exercises(json_path: Path | None = None) -> list[Exercise]:
    """Load catalog exercises from a JSON file.

    The file holds ``{"exercises": [{"name": ..., "photo": ...}, ...]}``.
    Entries without a name are skipped.

    Returns:
        List of Exercise objects loaded from JSON
    """
    json_path = json_path or get_exercises_json_path()
    if not json_path.exists():
        return []

    with open(json_path, encoding="utf-8") as f:
        data = json.load(f)

    exercises = []
    for ex_data in data.get("exercises", []):
        try:
            exercises.append(Exercise.from_dict(ex_data))
        except (KeyError, TypeError) as e:
            logger.warning("Skipping invalid exercise %r: %s", ex_data, e)
            continue

    return exercises


async def seed_exercises_from_json(
    db_path: Path | None = None, json_path: Path | None = None
) -> int:
    """Seed the catalog from a JSON file. Existing names are left untouched.

    Returns:
        Number of exercises inserted
    """
    if db_path is None:
        db_path = get_db_path()

    exercises = load_exercises(json_path)
    if not exercises:
        logger.warning("No exercises found in %s", json_path or get_exercises_json_path())
        return 0

    return await seed_exercises(exercises, db_path)
