"""Initialize database and seed commands."""

from pathlib import Path

import click

from ..data.exercise_loader import get_exercises_json_path, seed_exercises_from_json
from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success, ensure_initialized


@click.command()
@async_command
async def init():
    """Initialize the gymflow database.

    Creates the data directory and the SQLite schema, then seeds the
    exercise catalog from the bundled JSON file.
    """
    db_path = get_db_path()

    echo_info(f"Initializing gymflow database at {db_path}")

    await init_db(db_path)
    echo_success("Database initialized")

    count = await seed_exercises_from_json(db_path)
    echo_success(f"Exercise catalog populated ({count} new exercises)")

    click.echo()
    click.echo("gymflow is ready. Start the API with:")
    click.echo("  gymflow serve")


@click.command()
@click.option(
    "--file",
    "-f",
    "json_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Catalog JSON file (default: bundled catalog)",
)
@click.pass_context
@async_command
async def seed(ctx, json_file: Path | None):
    """Add exercises to the catalog from a JSON file.

    Exercises whose name already exists are skipped.
    """
    db_path = ensure_initialized(ctx)

    source = json_file or get_exercises_json_path()
    count = await seed_exercises_from_json(db_path, json_file)
    echo_success(f"Seeded {count} new exercise(s) from {source}")
