"""Helpers shared by the gymflow commands."""

import asyncio
from functools import wraps
from pathlib import Path

import click

from ..db import get_db_path


def async_command(f):
    """Let a click command be written as a coroutine."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> Path:
    """Return the database path, or exit with status 1 if it was never created."""
    db_path = get_db_path()
    if not db_path.exists():
        echo_error(f"No database at {db_path}. Run 'gymflow init' first.")
        ctx.exit(1)
    return db_path


def echo_success(message: str) -> None:
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    click.echo(click.style("[INFO] ", fg="blue") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Render rows under headers as left-aligned columns.

    Returns an empty string when there are no rows.
    """
    if not rows:
        return ""

    widths = [
        max(len(header), *(len(str(row[i])) for row in rows))
        for i, header in enumerate(headers)
    ]

    def render(cells) -> str:
        return "".join(str(c).ljust(w + padding) for c, w in zip(cells, widths)).rstrip()

    separator = "".join("-" * w + " " * padding for w in widths).rstrip()
    return "\n".join([render(headers), separator, *(render(row) for row in rows)])
