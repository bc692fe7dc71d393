"""Read-only views of the catalog and leaderboard."""

import click

from ..config import settings
from ..db import ExerciseRepository, RankingRepository
from .base import async_command, echo_info, ensure_initialized, format_table


@click.command()
@click.pass_context
@async_command
async def exercises(ctx):
    """List the exercise catalog."""
    repo = ExerciseRepository(ensure_initialized(ctx))

    catalog = await repo.list_all()
    if not catalog:
        echo_info("Catalog is empty. Seed it with 'gymflow seed'")
        return

    rows = [[str(ex.id), ex.name, ex.to_dict()["photo"] or "-"] for ex in catalog]
    click.echo()
    click.echo(format_table(["ID", "Name", "Photo"], rows))
    click.echo()
    click.echo(f"Total: {len(catalog)} exercise(s)")


@click.command()
@click.option("--limit", "-n", type=int, default=None, help="Number of users to show")
@click.pass_context
@async_command
async def ranking(ctx, limit: int | None):
    """Show the points leaderboard."""
    repo = RankingRepository(ensure_initialized(ctx))

    entries = await repo.compute(limit=limit or settings.RANKING_LIMIT)
    if not entries:
        echo_info("No users registered yet")
        return

    rows = [[str(e.position), e.user_name, str(e.points)] for e in entries]
    click.echo()
    click.echo(format_table(["#", "User", "Points"], rows))
