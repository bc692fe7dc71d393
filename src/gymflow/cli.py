"""CLI entry point for gymflow."""

import click

from . import __version__
from .commands import exercises, init, ranking, seed, serve
from .config import configure_logging, settings


@click.group()
@click.version_option(version=__version__, prog_name="gymflow")
def main():
    """gymflow: workout tracking API.

    Example usage:

        # Create the database and seed the exercise catalog
        gymflow init

        # Run the API for the mobile app
        gymflow serve --host 0.0.0.0

        # Check the leaderboard
        gymflow ranking -n 10
    """
    configure_logging(settings.LOG_LEVEL)


# Register commands
main.add_command(init)
main.add_command(seed)
main.add_command(serve)
main.add_command(exercises)
main.add_command(ranking)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
