"""API server command."""

import os

import click

from ..config import settings
from .base import echo_info, ensure_initialized


@click.command()
@click.option("--host", default="127.0.0.1", help="Interface to listen on")
@click.option("--port", "-p", default=3030, type=int, help="Port to listen on (default: 3030)")
@click.option(
    "--require-auth/--no-require-auth",
    default=None,
    help="Demand a bearer token on workout, profile and ranking routes",
)
@click.option("--reload", is_flag=True, help="Restart when source files change")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, require_auth: bool | None, reload: bool):
    """Run the gymflow API for the mobile client.

    Examples:

        # Local only, port 3030
        gymflow serve

        # Reachable from a phone on the same network, tokens enforced
        gymflow serve --host 0.0.0.0 --require-auth
    """
    db_path = ensure_initialized(ctx)

    import uvicorn

    # Reload workers rebuild settings from the environment
    if require_auth is not None:
        os.environ["GYMFLOW_REQUIRE_AUTH"] = "true" if require_auth else "false"
        settings.REQUIRE_AUTH = require_auth

    echo_info(f"Serving {db_path} on http://{host}:{port}")
    if settings.REQUIRE_AUTH:
        echo_info("Bearer tokens required (obtain one from POST /login)")
    click.echo("Press Ctrl+C to stop.")

    if reload:
        uvicorn.run("gymflow.web:create_app", host=host, port=port, reload=True, factory=True)
        return

    from ..web import create_app

    uvicorn.run(create_app(settings), host=host, port=port, log_level=settings.LOG_LEVEL.lower())
