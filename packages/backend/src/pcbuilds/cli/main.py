"""PC Builds CLI — run the API server and bootstrap the database.

Usage:
    pcbuilds serve                     # Run the API with uvicorn
    pcbuilds serve --reload            # Dev mode with auto-reload
    pcbuilds init-db                   # Create tables (dev / first run)
    pcbuilds gen-secret                # Print a random token secret
"""

from __future__ import annotations

import asyncio
import secrets

import click

from pcbuilds.config import get_settings


@click.group()
def cli():
    """PC Builds API management commands."""


@cli.command()
@click.option("--host", default=None, help="Bind address (default: PCBUILDS_HOST)")
@click.option("--port", default=None, type=int, help="Port (default: PCBUILDS_PORT)")
@click.option("--reload", is_flag=True, help="Auto-reload on code changes")
def serve(host: str | None, port: int | None, reload: bool):
    """Run the API server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "pcbuilds.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


@cli.command("init-db")
def init_db():
    """Create all tables that don't exist yet."""
    from pcbuilds.db.engine import build_engine
    from pcbuilds.db.models import Base

    settings = get_settings()

    async def _create():
        engine = build_engine(settings)
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        finally:
            await engine.dispose()

    asyncio.run(_create())
    click.secho("Tables created.", fg="green")


@cli.command("gen-secret")
def gen_secret():
    """Print a random value suitable for a token signing secret."""
    click.echo(secrets.token_urlsafe(32))


def main():
    cli()


if __name__ == "__main__":
    main()
