# Copyright (c) SkillSnap.
# SPDX-License-Identifier: MIT
"""SkillSnap CLI: operational commands.

Commands:
    init-db    Create any missing tables for the configured database.
    serve      Run the HTTP API under uvicorn.

Environment:
    DATABASE_URL    Async SQLAlchemy URL.
"""

from __future__ import annotations

import asyncio

import typer

from skillsnap_api.config.settings import get_settings
from skillsnap_api.infrastructure.database import session as db_session
from skillsnap_api.infrastructure.logging.logger import configure_root_logging, get_json_logger

configure_root_logging()
log = get_json_logger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)


async def _init_db() -> str:
    settings = get_settings()
    db_session.init_engine_and_sessionmaker(settings)
    try:
        await db_session.create_all()
        return db_session.get_engine().dialect.name
    finally:
        await db_session.dispose_engine()


@app.command("init-db")
def init_db() -> None:
    """Create portfolio, project, skill and account tables if they are missing."""
    backend = asyncio.run(_init_db())
    log.info("cli.init_db.done", extra={"backend": backend})
    typer.echo(f"database initialized ({backend})")


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address."),  # noqa: B008
    port: int = typer.Option(8000, min=1, max=65535, envvar="PORT", help="Bind port."),  # noqa: B008
    reload: bool = typer.Option(False, help="Reload on code changes (development)."),  # noqa: B008
) -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    log.info("cli.serve", extra={"host": host, "port": port, "reload": reload})
    uvicorn.run("skillsnap_api.main:create_app", factory=True, host=host, port=port, reload=reload)


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
