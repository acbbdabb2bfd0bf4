"""Users API entrypoint."""

from __future__ import annotations

import logging

import uvicorn

from vitedemo.api import create_api
from vitedemo.settings import get_settings

app = create_api()


def _run_uvicorn(*, reload: bool) -> None:
    """Start uvicorn with a consistent configuration.

    The schema is managed by Alembic: run ``alembic upgrade head`` first.
    """
    config = get_settings()
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(
        "vitedemo.main:app",
        host=config.api_host,
        port=config.api_port,
        reload=reload,
    )


def run_dev() -> None:
    """Run the development ASGI server with auto-reload."""
    _run_uvicorn(reload=True)


def run_prod() -> None:
    """Run the production ASGI server without auto-reload."""
    _run_uvicorn(reload=False)
