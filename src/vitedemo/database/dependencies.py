"""Request-scoped database access for the users routes."""

from __future__ import annotations

from collections.abc import Iterator
from functools import cache

from fastapi import Depends
from sqlalchemy.orm import Session

from vitedemo.database.service import DatabaseService
from vitedemo.settings import Settings, get_settings


@cache
def database_for(url: str) -> DatabaseService:
    """Return the one engine-owning service kept per connection URL."""
    return DatabaseService(url)


def get_database(settings: Settings = Depends(get_settings)) -> DatabaseService:
    return database_for(settings.database_url)


def get_session(db: DatabaseService = Depends(get_database)) -> Iterator[Session]:
    """Open a session that commits when the request handler returns."""
    with db.session() as session:
        yield session
