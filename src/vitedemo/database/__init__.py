"""Database connectivity helpers and persistence objects."""

from vitedemo.database.base import BaseSchema
from vitedemo.database.dependencies import get_database, get_session
from vitedemo.database.repositories import UserRepository
from vitedemo.database.schemas import UserSchema
from vitedemo.database.service import DatabaseService

__all__ = [
    "BaseSchema",
    "DatabaseService",
    "UserRepository",
    "UserSchema",
    "get_database",
    "get_session",
]
