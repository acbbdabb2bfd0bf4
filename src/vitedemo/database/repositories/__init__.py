"""Repositories wrapping SQLAlchemy sessions."""

from vitedemo.database.repositories.user import UserRepository

__all__ = ["UserRepository"]
