"""SQLAlchemy schemas."""

from vitedemo.database.schemas.user import UserSchema

__all__ = ["UserSchema"]
