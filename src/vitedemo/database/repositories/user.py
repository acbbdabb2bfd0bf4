"""Repository helpers for working with users."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from vitedemo.database.schemas import UserSchema


class UserRepository:
    """Encapsulates persistence operations for :class:`UserSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[UserSchema]:
        """Return every user ordered by ID."""
        stmt = select(UserSchema).order_by(UserSchema.id)
        return list(self._session.scalars(stmt))

    def get_by_id(self, user_id: int) -> UserSchema | None:
        """Return user entity by user's ID."""
        return self._session.get(UserSchema, user_id)

    def get_by_email(self, email: str) -> UserSchema | None:
        """Return user entity by user's email."""
        stmt = select(UserSchema).where(UserSchema.email == email)
        return self._session.scalar(stmt)

    def add(self, user: UserSchema) -> UserSchema:
        """Add new user to database."""
        self._session.add(user)
        self._session.flush()
        self._session.refresh(user)
        return user

    def save(self, user: UserSchema) -> UserSchema:
        """Flush pending changes of an existing user and reload server values."""
        self._session.flush()
        self._session.refresh(user)
        return user

    def delete(self, user: UserSchema) -> None:
        """Remove user from database."""
        self._session.delete(user)
        self._session.flush()
