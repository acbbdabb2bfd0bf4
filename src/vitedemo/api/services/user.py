"""User management domain logic."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from vitedemo.api.models import UserRequest
from vitedemo.database import UserRepository, UserSchema

logger = logging.getLogger(__name__)


class EmailAlreadyExistsError(Exception):
    """Raised when another user already owns the requested email."""

    def __init__(self, email: str) -> None:
        super().__init__(f"이미 존재하는 이메일입니다: {email}")
        self.email = email


class UserDoesNotExistError(Exception):
    """Raised when no user matches the requested ID."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"사용자를 찾을 수 없습니다: id={user_id}")
        self.user_id = user_id


@contextmanager
def _unique_email(session: Session, email: str) -> Iterator[None]:
    """Translate a unique-constraint violation on flush into a domain error."""
    try:
        yield
    except IntegrityError as exc:
        session.rollback()
        logger.warning("Duplicate email on flush: %s", email)
        raise EmailAlreadyExistsError(email) from exc


class UserService:
    """Creates, reads, updates and deletes users."""

    def create_user(self, *, session: Session, payload: UserRequest) -> UserSchema:
        logger.info("Create user requested: email=%s", payload.email)
        repository = UserRepository(session)
        if repository.get_by_email(payload.email) is not None:
            logger.warning("Duplicate email: %s", payload.email)
            raise EmailAlreadyExistsError(payload.email)

        with _unique_email(session, payload.email):
            user = repository.add(UserSchema(email=payload.email, name=payload.name))
        logger.info("User created: id=%s, email=%s", user.id, user.email)
        return user

    def list_users(self, *, session: Session) -> list[UserSchema]:
        logger.info("List users requested")
        users = UserRepository(session).list_all()
        logger.info("Users found: %d", len(users))
        return users

    def get_user(self, *, session: Session, user_id: int) -> UserSchema:
        logger.info("Get user requested: id=%s", user_id)
        return self._require_user(UserRepository(session), user_id)

    def update_user(
        self, *, session: Session, user_id: int, payload: UserRequest
    ) -> UserSchema:
        logger.info("Update user requested: id=%s", user_id)
        repository = UserRepository(session)
        user = self._require_user(repository, user_id)

        if user.email != payload.email and repository.get_by_email(payload.email):
            logger.warning("Duplicate email: %s", payload.email)
            raise EmailAlreadyExistsError(payload.email)

        user.email = payload.email
        user.name = payload.name
        with _unique_email(session, payload.email):
            user = repository.save(user)
        logger.info("User updated: id=%s", user.id)
        return user

    def delete_user(self, *, session: Session, user_id: int) -> None:
        logger.info("Delete user requested: id=%s", user_id)
        repository = UserRepository(session)
        repository.delete(self._require_user(repository, user_id))
        logger.info("User deleted: id=%s", user_id)

    @staticmethod
    def _require_user(repository: UserRepository, user_id: int) -> UserSchema:
        user = repository.get_by_id(user_id)
        if user is None:
            logger.warning("User not found: id=%s", user_id)
            raise UserDoesNotExistError(user_id)
        return user
