"""Service layer for API-specific business logic."""

from vitedemo.api.services.user import (
    EmailAlreadyExistsError,
    UserDoesNotExistError,
    UserService,
)

__all__ = [
    "EmailAlreadyExistsError",
    "UserDoesNotExistError",
    "UserService",
]
