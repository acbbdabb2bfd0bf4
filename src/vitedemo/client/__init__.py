"""Typed async client for the users REST API."""

from vitedemo.client.errors import (
    UserApiError,
    UserCreateFailedError,
    UserDeleteFailedError,
    UserListFailedError,
    UserNotFoundError,
    UserUpdateFailedError,
)
from vitedemo.client.models import User, UserRequest
from vitedemo.client.users import (
    USERS_API_ROOT,
    UserApiClient,
    create_user_api_client,
)

__all__ = [
    "USERS_API_ROOT",
    "User",
    "UserApiClient",
    "UserApiError",
    "UserCreateFailedError",
    "UserDeleteFailedError",
    "UserListFailedError",
    "UserNotFoundError",
    "UserRequest",
    "UserUpdateFailedError",
    "create_user_api_client",
]
