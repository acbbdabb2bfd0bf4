"""Async client for the ``/api/users`` REST resource."""

from __future__ import annotations

from typing import Any

import httpx

from vitedemo.client.errors import (
    UserCreateFailedError,
    UserDeleteFailedError,
    UserListFailedError,
    UserNotFoundError,
    UserUpdateFailedError,
)
from vitedemo.client.models import User, UserRequest
from vitedemo.settings import Settings, get_settings

USERS_API_ROOT = "/api/users"

_JSON_HEADERS = {"Content-Type": "application/json"}


class UserApiClient:
    """Maps user CRUD operations onto single HTTP requests.

    Only the status class decides the outcome: 2xx succeeds, anything else
    raises a :class:`~vitedemo.client.errors.UserApiError` subclass. Create
    and update failures carry the response body text when the server sent
    one. Transport and decoding errors propagate unchanged.
    """

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def __aenter__(self) -> UserApiClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()

    async def get_all_users(self) -> list[User]:
        response = await self._http.get(USERS_API_ROOT)
        if not response.is_success:
            raise UserListFailedError(response.status_code)
        return [User.model_validate(item) for item in response.json()]

    async def get_user_by_id(self, user_id: int) -> User:
        response = await self._http.get(_user_path(user_id))
        if not response.is_success:
            raise UserNotFoundError(response.status_code)
        return User.model_validate(response.json())

    async def create_user(self, user_request: UserRequest) -> User:
        response = await self._http.post(
            USERS_API_ROOT,
            json=user_request.model_dump(mode="json"),
            headers=_JSON_HEADERS,
        )
        if not response.is_success:
            raise UserCreateFailedError(response.status_code, response.text)
        return User.model_validate(response.json())

    async def update_user(self, user_id: int, user_request: UserRequest) -> User:
        response = await self._http.put(
            _user_path(user_id),
            json=user_request.model_dump(mode="json"),
            headers=_JSON_HEADERS,
        )
        if not response.is_success:
            raise UserUpdateFailedError(response.status_code, response.text)
        return User.model_validate(response.json())

    async def delete_user(self, user_id: int) -> None:
        response = await self._http.delete(_user_path(user_id))
        if not response.is_success:
            raise UserDeleteFailedError(response.status_code)


def _user_path(user_id: int) -> str:
    return f"{USERS_API_ROOT}/{user_id}"


def create_user_api_client(settings: Settings | None = None) -> UserApiClient:
    """Build a client for the configured users API base URL.

    The returned client owns its :class:`httpx.AsyncClient`; use it as an
    async context manager or call :meth:`UserApiClient.aclose`.
    """

    config = settings or get_settings()
    http = httpx.AsyncClient(
        base_url=config.users_api_base_url,
        timeout=config.users_api_timeout_seconds,
    )
    return UserApiClient(http)
