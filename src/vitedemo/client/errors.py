"""Failures raised by :class:`~vitedemo.client.users.UserApiClient`."""

from __future__ import annotations


class UserApiError(Exception):
    """Raised when the users API answers with a non-2xx status."""

    default_message = "사용자 요청에 실패했습니다."

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        self.message = message or self.default_message
        super().__init__(self.message)


class UserListFailedError(UserApiError):
    default_message = "사용자 목록을 불러오는데 실패했습니다."


class UserNotFoundError(UserApiError):
    default_message = "사용자를 찾을 수 없습니다."


class UserCreateFailedError(UserApiError):
    default_message = "사용자 생성에 실패했습니다."


class UserUpdateFailedError(UserApiError):
    default_message = "사용자 수정에 실패했습니다."


class UserDeleteFailedError(UserApiError):
    default_message = "사용자 삭제에 실패했습니다."
