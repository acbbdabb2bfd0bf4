"""Models used for API request and response payloads."""

from vitedemo.api.models.user import (
    UserRequest,
    UserRequestPayload,
    UserResponse,
)

__all__ = [
    "UserRequest",
    "UserRequestPayload",
    "UserResponse",
]
