"""Pydantic models for the users endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from vitedemo.client.models import UserRequest

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
EMAIL_MAX_LENGTH = 255
NAME_MAX_LENGTH = 100


class UserRequestPayload(UserRequest):
    """Validated request body accepted by the users endpoints."""

    email: str = Field(pattern=EMAIL_PATTERN, max_length=EMAIL_MAX_LENGTH)
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)

    @field_validator("email", "name")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        if not value.strip():
            msg = "value must not be blank"
            raise ValueError(msg)
        return value


class UserResponse(BaseModel):
    """Public representation of a stored user."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    email: str
    name: str
    created_at: datetime
    updated_at: datetime
