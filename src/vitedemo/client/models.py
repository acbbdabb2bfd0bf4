"""Pydantic models decoded from users API responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class User(BaseModel):
    """A user as returned by the server.

    Timestamps are kept as the strings the server sent. Unknown fields are
    retained so that ``model_dump(by_alias=True)`` reproduces the response body.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    id: int
    email: str
    name: str
    created_at: str
    updated_at: str


class UserRequest(BaseModel):
    """Fields a caller may submit when creating or updating a user."""

    email: str
    name: str
