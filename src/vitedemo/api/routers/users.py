"""User CRUD endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from vitedemo.api.dependencies import get_user_service
from vitedemo.api.models import UserRequestPayload, UserResponse
from vitedemo.api.services import (
    EmailAlreadyExistsError,
    UserDoesNotExistError,
    UserService,
)
from vitedemo.database import get_session

router = APIRouter(prefix="/api/users", tags=["users"])


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


def _bad_request(exc: EmailAlreadyExistsError) -> Response:
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_user(
    payload: UserRequestPayload,
    session: Session = Depends(get_session),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse | Response:
    """Create a user; emails must be unique."""

    try:
        user = user_service.create_user(session=session, payload=payload)
    except EmailAlreadyExistsError as exc:
        return _bad_request(exc)
    return UserResponse.model_validate(user, from_attributes=True)


@router.get("", response_model=list[UserResponse])
def list_users(
    session: Session = Depends(get_session),
    user_service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """Return every user ordered by ID."""

    users = user_service.list_users(session=session)
    return [UserResponse.model_validate(user, from_attributes=True) for user in users]


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    session: Session = Depends(get_session),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse | Response:
    """Return a single user."""

    try:
        user = user_service.get_user(session=session, user_id=user_id)
    except UserDoesNotExistError:
        return _not_found()
    return UserResponse.model_validate(user, from_attributes=True)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    payload: UserRequestPayload,
    session: Session = Depends(get_session),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse | Response:
    """Replace the email and name of a user."""

    try:
        user = user_service.update_user(
            session=session, user_id=user_id, payload=payload
        )
    except UserDoesNotExistError:
        return _not_found()
    except EmailAlreadyExistsError as exc:
        return _bad_request(exc)
    return UserResponse.model_validate(user, from_attributes=True)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    session: Session = Depends(get_session),
    user_service: UserService = Depends(get_user_service),
) -> Response:
    """Delete a user."""

    try:
        user_service.delete_user(session=session, user_id=user_id)
    except UserDoesNotExistError:
        return _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
