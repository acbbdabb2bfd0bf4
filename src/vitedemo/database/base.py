"""Declarative base shared by the users schema."""

from sqlalchemy.orm import DeclarativeBase


class BaseSchema(DeclarativeBase):
    """Base class whose metadata collects every table of the service."""
