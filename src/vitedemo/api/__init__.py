"""API layer modules exposed by the users service."""

from vitedemo.api.app import create_api

__all__ = ["create_api"]
