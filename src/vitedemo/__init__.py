"""Vitedemo users service and its API client.

Importing the package stays light: the FastAPI app lives in
:mod:`vitedemo.main` and the client in :mod:`vitedemo.client`.
"""

from vitedemo.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
