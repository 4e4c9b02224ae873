"""Web layer for the album catalogue."""

from .app import create_app

__all__ = [
    "create_app",
]
