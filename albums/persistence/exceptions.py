"""
Exceptions raised by the album table gateway.

Storage errors (connectivity, constraint violations) are not wrapped; they
reach the caller as SQLAlchemy / driver exceptions.
"""

from typing import Any


class AlbumTableError(Exception):
    """Base exception for album table errors."""

    def __init__(self, message: str, album_id: Any = None):
        self.album_id = album_id
        super().__init__(message)


class NotFound(AlbumTableError):
    """Raised when no row matches the requested id."""

    def __init__(self, album_id: int):
        super().__init__(f"Could not find row with identifier {album_id}", album_id)


class InvalidReference(AlbumTableError):
    """Raised when an update targets an id that does not exist."""

    def __init__(self, album_id: int):
        super().__init__(f"Cannot update album with identifier {album_id}; does not exist", album_id)


class InvalidArgument(AlbumTableError, ValueError):
    """Raised when an identifier is not a non-negative integer."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid album identifier: {value!r}", None)
