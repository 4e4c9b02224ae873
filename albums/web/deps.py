"""FastAPI dependency injection."""

from fastapi import Request

from albums.persistence.album_table import AlbumTable
from albums.registry import ALBUM_TABLE, ServiceRegistry


def get_registry(request: Request) -> ServiceRegistry:
    """Provide the ServiceRegistry from app state."""
    return request.app.state.registry


def get_album_table(request: Request) -> AlbumTable:
    """Provide the AlbumTable, built by the registry on first use."""
    return get_registry(request).get(ALBUM_TABLE)
