"""Persistence layer -- a table gateway over SQLAlchemy Core (asyncpg / aiosqlite)."""

from .album_table import AlbumTable
from .exceptions import AlbumTableError, InvalidArgument, InvalidReference, NotFound
from .models import Album
from .schema import create_schema, drop_schema, load_sample_data
from .tables import albums, metadata

__all__ = [
    "Album",
    "AlbumTable",
    "AlbumTableError",
    "InvalidArgument",
    "InvalidReference",
    "NotFound",
    "albums",
    "metadata",
    "create_schema",
    "drop_schema",
    "load_sample_data",
]
