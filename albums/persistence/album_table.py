"""Async table gateway for the ``album`` table using SQLAlchemy Core."""

from typing import Any

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncEngine

from .exceptions import InvalidArgument, InvalidReference, NotFound
from .models import Album
from .tables import albums

# Largest value the integer primary key column can hold
MAX_ID = 2**31 - 1


class AlbumTable:
    """The only component that issues statements against ``album``.

    All methods are async and each awaits a single round trip. The engine is
    borrowed: its lifecycle is managed by whoever built it (the service
    registry or a test fixture), so this class never disposes it.
    """

    def __init__(self, engine: AsyncEngine):
        self._engine = engine
        self._table = albums

    @property
    def table_name(self) -> str:
        return self._table.name

    # === Reads ===

    async def fetch_all(self) -> list[Album]:
        """Every row, in whatever order the storage engine returns them."""
        async with self._engine.connect() as conn:
            result = await conn.execute(select(self._table))
            rows = result.mappings().all()
        return [Album.from_dict(row) for row in rows]

    async def get_album(self, album_id: Any) -> Album:
        """Fetch one album by primary key. Raises NotFound if absent."""
        album_id = self._check_id(album_id)
        if album_id > MAX_ID:
            raise NotFound(album_id)
        async with self._engine.connect() as conn:
            result = await conn.execute(select(self._table).where(self._table.c.id == album_id))
            row = result.mappings().first()
        if not row:
            raise NotFound(album_id)
        return Album.from_dict(row)

    async def count(self) -> int:
        async with self._engine.connect() as conn:
            result = await conn.execute(select(func.count()).select_from(self._table))
            return result.scalar_one()

    # === Writes ===

    async def save_album(self, album: Album) -> Album:
        """Insert a new album or update an existing one.

        A new album (id unset or 0) is inserted and gets its storage-assigned
        id written back. Otherwise a single UPDATE is issued; if it touches no
        rows the target does not exist and InvalidReference is raised.
        """
        album_id = 0 if album.id is None else self._check_id(album.id)
        data = {"artist": album.artist, "title": album.title}

        if album_id == 0:
            async with self._engine.begin() as conn:
                result = await conn.execute(
                    insert(self._table).values(**data).returning(self._table.c.id)
                )
                album.id = result.scalar_one()
            return album

        if album_id > MAX_ID:
            raise InvalidReference(album_id)
        async with self._engine.begin() as conn:
            result = await conn.execute(
                update(self._table).where(self._table.c.id == album_id).values(**data)
            )
            updated = result.rowcount
        if not updated:
            raise InvalidReference(album_id)
        album.id = album_id
        return album

    async def delete_album(self, album_id: Any) -> None:
        """Delete by id. Deleting a missing id is a no-op."""
        album_id = self._check_id(album_id)
        if album_id > MAX_ID:
            return
        async with self._engine.begin() as conn:
            await conn.execute(delete(self._table).where(self._table.c.id == album_id))

    # === Helpers ===

    @staticmethod
    def _check_id(value: Any) -> int:
        """Return ``value`` as a non-negative int or raise InvalidArgument.

        Decimal digit strings (e.g. from a URL) are accepted; bools, floats
        and anything else are rejected instead of being coerced to 0. Ids
        above MAX_ID pass; callers treat them as absent rows.
        """
        if isinstance(value, bool):
            raise InvalidArgument(value)
        if isinstance(value, int):
            album_id = value
        elif isinstance(value, str) and value.isascii() and value.isdigit():
            album_id = int(value)
        else:
            raise InvalidArgument(value)
        if album_id < 0:
            raise InvalidArgument(value)
        return album_id
