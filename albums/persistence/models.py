"""Data model for a single album row."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass
class Album:
    """One row of the ``album`` table.

    ``id`` is ``None`` (or ``0``) until the row has been persisted; the
    storage engine assigns it on insert.
    """

    artist: str | None = None
    title: str | None = None

    # Storage identity (set by AlbumTable)
    id: int | None = None

    @property
    def is_new(self) -> bool:
        """True when this album has not been persisted yet."""
        return not self.id

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Album":
        """Build an album from a row or any mapping.

        Missing keys keep their defaults and unknown keys are ignored. No
        validation happens here; see ``albums.web.forms`` for that.
        """
        album = cls()
        album.exchange(data)
        return album

    def exchange(self, data: Mapping[str, Any]) -> None:
        """Overwrite every field from ``data`` in place."""
        self.id = data.get("id")
        self.artist = data.get("artist")
        self.title = data.get("title")

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "artist": self.artist,
            "title": self.title,
        }
