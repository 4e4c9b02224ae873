"""Input validation for album add/edit submissions."""

import re
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from albums.persistence.models import Album

TAG_PATTERN = re.compile(r"<[^>]*>")
MAX_LENGTH = 100

_MESSAGES = {
    "missing": "Value is required and can't be empty",
    "string_too_short": "Value is required and can't be empty",
    "string_too_long": f"The input is more than {MAX_LENGTH} characters long",
    "int_parsing": "The input must be a whole number",
    "greater_than_equal": "The input must be zero or greater",
}


class AlbumFields(BaseModel):
    """Artist and title, filtered then validated.

    Tags are stripped and whitespace trimmed before the length checks run.
    Shared by the HTML form and the JSON API body.
    """

    artist: str = Field(min_length=1, max_length=MAX_LENGTH)
    title: str = Field(min_length=1, max_length=MAX_LENGTH)

    @field_validator("artist", "title", mode="before")
    @classmethod
    def strip_tags_and_trim(cls, v: Any) -> Any:
        if isinstance(v, str):
            return TAG_PATTERN.sub("", v).strip()
        return v


class AlbumForm(AlbumFields):
    """Submitted album form: the shared fields plus the hidden id."""

    id: int = Field(default=0, ge=0)

    @field_validator("id", mode="before")
    @classmethod
    def blank_id_is_new(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return 0
        return v

    @classmethod
    def from_album(cls, album: Album) -> "AlbumForm":
        return cls(id=album.id or 0, artist=album.artist or "", title=album.title or "")

    def to_album(self) -> Album:
        return Album(id=self.id or None, artist=self.artist, title=self.title)


def form_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Flatten a ValidationError into ``{field: [messages]}`` for templates."""
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else "form"
        errors.setdefault(field, []).append(_MESSAGES.get(err["type"], err["msg"]))
    return errors
