"""REST API endpoints for albums."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Response

from albums.persistence.album_table import AlbumTable
from albums.persistence.exceptions import InvalidReference, NotFound
from albums.persistence.models import Album

from .deps import get_album_table
from .forms import AlbumFields

logger = logging.getLogger(__name__)

api_router = APIRouter(tags=["albums"])


class AlbumBody(AlbumFields):
    """JSON body for create and update; validated like the HTML form."""


@api_router.get("/health")
def health():
    return {"status": "ok"}


@api_router.get("/albums")
async def list_albums(table: AlbumTable = Depends(get_album_table)):
    """List every album."""
    return [a.to_dict() for a in await table.fetch_all()]


@api_router.get("/albums/{album_id}")
async def get_album(album_id: int = Path(ge=0), table: AlbumTable = Depends(get_album_table)):
    """Get a single album by ID."""
    try:
        album = await table.get_album(album_id)
    except NotFound:
        raise HTTPException(404, f"Album {album_id} not found")
    return album.to_dict()


@api_router.post("/albums", status_code=201)
async def create_album(body: AlbumBody, table: AlbumTable = Depends(get_album_table)):
    """Create an album. The response carries the storage-assigned id."""
    album = await table.save_album(Album(artist=body.artist, title=body.title))
    logger.info(f"Created album #{album.id} via API")
    return album.to_dict()


@api_router.put("/albums/{album_id}")
async def update_album(
    body: AlbumBody,
    album_id: int = Path(ge=0),
    table: AlbumTable = Depends(get_album_table),
):
    """Replace artist and title of an existing album."""
    if album_id == 0:
        raise HTTPException(404, "Album 0 not found")
    try:
        album = await table.save_album(Album(id=album_id, artist=body.artist, title=body.title))
    except InvalidReference:
        raise HTTPException(404, f"Album {album_id} not found")
    logger.info(f"Updated album #{album_id} via API")
    return album.to_dict()


@api_router.delete("/albums/{album_id}", status_code=204)
async def delete_album(album_id: int = Path(ge=0), table: AlbumTable = Depends(get_album_table)):
    """Delete an album. Deleting a missing album still returns 204."""
    await table.delete_album(album_id)
    logger.info(f"Deleted album #{album_id} via API")
    return Response(status_code=204)
