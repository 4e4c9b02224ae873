"""HTML pages for listing, adding, editing and deleting albums."""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi import Path as PathParam
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from albums.persistence.album_table import AlbumTable
from albums.persistence.exceptions import InvalidReference, NotFound

from .deps import get_album_table
from .forms import AlbumForm, form_errors

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

# Jinja2Templates enables autoescaping and exposes url_for to templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(prefix="/album", tags=["album"])


def _redirect(request: Request, name: str, **path_params) -> RedirectResponse:
    """303 so the browser follows a POST with a GET."""
    return RedirectResponse(str(request.url_for(name, **path_params)), status_code=303)


def _render(request: Request, template: str, **context) -> HTMLResponse:
    context.setdefault("title", request.app.title)
    return templates.TemplateResponse(request, template, context)


# === List ===


@router.get("", response_class=HTMLResponse, name="album_index")
async def index(request: Request, table: AlbumTable = Depends(get_album_table)):
    """List every album."""
    albums = await table.fetch_all()
    return _render(request, "album/index.html", albums=albums)


# === Add ===


@router.get("/add", response_class=HTMLResponse, name="album_add")
async def add(request: Request):
    return _render(request, "album/add.html", form={"artist": "", "title": ""}, errors={})


@router.post("/add", response_class=HTMLResponse, name="album_add_submit")
async def add_submit(
    request: Request,
    artist: str = Form(default=""),
    title: str = Form(default=""),
    table: AlbumTable = Depends(get_album_table),
):
    """Validate and insert a new album, then go back to the list."""
    submitted = {"artist": artist, "title": title}
    try:
        form = AlbumForm(**submitted)
    except ValidationError as e:
        return _render(request, "album/add.html", form=submitted, errors=form_errors(e))

    album = await table.save_album(form.to_album())
    logger.info(f"Created album #{album.id}: {album.artist} - {album.title}")
    return _redirect(request, "album_index")


# === Edit ===


@router.get("/edit/{album_id}", response_class=HTMLResponse, name="album_edit")
async def edit(
    request: Request,
    album_id: int = PathParam(ge=0),
    table: AlbumTable = Depends(get_album_table),
):
    if album_id == 0:
        return _redirect(request, "album_add")

    try:
        album = await table.get_album(album_id)
    except NotFound:
        logger.warning(f"Edit requested for missing album #{album_id}")
        return _redirect(request, "album_index")

    form = AlbumForm.from_album(album)
    return _render(request, "album/edit.html", album_id=album_id, form=form.model_dump(), errors={})


@router.post("/edit/{album_id}", response_class=HTMLResponse, name="album_edit_submit")
async def edit_submit(
    request: Request,
    album_id: int = PathParam(ge=0),
    artist: str = Form(default=""),
    title: str = Form(default=""),
    table: AlbumTable = Depends(get_album_table),
):
    """Validate and update an existing album, then go back to the list."""
    if album_id == 0:
        return _redirect(request, "album_add")

    submitted = {"id": album_id, "artist": artist, "title": title}
    try:
        form = AlbumForm(**submitted)
    except ValidationError as e:
        return _render(
            request, "album/edit.html", album_id=album_id, form=submitted, errors=form_errors(e)
        )

    try:
        await table.save_album(form.to_album())
    except InvalidReference:
        logger.warning(f"Update requested for missing album #{album_id}")
        return _redirect(request, "album_index")

    logger.info(f"Updated album #{album_id}")
    return _redirect(request, "album_index")


# === Delete ===


@router.get("/delete/{album_id}", response_class=HTMLResponse, name="album_delete")
async def delete(
    request: Request,
    album_id: int = PathParam(ge=0),
    table: AlbumTable = Depends(get_album_table),
):
    """Ask for confirmation before deleting."""
    if album_id == 0:
        return _redirect(request, "album_index")

    try:
        album = await table.get_album(album_id)
    except NotFound:
        logger.warning(f"Delete requested for missing album #{album_id}")
        return _redirect(request, "album_index")

    return _render(request, "album/delete.html", album=album)


@router.post("/delete/{album_id}", name="album_delete_submit")
async def delete_submit(
    request: Request,
    album_id: int = PathParam(ge=0),
    confirm: str = Form(default="No", alias="del"),
    table: AlbumTable = Depends(get_album_table),
):
    if album_id != 0 and confirm == "Yes":
        await table.delete_album(album_id)
        logger.info(f"Deleted album #{album_id}")
    return _redirect(request, "album_index")
