"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from albums.config import Config, load_config
from albums.persistence.schema import create_schema
from albums.registry import ENGINE, build_registry

from .api import api_router
from .routes import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the service registry and manage the engine lifecycle."""
    config: Config = app.state.config
    engine = getattr(app.state, "engine", None)

    # Registry may be pre-built by the caller and stored on app.state
    if not getattr(app.state, "registry", None):
        app.state.registry = build_registry(config, engine=engine)

    registry = app.state.registry
    if config.database.create_schema:
        await create_schema(registry.get(ENGINE))

    logger.info(f"{app.title} started")
    yield

    # Only dispose an engine the registry created itself
    if engine is None and registry.is_built(ENGINE):
        await registry.get(ENGINE).dispose()


def create_app(config: Config | None = None, engine=None) -> FastAPI:
    """Create FastAPI application.

    Args:
        config: Optional Config. If None, loaded from the default locations.
        engine: Optional AsyncEngine. If None, the registry builds one lazily
            from ``config.database`` and disposes it at shutdown.
    """
    if config is None:
        config = load_config()

    app = FastAPI(
        title=config.web.title,
        description="Browse, add, edit and delete albums",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.config = config

    # Pre-set engine if provided (lifespan will use it instead of creating one)
    if engine is not None:
        app.state.engine = engine

    @app.get("/", include_in_schema=False)
    async def home() -> RedirectResponse:
        return RedirectResponse(app.url_path_for("album_index"), status_code=303)

    app.include_router(router)
    app.include_router(api_router, prefix="/api")

    return app
