"""Schema creation and sample data for the album table."""

import logging

from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncEngine

from .tables import albums, metadata

logger = logging.getLogger(__name__)

SAMPLE_ALBUMS = [
    {"artist": "The Military Wives", "title": "In My Dreams"},
    {"artist": "Adele", "title": "21"},
    {"artist": "Bruce Springsteen", "title": "Wrecking Ball (Deluxe)"},
    {"artist": "Lana Del Rey", "title": "Born To Die"},
    {"artist": "Gotye", "title": "Making Mirrors"},
]


async def create_schema(engine: AsyncEngine) -> None:
    """Create missing tables. Safe to call repeatedly."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.info("Database schema ready")


async def drop_schema(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
    logger.info("Database schema dropped")


async def load_sample_data(engine: AsyncEngine) -> int:
    """Insert the sample albums. Returns the number of rows inserted."""
    async with engine.begin() as conn:
        await conn.execute(insert(albums), SAMPLE_ALBUMS)
    logger.info(f"Loaded {len(SAMPLE_ALBUMS)} sample albums")
    return len(SAMPLE_ALBUMS)
