"""
Pytest configuration and fixtures for album catalogue tests.
"""

import os

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

from albums.config import Config, DatabaseConfig
from albums.persistence.album_table import AlbumTable
from albums.persistence.tables import metadata


@pytest.fixture
def db_url(tmp_path) -> str:
    """Database URL for tests.

    Defaults to a throwaway SQLite file; set ALBUMS_TEST_DB_URL to run the
    same tests against PostgreSQL.
    """
    return os.environ.get("ALBUMS_TEST_DB_URL", f"sqlite+aiosqlite:///{tmp_path / 'albums.db'}")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep ALBUMS_* variables from the outer environment out of tests."""
    for key in list(os.environ):
        if key.startswith("ALBUMS_") and key != "ALBUMS_TEST_DB_URL":
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
async def engine(db_url):
    """Create a test engine with fresh schema."""
    eng = create_async_engine(db_url)
    try:
        async with eng.begin() as conn:
            await conn.run_sync(metadata.drop_all)
            await conn.run_sync(metadata.create_all)
        yield eng
    finally:
        async with eng.begin() as conn:
            await conn.run_sync(metadata.drop_all)
        await eng.dispose()


@pytest.fixture
async def table(engine):
    """Create an AlbumTable over a clean schema."""
    return AlbumTable(engine)


@pytest.fixture
def app_config(db_url) -> Config:
    """Config pointing the web app at the test database, creating tables on startup."""
    return Config(database=DatabaseConfig(url_override=db_url, create_schema=True))
