"""Configuration management for the album catalogue."""

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

SQLITE_DRIVERS = ("sqlite", "sqlite+aiosqlite")


@dataclass
class DatabaseConfig:
    """Database connection configuration.

    Credentials belong in ``config/local.yaml`` or the environment, never in
    the committed ``default.yaml``.
    """

    driver: str = "postgresql+asyncpg"
    host: str = "localhost"
    port: int = 5432
    database: str = "albums"
    user: str = "albums"
    password: str = ""
    # Full SQLAlchemy URL; overrides every field above when set
    url_override: str = ""
    pool_size: int = 5
    echo: bool = False
    # Create missing tables at startup (handy for SQLite and tests)
    create_schema: bool = False

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def url(self) -> str:
        """Async SQLAlchemy connection URL."""
        if self.url_override:
            return self.url_override
        if self.driver in SQLITE_DRIVERS:
            return f"sqlite+aiosqlite:///{self.database}"
        return f"{self.driver}://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"


@dataclass
class WebConfig:
    """HTTP server configuration."""

    host: str = "127.0.0.1"
    port: int = 8000
    title: str = "Album Catalogue"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class Config:
    """Main configuration container."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    web: WebConfig = field(default_factory=WebConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_SECTIONS = {
    "database": DatabaseConfig,
    "web": WebConfig,
    "logging": LoggingConfig,
}


def _merge_section(current, data: dict):
    """Return a copy of ``current`` with keys from ``data`` applied."""
    known = {f.name for f in fields(current)}
    values = {f.name: getattr(current, f.name) for f in fields(current)}
    for key, value in data.items():
        if key == "url":
            key = "url_override"
        if key not in known:
            logger.warning(f"Ignoring unknown config key '{key}' in section {type(current).__name__}")
            continue
        values[key] = value
    return type(current)(**values)


def _apply_file(config: Config, path: Path) -> None:
    with open(path) as f:
        data = yaml.safe_load(f)

    if not data:
        return

    for section in _SECTIONS:
        if section in data and data[section]:
            setattr(config, section, _merge_section(getattr(config, section), data[section]))


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from YAML files with environment variable overrides.

    Resolution order (later wins):
        1. dataclass defaults
        2. ``config/default.yaml`` (or ``config_path``)
        3. ``local.yaml`` in the same directory (not under version control)
        4. ``ALBUMS_*`` environment variables

    Args:
        config_path: Path to config file. Defaults to config/default.yaml

    Returns:
        Populated Config dataclass
    """
    if config_path is None:
        candidates = [
            Path("config/default.yaml"),
            Path(__file__).parent.parent / "config" / "default.yaml",
        ]
        for candidate in candidates:
            if candidate.exists():
                config_path = str(candidate)
                break

    config = Config()

    if config_path and Path(config_path).exists():
        _apply_file(config, Path(config_path))
        local_path = Path(config_path).parent / "local.yaml"
        if local_path.exists():
            _apply_file(config, local_path)

    # Environment variable overrides
    if os.environ.get("ALBUMS_DB_URL"):
        config.database.url_override = os.environ["ALBUMS_DB_URL"]
    if os.environ.get("ALBUMS_DB_DRIVER"):
        config.database.driver = os.environ["ALBUMS_DB_DRIVER"]
    if os.environ.get("ALBUMS_DB_HOST"):
        config.database.host = os.environ["ALBUMS_DB_HOST"]
    if os.environ.get("ALBUMS_DB_PORT"):
        config.database.port = int(os.environ["ALBUMS_DB_PORT"])
    if os.environ.get("ALBUMS_DB_NAME"):
        config.database.database = os.environ["ALBUMS_DB_NAME"]
    if os.environ.get("ALBUMS_DB_USER"):
        config.database.user = os.environ["ALBUMS_DB_USER"]
    if os.environ.get("ALBUMS_DB_PASSWORD"):
        config.database.password = os.environ["ALBUMS_DB_PASSWORD"]
    if os.environ.get("ALBUMS_DB_CREATE_SCHEMA"):
        config.database.create_schema = os.environ["ALBUMS_DB_CREATE_SCHEMA"].lower() == "true"
    if os.environ.get("ALBUMS_LOG_LEVEL"):
        config.logging.level = os.environ["ALBUMS_LOG_LEVEL"]

    return config


def setup_logging(config: LoggingConfig) -> None:
    """
    Configure logging based on configuration.

    Args:
        config: Logging configuration
    """
    level = getattr(logging, config.level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if config.file:
        log_path = Path(config.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.file))

    logging.basicConfig(
        level=level,
        format=config.format,
        handlers=handlers,
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logger.info(f"Logging configured at level {config.level}")
