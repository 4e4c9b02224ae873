"""Service registry: named factories resolved lazily.

The registry is built once at startup (``build_registry``) and stored on the
FastAPI app. Request handlers never use it directly; ``albums.web.deps`` pulls
services out of it and hands them to routes as explicit parameters.
"""

import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from albums.config import Config, DatabaseConfig
from albums.persistence.album_table import AlbumTable

logger = logging.getLogger(__name__)

ENGINE = "db.engine"
ALBUM_TABLE = "AlbumTable"

Factory = Callable[["ServiceRegistry"], Any]


class ServiceNotFound(KeyError):
    """Raised when no factory is registered under a name."""


class ServiceRegistry:
    """Maps stable names to factories.

    Shared services are built on first ``get`` and cached; non-shared ones are
    rebuilt on every call.
    """

    def __init__(self):
        self._factories: dict[str, tuple[Factory, bool]] = {}
        self._instances: dict[str, Any] = {}

    def register(self, name: str, factory: Factory, shared: bool = True, override: bool = False) -> None:
        if name in self._factories and not override:
            raise ValueError(f"Service '{name}' is already registered")
        self._factories[name] = (factory, shared)
        self._instances.pop(name, None)

    def set(self, name: str, instance: Any, override: bool = False) -> None:
        """Register an already-built shared instance."""
        if name in self._factories and not override:
            raise ValueError(f"Service '{name}' is already registered")
        self._factories[name] = (lambda _registry: instance, True)
        self._instances[name] = instance

    def has(self, name: str) -> bool:
        return name in self._factories

    def get(self, name: str) -> Any:
        if name in self._instances:
            return self._instances[name]
        try:
            factory, shared = self._factories[name]
        except KeyError:
            raise ServiceNotFound(name) from None

        instance = factory(self)
        if shared:
            self._instances[name] = instance
            logger.debug(f"Created shared service '{name}'")
        return instance

    def is_built(self, name: str) -> bool:
        return name in self._instances


def create_engine_from_config(config: DatabaseConfig) -> AsyncEngine:
    """Build the async engine described by ``config``."""
    if config.is_sqlite:
        # SQLite pools ignore pool_size
        return create_async_engine(config.url, echo=config.echo)
    return create_async_engine(config.url, pool_size=config.pool_size, echo=config.echo)


def build_registry(config: Config, engine: AsyncEngine | None = None) -> ServiceRegistry:
    """Register the engine and the album table gateway.

    Args:
        config: Loaded application config.
        engine: Optional pre-built engine. When given, the registry does not
            own it and callers must dispose it themselves.
    """
    registry = ServiceRegistry()

    if engine is not None:
        registry.set(ENGINE, engine)
    else:
        registry.register(ENGINE, lambda _registry: create_engine_from_config(config.database))

    registry.register(ALBUM_TABLE, lambda r: AlbumTable(r.get(ENGINE)))
    return registry
