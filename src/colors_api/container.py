"""Service container for the Colors API.

Services are created on first access and reused afterwards. The session
store lives here, so every request handled by one process shares it. It is
built at most once per container, under a lock.

Usage:
    from colors_api.container import get_container

    container = get_container()
    palette = container.palette_service.generate_complete_color_system(
        "#3B82F6", "#10B981"
    )
"""

import threading
from functools import cached_property
from typing import TYPE_CHECKING

from colors_api.config import Settings, get_settings
from colors_api.logging_config import get_logger

if TYPE_CHECKING:
    from colors_api.services.interfaces import (
        ExportService,
        PaletteService,
        PaletteSessionStore,
    )

logger = get_logger(__name__)


class Container:
    """Lazily builds and caches the application services.

    Tests can build their own container with custom settings:

        container = Container(settings=Settings(session_ttl_hours=1))
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._store_lock = threading.Lock()
        self._session_store: "PaletteSessionStore | None" = None
        logger.debug(
            "container_created",
            environment=self._settings.environment.value,
            session_ttl_hours=self._settings.session_ttl_hours,
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    @cached_property
    def palette_service(self) -> "PaletteService":
        from colors_api.services.palette import PaletteServiceImpl

        return PaletteServiceImpl()

    @cached_property
    def export_service(self) -> "ExportService":
        from colors_api.services.export import ExportServiceImpl

        return ExportServiceImpl()

    @property
    def session_store(self) -> "PaletteSessionStore":
        with self._store_lock:
            if self._session_store is None:
                from colors_api.services.sessions import InMemoryPaletteSessionStore

                self._session_store = InMemoryPaletteSessionStore()
            return self._session_store

    def close(self) -> None:
        """Drop cached sessions held by this container."""
        with self._store_lock:
            store, self._session_store = self._session_store, None
        if store is not None:
            logger.info("session_store_released", sessions=len(store))


_container: Container | None = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Return the process-wide container, creating it on first use."""
    global _container
    with _container_lock:
        if _container is None:
            _container = Container()
        return _container


def reset_container() -> None:
    """Close and forget the global container."""
    global _container
    with _container_lock:
        container, _container = _container, None
    if container is not None:
        container.close()


# FastAPI dependency functions
def get_palette_service() -> "PaletteService":
    return get_container().palette_service


def get_export_service() -> "ExportService":
    return get_container().export_service


def get_session_store() -> "PaletteSessionStore":
    return get_container().session_store


def get_app_settings() -> Settings:
    return get_container().settings
