"""
Application factory for creating FastAPI app instances.

The spell catalog is built once inside the lifespan, before any request is
served. A failed load aborts startup: no partial catalog is ever published.
"""

from contextlib import asynccontextmanager
from typing import Optional

from domain.exceptions import CatalogLoadError, ConfigurationError
from domain.value_objects.enums import LifecycleEvent
from fastapi import FastAPI
from infrastructure.row_store import RowStore, YamlRowStore
from services.catalog_service import build_catalog
from services.filter_engine import FilterEngine
from services.unlock_service import StaticUnlockResolver, UnlockService

from core import get_logger, get_settings
from core.settings import Settings

logger = get_logger("AppFactory")


def init_app_state(app: FastAPI, store: RowStore, settings: Optional[Settings] = None) -> None:
    """
    Load the catalog and attach the catalog services to app state.

    Raises:
        CatalogLoadError: If any row fails to join or parse
        ConfigurationError: If a sheet or the unlock file is missing or malformed
    """
    settings = settings or get_settings()

    try:
        catalog = build_catalog(store)
    except (CatalogLoadError, ConfigurationError) as e:
        logger.error(f"Spell catalog failed to load: {e}")
        raise

    unlock_service = UnlockService(catalog)
    if settings.unlocked_keys_path:
        unlock_service.register_resolver(StaticUnlockResolver.from_yaml(settings.unlocked_keys_path))
        unlock_service.handle_event(LifecycleEvent.READY)

    app.state.catalog = catalog
    app.state.filter_engine = FilterEngine(catalog)
    app.state.unlock_service = unlock_service


def create_app(store: Optional[RowStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Row store to load the catalog from. Defaults to the YAML
            sheets in the configured data directory.

    Returns:
        Configured FastAPI application instance
    """
    from fastapi.middleware.cors import CORSMiddleware
    from routers import actions, filters, unlocks

    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifespan context manager for application startup and shutdown."""
        logger.info("Application startup...")
        row_store = store if store is not None else YamlRowStore(settings.sheets_dir)
        init_app_state(app, row_store, settings)
        logger.info("Application startup complete")

        yield

        logger.info("Application shutdown complete")

    app = FastAPI(title="Spellbook API", lifespan=lifespan)

    allowed_origins = settings.get_cors_origins()
    logger.info(f"Allowed CORS origins: {allowed_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["Health"])
    async def health():
        """Liveness check."""
        return {"status": "ok"}

    app.include_router(actions.router, prefix="/actions", tags=["Actions"])
    app.include_router(filters.router, prefix="/filters", tags=["Filters"])
    app.include_router(unlocks.router, prefix="/unlocks", tags=["Unlocks"])

    return app
