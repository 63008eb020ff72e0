"""
Pytest configuration and shared fixtures for backend tests.

This module provides fixtures for the sample catalog, the filter engine and
an HTTP client wired to an app whose state is loaded from in-memory sheets.
"""

import gc
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

# Add backend directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Type hints only - not imported at runtime
if TYPE_CHECKING:
    from typing import AsyncGenerator

    from httpx import AsyncClient
    from infrastructure.row_store import InMemoryRowStore
    from services.catalog_service import ActionCatalog
    from services.filter_engine import FilterEngine


def pytest_collection_modifyitems(items):
    """Auto-apply markers based on test directory."""
    for item in items:
        filepath = str(item.fspath)

        if "/tests/unit/" in filepath:
            item.add_marker(pytest.mark.unit)
        elif "/tests/integration/" in filepath:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def cleanup_after_test():
    """Run garbage collection after each test to free memory."""
    yield
    gc.collect()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep tests independent of the developer's environment and .env file."""
    from core import reset_settings

    for name in ("DATA_DIR", "UNLOCKED_KEYS_FILE", "DEBUG", "LOG_LEVEL", "FRONTEND_URL"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


# ============================================================================
# Catalog fixtures
# ============================================================================


@pytest.fixture
def catalog(sample_store: "InMemoryRowStore") -> "ActionCatalog":
    """Catalog built from the sample sheets."""
    from services.catalog_service import build_catalog

    return build_catalog(sample_store)


@pytest.fixture
def filter_engine(catalog: "ActionCatalog") -> "FilterEngine":
    """Fresh filter engine over the sample catalog."""
    from services.filter_engine import FilterEngine

    return FilterEngine(catalog)


# ============================================================================
# App/Client fixtures
# ============================================================================


@pytest.fixture
def app(sample_store: "InMemoryRowStore"):
    """App with its state loaded from the sample sheets."""
    from core.app_factory import create_app, init_app_state

    application = create_app(sample_store)
    init_app_state(application, sample_store)
    return application


@pytest.fixture
async def client(app) -> "AsyncGenerator[AsyncClient, None]":
    """Create a test client for the sample app."""
    from httpx import ASGITransport, AsyncClient

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def sheets_dir() -> Path:
    """The sheets shipped with the backend."""
    return Path(__file__).parent.parent / "data" / "sheets"


# ============================================================================
# Sheet fixtures (imported from fixtures module)
# ============================================================================

from tests.fixtures.sheet_fixtures import (  # noqa: E402, F401
    sample_sheets,
    sample_store,
)
