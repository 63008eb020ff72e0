"""Shared dependencies for FastAPI endpoints."""

from domain.exceptions import CategoryValueNotFoundError
from domain.value_objects.categories import Category, CategoryValue, find_value
from fastapi import Request
from services.catalog_service import ActionCatalog
from services.filter_engine import FilterEngine
from services.unlock_service import UnlockService


def get_catalog(request: Request) -> ActionCatalog:
    """
    Dependency to get the spell catalog from app state.

    The catalog is built during application startup in the lifespan context.
    """
    return request.app.state.catalog


def get_filter_engine(request: Request) -> FilterEngine:
    """Dependency to get the filter engine from app state."""
    return request.app.state.filter_engine


def get_unlock_service(request: Request) -> UnlockService:
    """Dependency to get the unlock service from app state."""
    return request.app.state.unlock_service


def resolve_category_value(category: Category, value: str) -> CategoryValue:
    """Turn a request's category/value strings into an enum member or raise a 404."""
    member = find_value(category, value)
    if member is None:
        raise CategoryValueNotFoundError(str(category), value)
    return member
