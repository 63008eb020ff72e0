"""
Spellbook API - blue magic spell catalog and filters.

This is the main entry point for the FastAPI application.
All application configuration and setup is handled by the app factory.
"""

# Initialize settings and logging first
from core import get_settings, setup_logging

settings = get_settings()
setup_logging(debug_mode=settings.debug, log_level=settings.get_log_level())

# Create the FastAPI application
from core.app_factory import create_app  # noqa: E402

app = create_app()
