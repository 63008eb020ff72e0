"""
Centralized application settings using Pydantic BaseSettings.

This module provides type-safe access to environment variables with validation.
All settings are loaded once at application startup.
"""

from pathlib import Path
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings


def _get_backend_dir() -> Path:
    """Get the backend directory (parent of core/)."""
    return Path(__file__).parent.parent


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults and are validated on startup.
    """

    # Game data
    data_dir: Optional[str] = None

    # Unlock state (YAML file with an `unlocked_keys` list)
    unlocked_keys_file: Optional[str] = None

    # CORS configuration
    frontend_url: Optional[str] = None

    # Logging
    debug: bool = False
    log_level: Optional[str] = None

    @field_validator("debug", mode="before")
    @classmethod
    def validate_debug(cls, v: Optional[str]) -> bool:
        """Parse debug from string to bool."""
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            return v.lower() == "true"
        return False

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Optional[str]) -> Optional[str]:
        """Normalize log level names (e.g. 'info' -> 'INFO')."""
        if v is None or v == "":
            return None
        return str(v).upper()

    @property
    def backend_dir(self) -> Path:
        """
        Get the backend directory.

        Returns:
            Path to the backend directory
        """
        return _get_backend_dir()

    @property
    def project_root(self) -> Path:
        """
        Get the project root directory (parent of backend/).

        Returns:
            Path to the project root directory
        """
        return self.backend_dir.parent

    @property
    def sheets_dir(self) -> Path:
        """
        Get the directory holding the game-data sheet files.

        Defaults to backend/data/sheets when DATA_DIR is not set.

        Returns:
            Path to the sheets directory
        """
        if self.data_dir:
            return Path(self.data_dir)
        return self.backend_dir / "data" / "sheets"

    @property
    def unlocked_keys_path(self) -> Optional[Path]:
        """
        Get the path to the unlocked keys file, if configured.

        Returns:
            Path to the YAML file or None
        """
        if not self.unlocked_keys_file:
            return None
        return Path(self.unlocked_keys_file)

    def get_cors_origins(self) -> List[str]:
        """
        Get the list of allowed CORS origins.

        Returns:
            List of allowed origin URLs
        """
        origins = [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ]

        # Add custom frontend URL if provided
        if self.frontend_url:
            origins.append(self.frontend_url)

        return origins

    def get_log_level(self) -> Optional[int]:
        """
        Resolve log_level to a logging level number.

        Returns:
            Level number, or None to fall back to the debug flag
        """
        import logging

        if not self.log_level:
            return None
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else None

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        # Allow extra fields for forward compatibility
        extra = "ignore"


# Singleton instance - load settings once at first use
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        # Create settings instance first (to access path properties)
        _settings = Settings()

        # Find .env file in project root using settings path properties
        env_path = _settings.project_root / ".env"

        # Reload settings with explicit env file path if it exists
        if env_path.exists():
            _settings = Settings(_env_file=str(env_path))

    return _settings


def reset_settings() -> None:
    """
    Reset the settings singleton (useful for testing).
    """
    global _settings
    _settings = None
