"""
Custom exception classes for the spellbook application.

Ingestion errors (JoinError, StatsParseError) abort the catalog load.
HTTP-facing errors map lookups from the display client onto 404 responses.
"""

from typing import Optional

from fastapi import HTTPException, status


class CatalogLoadError(Exception):
    """Base class for errors that make the catalog unusable."""


class JoinError(CatalogLoadError):
    """Raised when a related row is missing for a known primary id."""

    def __init__(self, sheet: str, row_id: int, detail: Optional[str] = None):
        self.sheet = sheet
        self.row_id = row_id
        message = f"Missing row {row_id} in sheet '{sheet}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class StatsParseError(CatalogLoadError, ValueError):
    """Raised when stat text or a raw column value is outside the closed vocabulary."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse {text!r}: {reason}")


class FilterLookupError(LookupError):
    """Raised when a filter lookup references a value that is not in the filter state."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Value {value!r} is not part of the filter state")


class ConfigurationError(ValueError):
    """Raised when there's an error in configuration parsing or validation."""

    def __init__(self, message: str):
        super().__init__(f"Configuration error: {message}")


class ActionNotFoundError(HTTPException):
    """Raised when a requested action does not exist in the catalog."""

    def __init__(self, action_id: int):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=f"Action with id {action_id} not found")


class CategoryValueNotFoundError(HTTPException):
    """Raised when a request names a category value that does not exist."""

    def __init__(self, category: str, value: str):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Value '{value}' not found in category '{category}'",
        )
