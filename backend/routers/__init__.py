"""FastAPI routers for modular endpoint organization."""

from . import actions, filters, unlocks

__all__ = [
    "actions",
    "filters",
    "unlocks",
]
