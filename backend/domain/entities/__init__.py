"""
Domain entities - core data models for business logic.
"""

from .action_record import ActionRecord

__all__ = [
    "ActionRecord",
]
