"""
Domain enums for type-safe constants.
"""

from enum import Enum


class LifecycleEvent(str, Enum):
    """Host events that trigger an unlock refresh."""

    READY = "ready"  # Initial ready state after load
    LOGIN = "login"  # Character logged in
    ZONE_CHANGE = "zone_change"  # Territory changed

    def __str__(self) -> str:
        return self.value
