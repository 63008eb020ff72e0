"""
Unlock state handling.

The unlock state of each spell comes from an external resolver (a callable
mapping a record's unlock key to a bool). The owning process registers the
resolver and forwards lifecycle events; each event re-resolves the whole
catalog synchronously. Unlock state is display-only and never filters.
"""

import logging
from pathlib import Path
from typing import Callable, Iterable, Optional, Union

import yaml

from domain.exceptions import ConfigurationError
from domain.value_objects.enums import LifecycleEvent

from services.catalog_service import ActionCatalog

logger = logging.getLogger("UnlockService")

UnlockResolver = Callable[[int], bool]


class StaticUnlockResolver:
    """Resolver backed by a fixed set of unlocked keys."""

    def __init__(self, unlocked_keys: Iterable[int]):
        self.unlocked_keys = frozenset(int(key) for key in unlocked_keys)

    def __call__(self, unlock_key: int) -> bool:
        return unlock_key in self.unlocked_keys

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "StaticUnlockResolver":
        """
        Load unlocked keys from a YAML file.

        Expected format:
            unlocked_keys: [1, 2, 3]
        """
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Unlock file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        keys = data.get("unlocked_keys", [])
        if not isinstance(keys, list):
            raise ConfigurationError(f"'unlocked_keys' in {path} must be a list")
        return cls(keys)


class UnlockService:
    """Applies the registered resolver to the catalog on lifecycle events."""

    def __init__(self, catalog: ActionCatalog, resolver: Optional[UnlockResolver] = None):
        self.catalog = catalog
        self._resolver = resolver

    @property
    def has_resolver(self) -> bool:
        return self._resolver is not None

    def register_resolver(self, resolver: UnlockResolver) -> None:
        self._resolver = resolver

    def set_unlocked(self, action_id: int, is_unlocked: bool) -> bool:
        """Set one record's unlock state. Returns False if the action is unknown."""
        return self.catalog.set_unlocked(action_id, is_unlocked)

    def handle_event(self, event: LifecycleEvent) -> int:
        """
        Re-resolve unlock state for every record.

        Returns:
            Number of unlocked records after the refresh
        """
        if self._resolver is None:
            logger.debug(f"No unlock resolver registered, ignoring {event} event")
            return sum(1 for record in self.catalog if record.is_unlocked)

        unlocked = 0
        for record in self.catalog:
            is_unlocked = bool(self._resolver(record.unlock_key))
            self.catalog.set_unlocked(record.action_id, is_unlocked)
            unlocked += is_unlocked

        logger.info(f"Unlock refresh on {event}: {unlocked}/{len(self.catalog)} unlocked")
        return unlocked
