"""
Platform-agnostic contract for key-value preference stores.

Mirrors the subset of Foundation's ``UserDefaults`` semantics HapticsKit
relies on: a registration domain of defaults that never overrides explicit
values, and explicit per-key writes.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional


class DefaultsStore(ABC):
    """
    Persistent key-value store holding user preferences.

    Implementations are shared handles; HapticsKit never closes or owns them.
    """

    @abstractmethod
    def register_defaults(self, defaults: Mapping[str, Any]) -> None:
        """
        Register fallback values.

        Registered values are returned by ``object_for_key`` only while the
        key has no explicit value. Registering never overwrites an explicit
        value.
        """
        ...

    @abstractmethod
    def object_for_key(self, key: str) -> Optional[Any]:
        """
        Get the value for a key.

        Returns:
            The explicit value, else the registered default, else None
        """
        ...

    @abstractmethod
    def has_value(self, key: str) -> bool:
        """Check whether the key holds an explicit (persisted) value."""
        ...

    @abstractmethod
    def set_bool(self, value: bool, key: str) -> None:
        """Persist an explicit boolean value for the key."""
        ...

    @abstractmethod
    def remove_object(self, key: str) -> None:
        """Drop the explicit value for the key, exposing any registered default."""
        ...

    def bool_for_key(self, key: str) -> bool:
        """Boolean view of ``object_for_key``; False when nothing is present."""
        value = self.object_for_key(key)
        return bool(value) if value is not None else False
