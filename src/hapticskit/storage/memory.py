"""
In-memory defaults store for tests, previews and ephemeral hosts.
"""

from typing import Any, Dict, Mapping, Optional

from .protocol import DefaultsStore


class InMemoryDefaults(DefaultsStore):
    """
    Defaults store backed by two dictionaries.

    ``write_count`` counts explicit writes so callers can verify that
    redundant writes were skipped.
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values: Dict[str, Any] = dict(values or {})
        self._registered: Dict[str, Any] = {}
        self.write_count = 0

    def register_defaults(self, defaults: Mapping[str, Any]) -> None:
        self._registered.update(defaults)

    def object_for_key(self, key: str) -> Optional[Any]:
        if key in self._values:
            return self._values[key]
        return self._registered.get(key)

    def has_value(self, key: str) -> bool:
        return key in self._values

    def set_bool(self, value: bool, key: str) -> None:
        self._values[key] = bool(value)
        self.write_count += 1

    def remove_object(self, key: str) -> None:
        self._values.pop(key, None)

    def __repr__(self) -> str:
        return f"InMemoryDefaults(values={self._values!r}, registered={self._registered!r})"
