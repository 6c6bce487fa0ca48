"""
Key-value preference stores.

- protocol.py - DefaultsStore contract
- memory.py - in-memory store
- json_file.py - JSON file store
- user_defaults.py - Foundation NSUserDefaults store
"""

from pathlib import Path
from typing import Optional, Union

from .json_file import JSONFileDefaults
from .memory import InMemoryDefaults
from .protocol import DefaultsStore
from .user_defaults import UserDefaultsStore

_standard_store: Optional[DefaultsStore] = None


def standard_defaults(path: Optional[Union[str, Path]] = None) -> DefaultsStore:
    """
    Get the process-wide standard defaults store.

    Uses NSUserDefaults when a Foundation bridge is importable, otherwise a
    JSON file at ``path`` (or HAPTICSKIT_DEFAULTS_PATH). An explicit ``path``
    always selects the JSON file store and is not cached.

    Args:
        path: Optional JSON defaults file

    Returns:
        Shared DefaultsStore instance
    """
    global _standard_store

    if path is not None:
        return JSONFileDefaults(path)

    if _standard_store is None:
        store = UserDefaultsStore()
        if store.available:
            _standard_store = store
        else:
            from ..config.settings import HapticsKitSettings

            _standard_store = JSONFileDefaults(
                HapticsKitSettings.from_env().defaults_path
            )
    return _standard_store


__all__ = [
    "DefaultsStore",
    "InMemoryDefaults",
    "JSONFileDefaults",
    "UserDefaultsStore",
    "standard_defaults",
]
