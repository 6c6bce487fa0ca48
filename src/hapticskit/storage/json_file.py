"""
JSON file defaults store for hosts without a native preferences system.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from .protocol import DefaultsStore

logger = logging.getLogger(__name__)


class JSONFileDefaults(DefaultsStore):
    """
    Persists explicit values as a flat JSON object.

    Registered defaults live in memory only, like Foundation's registration
    domain. The file is created on first write and replaced atomically.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize the store and load any existing values.

        Args:
            path: JSON file location
        """
        self.path = Path(path).expanduser()
        self._registered: Dict[str, Any] = {}
        self._values: Dict[str, Any] = self._load()

    def _load(self) -> Dict[str, Any]:
        """Read persisted values, treating a missing or corrupt file as empty."""
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable defaults file {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring defaults file {self.path}: not a JSON object")
            return {}
        return data

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(self._values, handle, indent=2, sort_keys=True)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def reload(self) -> None:
        """Re-read the file, picking up writes from other processes."""
        self._values = self._load()

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
        self._save()
        logger.debug(f"Persisted {key}={bool(value)} to {self.path}")

    def remove_object(self, key: str) -> None:
        if self._values.pop(key, None) is not None:
            self._save()
