"""
Foundation ``NSUserDefaults`` store.

Uses pyobjc's Foundation bindings on macOS and rubicon-objc on iOS and
watchOS, where pyobjc is not available.
"""

import logging
from typing import Any, Mapping, Optional

from .protocol import DefaultsStore

logger = logging.getLogger(__name__)


class UserDefaultsStore(DefaultsStore):
    """
    Defaults store delegating to the host ``NSUserDefaults`` database.
    """

    def __init__(self, suite_name: Optional[str] = None):
        """
        Initialize the Foundation bridge.

        Args:
            suite_name: Defaults suite (app group). None uses the standard defaults.
        """
        self.suite_name = suite_name
        self.available = False
        self.bridge: Optional[str] = None
        self._defaults: Any = None
        self._py_from_ns = None
        self._initialize_foundation()

    def _initialize_foundation(self) -> None:
        """
        Load NSUserDefaults through pyobjc, falling back to rubicon-objc.
        """
        try:
            from Foundation import NSUserDefaults

            if self.suite_name:
                self._defaults = NSUserDefaults.alloc().initWithSuiteName_(
                    self.suite_name
                )
            else:
                self._defaults = NSUserDefaults.standardUserDefaults()
            self.bridge = "pyobjc"
            self.available = True
            return
        except ImportError:
            pass

        try:
            from rubicon.objc import ObjCClass, py_from_ns

            NSUserDefaults = ObjCClass("NSUserDefaults")
            if self.suite_name:
                self._defaults = NSUserDefaults.alloc().initWithSuiteName_(
                    self.suite_name
                )
            else:
                self._defaults = NSUserDefaults.standardUserDefaults
            self._py_from_ns = py_from_ns
            self.bridge = "rubicon"
            self.available = True
        except (ImportError, ValueError, OSError) as e:
            logger.debug(f"NSUserDefaults unavailable: {e}")
            self.available = False

    def _to_python(self, value: Any) -> Any:
        if value is None or self._py_from_ns is None:
            return value
        return self._py_from_ns(value)

    def _domain_name(self) -> str:
        """Persistent domain holding this store's explicit values."""
        if self.suite_name:
            return self.suite_name

        if self.bridge == "pyobjc":
            from Foundation import NSBundle, NSProcessInfo

            identifier = NSBundle.mainBundle().bundleIdentifier()
            return str(identifier or NSProcessInfo.processInfo().processName())

        from rubicon.objc import ObjCClass

        identifier = ObjCClass("NSBundle").mainBundle.bundleIdentifier
        if identifier is None:
            identifier = ObjCClass("NSProcessInfo").processInfo.processName
        return str(identifier)

    def register_defaults(self, defaults: Mapping[str, Any]) -> None:
        self._defaults.registerDefaults_(dict(defaults))

    def object_for_key(self, key: str) -> Optional[Any]:
        return self._to_python(self._defaults.objectForKey_(key))

    def has_value(self, key: str) -> bool:
        domain = self._to_python(
            self._defaults.persistentDomainForName_(self._domain_name())
        )
        return domain is not None and key in domain

    def set_bool(self, value: bool, key: str) -> None:
        self._defaults.setBool_forKey_(bool(value), key)

    def remove_object(self, key: str) -> None:
        self._defaults.removeObjectForKey_(key)
