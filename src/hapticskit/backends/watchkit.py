"""
watchOS haptics through WKInterfaceDevice.
"""

import logging
from typing import Any, Callable, Optional

from ..schemas.feedback import WatchHapticType
from .protocol import HapticBackend

logger = logging.getLogger(__name__)


class WatchKitHapticBackend(HapticBackend):
    """
    Haptic backend for Apple Watch. Every watch has a Taptic Engine, so
    support is unconditional.
    """

    name = "watchkit"

    def __init__(self, objc_class: Optional[Callable[[str], Any]] = None):
        self._objc_class = objc_class
        self.available = objc_class is not None
        if not self.available:
            self._initialize_watchkit()

    def _initialize_watchkit(self) -> None:
        try:
            from rubicon.objc import ObjCClass
            from rubicon.objc.runtime import load_library

            load_library("WatchKit")
            self._objc_class = ObjCClass
            self.available = True
        except (ImportError, ValueError, OSError) as e:
            logger.debug(f"WatchKit haptics unavailable: {e}")
            self.available = False

    def supports_haptics(self) -> bool:
        return True

    def play_haptic(self, haptic_type: WatchHapticType) -> None:
        if not self.available:
            logger.debug(f"Dropping {haptic_type.value} haptic: WatchKit not loaded")
            return
        device = self._objc_class("WKInterfaceDevice").currentDevice
        device.playHaptic_(haptic_type.native_value)
