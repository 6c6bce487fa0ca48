"""
iOS haptics through UIKit feedback generators.

Objective-C is reached with rubicon-objc, the bridge available to Python
apps embedded on iOS.
"""

import logging
from ctypes import c_bool, c_long
from typing import Any, Callable, Optional

from ..schemas.feedback import ImpactFeedbackStyle, NotificationFeedbackType
from ..schemas.platform import HapticPlatform
from .protocol import HapticBackend

logger = logging.getLogger(__name__)

UI_USER_INTERFACE_IDIOM_PHONE = 0


class UIKitHapticBackend(HapticBackend):
    """
    Haptic backend for iPhone-class devices.

    Notification, impact and selection feedback map to
    ``UINotificationFeedbackGenerator``, ``UIImpactFeedbackGenerator`` and
    ``UISelectionFeedbackGenerator``.
    """

    name = "uikit"

    def __init__(
        self,
        platform: Optional[HapticPlatform] = None,
        objc_class: Optional[Callable[[str], Any]] = None,
        send_message: Optional[Callable[..., Any]] = None,
    ):
        """
        Initialize the UIKit bridge.

        Args:
            platform: Detected platform, used for simulator handling
            objc_class: Class resolver (defaults to rubicon's ObjCClass)
            send_message: Raw message sender (defaults to rubicon's send_message)
        """
        self.platform = platform or HapticPlatform(family="ios")
        self.available = False
        self._objc_class = objc_class
        self._send_message = send_message

        if objc_class is not None and send_message is not None:
            self.available = True
        else:
            self._initialize_uikit()

    def _initialize_uikit(self) -> None:
        """
        Load UIKit and CoreHaptics through rubicon-objc.
        """
        try:
            from rubicon.objc import ObjCClass, send_message
            from rubicon.objc.runtime import load_library

            load_library("UIKit")
            load_library("CoreHaptics")

            self._objc_class = self._objc_class or ObjCClass
            self._send_message = self._send_message or send_message
            self.available = True
        except (ImportError, ValueError, OSError) as e:
            logger.debug(f"UIKit haptics unavailable: {e}")
            self.available = False

    def supports_haptics(self) -> bool:
        """
        Simulators report support when the UI idiom is phone; real hardware
        asks CoreHaptics.
        """
        if not self.available:
            return False

        if self.platform.is_simulator:
            device = self._objc_class("UIDevice").currentDevice
            idiom = self._send_message(
                device, "userInterfaceIdiom", restype=c_long, argtypes=[]
            )
            return idiom == UI_USER_INTERFACE_IDIOM_PHONE

        capabilities = self._objc_class("CHHapticEngine").capabilitiesForHardware()
        return bool(
            self._send_message(
                capabilities, "supportsHaptics", restype=c_bool, argtypes=[]
            )
        )

    def notification_occurred(self, feedback_type: NotificationFeedbackType) -> None:
        generator = self._objc_class("UINotificationFeedbackGenerator").alloc().init()
        generator.notificationOccurred_(feedback_type.native_value)

    def impact_occurred(self, style: ImpactFeedbackStyle, intensity: float) -> None:
        generator = (
            self._objc_class("UIImpactFeedbackGenerator")
            .alloc()
            .initWithStyle_(style.native_value)
        )
        generator.impactOccurredWithIntensity_(float(intensity))

    def selection_changed(self) -> None:
        generator = self._objc_class("UISelectionFeedbackGenerator").alloc().init()
        generator.selectionChanged()
