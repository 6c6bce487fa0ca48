"""
Host haptic engines.

- protocol.py - HapticBackend contract
- uikit.py - iOS (UIKit feedback generators)
- watchkit.py - watchOS (WKInterfaceDevice)
- null.py - every other platform
"""

import logging
from typing import Optional

from ..schemas.platform import HapticPlatform
from ..utils.platform import detect_platform
from .null import NullHapticBackend
from .protocol import HapticBackend
from .uikit import UIKitHapticBackend
from .watchkit import WatchKitHapticBackend

logger = logging.getLogger(__name__)


def get_haptic_backend(platform: Optional[HapticPlatform] = None) -> HapticBackend:
    """
    Factory function to get the haptic backend for the current platform.

    Args:
        platform: Platform description. Detected when omitted.

    Returns:
        Backend implementing HapticBackend. Platforms other than iOS and
        watchOS get NullHapticBackend.
    """
    platform = platform or detect_platform()

    if platform.is_phone_class:
        backend: HapticBackend = UIKitHapticBackend(platform)
    elif platform.is_wearable:
        backend = WatchKitHapticBackend()
    else:
        backend = NullHapticBackend()

    logger.debug(f"Selected {backend.name} haptic backend for {platform.family}")
    return backend


__all__ = [
    "get_haptic_backend",
    "HapticBackend",
    "NullHapticBackend",
    "UIKitHapticBackend",
    "WatchKitHapticBackend",
]
