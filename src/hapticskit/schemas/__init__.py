"""
Pydantic schemas and enumerations shared across HapticsKit.
"""

from .feedback import ImpactFeedbackStyle, NotificationFeedbackType, WatchHapticType
from .platform import HapticPlatform, PlatformFamily

__all__ = [
    "NotificationFeedbackType",
    "ImpactFeedbackStyle",
    "WatchHapticType",
    "HapticPlatform",
    "PlatformFamily",
]
