"""
Semantic haptic feedback types.

Each member's value is the name callers pass around; ``native_value`` is the
raw integer the host framework expects for the same constant.
"""

from enum import Enum


class NotificationFeedbackType(str, Enum):
    """Outcome of a task or action (UINotificationFeedbackType)."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"

    @property
    def native_value(self) -> int:
        return _NOTIFICATION_RAW[self]


class ImpactFeedbackStyle(str, Enum):
    """Mass of the colliding objects (UIImpactFeedbackStyle)."""

    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"
    SOFT = "soft"
    RIGID = "rigid"

    @property
    def native_value(self) -> int:
        return _IMPACT_RAW[self]


class WatchHapticType(str, Enum):
    """Haptics playable on a watch (WKHapticType)."""

    NOTIFICATION = "notification"
    DIRECTION_UP = "directionUp"
    DIRECTION_DOWN = "directionDown"
    SUCCESS = "success"
    FAILURE = "failure"
    RETRY = "retry"
    START = "start"
    STOP = "stop"
    CLICK = "click"
    NAVIGATION_GENERIC_MANEUVER = "navigationGenericManeuver"
    NAVIGATION_LEFT_TURN = "navigationLeftTurn"
    NAVIGATION_RIGHT_TURN = "navigationRightTurn"

    @property
    def native_value(self) -> int:
        return _WATCH_RAW[self]


_NOTIFICATION_RAW = {member: index for index, member in enumerate(NotificationFeedbackType)}
_IMPACT_RAW = {member: index for index, member in enumerate(ImpactFeedbackStyle)}
_WATCH_RAW = {member: index for index, member in enumerate(WatchHapticType)}
