"""
HapticsKit facade and module-level convenience functions.
"""

from .haptics import (
    ENABLED_PROPERTY,
    HapticsKit,
    configure,
    default_backend,
    haptic_feedback_supported,
    is_haptic_feedback_enabled,
    observe_enabled,
    perform,
    perform_impact,
    perform_notification,
    perform_selection,
    set_haptic_feedback_enabled,
)

__all__ = [
    "ENABLED_PROPERTY",
    "HapticsKit",
    "configure",
    "default_backend",
    "haptic_feedback_supported",
    "is_haptic_feedback_enabled",
    "set_haptic_feedback_enabled",
    "observe_enabled",
    "perform",
    "perform_impact",
    "perform_notification",
    "perform_selection",
]
