"""
HapticsKit: one configurable access point for Apple platform haptics.

    from hapticskit import HapticsKit, HapticsKitConfiguration

    haptics = HapticsKit.configure(HapticsKitConfiguration())
    haptics.perform_notification("success")
"""

from .backends import (
    HapticBackend,
    NullHapticBackend,
    UIKitHapticBackend,
    WatchKitHapticBackend,
    get_haptic_backend,
)
from .config import DEFAULT_STORAGE_KEY, HapticsKitConfiguration, HapticsKitSettings
from .core import (
    HapticsKit,
    configure,
    haptic_feedback_supported,
    is_haptic_feedback_enabled,
    observe_enabled,
    perform,
    perform_impact,
    perform_notification,
    perform_selection,
    set_haptic_feedback_enabled,
)
from .exceptions import HapticBackendError, HapticsKitError, HapticsKitNotConfiguredError
from .observation import ObservationRegistrar, with_observation_tracking
from .schemas import (
    HapticPlatform,
    ImpactFeedbackStyle,
    NotificationFeedbackType,
    WatchHapticType,
)
from .storage import (
    DefaultsStore,
    InMemoryDefaults,
    JSONFileDefaults,
    UserDefaultsStore,
    standard_defaults,
)

__version__ = "0.1.0"

__all__ = [
    "HapticsKit",
    "HapticsKitConfiguration",
    "HapticsKitSettings",
    "DEFAULT_STORAGE_KEY",
    "configure",
    "haptic_feedback_supported",
    "is_haptic_feedback_enabled",
    "set_haptic_feedback_enabled",
    "observe_enabled",
    "perform",
    "perform_impact",
    "perform_notification",
    "perform_selection",
    "HapticBackend",
    "NullHapticBackend",
    "UIKitHapticBackend",
    "WatchKitHapticBackend",
    "get_haptic_backend",
    "HapticsKitError",
    "HapticsKitNotConfiguredError",
    "HapticBackendError",
    "ObservationRegistrar",
    "with_observation_tracking",
    "HapticPlatform",
    "ImpactFeedbackStyle",
    "NotificationFeedbackType",
    "WatchHapticType",
    "DefaultsStore",
    "InMemoryDefaults",
    "JSONFileDefaults",
    "UserDefaultsStore",
    "standard_defaults",
]
