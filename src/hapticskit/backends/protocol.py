"""
Platform-agnostic contract for host haptic engines.

Each backend wraps one platform's feedback API. Primitives a platform does
not have are no-ops, so the facade can call any of them everywhere.
"""

from abc import ABC, abstractmethod

from ..schemas.feedback import (
    ImpactFeedbackStyle,
    NotificationFeedbackType,
    WatchHapticType,
)


class HapticBackend(ABC):
    """
    Unified haptic engine contract for all platforms.
    """

    name: str = "abstract"

    @abstractmethod
    def supports_haptics(self) -> bool:
        """Whether the host can render haptic feedback at all."""
        ...

    def notification_occurred(self, feedback_type: NotificationFeedbackType) -> None:
        """Play a notification haptic (success, warning, error)."""

    def impact_occurred(self, style: ImpactFeedbackStyle, intensity: float) -> None:
        """
        Play an impact haptic.

        Args:
            style: Impact style
            intensity: Intensity between 0.0 and 1.0
        """

    def selection_changed(self) -> None:
        """Play a selection-changed haptic."""

    def play_haptic(self, haptic_type: WatchHapticType) -> None:
        """Play a watch haptic."""

    def provides(self, primitive: str) -> bool:
        """Whether this backend implements ``primitive`` instead of the no-op."""
        return getattr(type(self), primitive) is not getattr(HapticBackend, primitive)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
