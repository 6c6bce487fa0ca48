"""
Basic usage examples for HapticsKit.
"""

from hapticskit import (
    HapticsKit,
    HapticsKitConfiguration,
    ImpactFeedbackStyle,
    InMemoryDefaults,
    NotificationFeedbackType,
    with_observation_tracking,
)
from hapticskit.utils.logging import setup_logging
from hapticskit.utils.platform import detect_platform


def example_feedback():
    """
    Example: Play feedback through the shared facade.
    """
    print("\n" + "=" * 60)
    print("Example 1: Feedback")
    print("=" * 60)

    platform = detect_platform()
    haptics = HapticsKit.configure(HapticsKitConfiguration(store=InMemoryDefaults()))

    print(f"\nPlatform: {platform.family} (backend: {haptics.backend.name})")
    print(f"Supported: {haptics.supported}")

    haptics.perform_notification(NotificationFeedbackType.SUCCESS)
    haptics.perform_impact(ImpactFeedbackStyle.LIGHT, intensity=0.5)
    haptics.perform_selection()


def example_preference_binding():
    """
    Example: React to the enabled preference like a UI binding would.
    """
    print("\n" + "=" * 60)
    print("Example 2: Preference binding")
    print("=" * 60)

    haptics = HapticsKit.shared()

    def render():
        label = "on" if haptics.haptic_feedback_enabled else "off"
        print(f"\nHaptics toggle: {label}")

    def on_change():
        with_observation_tracking(render, on_change)

    with_observation_tracking(render, on_change)
    haptics.haptic_feedback_enabled = False
    haptics.haptic_feedback_enabled = True


if __name__ == "__main__":
    setup_logging(verbose=True)
    example_feedback()
    example_preference_binding()
