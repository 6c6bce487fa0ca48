"""
Backend for platforms without a supported haptic engine.
"""

from .protocol import HapticBackend


class NullHapticBackend(HapticBackend):
    """Never supports haptics; every primitive is a no-op."""

    name = "null"

    def supports_haptics(self) -> bool:
        return False
