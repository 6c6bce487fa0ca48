"""
Type-safe schema for the detected haptic host platform.
"""

from typing import Literal, Optional
from pydantic import BaseModel, Field


PlatformFamily = Literal["ios", "watchos", "macos", "other"]


class HapticPlatform(BaseModel):
    """
    Host platform information relevant to haptic feedback.
    """

    family: PlatformFamily = Field(description="Detected platform family")
    os_version: str = Field(default="", description="Operating system version string")
    model: Optional[str] = Field(
        default=None, description="Device model reported by the host (iPhone, iPad, ...)"
    )
    is_simulator: bool = Field(
        default=False, description="Whether running in a simulated environment"
    )

    @property
    def is_phone_class(self) -> bool:
        """True for touch-phone-class platforms (iOS / iPadOS)."""
        return self.family == "ios"

    @property
    def is_wearable(self) -> bool:
        """True for wrist-wearable platforms (watchOS)."""
        return self.family == "watchos"
