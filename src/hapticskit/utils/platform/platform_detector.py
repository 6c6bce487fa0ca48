"""
Platform detection for haptic capability selection.
"""

import logging
import platform
import sys
from typing import Optional

from ...config.settings import HapticsKitSettings
from ...schemas.platform import HapticPlatform

logger = logging.getLogger(__name__)

_FAMILY_ALIASES = {
    "ios": "ios",
    "ipados": "ios",
    "iphoneos": "ios",
    "watchos": "watchos",
    "watch": "watchos",
    "darwin": "macos",
    "macos": "macos",
    "mac": "macos",
}


def normalize_family(name: str) -> str:
    """
    Map a platform name to a HapticPlatform family.

    Args:
        name: Platform name such as ``sys.platform`` or an override value

    Returns:
        One of "ios", "watchos", "macos" or "other"
    """
    return _FAMILY_ALIASES.get(name.strip().lower(), "other")


def detect_platform(override: Optional[str] = None) -> HapticPlatform:
    """
    Detect the current host platform.

    Args:
        override: Platform family to force. Falls back to HAPTICSKIT_PLATFORM.

    Returns:
        HapticPlatform with detected system information
    """
    if override is None:
        override = HapticsKitSettings.from_env().platform_override

    if override:
        family = normalize_family(override)
        logger.debug(f"Platform forced to {family} (override={override!r})")
        return HapticPlatform(family=family, os_version=platform.release())

    family = normalize_family(sys.platform)

    if family == "ios":
        return _detect_ios()
    if family == "watchos":
        return HapticPlatform(family="watchos", os_version=platform.release())
    if family == "macos":
        return HapticPlatform(family="macos", os_version=platform.mac_ver()[0])

    return HapticPlatform(family="other", os_version=platform.release())


def _detect_ios() -> HapticPlatform:
    """
    Describe an iOS host using ``platform.ios_ver`` when the interpreter has it.
    """
    ios_ver = getattr(platform, "ios_ver", None)
    if ios_ver is None:
        return HapticPlatform(family="ios", os_version=platform.release())

    info = ios_ver()
    return HapticPlatform(
        family="ios",
        os_version=info.release,
        model=info.model or None,
        is_simulator=bool(info.is_simulator),
    )
