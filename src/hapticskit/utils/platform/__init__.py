"""
Platform detection utilities.
"""

from .platform_detector import detect_platform, normalize_family

__all__ = ["detect_platform", "normalize_family"]
