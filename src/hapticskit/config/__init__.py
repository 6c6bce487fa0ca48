"""
Configuration for the enabled preference and environment settings.
"""

from .configuration import HapticsKitConfiguration
from .settings import DEFAULT_STORAGE_KEY, HapticsKitSettings

__all__ = ["HapticsKitConfiguration", "HapticsKitSettings", "DEFAULT_STORAGE_KEY"]
