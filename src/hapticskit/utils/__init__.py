"""
Utility modules organized by domain.

Submodules:
- platform: Host platform detection
- threading: Main-context registration and marshalling
- logging: Logging configuration
"""

from .platform import detect_platform, normalize_family
from .threading import is_main_thread, run_on_main_thread, set_main_event_loop

__all__ = [
    "detect_platform",
    "normalize_family",
    "is_main_thread",
    "run_on_main_thread",
    "set_main_event_loop",
]
