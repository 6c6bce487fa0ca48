"""
Logging configuration.
"""

from .logging_config import PACKAGE_LOGGER, setup_logging

__all__ = ["PACKAGE_LOGGER", "setup_logging"]
