"""
Centralized logging configuration for HapticsKit.
"""

import logging
from typing import Optional

from ...config.settings import HapticsKitSettings

PACKAGE_LOGGER = "hapticskit"

NOISY_LIBRARIES = [
    "rubicon",
    "rubicon.objc",
    "objc",
    "asyncio",
]


class NullHandler(logging.Handler):
    """Handler that discards all log records."""

    def emit(self, record):
        pass


def setup_logging(verbose: bool = False, level: Optional[str] = None) -> None:
    """
    Configure hapticskit log levels and silence the Objective-C bridge loggers.

    Args:
        verbose: If True, log hapticskit debug output.
        level: Explicit level name. Defaults to HAPTICSKIT_LOG_LEVEL.
    """
    level_name = level or HapticsKitSettings.from_env().log_level

    if verbose:
        package_level = logging.DEBUG
    elif level_name:
        package_level = logging.getLevelName(level_name.upper())
        if not isinstance(package_level, int):
            package_level = logging.WARNING
    else:
        package_level = logging.WARNING

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(package_level)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        package_logger.addHandler(handler)
    package_logger.propagate = False

    for logger_name in NOISY_LIBRARIES:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.CRITICAL if not verbose else logging.WARNING)
        logger.propagate = False
        logger.handlers = [NullHandler()] if not verbose else []
