"""
Environment driven settings for HapticsKit.

Environment Variables:
- HAPTICSKIT_STORAGE_KEY: Preference key for the enabled flag
- HAPTICSKIT_DEFAULTS_PATH: JSON file used when no native defaults store exists
- HAPTICSKIT_PLATFORM: Force platform detection (ios, watchos, macos, other)
- HAPTICSKIT_LOG_LEVEL: Log level name for the hapticskit loggers
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

DEFAULT_STORAGE_KEY = "HKHapticFeedbackEnabled"
DEFAULT_DEFAULTS_PATH = Path.home() / ".config" / "hapticskit" / "defaults.json"


class HapticsKitSettings(BaseModel):
    """
    Snapshot of the HapticsKit environment settings.
    """

    storage_key: str = Field(
        default=DEFAULT_STORAGE_KEY, description="Key of the enabled preference"
    )
    defaults_path: Path = Field(
        default=DEFAULT_DEFAULTS_PATH,
        description="Fallback JSON defaults file",
    )
    platform_override: Optional[str] = Field(
        default=None, description="Platform family forced instead of detection"
    )
    log_level: Optional[str] = Field(
        default=None, description="Log level for hapticskit loggers"
    )

    @classmethod
    def from_env(cls) -> "HapticsKitSettings":
        """
        Read settings from the process environment (and any loaded .env file).

        Returns:
            HapticsKitSettings populated from environment variables
        """
        defaults_path = os.getenv("HAPTICSKIT_DEFAULTS_PATH")
        platform_override = os.getenv("HAPTICSKIT_PLATFORM", "").strip().lower()
        log_level = os.getenv("HAPTICSKIT_LOG_LEVEL", "").strip().upper()

        return cls(
            storage_key=os.getenv("HAPTICSKIT_STORAGE_KEY") or DEFAULT_STORAGE_KEY,
            defaults_path=(
                Path(defaults_path).expanduser()
                if defaults_path
                else DEFAULT_DEFAULTS_PATH
            ),
            platform_override=platform_override or None,
            log_level=log_level or None,
        )
