"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path
from typing import Any, List, Tuple

import pytest

src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from hapticskit import storage  # noqa: E402
from hapticskit.backends import HapticBackend  # noqa: E402
from hapticskit.core import HapticsKit  # noqa: E402
from hapticskit.storage import InMemoryDefaults  # noqa: E402
from hapticskit.utils.threading import clear_main_event_loop  # noqa: E402


class RecordingBackend(HapticBackend):
    """Backend substitute that records every primitive call."""

    name = "recording"

    def __init__(self, supported: bool = True):
        self.supported = supported
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def supports_haptics(self) -> bool:
        return self.supported

    def notification_occurred(self, feedback_type) -> None:
        self.calls.append(("notification_occurred", (feedback_type,)))

    def impact_occurred(self, style, intensity) -> None:
        self.calls.append(("impact_occurred", (style, intensity)))

    def selection_changed(self) -> None:
        self.calls.append(("selection_changed", ()))

    def play_haptic(self, haptic_type) -> None:
        self.calls.append(("play_haptic", (haptic_type,)))


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep tests away from real preferences, env overrides and shared state."""
    for name in (
        "HAPTICSKIT_STORAGE_KEY",
        "HAPTICSKIT_PLATFORM",
        "HAPTICSKIT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HAPTICSKIT_DEFAULTS_PATH", str(tmp_path / "defaults.json"))
    monkeypatch.setattr(storage, "_standard_store", InMemoryDefaults())

    HapticsKit.reset()
    clear_main_event_loop()
    yield
    HapticsKit.reset()
    clear_main_event_loop()


@pytest.fixture
def memory_store() -> InMemoryDefaults:
    return InMemoryDefaults()


@pytest.fixture
def recording_backend() -> RecordingBackend:
    return RecordingBackend(supported=True)


@pytest.fixture
def unsupported_backend() -> RecordingBackend:
    return RecordingBackend(supported=False)
