"""
Tests for main-context marshalling of host haptic calls.
"""

from __future__ import annotations

import asyncio
import logging
import threading

from hapticskit import HapticsKit, HapticsKitConfiguration, InMemoryDefaults
from hapticskit.utils.threading import (
    is_main_thread,
    run_on_main_thread,
    set_main_event_loop,
)


class _LoopThread:
    """Runs an event loop registered as the main loop on a helper thread."""

    def __init__(self) -> None:
        self.loop = asyncio.new_event_loop()
        self.ready = threading.Event()
        self.thread = threading.Thread(target=self._run, daemon=True)

    def _run(self) -> None:
        asyncio.set_event_loop(self.loop)
        self.loop.call_soon(self._register)
        self.loop.run_forever()

    def _register(self) -> None:
        set_main_event_loop(self.loop)
        self.ready.set()

    def __enter__(self) -> "_LoopThread":
        self.thread.start()
        assert self.ready.wait(timeout=2)
        return self

    def __exit__(self, *exc) -> None:
        self.loop.call_soon_threadsafe(self.loop.stop)
        self.thread.join(timeout=2)
        self.loop.close()


def test_direct_call_without_registered_loop() -> None:
    assert run_on_main_thread(lambda a, b: a + b, 2, 3) == 5
    assert is_main_thread()


def test_call_is_marshalled_to_registered_loop() -> None:
    with _LoopThread() as runner:
        assert not is_main_thread()

        thread_id = run_on_main_thread(threading.get_ident, timeout=2)

        assert thread_id == runner.thread.ident


def test_facade_actions_run_on_registered_loop(recording_backend) -> None:
    seen_threads = []
    original = recording_backend.selection_changed

    def selection_changed() -> None:
        seen_threads.append(threading.get_ident())
        original()

    recording_backend.selection_changed = selection_changed
    haptics = HapticsKit(
        HapticsKitConfiguration(store=InMemoryDefaults()), backend=recording_backend
    )

    with _LoopThread() as runner:
        haptics.perform_selection()

    assert seen_threads == [runner.thread.ident]
    assert recording_backend.calls == [("selection_changed", ())]


def test_queued_call_returns_without_waiting() -> None:
    started = threading.Event()
    release = threading.Event()
    seen_threads = []

    def blocking() -> None:
        started.set()
        release.wait(timeout=2)
        seen_threads.append(threading.get_ident())

    with _LoopThread() as runner:
        run_on_main_thread(blocking, wait=False)
        assert started.wait(timeout=2)

        # The loop thread is still parked inside blocking().
        assert run_on_main_thread(lambda: "queued", wait=False) is None
        assert seen_threads == []
        release.set()

    assert seen_threads == [runner.thread.ident]


def test_queued_call_errors_are_logged(caplog, monkeypatch) -> None:
    monkeypatch.setattr(logging.getLogger("hapticskit"), "propagate", True)

    def failing() -> None:
        raise RuntimeError("engine gone")

    with caplog.at_level("ERROR", logger="hapticskit.utils.threading.main_thread"):
        with _LoopThread():
            assert run_on_main_thread(failing, wait=False) is None

    errors = [record for record in caplog.records if record.exc_info]
    assert len(errors) == 1
    assert str(errors[0].exc_info[1]) == "engine gone"
