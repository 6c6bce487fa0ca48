"""Main-context registration and marshalling for host haptic calls.

UIKit and WatchKit feedback APIs must be driven from the UI thread. Hosts
that run HapticsKit next to an asyncio loop register that loop here and
every backend primitive is routed onto it.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from concurrent.futures import Future
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

_main_loop: Optional[asyncio.AbstractEventLoop] = None
_main_thread_id: Optional[int] = None


def set_main_event_loop(loop: asyncio.AbstractEventLoop) -> None:
    """Register the main event loop and thread identity."""
    global _main_loop, _main_thread_id
    _main_loop = loop
    _main_thread_id = threading.get_ident()


def clear_main_event_loop() -> None:
    """Forget the registered main loop."""
    global _main_loop, _main_thread_id
    _main_loop = None
    _main_thread_id = None


def is_main_thread() -> bool:
    """Return True if the current thread is the registered main thread."""
    if _main_thread_id is None:
        return threading.current_thread() is threading.main_thread()
    return threading.get_ident() == _main_thread_id


def run_on_main_thread(
    func: Callable[..., Any],
    *args: Any,
    wait: bool = True,
    timeout: Optional[float] = None,
    **kwargs: Any,
) -> Any:
    """
    Run a callable on the registered main loop, or directly if there is none.

    Args:
        func: Callable to run
        wait: Block until the call has run and return its result. When False
            the call is queued and errors are logged on the loop thread.
        timeout: Seconds to wait for the result when ``wait`` is True

    Returns:
        The callable's result, or None for a queued call
    """
    if (
        _main_loop is None
        or _main_loop.is_closed()
        or not _main_loop.is_running()
        or is_main_thread()
    ):
        return func(*args, **kwargs)

    if not wait:

        def _fire() -> None:
            try:
                func(*args, **kwargs)
            except Exception:
                logger.exception(f"Queued main-thread call {func!r} failed")

        try:
            _main_loop.call_soon_threadsafe(_fire)
        except RuntimeError:
            func(*args, **kwargs)
        return None

    future: Future = Future()

    def _call() -> None:
        if future.cancelled():
            return
        try:
            result = func(*args, **kwargs)
        except Exception as exc:
            future.set_exception(exc)
        else:
            future.set_result(result)

    try:
        _main_loop.call_soon_threadsafe(_call)
    except RuntimeError:
        return func(*args, **kwargs)

    return future.result(timeout=timeout)
