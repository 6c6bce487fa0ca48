"""
Main-thread helpers.
"""

from .main_thread import (
    clear_main_event_loop,
    is_main_thread,
    run_on_main_thread,
    set_main_event_loop,
)

__all__ = [
    "set_main_event_loop",
    "clear_main_event_loop",
    "is_main_thread",
    "run_on_main_thread",
]
