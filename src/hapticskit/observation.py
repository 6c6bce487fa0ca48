"""
Observable properties for reactive UI bindings.

Properties report reads through ``ObservationRegistrar.access`` and writes
through ``ObservationRegistrar.did_change``. UI layers either subscribe to a
property directly or wrap their render function in
``with_observation_tracking`` to be told once when anything it read changes.
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Set, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

ObservedKey = Tuple[int, str]

_tracking = threading.local()


def _active_trackers() -> List[Set[Tuple["ObservationRegistrar", Any, str]]]:
    stack = getattr(_tracking, "stack", None)
    if stack is None:
        stack = []
        _tracking.stack = stack
    return stack


class ObservationRegistrar:
    """
    Keeps observers per (subject, property name) pair.
    """

    def __init__(self) -> None:
        self._observers: Dict[ObservedKey, List[Callable[[Any], None]]] = {}

    def access(self, subject: Any, key: str) -> None:
        """Record a read of ``subject.key`` in every active tracking scope."""
        for accessed in _active_trackers():
            accessed.add((self, subject, key))

    def did_change(self, subject: Any, key: str, value: Any = None) -> None:
        """
        Notify observers that ``subject.key`` changed.

        Args:
            subject: Object owning the property
            key: Property name
            value: New value passed to each observer
        """
        callbacks = list(self._observers.get((id(subject), key), []))
        logger.debug(f"{key} changed, notifying {len(callbacks)} observer(s)")
        for callback in callbacks:
            callback(value)

    def subscribe(
        self, subject: Any, key: str, callback: Callable[[Any], None]
    ) -> Callable[[], None]:
        """
        Call ``callback(value)`` on every change of ``subject.key``.

        Returns:
            Callable removing the subscription
        """
        observers = self._observers.setdefault((id(subject), key), [])
        observers.append(callback)

        def unsubscribe() -> None:
            if callback in observers:
                observers.remove(callback)

        return unsubscribe

    def observer_count(self, subject: Any, key: str) -> int:
        return len(self._observers.get((id(subject), key), []))


def with_observation_tracking(
    apply: Callable[[], T], on_change: Callable[[], None]
) -> T:
    """
    Run ``apply`` and call ``on_change`` once when any property it read changes.

    Args:
        apply: Function reading observable properties
        on_change: One-shot callback fired on the first subsequent change

    Returns:
        Whatever ``apply`` returned
    """
    accessed: Set[Tuple[ObservationRegistrar, Any, str]] = set()
    stack = _active_trackers()
    stack.append(accessed)
    try:
        result = apply()
    finally:
        stack.pop()

    if not accessed:
        return result

    unsubscribers: List[Callable[[], None]] = []
    fired = False

    def fire(_value: Any) -> None:
        nonlocal fired
        if fired:
            return
        fired = True
        for unsubscribe in unsubscribers:
            unsubscribe()
        on_change()

    for registrar, subject, key in accessed:
        unsubscribers.append(registrar.subscribe(subject, key, fire))

    return result
