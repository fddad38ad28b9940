"""
Result Cells

A ``ResultCell`` holds the latest value of one kind of call and pushes it
to its observers. Cells are not thread-safe: set and observe them from the
event loop thread that owns them.
"""

import logging
from typing import Callable, Generic, List, Optional, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar("T")

Observer = Callable[[T], None]

_UNSET = object()


class ResultCell(Generic[T]):
    """
    Single-slot observable value.

    - ``set(value)`` replaces the held value and notifies every observer in
      registration order.
    - ``observe(observer)`` registers a callback; if the cell already holds a
      value, the callback receives it immediately.

    Values are overwritten, never queued: a late observer only sees the
    latest one.
    """

    def __init__(self, name: str = "cell"):
        self.name = name
        self._value = _UNSET
        self._observers: List[Observer] = []

    @property
    def has_value(self) -> bool:
        return self._value is not _UNSET

    @property
    def value(self) -> Optional[T]:
        """The current value, or None if nothing was set yet."""
        return None if self._value is _UNSET else self._value

    def set(self, value: T) -> None:
        self._value = value
        logger.debug(f"{self.name}: notifying {len(self._observers)} observer(s)")
        # Copy so observers may unregister while being notified
        for observer in list(self._observers):
            observer(value)

    def observe(self, observer: Observer) -> Callable[[], None]:
        """
        Register ``observer`` and return a function that unregisters it.
        """
        self._observers.append(observer)
        if self.has_value:
            observer(self._value)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def __repr__(self) -> str:
        return f"ResultCell({self.name!r}, observers={len(self._observers)})"
