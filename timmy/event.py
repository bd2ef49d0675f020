"""Multicast event with removable listeners."""

from __future__ import annotations

from typing import Any, Callable


class Event:
    """Holds listeners keyed by the id returned when they were added."""

    def __init__(self) -> None:
        self._seq = 0
        self._listeners: dict[int, Callable[..., Any]] = {}

    def add_listener(self, listener: Callable[..., Any]) -> int:
        """Register ``listener`` and return its id."""
        listener_id = self._seq
        self._seq += 1
        self._listeners[listener_id] = listener
        return listener_id

    def invoke(self, *args: Any) -> None:
        """Call every listener with ``args``."""
        for listener in list(self._listeners.values()):
            listener(*args)

    def remove_listener(self, listener_id: int) -> None:
        self._listeners.pop(listener_id, None)

    def clear(self) -> None:
        self._listeners.clear()

    def has_listeners(self) -> bool:
        return bool(self._listeners)