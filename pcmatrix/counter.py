"""A thread-safe integer counter."""

from __future__ import annotations

import threading


class Counter:
    """An integer counter whose operations are serialised by a lock."""

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    def increment(self) -> None:
        """Add one to the counter."""
        with self._lock:
            self._value += 1

    def decrement(self) -> None:
        """Subtract one from the counter."""
        with self._lock:
            self._value -= 1

    def value(self) -> int:
        """Return the current value."""
        with self._lock:
            return self._value

    def __repr__(self) -> str:
        return f"Counter({self.value()})"