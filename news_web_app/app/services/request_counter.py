"""
Thread‑safe request counter.

Every request that reports a ``requestId`` takes the next value from the
counter.  Increments are serialised with a lock, so concurrent callers
never lose an update or observe the same id twice.
"""

import threading


class RequestCounter:
    """Monotonically increasing integer shared by all requests of one app."""

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    def increment(self) -> int:
        """Add one and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        """Current value, without incrementing."""
        with self._lock:
            return self._value

    def __repr__(self) -> str:
        return f"RequestCounter(value={self.value})"
