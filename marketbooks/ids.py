"""Thread-safe sequential identifier generation."""

from __future__ import annotations

import threading


class IDGenerator:
    """Produces identifiers made of a prefix and a zero-padded counter."""

    def __init__(self, prefix: str, digits: int) -> None:
        self.prefix = prefix
        self.digits = digits
        self._counter = 0
        self._lock = threading.Lock()

    def next(self) -> str:
        """Return the next identifier in the sequence."""
        with self._lock:
            self._counter += 1
            number = self._counter
        return f"{self.prefix}{number:0{self.digits}d}"