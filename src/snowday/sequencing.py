"""Request sequence numbers for discarding stale results."""

from __future__ import annotations

import threading


class RequestSequencer:
    """Hands out monotonically increasing request numbers.

    A result tagged with a number lower than :attr:`latest` was overtaken
    by a newer request and should not be shown.
    """

    def __init__(self) -> None:
        self._latest = 0
        self._lock = threading.Lock()

    @property
    def latest(self) -> int:
        return self._latest

    def next(self) -> int:
        with self._lock:
            self._latest += 1
            return self._latest

    def is_current(self, sequence: int) -> bool:
        return sequence == self._latest
