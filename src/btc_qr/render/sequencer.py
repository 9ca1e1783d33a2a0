"""Last-write-wins guard for asynchronous render requests."""

from __future__ import annotations

import itertools
import threading


class RequestSequencer:
    """Hand out increasing tokens and accept only the newest.

    Each "generate" action calls :meth:`begin` and keeps the token; when the
    render completes, :meth:`accept` tells whether the result is still the
    latest or has been superseded by a newer request.
    """

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._latest = 0
        self._lock = threading.Lock()

    @property
    def latest(self) -> int:
        return self._latest

    def begin(self) -> int:
        with self._lock:
            self._latest = next(self._counter)
            return self._latest

    def accept(self, token: int) -> bool:
        return token == self._latest

    def invalidate(self) -> None:
        """Make every outstanding token stale (e.g. after the form is cleared)."""
        self.begin()
