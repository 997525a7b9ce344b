"""
Request Sequencer
=================

Issues monotonically increasing tokens per logical query so that only the
response to the most recently issued request is applied.
"""
import itertools
import threading
from typing import Dict, Hashable


class RequestSequencer:
    """Tracks the latest issued request token for each query key."""

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._latest: Dict[Hashable, int] = {}
        self._lock = threading.Lock()

    def issue(self, key: Hashable) -> int:
        """Issue a new token for `key`; it supersedes every earlier one."""
        with self._lock:
            token = next(self._counter)
            self._latest[key] = token
            return token

    def is_latest(self, key: Hashable, token: int) -> bool:
        """Whether `token` is still the most recent one issued for `key`."""
        with self._lock:
            return self._latest.get(key) == token

    def invalidate(self, key: Hashable) -> None:
        """Discard all in-flight requests for `key`."""
        with self._lock:
            self._latest.pop(key, None)
