"""
Shared state for one top-level enumeration run.
"""

import threading

from web_enum.core.baseline import BaselineCache


class EnumerationSession:
    """
    Visited set plus baseline cache, shared by every node of one run.

    The session is owned by the caller and passed by reference to the
    walker; reuse it across runs to share deduplication, or call
    :meth:`reset` to start over.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._visited: set[str] = set()
        self.baselines = BaselineCache()

    def admit(self, url: str, depth: int, max_depth: int) -> bool:
        """Atomically claim *url* for exploration.

        Returns False when *depth* exceeds *max_depth* or *url* has
        already been claimed.
        """
        with self._lock:
            if depth > max_depth or url in self._visited:
                return False
            self._visited.add(url)
            return True

    def is_visited(self, url: str) -> bool:
        with self._lock:
            return url in self._visited

    @property
    def visited(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._visited)

    def reset(self) -> None:
        with self._lock:
            self._visited.clear()
        self.baselines.clear()
