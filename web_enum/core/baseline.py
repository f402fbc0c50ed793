"""
Soft-404 baseline fingerprints.

Many servers answer unknown paths with HTTP 200 and a generic error page,
so the enumerator compares every probe against what a path that certainly
does not exist looks like under the same base URL.
"""

import random
import string
import threading
from concurrent.futures import Future
from typing import Callable

from web_enum.config import BASELINE_SIGNATURE_BYTES
from web_enum.utils.url import combine_url


def signature(body: str, size: int = BASELINE_SIGNATURE_BYTES) -> bytes:
    """First *size* bytes of *body* (UTF-8)."""
    return body.encode("utf-8", errors="replace")[:size]


def not_found_path() -> str:
    """A random directory name that should not exist on any server."""
    slug = "".join(random.choices(string.ascii_lowercase, k=12))
    return f"__{slug}_not_found__/"


def not_found_url(base_url: str) -> str:
    return combine_url(base_url, not_found_path())


class BaselineCache:
    """
    Baseline signatures keyed by base URL, computed at most once per key.

    The first caller for a key installs an in-flight future under the
    lock and computes the value outside of it; concurrent callers for the
    same key block on that future instead of fetching again.  Different
    keys are computed in parallel.  Entries are never invalidated.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[str, Future] = {}
        self.hits = 0
        self.misses = 0

    def get(self, base_url: str, compute: Callable[[str], bytes]) -> bytes:
        with self._lock:
            fut = self._entries.get(base_url)
            if fut is None:
                fut = Future()
                self._entries[base_url] = fut
                self.misses += 1
                owner = True
            else:
                self.hits += 1
                owner = False

        if owner:
            try:
                fut.set_result(compute(base_url))
            except BaseException as exc:
                fut.set_exception(exc)
                raise
        return fut.result()

    def __contains__(self, base_url: str) -> bool:
        with self._lock:
            return base_url in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0
