"""Resolution cache keyed by package coordinate.

Entries live for the lifetime of the cache object and are never evicted.
Each key has its own lock, so two threads resolving the same coordinate
run the pipeline once, while different coordinates never wait on each
other's filesystem I/O.
"""

from __future__ import annotations

import threading
from typing import Callable, Dict, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


def make_key(name: str, version: str) -> str:
    """Cache key: case-insensitive on name, case-sensitive on version."""
    return f"{name.lower()}:{version}"


class ResolutionCache(Generic[T]):
    """Thread-safe memo of resolution results."""

    def __init__(self) -> None:
        self._entries: Dict[str, T] = {}
        self._key_locks: Dict[str, threading.Lock] = {}
        # Guards _entries and _key_locks; never held across compute()
        self._lock = threading.Lock()

    def _lock_for(self, key: str) -> threading.Lock:
        with self._lock:
            lock = self._key_locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._key_locks[key] = lock
            return lock

    def get(self, key: str) -> Optional[T]:
        """Return the cached value for ``key`` or None."""
        with self._lock:
            return self._entries.get(key)

    def get_or_compute(
        self, key: str, compute: Callable[[], Optional[T]]
    ) -> Tuple[Optional[T], bool]:
        """Return ``(value, hit)``, computing and storing the value on a miss.

        ``hit`` is True whenever the value came from the cache, including
        when another thread stored it while this one waited on the key.

        ``compute`` returning None means the outcome must not be cached;
        the next call for the key will compute again. Exceptions from
        ``compute`` propagate and leave the cache untouched.
        """
        with self._lock:
            if key in self._entries:
                return self._entries[key], True

        with self._lock_for(key):
            # Another thread may have finished while we waited
            with self._lock:
                if key in self._entries:
                    return self._entries[key], True

            value = compute()
            if value is not None:
                with self._lock:
                    self._entries[key] = value
                    # Later callers take the fast path; waiters hold their own reference
                    self._key_locks.pop(key, None)
            return value, False

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        """Drop every entry and its key lock."""
        with self._lock:
            self._entries.clear()
            self._key_locks.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
