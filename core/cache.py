# core/cache.py

"""
In-memory memo store for the actor-bound permission queries.

Every entry is keyed by the actor identity it was computed for, and the
store keeps a single "epoch" identity: the first read or write under a
different identity drops everything cached for the previous one. An answer
computed for one actor is never returned to another.
"""

from collections import OrderedDict
from typing import Optional, Any, Callable, Hashable, Tuple
from threading import Lock

from core.config import settings
from core.logging_config import logger


_MISSING = object()


class PermissionCache:
    """
    Identity-scoped memo cache.

    Thread-safe for concurrent access. Bounded: the oldest entry is evicted
    once max_entries is reached.
    """

    def __init__(self, max_entries: Optional[int] = None):
        self._entries: "OrderedDict[Tuple, Any]" = OrderedDict()
        self._lock = Lock()
        self._epoch: Any = _MISSING
        self._max_entries = max_entries if max_entries is not None else settings.POLICY_CACHE_MAX_ENTRIES
        if self._max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {self._max_entries}")
        self._hits = 0
        self._misses = 0

    # -----------------------------------------------------
    # Epoch handling (caller holds the lock)
    # -----------------------------------------------------
    def _enter_epoch(self, identity: Hashable):
        if self._epoch is _MISSING or identity != self._epoch:
            if self._entries:
                logger.debug(
                    f"Actor identity changed, dropping {len(self._entries)} cached permission answers"
                )
            self._entries.clear()
            self._epoch = identity

    def _store(self, full_key: Tuple, value: Any):
        self._entries[full_key] = value
        while len(self._entries) > self._max_entries:
            self._entries.popitem(last=False)

    # -----------------------------------------------------
    # Public API
    # -----------------------------------------------------
    def get(self, identity: Hashable, key: Tuple, default: Any = None) -> Any:
        """
        Get a value cached for this identity.

        Returns default when nothing is cached, or when the key cannot be hashed.
        """
        with self._lock:
            self._enter_epoch(identity)
            try:
                value = self._entries.get((identity,) + tuple(key), _MISSING)
            except TypeError:
                value = _MISSING

            if value is _MISSING:
                self._misses += 1
                return default

            self._hits += 1
            return value

    def set(self, identity: Hashable, key: Tuple, value: Any):
        with self._lock:
            self._enter_epoch(identity)
            try:
                self._store((identity,) + tuple(key), value)
            except TypeError:
                logger.debug(f"Unhashable permission cache key skipped: {key!r}")

    def get_or_compute(
        self,
        identity: Hashable,
        key: Tuple,
        compute: Callable[[], Any],
        is_valid: Optional[Callable[[Any], bool]] = None,
    ) -> Any:
        """
        Return the cached value, or compute, store and return it.

        compute runs under the lock so a concurrent identity change cannot
        slip a stale answer in between the read and the write. When is_valid
        is given, a cached value it rejects is recomputed and replaced.
        """
        full_key = (identity,) + tuple(key)

        with self._lock:
            self._enter_epoch(identity)
            try:
                value = self._entries.get(full_key, _MISSING)
            except TypeError:
                # Unhashable arguments are answered but never cached
                self._misses += 1
                return compute()

            if value is not _MISSING and (is_valid is None or is_valid(value)):
                self._hits += 1
                return value

            self._misses += 1
            value = compute()
            self._store(full_key, value)
            return value

    def clear(self):
        """Clear all cache entries and forget the epoch."""
        with self._lock:
            self._entries.clear()
            self._epoch = _MISSING
            self._hits = 0
            self._misses = 0

    @property
    def epoch(self) -> Any:
        with self._lock:
            return None if self._epoch is _MISSING else self._epoch

    def size(self) -> int:
        """Get the number of entries in the cache."""
        with self._lock:
            return len(self._entries)

    def stats(self) -> dict:
        with self._lock:
            return {
                "entries": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
                "max_entries": self._max_entries,
            }
