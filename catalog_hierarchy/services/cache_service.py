# catalog_hierarchy/services/cache_service.py
import logging
import threading
from contextlib import contextmanager
from typing import Any, Callable, Dict, Hashable


class _KeyLock:
    """Per-key lock plus the number of callers using it"""

    def __init__(self):
        self.lock = threading.Lock()
        self.users = 0


class HydrationCache:
    """Process-wide store for expensive derived values.

    A value is computed by the caller's factory the first time its key is
    requested. Only one factory call runs per key at a time; a factory
    that raises leaves nothing behind. Per-key locks live only while some
    caller holds or waits on them.
    """

    def __init__(self):
        self._values: Dict[Hashable, Any] = {}
        self._key_locks: Dict[Hashable, _KeyLock] = {}
        self._lock = threading.Lock()
        self.logger = logging.getLogger(__name__)

    def __contains__(self, key: Hashable) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    @contextmanager
    def _holding(self, key: Hashable):
        with self._lock:
            entry = self._key_locks.get(key)
            if entry is None:
                entry = self._key_locks[key] = _KeyLock()
            entry.users += 1
        try:
            with entry.lock:
                yield
        finally:
            with self._lock:
                entry.users -= 1
                if entry.users == 0:
                    del self._key_locks[key]

    def get(self, key: Hashable, default: Any = None) -> Any:
        return self._values.get(key, default)

    def get_or_create(self, key: Hashable, factory: Callable[[], Any]) -> Any:
        """Cached value for key, running factory on a miss"""
        if key in self._values:
            return self._values[key]
        with self._holding(key):
            if key in self._values:
                return self._values[key]
            self.logger.debug(f"Hydration cache miss for {key!r}")
            value = factory()
            self._values[key] = value
            return value

    def put(self, key: Hashable, value: Any):
        with self._holding(key):
            self._values[key] = value

    def invalidate(self, key: Hashable) -> bool:
        """Drop one entry; the next read recomputes it"""
        if key not in self._values:
            return False
        with self._holding(key):
            return self._values.pop(key, None) is not None

    def clear(self):
        # in-flight key locks stay with their holders
        with self._lock:
            self._values.clear()
