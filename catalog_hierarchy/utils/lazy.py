# catalog_hierarchy/utils/lazy.py
import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class LazySlot(Generic[T]):
    """Memoized value computed on first access.

    The factory runs at most once per slot; concurrent readers wait for
    the first computation instead of repeating it.
    """

    def __init__(self):
        self._value: Optional[T] = None
        self._filled = False
        self._lock = threading.Lock()

    @property
    def filled(self) -> bool:
        return self._filled

    def get_or_compute(self, factory: Callable[[], T]) -> T:
        if self._filled:
            return self._value
        with self._lock:
            if not self._filled:
                self._value = factory()
                self._filled = True
        return self._value

    def set(self, value: T):
        with self._lock:
            self._value = value
            self._filled = True

    def clear(self):
        with self._lock:
            self._value = None
            self._filled = False
