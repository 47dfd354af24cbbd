from __future__ import annotations
import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class Lazy(Generic[T]):
    """
    Compute once on first use, then hand the same object to every caller.

    The first callers race for a lock; exactly one runs the factory while the
    others wait, so nobody sees a half-built value and the factory never runs
    twice. Once built, get() is a plain attribute read. If the factory raises,
    the error is kept and raised again on every later get(); the factory is
    not retried.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._value: Optional[T] = None
        self._error: Optional[BaseException] = None
        self._ready = False
        self.builds = 0  # instrumentation: how many times the factory completed

    @property
    def ready(self) -> bool:
        return self._ready

    @property
    def failed(self) -> bool:
        return self._error is not None

    def get(self) -> T:
        if self._ready:
            return self._value  # type: ignore[return-value]
        with self._lock:
            if self._error is not None:
                raise self._error
            if not self._ready:
                try:
                    self._value = self._factory()
                except Exception as e:
                    self._error = e
                    raise
                self.builds += 1
                self._ready = True
        return self._value  # type: ignore[return-value]
