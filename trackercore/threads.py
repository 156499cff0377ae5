"""Thread counting and detached worker threads that are counted while alive."""

from __future__ import annotations

import logging
import threading
from types import TracebackType
from typing import Any, Callable, Optional, Type

logger = logging.getLogger(__name__)


class AtomicCounter:
    """An integer that can be changed safely from several threads."""

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    def decrement(self) -> int:
        with self._lock:
            self._value -= 1
            return self._value

    def value(self) -> int:
        with self._lock:
            return self._value


class ThreadCounter:
    """Counts one running thread for as long as it is held.

    The counter is raised on creation and lowered when the block ends.
    """

    def __init__(self, counter: AtomicCounter) -> None:
        self._counter = counter
        counter.increment()

    def count(self) -> int:
        return self._counter.value()

    def __enter__(self) -> ThreadCounter:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self._counter.decrement()


class CountedThreads:
    """Starts detached worker threads and counts those still running."""

    def __init__(self) -> None:
        self._condition = threading.Condition()
        self._count = 0
        self._closed = False

    def spawn(self, function: Callable[..., Any], *args: Any) -> bool:
        """Run function(*args) in a new thread; return False once closed."""
        with self._condition:
            if self._closed:
                return False
            self._count += 1
        thread = threading.Thread(target=self._run, args=(function, args), daemon=True)
        try:
            thread.start()
        except BaseException:
            self._finished()
            raise
        return True

    def _run(self, function: Callable[..., Any], args: tuple) -> None:
        try:
            function(*args)
        except Exception:
            logger.debug("worker thread failed", exc_info=True)
        finally:
            self._finished()

    def _finished(self) -> None:
        with self._condition:
            self._count -= 1
            self._condition.notify_all()

    def active(self) -> int:
        with self._condition:
            return self._count

    def close(self) -> None:
        """Refuse any further threads."""
        with self._condition:
            self._closed = True

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait until no thread runs; return whether that happened in time."""
        with self._condition:
            return self._condition.wait_for(lambda: self._count == 0, timeout)