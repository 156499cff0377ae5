"""A non-reentrant try-lock and the lock ordering levels."""

from __future__ import annotations

import threading
from enum import IntEnum
from types import TracebackType
from typing import Optional, Type


class LockLevel(IntEnum):
    """Lock hierarchy levels, from lowest to highest."""

    LOW = 0
    IO = 1
    IDENTITY = 2
    EVENTS = 3
    DATA_ABSTRACTIONS = 4
    PROGRAM_LOGIC = 5
    GUI = 6
    END = 7


class CASLock:
    """A simple mutual-exclusion lock with a non-blocking attempt."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def try_lock(self) -> bool:
        """Acquire the lock if free; return whether it was acquired."""
        return self._lock.acquire(blocking=False)

    def lock(self) -> None:
        """Block until the lock is acquired."""
        self._lock.acquire()

    def unlock(self) -> None:
        """Release the lock; releasing a free lock does nothing."""
        try:
            self._lock.release()
        except RuntimeError:
            pass

    def locked(self) -> bool:
        return self._lock.locked()

    def __enter__(self) -> CASLock:
        self.lock()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.unlock()