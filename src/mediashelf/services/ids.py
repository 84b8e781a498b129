"""Record id generation."""

import threading
import time
from typing import Protocol


class IdGenerator(Protocol):
    def __call__(self) -> int: ...


class TimestampIdGenerator:
    """Epoch-millisecond ids that never repeat within the process.

    When two ids are requested in the same millisecond (or the clock steps
    back) the previous id plus one is returned instead.
    """

    def __init__(self, clock=time.time) -> None:
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            candidate = int(self._clock() * 1000)
            self._last = max(candidate, self._last + 1)
            return self._last


# Global id generator instance
next_id: IdGenerator = TimestampIdGenerator()
