from __future__ import annotations

import threading
import time
from typing import Callable, Iterable


def _now_ms() -> int:
    return int(time.time() * 1000)


class IdGenerator:
    """
    Millisecond-timestamp ids that never repeat within a process.

    Two creates inside the same millisecond get consecutive ids, and ids already
    present in the target collection are skipped.
    """

    def __init__(self, clock: Callable[[], int] = _now_ms) -> None:
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self, taken: Iterable[int] = ()) -> int:
        taken_ids = set(taken)
        with self._lock:
            candidate = max(self._clock(), self._last + 1)
            while candidate in taken_ids:
                candidate += 1
            self._last = candidate
            return candidate
