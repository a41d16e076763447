from __future__ import annotations

import time
from collections.abc import Callable


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class IdGenerator:
    """Millisecond timestamp ids, strictly increasing within the process."""

    def __init__(self, clock: Callable[[], int] = _now_ms) -> None:
        self._clock = clock
        self._last = 0

    def observe(self, ids: list[int]) -> None:
        """Never hand out an id at or below one already in use."""
        if ids:
            self._last = max(self._last, max(ids))

    def next_id(self) -> int:
        candidate = max(self._clock(), self._last + 1)
        self._last = candidate
        return candidate
