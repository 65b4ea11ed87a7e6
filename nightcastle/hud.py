"""The heads-up display: the stage countdown timer."""

from __future__ import annotations

import time
from typing import Callable, Optional, Sequence

from .objects import GameObject

START_TIME = 300
TICK_MS = 1000


def _now_ms() -> int:
    return int(time.monotonic() * 1000)


class VisualFigures(GameObject):
    """Counts the stage timer down by one each second unless time is stopped."""

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        super().__init__()
        self.clock = clock or _now_ms
        self.time_count = START_TIME
        self.time_start_count = self.clock()
        self.time_during_count = TICK_MS
        self.is_stop_time = False

    def update(self, dt, co_objects: Optional[Sequence[GameObject]] = None) -> None:
        """Decrease the timer once a full period has passed since the last step."""
        if self.is_stop_time:
            return
        now = self.clock()
        if now - self.time_start_count >= self.time_during_count:
            if self.time_count > 0:
                self.time_count -= 1
            self.time_start_count = now