"""
Fixed-rate frame pacing.

Frame N is released no earlier than ``N / fps`` seconds after start.  The
pacer re-checks the clock every ``poll_interval`` seconds instead of
sleeping for the exact remainder, so it may run late by up to one poll
interval but never early.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)

POLL_INTERVAL = 0.01  # seconds


class FramePacer:
    """Blocks the caller until the next scheduled frame time.

    Parameters:
        fps:           Target frames per second.
        poll_interval: Sleep granularity in seconds.
        clock:         Monotonic time source in seconds.
        sleep:         Blocking sleep, called with ``poll_interval``.
    """

    def __init__(
        self,
        fps: int,
        poll_interval: float = POLL_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if fps < 1:
            raise ValueError(f"fps must be positive, got {fps}")
        self.frame_interval = 1.0 / fps
        self.poll_interval = poll_interval
        self._clock = clock
        self._sleep = sleep
        self._start: Optional[float] = None
        self.frame = 0

    def start(self) -> None:
        self._start = self._clock()
        self.frame = 0

    @property
    def elapsed(self) -> float:
        if self._start is None:
            raise RuntimeError("FramePacer.start() has not been called")
        return self._clock() - self._start

    def wait(self) -> float:
        """Wait for the current frame's slot, advance the counter.

        Returns the elapsed time at release.
        """
        due = self.frame * self.frame_interval
        elapsed = self.elapsed
        while elapsed < due:
            self._sleep(self.poll_interval)
            elapsed = self.elapsed
        self.frame += 1
        return elapsed
