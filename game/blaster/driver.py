"""
Frame driver: turns wall-clock time between frames into simulation steps
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class FrameDriver:
    """Calls ``update(dt)`` then ``render()`` once per frame.

    The host (the arcade window) calls ``tick`` from its per-frame callback,
    which is what reschedules the next frame. ``max_dt`` optionally caps a
    long gap (e.g. after the process was suspended); by default the measured
    delta is passed through unchanged.
    """

    def __init__(self, update: Callable[[float], object], render: Callable[[], object],
                 clock: Callable[[], float] = time.perf_counter,
                 max_dt: Optional[float] = None):
        self.update = update
        self.render = render
        self.clock = clock
        self.max_dt = max_dt
        self.last_time: Optional[float] = None
        self.frames = 0

    def start(self):
        self.last_time = self.clock()
        self.frames = 0

    def tick(self) -> float:
        now = self.clock()
        if self.last_time is None:
            self.last_time = now
        dt = max(0.0, now - self.last_time)
        if self.max_dt is not None and dt > self.max_dt:
            logger.debug("Clamping frame delta %.3fs to %.3fs", dt, self.max_dt)
            dt = self.max_dt

        self.update(dt)
        self.render()

        self.last_time = now
        self.frames += 1
        return dt
