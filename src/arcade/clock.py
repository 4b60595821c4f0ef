# clock.py
"""
Millisecond scheduler driven by the host loop.

Nothing here reads the wall clock: the host calls `advance(now_ms)` once per
display refresh, which fires due timers first and then the frame callbacks
requested since the previous refresh. Every callback therefore runs on the
host loop's thread, one after another.
"""
from __future__ import annotations
import heapq
import itertools
from typing import Callable, List, Optional, Tuple

from .config import SNAKE_CFG, SnakeConfig

Callback = Callable[[], None]


class TimerHandle:
    """A pending one-shot timer, repeating timer, or frame request."""

    def __init__(self, callback: Callback, due: float, interval: Optional[float] = None):
        self.callback = callback
        self.due = due
        self.interval = interval
        self.cancelled = False
        self.fired = False

    @property
    def active(self) -> bool:
        if self.cancelled:
            return False
        return self.interval is not None or not self.fired

    def cancel(self) -> None:
        self.cancelled = True


class Scheduler:
    def __init__(self, now_ms: float = 0):
        self.now = now_ms
        self._seq = itertools.count()
        self._timers: List[Tuple[float, int, TimerHandle]] = []
        self._frames: List[TimerHandle] = []

    # ---------- Arming ----------
    def call_later(self, delay_ms: float, callback: Callback) -> TimerHandle:
        handle = TimerHandle(callback, self.now + max(0, delay_ms))
        heapq.heappush(self._timers, (handle.due, next(self._seq), handle))
        return handle

    def call_every(self, interval_ms: float, callback: Callback) -> TimerHandle:
        if interval_ms <= 0:
            raise ValueError("interval must be positive")
        handle = TimerHandle(callback, self.now + interval_ms, interval=interval_ms)
        heapq.heappush(self._timers, (handle.due, next(self._seq), handle))
        return handle

    def request_frame(self, callback: Callback) -> TimerHandle:
        handle = TimerHandle(callback, self.now)
        self._frames.append(handle)
        return handle

    @property
    def pending(self) -> int:
        """Live timers and frame requests still waiting to fire."""
        return sum(1 for _, _, h in self._timers if h.active) + \
            sum(1 for h in self._frames if h.active)

    # ---------- Driving ----------
    def advance(self, now_ms: float) -> None:
        """Fire every timer due at or before `now_ms`, then the queued frames."""
        self.now = max(self.now, now_ms)

        while self._timers and self._timers[0][0] <= self.now:
            _, _, handle = heapq.heappop(self._timers)
            if handle.cancelled:
                continue
            if handle.interval is not None:
                # re-arm from now: a stalled host loop gets one fire, not a backlog
                handle.due = self.now + handle.interval
                heapq.heappush(self._timers, (handle.due, next(self._seq), handle))
            else:
                handle.fired = True
            handle.callback()

        # Frames requested while these run wait for the next refresh
        frames, self._frames = self._frames, []
        for handle in frames:
            if handle.cancelled:
                continue
            handle.fired = True
            handle.callback()

    def cancel_all(self) -> None:
        for _, _, h in self._timers:
            h.cancel()
        for h in self._frames:
            h.cancel()
        self._timers = []
        self._frames = []


def tick_delay(score: int, slow_active: bool, cfg: SnakeConfig = SNAKE_CFG) -> int:
    """Grid tick interval: faster as the score rises, slower under a slow effect."""
    delay = max(cfg.min_delay_ms, cfg.base_delay_ms - score * cfg.delay_step_per_point)
    if slow_active:
        delay += cfg.slow_penalty_ms
    return delay


class TickChain:
    """
    Discrete-tick driver: at most one pending timer. Each fire runs `step`
    and re-arms only if `keep_going()` still holds afterwards.
    """

    def __init__(self, scheduler: Scheduler, step: Callback,
                 delay: Callable[[], float], keep_going: Callable[[], bool]):
        self.scheduler = scheduler
        self.step = step
        self.delay = delay
        self.keep_going = keep_going
        self.handle: Optional[TimerHandle] = None

    @property
    def armed(self) -> bool:
        return self.handle is not None and self.handle.active

    def start(self) -> None:
        if self.armed:
            return
        self._arm()

    def stop(self) -> None:
        if self.handle is not None:
            self.handle.cancel()
            self.handle = None

    def _arm(self) -> None:
        self.handle = self.scheduler.call_later(self.delay(), self._fire)

    def _fire(self) -> None:
        self.handle = None
        self.step()
        if self.keep_going() and self.handle is None:
            self._arm()


class FrameLoop:
    """Continuous driver: runs `frame` once per refresh while `keep_going()` holds."""

    def __init__(self, scheduler: Scheduler, frame: Callback, keep_going: Callable[[], bool]):
        self.scheduler = scheduler
        self.frame = frame
        self.keep_going = keep_going
        self.handle: Optional[TimerHandle] = None

    @property
    def armed(self) -> bool:
        return self.handle is not None and self.handle.active

    def start(self) -> None:
        if self.armed:
            return
        self.handle = self.scheduler.request_frame(self._fire)

    def stop(self) -> None:
        if self.handle is not None:
            self.handle.cancel()
            self.handle = None

    def _fire(self) -> None:
        self.handle = None
        self.frame()
        if self.keep_going() and self.handle is None:
            self.handle = self.scheduler.request_frame(self._fire)
