"""Tick schedulers: fixed delay, then fire on the next frame"""
from typing import Callable, Optional

Callback = Callable[[], None]


class TickScheduler:
    """Holds at most one pending tick; scheduling again replaces it."""

    def schedule(self, interval_ms: float, callback: Callback):
        raise NotImplementedError

    def cancel(self):
        raise NotImplementedError


class ManualScheduler(TickScheduler):
    def __init__(self):
        self.interval_ms: Optional[float] = None
        self.callback: Optional[Callback] = None
        self.fired = 0

    @property
    def pending(self) -> bool:
        return self.callback is not None

    def schedule(self, interval_ms, callback):
        self.interval_ms = interval_ms
        self.callback = callback

    def cancel(self):
        self.interval_ms = None
        self.callback = None

    def advance(self, n: int = 1) -> int:
        """Fire up to n pending ticks; returns how many actually ran."""
        ran = 0
        for _ in range(n):
            cb = self.callback
            if cb is None:
                break
            self.cancel()
            cb()
            ran += 1
            self.fired += 1
        return ran


class ClockScheduler(TickScheduler):
    """Host scheduler driven once per repaint with the current time in ms."""

    def __init__(self, now: Callable[[], int]):
        self._now = now
        self._due_at: Optional[float] = None
        self._callback: Optional[Callback] = None

    def schedule(self, interval_ms, callback):
        self._due_at = self._now() + interval_ms
        self._callback = callback

    def cancel(self):
        self._due_at = None
        self._callback = None

    def run_due(self, now_ms: int) -> bool:
        if self._callback is None or now_ms < self._due_at:
            return False
        cb = self._callback
        self.cancel()
        cb()
        return True
