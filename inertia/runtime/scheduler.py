"""Millisecond one-shot timers for fallback scroll-end checks."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from heapq import heapify, heappop, heappush

TimerCallback = Callable[[], None]


@dataclass(frozen=True, slots=True)
class _Timer:
    due_ms: int
    callback: TimerCallback


class Scheduler:
    """Timer service on a clock the host advances; nothing fires on its own.

    Cancelled timers are dropped immediately, so a host that stops advancing
    the clock does not keep their callbacks alive.
    """

    def __init__(self, *, start_ms: int = 0) -> None:
        self._now_ms = start_ms
        self._last_id = 0
        self._timers: dict[int, _Timer] = {}
        self._due: list[tuple[int, int]] = []

    @property
    def now_ms(self) -> int:
        return self._now_ms

    @property
    def queued_task_count(self) -> int:
        """Timers still waiting to fire."""
        return len(self._timers)

    def call_later(self, delay_ms: int, callback: TimerCallback) -> int:
        """Fire `callback` once, `delay_ms` after the current clock. Returns a timer id."""
        if delay_ms < 0:
            raise ValueError("delay_ms must be >= 0")
        self._last_id += 1
        timer_id = self._last_id
        due_ms = self._now_ms + delay_ms
        self._timers[timer_id] = _Timer(due_ms=due_ms, callback=callback)
        heappush(self._due, (due_ms, timer_id))
        return timer_id

    def cancel(self, task_id: int) -> None:
        timer = self._timers.pop(task_id, None)
        if timer is None:
            return
        self._due.remove((timer.due_ms, task_id))
        heapify(self._due)

    def cancel_all(self) -> None:
        self._timers.clear()
        self._due.clear()

    def advance(self, delta_ms: int) -> int:
        """Move the clock forward by `delta_ms` and fire what became due."""
        if delta_ms < 0:
            raise ValueError("delta_ms must be >= 0")
        return self.run_due(self._now_ms + delta_ms)

    def run_due(self, now_ms: int) -> int:
        """Set the clock to `now_ms` and fire due timers in (due, id) order.

        Timers armed by a firing callback run in the same pass when already
        due. Returns the number of callbacks invoked.
        """
        if now_ms < self._now_ms:
            raise ValueError("now_ms cannot move backwards")
        self._now_ms = now_ms
        fired = 0
        while self._due and self._due[0][0] <= now_ms:
            _, timer_id = heappop(self._due)
            timer = self._timers.pop(timer_id)
            timer.callback()
            fired += 1
        return fired
