from __future__ import annotations

from typing import Optional


class TickClock:
    """Fixed-cadence tick source polled by a frontend loop.

    ``due`` reports how many whole intervals passed since the previous
    call, so ``on_tick`` runs at the same rate whatever the frame rate.
    """

    def __init__(self, interval: float, max_catchup: int = 5) -> None:
        if interval <= 0:
            raise ValueError("tick interval must be positive")
        self.interval = interval
        self.max_catchup = max_catchup
        self._last: Optional[float] = None

    def reset(self, now: float) -> None:
        self._last = now

    def due(self, now: float) -> int:
        if self._last is None:
            self._last = now
            return 0
        ticks = int((now - self._last) // self.interval)
        if ticks <= 0:
            return 0
        if ticks > self.max_catchup:
            # A stalled frame drops the backlog instead of bursting moves.
            self._last = now
            return self.max_catchup
        self._last += ticks * self.interval
        return ticks
