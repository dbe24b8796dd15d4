from __future__ import annotations

import logging
import queue
from typing import Optional

from snaketerm.types import Direction

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 5


class InputArbiter:
    """Bounded buffer of pending direction changes.

    Key handlers call ``submit`` whenever a key arrives; the engine calls
    ``drain_one`` once per move. ``queue.Queue`` keeps the producer and the
    tick consumer safe to run on different threads.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, dedupe: bool = True) -> None:
        if capacity < 1:
            raise ValueError("queue capacity must be at least 1")
        self.capacity = capacity
        self.dedupe = dedupe
        self._queue: "queue.Queue[Direction]" = queue.Queue(maxsize=capacity)
        self._last_submitted: Optional[Direction] = None

    def submit(self, direction: Direction) -> bool:
        if self.dedupe and direction is self._last_submitted:
            return False
        try:
            self._queue.put_nowait(direction)
        except queue.Full:
            logger.warning("Buffer full, dropping %s", direction.name.lower())
            return False
        self._last_submitted = direction
        logger.debug("Queued direction %s", direction.name)
        return True

    def drain_one(
        self, current: Direction, previous: Optional[Direction] = None
    ) -> Optional[Direction]:
        """Pop until a direction that turns away from ``current`` is found.

        Repeats of ``current`` and reversals of it are discarded, so a
        turn queued before an earlier turn was applied cannot reverse the
        snake later.
        """
        while True:
            try:
                candidate = self._queue.get_nowait()
            except queue.Empty:
                return None
            if candidate is current or candidate is current.opposite:
                logger.debug(
                    "Invalid direction %s (current %s, previous %s)",
                    candidate.name,
                    current.name,
                    previous.name if previous else None,
                )
                continue
            logger.debug("New direction %s (was %s)", candidate.name, current.name)
            return candidate

    def pending(self) -> int:
        return self._queue.qsize()
