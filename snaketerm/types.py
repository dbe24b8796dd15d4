from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Tuple

Vec2 = Tuple[int, int]


class Position(NamedTuple):
    x: int
    y: int

    def moved(self, direction: "Direction") -> "Position":
        dx, dy = direction.vector
        return Position(self.x + dx, self.y + dy)


class Direction(Enum):
    # y grows downward, matching screen coordinates
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def vector(self) -> Vec2:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


class GameStatus(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"
