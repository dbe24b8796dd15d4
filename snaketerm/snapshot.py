from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from snaketerm.types import GameStatus, Position

EMPTY = 0
BODY = 1
HEAD = 2
FOOD = 3

CELL_CHARS = {
    EMPTY: "  ",
    BODY: "▒▒",
    HEAD: "██",
    FOOD: "()",
}


@dataclass(frozen=True)
class BoardSnapshot:
    """Read-only view of a session, taken between ticks for rendering."""

    width: int
    height: int
    snake: Tuple[Position, ...]
    food: Optional[Position]  # None once the snake fills the board
    score: int
    status: GameStatus
    move_speed: int

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def body(self) -> Tuple[Position, ...]:
        return self.snake[1:]

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    @property
    def paused(self) -> bool:
        return self.status is GameStatus.PAUSED

    def to_grid(self) -> np.ndarray:
        """Board as an int8 array indexed ``[y, x]``.

        Cells hold EMPTY, BODY, HEAD or FOOD. Anything outside the board is
        skipped, which only happens for a head that left the board.
        """
        h, w = self.height, self.width
        grid = np.zeros((h, w), dtype=np.int8)

        for x, y in self.body:
            if 0 <= x < w and 0 <= y < h:
                grid[y, x] = BODY

        if self.food is not None:
            fx, fy = self.food
            if 0 <= fx < w and 0 <= fy < h:
                grid[fy, fx] = FOOD

        hx, hy = self.head
        if 0 <= hx < w and 0 <= hy < h:
            grid[hy, hx] = HEAD

        return grid

    def to_rows(self) -> List[str]:
        # Two characters per cell keeps terminal cells roughly square.
        return ["".join(CELL_CHARS[int(cell)] for cell in row) for row in self.to_grid()]
