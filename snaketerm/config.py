from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

from snaketerm.game import MIN_WIDTH, GameSession, SpeedCurve

# ----- Logical board -----
BOARD_WIDTH, BOARD_HEIGHT = 26, 34

# Rows under the board kept for the score line and key hints
STATUS_ROWS = 2
# Terminal columns per board cell
CELL_COLUMNS = 2


@dataclass
class GameConfig:
    board_width: int = BOARD_WIDTH
    board_height: int = BOARD_HEIGHT
    tick_interval: float = 0.016  # seconds
    initial_speed: int = 8  # ticks per move
    speed_divisor: int = 2  # points per speed step
    min_speed: int = 3
    queue_capacity: int = 5
    random_initial_food: bool = False
    seed: Optional[int] = None

    def speed_curve(self) -> SpeedCurve:
        return SpeedCurve(self.initial_speed, self.speed_divisor, self.min_speed)

    def with_overrides(self, **overrides) -> "GameConfig":
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def new_session(self, width: Optional[int] = None, height: Optional[int] = None) -> GameSession:
        return GameSession(
            width or self.board_width,
            height or self.board_height,
            speed_curve=self.speed_curve(),
            seed=self.seed,
            queue_capacity=self.queue_capacity,
            random_initial_food=self.random_initial_food,
        )


PRESETS: Dict[str, GameConfig] = {
    "classic": GameConfig(),
    "ssh": GameConfig(tick_interval=0.010, initial_speed=4, speed_divisor=4, min_speed=3),
}


def board_for_viewport(columns: int, rows: int, config: GameConfig) -> Tuple[int, int]:
    """Largest board that fits the viewport, capped at the logical board size."""
    width = min(config.board_width, columns // CELL_COLUMNS)
    height = min(config.board_height, rows - STATUS_ROWS)
    return max(width, MIN_WIDTH), max(height, 1)


def viewport_offset(columns: int, rows: int, width: int, height: int) -> Tuple[int, int]:
    """Top-left corner that centers a ``width`` x ``height`` board."""
    x = max(0, (columns - width * CELL_COLUMNS) // 2)
    y = max(0, (rows - height - STATUS_ROWS) // 2)
    return x, y
