from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional

from snaketerm.arbiter import DEFAULT_CAPACITY, InputArbiter
from snaketerm.snapshot import BoardSnapshot
from snaketerm.types import Direction, GameStatus, Position

logger = logging.getLogger(__name__)

INITIAL_LENGTH = 4
FOOD_LEAD = 5
MIN_WIDTH = 2 * (INITIAL_LENGTH - 1)


@dataclass(frozen=True)
class SpeedCurve:
    """Ticks between moves as a function of score.

    ``max(floor, initial - score // divisor)``: never increases with score
    and never drops below ``floor``.
    """

    initial: int = 8
    divisor: int = 2
    floor: int = 3

    def __post_init__(self) -> None:
        if self.floor < 1:
            raise ValueError("speed floor must be at least one tick")
        if self.divisor < 1:
            raise ValueError("speed divisor must be positive")
        if self.initial < self.floor:
            raise ValueError("initial speed must not be below the floor")

    def speed_for(self, score: int) -> int:
        return max(self.floor, self.initial - score // self.divisor)


@dataclass
class TickResult:
    moved: bool
    ate_food: bool
    collision: bool
    status: GameStatus


class GameSession:
    """State of one player's game, advanced by an external clock.

    The session never sleeps or schedules anything itself: callers feed
    it ``on_tick`` at a fixed cadence and ``submit`` whenever a key
    arrives.
    """

    def __init__(
        self,
        width: int,
        height: int,
        speed_curve: Optional[SpeedCurve] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        queue_capacity: int = DEFAULT_CAPACITY,
        random_initial_food: bool = False,
    ) -> None:
        if width < MIN_WIDTH or height < 1:
            raise ValueError(
                f"board {width}x{height} cannot hold the initial snake "
                f"(need at least {MIN_WIDTH}x1)"
            )
        self.width = width
        self.height = height
        self.speed_curve = speed_curve or SpeedCurve()
        self.random = rng or random.Random(seed)
        self.queue_capacity = queue_capacity
        self.random_initial_food = random_initial_food

        self.snake: Deque[Position] = deque()
        self.direction = Direction.RIGHT
        self.last_direction = Direction.RIGHT
        self.food: Optional[Position] = Position(0, 0)
        self.score = 0
        self.tick_count = 0
        self.move_speed = self.speed_curve.initial
        self.status = GameStatus.RUNNING
        self.arbiter = InputArbiter(queue_capacity)

        self.restart()

    def restart(self) -> "GameSession":
        center = Position(self.width // 2, self.height // 2)
        self.snake = deque(Position(center.x - i, center.y) for i in range(INITIAL_LENGTH))
        self.direction = Direction.RIGHT
        self.last_direction = Direction.RIGHT
        self.arbiter = InputArbiter(self.queue_capacity)

        self.score = 0
        self.tick_count = 0
        self.move_speed = self.speed_curve.initial
        self.status = GameStatus.RUNNING

        lead = Position(center.x + FOOD_LEAD, center.y)
        if self.random_initial_food or not self._on_board(lead):
            self.food = self._random_food()
        else:
            self.food = lead

        logger.info("Game restarted on %dx%d board", self.width, self.height)
        return self

    @property
    def head(self) -> Position:
        return self.snake[0]

    def submit(self, direction: Direction) -> bool:
        return self.arbiter.submit(direction)

    def toggle_pause(self) -> GameStatus:
        if self.status is GameStatus.RUNNING:
            self.status = GameStatus.PAUSED
        elif self.status is GameStatus.PAUSED:
            self.status = GameStatus.RUNNING
        logger.info("Pause toggled, status %s", self.status.value)
        return self.status

    def on_tick(self) -> TickResult:
        if self.status is not GameStatus.RUNNING:
            return self._result(moved=False)

        self.tick_count += 1
        if self.tick_count < self.move_speed:
            return self._result(moved=False)
        self.tick_count = 0

        new_direction = self.arbiter.drain_one(self.direction, self.last_direction)
        self.last_direction = self.direction
        if new_direction is not None:
            self.direction = new_direction

        new_head = self.head.moved(self.direction)

        if self._is_collision(new_head):
            self.status = GameStatus.GAME_OVER
            logger.info("Game over at %s, score %d", tuple(new_head), self.score)
            return self._result(moved=False, collision=True)

        self.snake.appendleft(new_head)

        if new_head == self.food:
            self._handle_food()
            return self._result(moved=True, ate_food=True)

        self.snake.pop()
        return self._result(moved=True)

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            width=self.width,
            height=self.height,
            snake=tuple(self.snake),
            food=self.food,
            score=self.score,
            status=self.status,
            move_speed=self.move_speed,
        )

    def _handle_food(self) -> None:
        self.score += 1
        self.move_speed = self.speed_curve.speed_for(self.score)
        logger.info("Snake ate food at %s, score %d", tuple(self.food), self.score)

        if len(self.snake) >= self.width * self.height:
            self.status = GameStatus.GAME_OVER
            self.food = None
            logger.info("No space left for food, board filled with score %d", self.score)
            return

        self.food = self._random_food()
        logger.debug("New food position %s", tuple(self.food))

    def _random_food(self) -> Position:
        occupied = set(self.snake)
        while True:
            food = Position(
                self.random.randrange(self.width),
                self.random.randrange(self.height),
            )
            if food not in occupied:
                return food
            logger.debug("Food spawned on snake at %s, rerolling", tuple(food))

    def _on_board(self, pos: Position) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def _is_collision(self, pos: Position) -> bool:
        if not self._on_board(pos):
            logger.warning("Snake collided with border: %s", list(self.snake))
            return True
        # The tail still counts: it is only vacated after the move.
        if pos in self.snake:
            logger.warning("Snake collided with itself at %s: %s", tuple(pos), list(self.snake))
            return True
        return False

    def _result(self, moved: bool, ate_food: bool = False, collision: bool = False) -> TickResult:
        return TickResult(moved=moved, ate_food=ate_food, collision=collision, status=self.status)


def restart(
    width: int,
    height: int,
    speed_curve: Optional[SpeedCurve] = None,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    **kwargs,
) -> GameSession:
    """Create a fresh session in its initial state."""
    return GameSession(width, height, speed_curve=speed_curve, rng=rng, seed=seed, **kwargs)


def on_tick(session: GameSession) -> GameSession:
    session.on_tick()
    return session


def toggle_pause(session: GameSession) -> GameSession:
    session.toggle_pause()
    return session
