from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional

from snaketerm.game import GameSession
from snaketerm.types import Direction

logger = logging.getLogger(__name__)


class Command(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAUSE = "pause"
    RESTART = "restart"
    QUIT = "quit"


KEYMAP: Dict[str, Command] = {
    "w": Command.UP,
    "k": Command.UP,
    "up": Command.UP,
    "s": Command.DOWN,
    "j": Command.DOWN,
    "down": Command.DOWN,
    "a": Command.LEFT,
    "h": Command.LEFT,
    "left": Command.LEFT,
    "d": Command.RIGHT,
    "l": Command.RIGHT,
    "right": Command.RIGHT,
    " ": Command.PAUSE,
    "space": Command.PAUSE,
    "r": Command.RESTART,
    "q": Command.QUIT,
    "ctrl+c": Command.QUIT,
    "escape": Command.QUIT,
}

STEERING = {
    Command.UP: Direction.UP,
    Command.DOWN: Direction.DOWN,
    Command.LEFT: Direction.LEFT,
    Command.RIGHT: Direction.RIGHT,
}


def command_for_key(name: str) -> Optional[Command]:
    if name in KEYMAP:
        return KEYMAP[name]
    return KEYMAP.get(name.lower())


def apply_command(session: GameSession, command: Command) -> bool:
    """Apply one input command; returns False once the player asked to quit."""
    if command is Command.QUIT:
        return False
    if command in STEERING:
        session.submit(STEERING[command])
    elif command is Command.PAUSE:
        session.toggle_pause()
    elif command is Command.RESTART:
        session.restart()
    return True
