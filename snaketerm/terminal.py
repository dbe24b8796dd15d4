from __future__ import annotations

import curses
import logging
import time
from typing import Optional

from snaketerm.clock import TickClock
from snaketerm.config import GameConfig, board_for_viewport, viewport_offset
from snaketerm.controls import Command, apply_command, command_for_key
from snaketerm.game import GameSession
from snaketerm.snapshot import BoardSnapshot

logger = logging.getLogger(__name__)

CURSES_KEYS = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    27: "escape",
    3: "ctrl+c",
}


def key_name(code: int) -> Optional[str]:
    if code in CURSES_KEYS:
        return CURSES_KEYS[code]
    if 0 < code < 256:
        return chr(code)
    return None


def run_terminal(config: GameConfig) -> int:
    """Play in the current terminal; returns the final score."""
    return curses.wrapper(_main, config)


def handle_key(session: GameSession, code: int, clock: Optional[TickClock] = None) -> bool:
    """Apply one curses key code; returns False once the player quits."""
    name = key_name(code)
    command = command_for_key(name) if name else None
    if command is None:
        return True
    if command is Command.RESTART and clock is not None:
        clock.reset(time.monotonic())
    return apply_command(session, command)


def _main(stdscr, config: GameConfig) -> int:
    curses.curs_set(0)
    stdscr.nodelay(True)
    stdscr.keypad(True)

    rows, columns = stdscr.getmaxyx()
    width, height = board_for_viewport(columns, rows, config)
    logger.info("Terminal %dx%d, board %dx%d", columns, rows, width, height)

    session = config.new_session(width, height)
    clock = TickClock(config.tick_interval)
    clock.reset(time.monotonic())

    running = True
    try:
        while running:
            code = stdscr.getch()
            while code != -1 and running:
                if code == curses.KEY_RESIZE:
                    # The board keeps its size; only its placement follows the window.
                    rows, columns = stdscr.getmaxyx()
                    logger.info("Terminal resized to %dx%d", columns, rows)
                else:
                    running = handle_key(session, code, clock)
                code = stdscr.getch()

            for _ in range(clock.due(time.monotonic())):
                session.on_tick()

            _draw(stdscr, session.snapshot(), columns, rows)
            time.sleep(config.tick_interval)
    except KeyboardInterrupt:
        # cbreak mode turns ctrl+c into SIGINT before getch sees it
        logger.info("Interrupted, leaving with score %d", session.score)

    return session.score


def _draw(stdscr, snapshot: BoardSnapshot, columns: int, rows: int) -> None:
    stdscr.erase()
    left, top = viewport_offset(columns, rows, snapshot.width, snapshot.height)

    if snapshot.game_over:
        _addstr(stdscr, top, left, f"Game Over! Score: {snapshot.score}")
        _addstr(stdscr, top + 1, left, "Press 'r' to restart | Press 'q' to quit")
        stdscr.refresh()
        return

    for y, row in enumerate(snapshot.to_rows()):
        _addstr(stdscr, top + y, left, row)

    status = f"Score: {snapshot.score} | Press 'r' to restart | Press 'q' to quit"
    if snapshot.paused:
        status = "Paused | " + status
    _addstr(stdscr, top + snapshot.height, left, status)
    stdscr.refresh()


def _addstr(stdscr, y: int, x: int, text: str) -> None:
    rows, columns = stdscr.getmaxyx()
    if y >= rows or x >= columns:
        return
    try:
        stdscr.addstr(y, x, text[: columns - x - 1])
    except curses.error:
        # Writing the bottom-right cell raises even though the text is drawn.
        pass
