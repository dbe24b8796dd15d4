import curses

import pytest

from snaketerm.config import GameConfig
from snaketerm.game import GameSession
from snaketerm.terminal import _main, handle_key, key_name
from snaketerm.types import Direction, GameStatus


class FakeScreen:
    """Stands in for a curses window: replays key codes and records drawing."""

    def __init__(self, codes, size=(24, 80), resized=None):
        self.codes = list(codes)
        self.size = size
        self.resized = resized
        self.drawn = []

    def getch(self):
        if not self.codes:
            raise KeyboardInterrupt
        code = self.codes.pop(0)
        if code == curses.KEY_RESIZE and self.resized:
            self.size = self.resized
        return code

    def getmaxyx(self):
        return self.size

    def addstr(self, y, x, text):
        self.drawn.append((y, x, text))

    def nodelay(self, flag):
        pass

    def keypad(self, flag):
        pass

    def erase(self):
        self.drawn = []

    def refresh(self):
        pass


@pytest.fixture(autouse=True)
def no_cursor(monkeypatch):
    monkeypatch.setattr(curses, "curs_set", lambda visibility: None)


def fast_config():
    return GameConfig(seed=1, tick_interval=0.001)


def test_key_names():
    assert key_name(curses.KEY_UP) == "up"
    assert key_name(3) == "ctrl+c"
    assert key_name(ord("q")) == "q"
    assert key_name(-1) is None


def test_handle_key():
    game = GameSession(10, 10, seed=2)
    assert handle_key(game, curses.KEY_UP)
    assert game.arbiter.drain_one(game.direction) is Direction.UP
    assert handle_key(game, ord("x"))
    assert handle_key(game, ord(" "))
    assert game.status is GameStatus.PAUSED
    assert handle_key(game, 3) is False
    assert handle_key(game, ord("q")) is False


def test_quit_key_ends_loop():
    screen = FakeScreen([ord("q")])
    assert _main(screen, fast_config()) == 0


def test_interrupt_ends_loop_with_score():
    screen = FakeScreen([-1, -1])
    assert _main(screen, fast_config()) == 0
    assert screen.codes == []


def test_resize_recenters_board():
    screen = FakeScreen([curses.KEY_RESIZE, -1, ord("q")], size=(24, 80), resized=(40, 120))
    _main(screen, fast_config())

    # 26x22 board chosen at 80x24 stays, centered in the 120x40 window
    board_rows = [(y, x) for y, x, text in screen.drawn if len(text) == 52]
    assert board_rows
    assert board_rows[0] == (8, 34)
