from snaketerm.controls import Command, apply_command, command_for_key
from snaketerm.game import GameSession
from snaketerm.types import Direction, GameStatus


def test_key_names():
    assert command_for_key("w") is Command.UP
    assert command_for_key("K") is Command.UP
    assert command_for_key("down") is Command.DOWN
    assert command_for_key("h") is Command.LEFT
    assert command_for_key("l") is Command.RIGHT
    assert command_for_key(" ") is Command.PAUSE
    assert command_for_key("space") is Command.PAUSE
    assert command_for_key("r") is Command.RESTART
    assert command_for_key("ctrl+c") is Command.QUIT
    assert command_for_key("x") is None


def test_steering_queues_direction():
    game = GameSession(10, 10, seed=2)
    assert apply_command(game, Command.UP)
    assert game.arbiter.pending() == 1
    assert game.arbiter.drain_one(game.direction) is Direction.UP


def test_pause_restart_and_quit():
    game = GameSession(10, 10, seed=2)
    apply_command(game, Command.PAUSE)
    assert game.status is GameStatus.PAUSED

    game.score = 3
    apply_command(game, Command.RESTART)
    assert game.score == 0
    assert game.status is GameStatus.RUNNING

    assert apply_command(game, Command.QUIT) is False
