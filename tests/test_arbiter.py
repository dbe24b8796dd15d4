import logging
import threading

import pytest

from snaketerm.arbiter import InputArbiter
from snaketerm.types import Direction


def test_submit_drops_newest_when_full(caplog):
    arbiter = InputArbiter(capacity=2, dedupe=False)
    assert arbiter.submit(Direction.UP)
    assert arbiter.submit(Direction.LEFT)

    with caplog.at_level(logging.WARNING, logger="snaketerm.arbiter"):
        assert not arbiter.submit(Direction.DOWN)
    assert "Buffer full" in caplog.text
    assert arbiter.pending() == 2

    assert arbiter.drain_one(Direction.RIGHT) is Direction.UP
    assert arbiter.drain_one(Direction.UP) is Direction.LEFT
    assert arbiter.drain_one(Direction.LEFT) is None


def test_repeated_submission_is_filtered():
    arbiter = InputArbiter()
    assert arbiter.submit(Direction.UP)
    assert not arbiter.submit(Direction.UP)
    assert arbiter.submit(Direction.LEFT)
    assert arbiter.submit(Direction.UP)
    assert arbiter.pending() == 3


def test_drain_skips_repeats_and_reversals():
    arbiter = InputArbiter()
    arbiter.submit(Direction.RIGHT)
    arbiter.submit(Direction.LEFT)
    arbiter.submit(Direction.UP)
    arbiter.submit(Direction.DOWN)

    assert arbiter.drain_one(Direction.RIGHT, Direction.RIGHT) is Direction.UP
    assert arbiter.pending() == 1
    # DOWN is now the reverse of the applied UP
    assert arbiter.drain_one(Direction.UP, Direction.RIGHT) is None
    assert arbiter.pending() == 0


def test_drain_on_empty_queue():
    assert InputArbiter().drain_one(Direction.LEFT) is None


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        InputArbiter(capacity=0)


def test_concurrent_producer_never_blocks():
    arbiter = InputArbiter(capacity=5, dedupe=False)
    turns = [Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT]
    done = threading.Event()

    def produce():
        for i in range(2000):
            arbiter.submit(turns[i % len(turns)])
        done.set()

    producer = threading.Thread(target=produce)
    producer.start()

    current = Direction.RIGHT
    while not done.is_set() or arbiter.pending():
        chosen = arbiter.drain_one(current)
        if chosen is not None:
            assert chosen is not current
            assert chosen is not current.opposite
            current = chosen

    producer.join(timeout=5)
    assert not producer.is_alive()
    assert arbiter.pending() <= arbiter.capacity
