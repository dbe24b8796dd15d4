import pytest

from snaketerm.clock import TickClock


def test_first_call_only_starts_clock():
    clock = TickClock(0.5)
    assert clock.due(10.0) == 0
    assert clock.due(11.0) == 2


def test_partial_intervals_carry_over():
    clock = TickClock(0.5)
    clock.reset(0.0)
    assert clock.due(0.75) == 1
    assert clock.due(0.9) == 0
    assert clock.due(1.0) == 1


def test_backlog_is_capped():
    clock = TickClock(0.5, max_catchup=5)
    clock.reset(0.0)
    assert clock.due(100.0) == 5
    assert clock.due(100.25) == 0


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        TickClock(0)
