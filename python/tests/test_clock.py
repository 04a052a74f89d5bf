"""GameClock: the frontend-owned elapsed-time counter."""

from __future__ import annotations

from backend.engine.gamestate import GameClock


def test_ticks_count_while_running() -> None:
    clock = GameClock()
    clock.tick()
    clock.tick()
    assert clock.seconds == 2
    assert clock.is_running


def test_stop_is_idempotent_and_freezes_time() -> None:
    clock = GameClock()
    clock.tick()
    clock.stop()
    clock.stop()
    clock.tick()
    assert clock.seconds == 1
    assert not clock.is_running


def test_clock_can_start_stopped() -> None:
    clock = GameClock(running=False)
    clock.tick()
    assert clock.seconds == 0
    clock.start()
    clock.tick()
    assert clock.seconds == 1


def test_reset_zeroes_and_restarts() -> None:
    clock = GameClock()
    clock.tick()
    clock.stop()
    clock.reset()
    assert clock.seconds == 0
    assert clock.is_running


def test_catch_up_applies_whole_seconds_only() -> None:
    clock = GameClock(running=False)
    clock.start(now=100.0)
    assert not clock.catch_up(now=100.9)
    assert clock.catch_up(now=102.5)
    assert clock.seconds == 2
    assert clock.catch_up(now=103.0)
    assert clock.seconds == 3


def test_catch_up_does_nothing_once_stopped() -> None:
    clock = GameClock(running=False)
    clock.start(now=0.0)
    clock.stop()
    assert not clock.catch_up(now=50.0)
    assert clock.seconds == 0
