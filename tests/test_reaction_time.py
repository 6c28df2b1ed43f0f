"""Reaction time: wait for green, then react."""

from __future__ import annotations

import random

import pytest

from humanbench.backend.engine.games import ReactionTime
from humanbench.backend.engine.games.reaction_time import (
    CLICK_WINDOW,
    Clicking,
    Ready,
    Results,
    TimeOut,
    TooEarly,
    Waiting,
)
from humanbench.backend.models.events import Key, Mouse, Tick
from humanbench.backend.models.savestate import ScoreRecord


# -- helpers ------------------------------------------------------------------


def _game(clock, record=None) -> ReactionTime:
    return ReactionTime(record, clock=clock, rng=random.Random(7))


def _until_green(session, clock) -> None:
    session.handle_event(Key("enter"))
    clock.now = session.mode.until
    session.handle_event(Tick())


# -- tests --------------------------------------------------------------------


def test_start_waits_between_three_and_six_seconds(clock):
    session = _game(clock)
    session.handle_event(Key("enter"))

    assert isinstance(session.mode, Waiting)
    assert 3.0 <= session.mode.until - clock.now <= 6.0
    assert session.poll_timeout() == pytest.approx(session.mode.until - clock.now)


def test_input_while_waiting_is_too_early(clock):
    session = _game(clock)
    session.handle_event(Key("enter"))
    session.handle_event(Key("x"))

    assert isinstance(session.mode, TooEarly)
    assert session.final_score() is None
    assert session.record == ScoreRecord()


def test_reacting_scores_milliseconds(clock):
    session = _game(clock)
    _until_green(session, clock)
    assert isinstance(session.mode, Clicking)

    clock.advance(0.2)
    session.handle_event(Mouse(5, 5))

    assert isinstance(session.mode, Results)
    assert session.final_score() == pytest.approx(200.0)
    assert session.record.count == 1


def test_no_reaction_times_out(clock):
    session = _game(clock)
    _until_green(session, clock)
    clock.advance(CLICK_WINDOW)
    session.handle_event(Tick())

    assert isinstance(session.mode, TimeOut)
    assert session.record == ScoreRecord()


def test_late_wakeup_skips_straight_to_timeout(clock):
    session = _game(clock)
    session.handle_event(Key("enter"))
    clock.now = session.mode.until + CLICK_WINDOW + 1
    session.handle_event(Tick())
    assert isinstance(session.mode, TimeOut)


def test_enter_after_results_starts_next_try(clock):
    session = _game(clock)
    _until_green(session, clock)
    session.handle_event(Key("enter"))

    session.handle_event(Key("enter"))
    assert isinstance(session.mode, Waiting)
    assert session.final_score() is None
    assert session.record.count == 1


def test_r_returns_to_ready(clock):
    session = _game(clock)
    session.handle_event(Key("enter"))
    session.handle_event(Key("x"))
    session.handle_event(Key("r"))
    assert session.mode == Ready()


def test_reset_keeps_merged_record(clock):
    session = _game(clock, ScoreRecord(100.0, 5))
    _until_green(session, clock)
    clock.advance(0.14)
    session.handle_event(Key("enter"))

    assert session.record.count == 6
    assert session.record.average == pytest.approx((500.0 + 140.0) / 6)

    session.reset()

    assert session.record.count == 6
    assert session.final_score() is None
    assert session.mode == _game(clock).mode
