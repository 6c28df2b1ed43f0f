"""Visual memory: remember the lit squares."""

from __future__ import annotations

import random

import pytest

from humanbench.backend.engine.games import VisualMemory
from humanbench.backend.engine.games.visual_memory import (
    LIVES,
    MISSES_PER_LIFE,
    SHOW_TIME,
    Clicking,
    Results,
    Watching,
    grid_size,
    pattern_size,
)
from humanbench.backend.models.events import Key, Mouse, Tick
from humanbench.backend.models.savestate import ScoreRecord


# -- helpers ------------------------------------------------------------------


def _game(clock) -> VisualMemory:
    session = VisualMemory(clock=clock, rng=random.Random(17))
    session.handle_event(Key("enter"))
    return session


def _reveal(session, clock) -> None:
    clock.advance(SHOW_TIME)
    session.handle_event(Tick())


def _blanks(session) -> list[int]:
    size = grid_size(session.level)
    return [tile for tile in range(size * size) if tile not in session.pattern]


def _lose_life(session) -> None:
    for tile in _blanks(session)[:MISSES_PER_LIFE]:
        session.press(tile)


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize(
    "level, size, tiles",
    [(1, 3, 3), (3, 3, 5), (4, 4, 6), (7, 5, 9), (10, 6, 12), (40, 6, 35)],
)
def test_grid_grows_with_level(level, size, tiles):
    assert grid_size(level) == size
    assert pattern_size(level) == tiles


def test_pattern_shown_then_hidden(clock):
    session = _game(clock)
    assert session.mode == Watching(clock.now + SHOW_TIME)
    assert len(session.pattern) == 3
    assert session.poll_timeout() == pytest.approx(SHOW_TIME)

    _reveal(session, clock)
    assert session.mode == Clicking()


def test_finding_pattern_advances_level(clock):
    session = _game(clock)
    _reveal(session, clock)
    for tile in sorted(session.pattern):
        session.press(tile)

    assert session.level == 2
    assert len(session.pattern) == 4
    assert isinstance(session.mode, Watching)


def test_presses_while_watching_are_ignored(clock):
    session = _game(clock)
    session.press(next(iter(session.pattern)))
    assert session.found == set()


def test_repeated_wrong_tile_counts_once(clock):
    session = _game(clock)
    _reveal(session, clock)
    blank = _blanks(session)[0]
    session.press(blank)
    session.press(blank)
    assert session.misses == 1


def test_three_misses_cost_a_life_and_replay_level(clock):
    session = _game(clock)
    _reveal(session, clock)
    _lose_life(session)

    assert session.lives == LIVES - 1
    assert session.level == 1
    assert isinstance(session.mode, Watching)
    assert session.misses == 0


def test_last_life_ends_run_with_level(clock):
    session = _game(clock)
    _reveal(session, clock)
    for tile in sorted(session.pattern):
        session.press(tile)
    for _ in range(LIVES):
        _reveal(session, clock)
        _lose_life(session)

    assert session.mode == Results(2)
    assert session.record == ScoreRecord(2.0, 1)


def test_mouse_presses_tile(clock):
    session = _game(clock)
    _reveal(session, clock)
    tile = min(session.pattern)
    rect = session.tile_rects()[tile]
    session.handle_event(Mouse(rect.x + 1, rect.y))
    assert session.found == {tile}
