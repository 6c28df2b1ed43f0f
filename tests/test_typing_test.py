"""Typing test: speed and accuracy on a fixed passage."""

from __future__ import annotations

import pytest

from humanbench.backend.engine.games import TypingTest
from humanbench.backend.engine.games.typing_test import (
    Playing,
    Ready,
    Results,
    accuracy,
    words_per_minute,
)
from humanbench.backend.models.events import Key

_PASSAGE = "ab cd"


# -- helpers ------------------------------------------------------------------


def _game(clock) -> TypingTest:
    session = TypingTest(clock=clock, texts=[_PASSAGE])
    session.handle_event(Key("enter"))
    return session


def _type(session, chars: str) -> None:
    for char in chars:
        session.handle_event(Key(char))


# -- scoring ------------------------------------------------------------------


@pytest.mark.parametrize(
    "typed, expected",
    [("", 0.0), ("ab cd", 1.0), ("xb cd", 0.8), ("abx", 2 / 3)],
)
def test_accuracy(typed, expected):
    assert accuracy(typed, _PASSAGE + "e") == pytest.approx(expected)


def test_wpm_uses_five_char_words():
    # 50 correct characters in 30 s is 10 words in half a minute
    assert words_per_minute("a" * 50, "a" * 50, 30.0) == pytest.approx(20.0)


def test_wpm_without_elapsed_time_is_zero():
    assert words_per_minute("abc", "abc", 0.0) == 0.0


# -- session ------------------------------------------------------------------


def test_start_picks_passage(clock):
    session = _game(clock)
    assert session.passage == _PASSAGE
    assert session.mode == Playing()
    assert session.accepts_text()


def test_timer_starts_on_first_character(clock):
    session = _game(clock)
    clock.advance(5.0)
    _type(session, "a")
    assert session.mode == Playing(started_at=5.0)

    clock.advance(6.0)
    _type(session, "b cd")

    assert isinstance(session.mode, Results)
    assert session.mode.wpm == pytest.approx(10.0)
    assert session.mode.accuracy == 1.0
    assert session.record.count == 1
    assert session.record.average == pytest.approx(10.0)


def test_mistakes_lower_the_score(clock):
    session = _game(clock)
    _type(session, "x")
    clock.advance(6.0)
    _type(session, "b cd")

    assert isinstance(session.mode, Results)
    assert session.mode.accuracy == pytest.approx(0.8)
    assert session.mode.wpm == pytest.approx(8.0)


def test_double_space_is_ignored(clock):
    session = _game(clock)
    _type(session, "ab  ")
    assert session.typed == "ab "


def test_backspace_and_early_enter(clock):
    session = _game(clock)
    _type(session, "abx")
    session.handle_event(Key("backspace"))
    assert session.typed == "ab"

    session.handle_event(Key("enter"))
    assert isinstance(session.mode, Playing)


def test_enter_after_results_starts_new_passage(clock):
    session = _game(clock)
    _type(session, _PASSAGE)
    assert isinstance(session.mode, Results)

    session.handle_event(Key("enter"))
    assert session.mode == Playing()
    assert session.typed == ""
    assert session.record.count == 1


def test_r_from_results_returns_to_ready(clock):
    session = _game(clock)
    _type(session, _PASSAGE)
    session.handle_event(Key("r"))
    assert session.mode == Ready()


def test_empty_passage_list_is_rejected(clock):
    with pytest.raises(ValueError, match="passages"):
        TypingTest(clock=clock, texts=())
