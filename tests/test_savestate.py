"""Running-average records and their on-disk form."""

from __future__ import annotations

import json
import logging

import pytest

from humanbench.backend.models.savestate import ScoreRecord, ScoreStore, merge


# -- merge --------------------------------------------------------------------


def test_merge_into_empty_record():
    assert merge(ScoreRecord(), 42.0) == ScoreRecord(42.0, 1)


def test_merge_keeps_running_mean():
    record = merge(merge(ScoreRecord(), 10.0), 20.0)
    assert record.count == 2
    assert record.average == pytest.approx(15.0)


@pytest.mark.parametrize(
    "samples",
    [[250.0], [1.0, 2.0, 3.0, 4.0], [0.1] * 10, [900.5, 12.25, 333.0, 48.0, 7.0]],
)
def test_repeated_merge_is_the_mean(samples):
    record = ScoreRecord()
    for sample in samples:
        record = merge(record, sample)
    assert record.count == len(samples)
    assert record.average == pytest.approx(sum(samples) / len(samples))


def test_merge_counts_every_call():
    once = merge(ScoreRecord(100.0, 5), 140.0)
    twice = merge(once, 140.0)
    assert once.count == 6
    assert once.average == pytest.approx(640.0 / 6)
    assert twice.count == 7
    assert twice != once


# -- persistence --------------------------------------------------------------


def test_save_then_load_round_trips(store):
    store.save("ReactionTime", ScoreRecord(231.5, 4))
    assert store.load("ReactionTime") == ScoreRecord(231.5, 4)


def test_save_writes_plain_json_without_leftovers(tmp_path):
    store = ScoreStore(tmp_path / "nested")
    store.save("ChimpTest", ScoreRecord(9.0, 2))

    files = sorted(p.name for p in (tmp_path / "nested").iterdir())
    assert files == ["ChimpTest.json"]
    data = json.loads((tmp_path / "nested" / "ChimpTest.json").read_text())
    assert data == {"average": 9.0, "count": 2}


def test_missing_file_loads_default(store, caplog):
    with caplog.at_level(logging.INFO):
        assert store.load("NumberMemory") == ScoreRecord()
    assert any(
        r.levelno == logging.INFO and "no record" in r.getMessage() for r in caplog.records
    )


@pytest.mark.parametrize(
    "content",
    [
        b"\xff\xfe\x00",
        b"not json at all",
        b"[]",
        b'"text"',
        b'{"average": 1.0}',
        b'{"average": "fast", "count": 1}',
        b'{"average": 1.0, "count": -1}',
        b'{"average": 1.0, "count": 1.5}',
        b'{"average": NaN, "count": 2}',
        b'{"average": Infinity, "count": 2}',
        b'{"average": 1.0, "count": true}',
        b'{"average": true, "count": 1}',
        b'{"average": 1' + b"0" * 400 + b', "count": 1}',
        b"[" * 100000 + b"]" * 100000,
    ],
    ids=[
        "bad-utf8",
        "not-json",
        "list",
        "string",
        "no-count",
        "string-average",
        "negative-count",
        "float-count",
        "nan",
        "infinity",
        "bool-count",
        "bool-average",
        "huge-average",
        "deep-nesting",
    ],
)
def test_garbage_loads_default(store, content, caplog):
    store.path_for("VerbalMemory").write_bytes(content)
    with caplog.at_level(logging.WARNING):
        assert store.load("VerbalMemory") == ScoreRecord()
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_legacy_field_names_are_accepted(store):
    store.path_for("TypingTest").write_text('{"avg_score": 12.5, "num_entries": 3}')
    assert store.load("TypingTest") == ScoreRecord(12.5, 3)


def test_empty_count_normalises_average(store):
    store.path_for("AimTrainer").write_text('{"average": 5.0, "count": 0}')
    assert store.load("AimTrainer") == ScoreRecord()


def test_save_failure_is_logged_not_raised(tmp_path, caplog):
    blocker = tmp_path / "blocked"
    blocker.write_text("a file where the directory should be")
    store = ScoreStore(blocker)

    with caplog.at_level(logging.ERROR):
        store.save("ReactionTime", ScoreRecord(200.0, 1))

    assert any(r.levelno == logging.ERROR for r in caplog.records)
    assert blocker.read_text() == "a file where the directory should be"


def test_load_all_returns_every_game(store):
    store.save("ChimpTest", ScoreRecord(7.0, 1))
    records = store.load_all(["ChimpTest", "VisualMemory"])
    assert records == {"ChimpTest": ScoreRecord(7.0, 1), "VisualMemory": ScoreRecord()}
