"""The ``humanbench`` command line."""

from __future__ import annotations

import os

from typer.testing import CliRunner

from humanbench import config
from humanbench.backend.models.savestate import ScoreRecord, ScoreStore
from humanbench.main import app

runner = CliRunner()


def test_scores_lists_every_game(tmp_path, monkeypatch):
    monkeypatch.setenv(config.DATA_DIR_ENV, str(tmp_path))
    ScoreStore(tmp_path).save("ReactionTime", ScoreRecord(231.5, 4))

    result = runner.invoke(app, ["--scores", "--data-dir", str(tmp_path)])

    assert result.exit_code == 0
    assert "Reaction Time" in result.output
    assert "231.5" in result.output
    assert "Typing Test" in result.output


def test_scores_reads_environment_override(tmp_path, monkeypatch):
    monkeypatch.setenv(config.DATA_DIR_ENV, str(tmp_path))
    ScoreStore(tmp_path).save("ChimpTest", ScoreRecord(12.0, 3))

    result = runner.invoke(app, ["--scores"])

    assert result.exit_code == 0
    assert "12.0" in result.output


def test_play_without_terminal_fails_cleanly(tmp_path, monkeypatch):
    monkeypatch.setenv(config.DATA_DIR_ENV, str(tmp_path))

    result = runner.invoke(app, ["--data-dir", str(tmp_path)])

    assert result.exit_code == 1
    assert "not a terminal" in result.output


def test_data_dir_flag_wins_without_touching_environment(tmp_path, monkeypatch):
    monkeypatch.setenv(config.DATA_DIR_ENV, str(tmp_path / "env"))
    ScoreStore(tmp_path / "env").save("ChimpTest", ScoreRecord(444.0, 1))
    ScoreStore(tmp_path / "flag").save("ChimpTest", ScoreRecord(27.0, 2))

    result = runner.invoke(app, ["--scores", "--data-dir", str(tmp_path / "flag")])

    assert result.exit_code == 0
    assert "27.0" in result.output
    assert "444.0" not in result.output
    assert os.environ[config.DATA_DIR_ENV] == str(tmp_path / "env")
