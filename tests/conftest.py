"""Shared fixtures: a hand-driven clock, scripted input and an in-memory screen.

A script is a sequence of steps fed to ``poll`` one at a time:

* an :data:`InputEvent` is returned as-is,
* a number advances the clock by that many seconds and times out,
* ``None`` lets the whole requested timeout elapse and times out.
"""

from __future__ import annotations

import logging
from typing import Iterable

import pytest

from humanbench.backend.engine.render import RenderModel
from humanbench.backend.logger import ROOT_LOGGER
from humanbench.backend.models.events import InputEvent
from humanbench.backend.models.savestate import ScoreStore
from humanbench.frontend.cli.rich.canvas import Canvas, paint


class FakeClock:
    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ScriptedSource:
    def __init__(self, clock: FakeClock, steps: Iterable[object]) -> None:
        self.clock = clock
        self.steps = list(steps)
        self.timeouts: list[float | None] = []

    def poll(self, timeout: float | None) -> InputEvent | None:
        self.timeouts.append(timeout)
        if not self.steps:
            raise AssertionError("script exhausted before the component finished")
        step = self.steps.pop(0)
        if step is None:
            assert timeout is not None, "waiting forever on a scripted source"
            self.clock.advance(timeout)
            return None
        if isinstance(step, (int, float)):
            self.clock.advance(step)
            return None
        return step  # type: ignore[return-value]


class FakeSurface:
    """Paints every frame so rendering is exercised along the way."""

    def __init__(self, *sizes: tuple[int, int]) -> None:
        self._sizes = list(sizes) or [(80, 24)]
        self.current = self._sizes[0]
        self.frames: list[Canvas] = []

    @property
    def size(self) -> tuple[int, int]:
        if len(self._sizes) > 1:
            self.current = self._sizes.pop(0)
        else:
            self.current = self._sizes[0]
        return self.current

    def draw(self, model: RenderModel) -> None:
        self.frames.append(paint(model, *self.current))


# -- fixtures -----------------------------------------------------------------


@pytest.fixture(autouse=True)
def _isolate_logging():
    """Undo whatever ``configure_logging`` did to the package logger."""
    root = logging.getLogger(ROOT_LOGGER)
    handlers, propagate, level = list(root.handlers), root.propagate, root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.propagate = propagate
    root.setLevel(level)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(tmp_path) -> ScoreStore:
    return ScoreStore(tmp_path)


@pytest.fixture
def make_source(clock):
    def factory(*steps: object) -> ScriptedSource:
        return ScriptedSource(clock, steps)

    return factory


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def make_surface():
    return FakeSurface
