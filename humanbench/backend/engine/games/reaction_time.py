"""Reaction time: wait for green, then press anything as fast as possible."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from humanbench.backend.engine.render import Border, Box, Element, RenderModel, text
from humanbench.backend.engine.session import CONFIRM_KEYS, GameSession
from humanbench.backend.models.events import Key, Mouse

MIN_WAIT = 3.0
MAX_WAIT = 6.0
CLICK_WINDOW = 10.0


# -- modes ----------------------------------------------------------------------


@dataclass(frozen=True)
class Ready:
    pass


@dataclass(frozen=True)
class Waiting:
    until: float


@dataclass(frozen=True)
class Clicking:
    since: float


@dataclass(frozen=True)
class TooEarly:
    pass


@dataclass(frozen=True)
class TimeOut:
    pass


@dataclass(frozen=True)
class Results:
    millis: float


Mode = Union[Ready, Waiting, Clicking, TooEarly, TimeOut, Results]


class ReactionTime(GameSession):
    game_id = "ReactionTime"
    title = "Reaction Time"

    def _init_transient(self) -> None:
        self.mode: Mode = Ready()

    # -- transitions ------------------------------------------------------------

    def _start(self) -> None:
        self.mode = Waiting(self.now + self.rng.uniform(MIN_WAIT, MAX_WAIT))

    def _react(self) -> None:
        mode = self.mode
        if isinstance(mode, Ready):
            self._start()
        elif isinstance(mode, Waiting):
            self.mode = TooEarly()
        elif isinstance(mode, Clicking):
            millis = (self.now - mode.since) * 1000.0
            self.mode = Results(millis)
            self._record_result(millis)
        else:
            self.reset()
            self._start()

    def advance(self) -> None:
        if isinstance(self.mode, Waiting) and self.now >= self.mode.until:
            self.mode = Clicking(self.mode.until)
        if isinstance(self.mode, Clicking) and self.now >= self.mode.since + CLICK_WINDOW:
            self.mode = TimeOut()

    def deadline(self) -> float | None:
        if isinstance(self.mode, Waiting):
            return self.mode.until
        if isinstance(self.mode, Clicking):
            return self.mode.since + CLICK_WINDOW
        return None

    def on_key(self, key: Key) -> None:
        if isinstance(self.mode, (Ready, Results, TooEarly, TimeOut)):
            if key.code in CONFIRM_KEYS:
                self._react()
            elif key.code == "r":
                self.reset()
            return
        self._react()

    def on_click(self, mouse: Mouse) -> None:
        self._react()

    # -- drawing ----------------------------------------------------------------

    def render_description(self) -> RenderModel:
        main = self.layout.main
        middle = main.centered(main.width, 3)
        mode = self.mode
        elements: list[Element] = []

        if isinstance(mode, Ready):
            heading = "Menu"
            elements.append(text(middle.row(0), "When the screen turns green, press any key or click.", "bold"))
            elements.append(text(middle.row(2), "Click/Enter to start", "italic"))
        elif isinstance(mode, Waiting):
            heading = "Wait"
            elements.append(Box(main, Border.NONE, fill="on red"))
            elements.append(text(middle.row(1), "Wait for green...", "bold white on red"))
        elif isinstance(mode, Clicking):
            heading = "Click"
            elements.append(Box(main, Border.NONE, fill="on green"))
            elements.append(text(middle.row(1), "CLICK!", "bold black on green"))
        elif isinstance(mode, TooEarly):
            heading = "Too soon"
            elements.append(Box(main, Border.NONE, fill="on grey23"))
            elements.append(text(middle.row(0), "Too soon!", "bold white on grey23"))
            elements.append(text(middle.row(2), "Click/Enter to try again", "white on grey23"))
        elif isinstance(mode, TimeOut):
            heading = "Timed out"
            elements.append(text(middle.row(0), "You took longer than 10 seconds.", "bold yellow"))
            elements.append(text(middle.row(2), "Click/Enter to try again", "italic"))
        else:
            heading = "Results"
            elements.append(text(middle.row(0), f"Your time: {mode.millis:.0f} ms", "bold cyan"))
            elements.append(text(
                middle.row(2),
                f"Your average: {self.record.average:.0f} ms over {self.record.count} tries",
            ))

        return self._frame(heading, elements, "Enter/click  react   R  restart   Q  back")
