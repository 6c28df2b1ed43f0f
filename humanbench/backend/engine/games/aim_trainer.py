"""Aim trainer: click 30 targets as quickly as possible."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from humanbench.backend.engine.layout import Rect
from humanbench.backend.engine.render import Border, Box, Element, RenderModel, text
from humanbench.backend.engine.session import CONFIRM_KEYS, GameSession
from humanbench.backend.models.events import Key, Mouse
from humanbench.backend.models.savestate import ScoreRecord, merge

TARGET_AMOUNT = 30
TARGET_HEIGHT = 3
TARGET_WIDTH = TARGET_HEIGHT * 2
PF_WIDTH = 70
PF_HEIGHT = 16
REFRESH = 0.25


@dataclass(frozen=True)
class Position:
    """Top-left corner of a target, relative to the playfield."""

    x: int
    y: int


# -- modes ----------------------------------------------------------------------


@dataclass(frozen=True)
class Ready:
    pass


@dataclass(frozen=True)
class Playing:
    target: Position
    shown_at: float


@dataclass(frozen=True)
class Results:
    millis: float


Mode = Union[Ready, Playing, Results]


class AimTrainer(GameSession):
    game_id = "AimTrainer"
    title = "Aim Trainer"

    def _init_transient(self) -> None:
        self.mode: Mode = Ready()
        self.times = ScoreRecord()

    # -- geometry ---------------------------------------------------------------

    def playfield(self) -> Rect | None:
        """Outer (bordered) playfield rectangle, or ``None`` if it won't fit."""
        main = self.layout.main
        if not main.fits(PF_WIDTH + 2, PF_HEIGHT + 2):
            return None
        return main.centered(PF_WIDTH + 2, PF_HEIGHT + 2)

    def target_rect(self, field: Rect, position: Position) -> Rect:
        inner = field.inner(1, 1)
        return Rect(inner.x + position.x, inner.y + position.y, TARGET_WIDTH, TARGET_HEIGHT)

    def start_position(self) -> Position:
        return Position((PF_WIDTH - TARGET_WIDTH) // 2, (PF_HEIGHT - TARGET_HEIGHT) // 2)

    # -- transitions ------------------------------------------------------------

    def _new_target(self) -> None:
        position = Position(
            self.rng.randrange(PF_WIDTH - TARGET_WIDTH),
            self.rng.randrange(PF_HEIGHT - TARGET_HEIGHT),
        )
        self.mode = Playing(position, self.now)

    def hit(self) -> None:
        """Count a hit on the current target."""
        if not isinstance(self.mode, Playing):
            return
        self.times = merge(self.times, (self.now - self.mode.shown_at) * 1000.0)
        if self.times.count >= TARGET_AMOUNT:
            self.mode = Results(self.times.average)
            self._record_result(self.times.average)
        else:
            self._new_target()

    def deadline(self) -> float | None:
        if isinstance(self.mode, Playing):
            return self.now + REFRESH
        return None

    def on_key(self, key: Key) -> None:
        if key.code == "r" or (isinstance(self.mode, Results) and key.code in CONFIRM_KEYS):
            self.reset()

    def on_click(self, mouse: Mouse) -> None:
        if isinstance(self.mode, Results):
            self.reset()
            return

        field = self.playfield()
        if field is None:
            return
        if isinstance(self.mode, Ready):
            if self.target_rect(field, self.start_position()).contains(mouse.column, mouse.row):
                self._new_target()
        elif self.target_rect(field, self.mode.target).contains(mouse.column, mouse.row):
            self.hit()

    # -- drawing ----------------------------------------------------------------

    def render_description(self) -> RenderModel:
        field = self.playfield()
        controls = "Click  targets   R  restart   Q  back"
        if field is None:
            message = text(self.layout.main.row(0), "Please make the window bigger.", "bold yellow")
            return self._frame("Too small", [message], controls)

        elements: list[Element] = []
        mode = self.mode
        if isinstance(mode, Ready):
            heading = "Menu"
            elements.append(Box(field, Border.ROUNDED, title="╡ Playing field ╞"))
            elements.append(Box(self.target_rect(field, self.start_position()),
                                Border.HEAVY, style="bright_red", fill="on grey23"))
            elements.append(text(field.inner(1, 1).row(1),
                                 f"Hit {TARGET_AMOUNT} targets in as short a time as possible",
                                 "italic"))
        elif isinstance(mode, Playing):
            heading = "Playing"
            elapsed = (self.now - mode.shown_at) * 1000.0
            title = (f"╡ {self.times.count}/{TARGET_AMOUNT}   "
                     f"avg {self.times.average:.0f} ms   {elapsed:.0f} ms ╞")
            elements.append(Box(field, Border.ROUNDED, title=title))
            elements.append(Box(self.target_rect(field, mode.target),
                                Border.HEAVY, style="bright_red", fill="on grey23"))
        else:
            heading = "Results"
            middle = field.centered(field.width, 3)
            elements.append(Box(field, Border.ROUNDED, title="╡ Results ╞"))
            elements.append(text(middle.row(0), f"Your score is: {mode.millis:.0f} ms", "bold cyan"))
            elements.append(text(middle.row(2),
                                 f"Your avg score overall is: {self.record.average:.0f} ms"))

        return self._frame(heading, elements, controls)
