"""Sequence memory: watch tiles light up in order, then repeat the order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from humanbench.backend.engine.layout import Rect, grid
from humanbench.backend.engine.render import Border, Box, Element, RenderModel, text
from humanbench.backend.engine.session import CONFIRM_KEYS, GameSession
from humanbench.backend.models.events import Key, Mouse

TILES = 9
FADE_OUT = 0.5
STEP = FADE_OUT + 0.1
PAUSE = FADE_OUT * 2
RESULTS_IDLE = 10.0


# -- modes ----------------------------------------------------------------------


@dataclass(frozen=True)
class Ready:
    pass


@dataclass(frozen=True)
class Watching:
    step: int
    until: float


@dataclass(frozen=True)
class Clicking:
    pass


@dataclass(frozen=True)
class Pause:
    until: float


@dataclass(frozen=True)
class Results:
    score: int


Mode = Union[Ready, Watching, Clicking, Pause, Results]


@dataclass(frozen=True)
class Flash:
    tile: int
    until: float


class SequenceMemory(GameSession):
    game_id = "SequenceMemory"
    title = "Sequence Memory"

    def _init_transient(self) -> None:
        self.mode: Mode = Ready()
        self.sequence: list[int] = [self.rng.randrange(TILES)]
        self.entered: list[int] = []
        self.flash: Flash | None = None

    @property
    def score(self) -> int:
        return len(self.sequence) - 1

    # -- transitions ------------------------------------------------------------

    def advance(self) -> None:
        if self.flash is not None and self.now >= self.flash.until:
            self.flash = None
        if isinstance(self.mode, Pause) and self.now >= self.mode.until:
            self.mode = Watching(0, self.mode.until + STEP)
        while isinstance(self.mode, Watching) and self.now >= self.mode.until:
            if self.mode.step >= len(self.sequence) - 1:
                self.mode = Clicking()
            else:
                self.mode = Watching(self.mode.step + 1, self.mode.until + STEP)

    def deadline(self) -> float | None:
        candidates = []
        if isinstance(self.mode, (Watching, Pause)):
            candidates.append(self.mode.until)
        elif isinstance(self.mode, Results):
            candidates.append(self.now + RESULTS_IDLE)
        if self.flash is not None:
            candidates.append(self.flash.until)
        return min(candidates) if candidates else None

    def press(self, tile: int) -> None:
        """Register a click on *tile* while reproducing the sequence."""
        if not isinstance(self.mode, Clicking):
            return
        self.flash = Flash(tile, self.now + FADE_OUT)
        self.entered.append(tile)

        position = len(self.entered) - 1
        if self.entered[position] != self.sequence[position]:
            self.entered.clear()
            self.mode = Results(self.score)
            self._record_result(self.score)
        elif len(self.entered) == len(self.sequence):
            self.entered.clear()
            self.sequence.append(self._next_tile())
            self.mode = Pause(self.now + PAUSE)

    def _next_tile(self) -> int:
        last = self.sequence[-1]
        tile = self.rng.randrange(TILES)
        while tile == last:
            tile = self.rng.randrange(TILES)
        return tile

    def on_key(self, key: Key) -> None:
        if key.code == "r":
            self.reset()
        elif isinstance(self.mode, Ready) and key.code in CONFIRM_KEYS:
            self.mode = Watching(0, self.now + STEP)
        elif isinstance(self.mode, Results) and key.code in CONFIRM_KEYS:
            self.reset()
        elif isinstance(self.mode, Clicking) and key.char is not None and key.char in "123456789":
            self.press(int(key.code) - 1)

    def on_click(self, mouse: Mouse) -> None:
        if isinstance(self.mode, Ready):
            self.mode = Watching(0, self.now + STEP)
        elif isinstance(self.mode, Clicking):
            for index, rect in enumerate(self.tile_rects()):
                if rect.contains(mouse.column, mouse.row):
                    self.press(index)
                    return

    # -- geometry & drawing -----------------------------------------------------

    def tile_rects(self) -> list[Rect]:
        main = self.layout.main
        area = Rect(main.x, main.y + 2, main.width, max(0, main.height - 2))
        height = max(3, min(5, area.height // 3))
        return grid(area, 3, 3, height * 2, height, gap_x=1)

    def _lit_tile(self) -> tuple[int, str] | None:
        if isinstance(self.mode, Watching):
            return self.sequence[self.mode.step], "on white"
        if isinstance(self.mode, (Clicking, Pause)) and self.flash is not None:
            return self.flash.tile, "on bright_cyan"
        return None

    def render_description(self) -> RenderModel:
        main = self.layout.main
        middle = main.centered(main.width, 3)
        elements: list[Element] = []

        if isinstance(self.mode, Ready):
            heading = "Menu"
            elements.append(text(middle.row(0), "Memorize the pattern.", "bold"))
            elements.append(text(middle.row(2), "Click/Enter to start playing", "italic"))
        elif isinstance(self.mode, Results):
            heading = "Results"
            elements.append(text(middle.row(0), f"Your score is: {self.mode.score}", "bold cyan"))
            elements.append(text(middle.row(2), f"Your avg score is: {self.record.average:.1f}"))
        else:
            heading = "Watch" if isinstance(self.mode, Watching) else "Repeat"
            elements.append(text(main.row(0), f"Score: {self.score}", "bold"))
            lit = self._lit_tile()
            for index, rect in enumerate(self.tile_rects()):
                if lit is not None and lit[0] == index:
                    elements.append(Box(rect, Border.HEAVY, fill=lit[1]))
                else:
                    elements.append(Box(rect, Border.HEAVY, style="blue"))

        return self._frame(heading, elements, "Click/1-9  tiles   R  restart   Q  back")
