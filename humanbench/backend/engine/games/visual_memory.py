"""Visual memory: remember which tiles flashed and click them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from humanbench.backend.engine.layout import Rect, grid
from humanbench.backend.engine.render import Border, Box, Element, RenderModel, text
from humanbench.backend.engine.session import CONFIRM_KEYS, GameSession
from humanbench.backend.models.events import Key, Mouse

LIVES = 3
MISSES_PER_LIFE = 3
SHOW_TIME = 1.0
MIN_GRID = 3
MAX_GRID = 6
TILE_WIDTH = 4
TILE_HEIGHT = 2


def grid_size(level: int) -> int:
    return min(MIN_GRID + (level - 1) // 3, MAX_GRID)


def pattern_size(level: int) -> int:
    size = grid_size(level)
    return min(level + 2, size * size - 1)


# -- modes ----------------------------------------------------------------------


@dataclass(frozen=True)
class Ready:
    pass


@dataclass(frozen=True)
class Watching:
    until: float


@dataclass(frozen=True)
class Clicking:
    pass


@dataclass(frozen=True)
class Results:
    level: int


Mode = Union[Ready, Watching, Clicking, Results]


class VisualMemory(GameSession):
    game_id = "VisualMemory"
    title = "Visual Memory"

    def _init_transient(self) -> None:
        self.mode: Mode = Ready()
        self.level = 1
        self.lives = LIVES
        self.misses = 0
        self.pattern: frozenset[int] = frozenset()
        self.found: set[int] = set()
        self.wrong: set[int] = set()

    # -- transitions ------------------------------------------------------------

    def _new_round(self) -> None:
        size = grid_size(self.level)
        self.pattern = frozenset(self.rng.sample(range(size * size), pattern_size(self.level)))
        self.found = set()
        self.wrong = set()
        self.misses = 0
        self.mode = Watching(self.now + SHOW_TIME)

    def press(self, tile: int) -> None:
        if not isinstance(self.mode, Clicking) or tile in self.found or tile in self.wrong:
            return
        if tile in self.pattern:
            self.found.add(tile)
            if self.found == self.pattern:
                self.level += 1
                self._new_round()
            return

        self.wrong.add(tile)
        self.misses += 1
        if self.misses < MISSES_PER_LIFE:
            return
        self.lives -= 1
        if self.lives == 0:
            self.mode = Results(self.level)
            self._record_result(self.level)
        else:
            self._new_round()

    def advance(self) -> None:
        if isinstance(self.mode, Watching) and self.now >= self.mode.until:
            self.mode = Clicking()

    def deadline(self) -> float | None:
        if isinstance(self.mode, Watching):
            return self.mode.until
        return None

    def on_key(self, key: Key) -> None:
        if key.code == "r":
            self.reset()
        elif key.code in CONFIRM_KEYS:
            if isinstance(self.mode, Ready):
                self._new_round()
            elif isinstance(self.mode, Results):
                self.reset()

    def on_click(self, mouse: Mouse) -> None:
        if isinstance(self.mode, Ready):
            self._new_round()
        elif isinstance(self.mode, Results):
            self.reset()
        elif isinstance(self.mode, Clicking):
            for index, rect in enumerate(self.tile_rects()):
                if rect.contains(mouse.column, mouse.row):
                    self.press(index)
                    return

    # -- geometry & drawing -----------------------------------------------------

    def tile_rects(self) -> list[Rect]:
        main = self.layout.main
        area = Rect(main.x, main.y + 1, main.width, max(0, main.height - 1))
        size = grid_size(self.level)
        return grid(area, size, size, TILE_WIDTH, TILE_HEIGHT, gap_x=1, gap_y=1)

    def _tile_fill(self, index: int) -> str:
        if isinstance(self.mode, Watching) and index in self.pattern:
            return "on white"
        if index in self.found:
            return "on white"
        if index in self.wrong:
            return "on grey19"
        return "on blue"

    def render_description(self) -> RenderModel:
        main = self.layout.main
        middle = main.centered(main.width, 3)
        elements: list[Element] = []

        if isinstance(self.mode, Ready):
            heading = "Menu"
            elements.append(text(middle.row(0), "Memorize the squares.", "bold"))
            elements.append(text(middle.row(2), "Click/Enter to start playing", "italic"))
        elif isinstance(self.mode, Results):
            heading = "Results"
            elements.append(text(middle.row(0), f"You reached level {self.mode.level}", "bold cyan"))
            elements.append(text(middle.row(2), f"Your avg level is: {self.record.average:.1f}"))
        else:
            heading = f"Level {self.level}"
            elements.append(text(main.row(0), f"Level: {self.level}    Lives: {self.lives}", "bold"))
            for index, rect in enumerate(self.tile_rects()):
                elements.append(Box(rect, Border.NONE, fill=self._tile_fill(index)))

        return self._frame(heading, elements, "Click  tiles   R  restart   Q  back")
