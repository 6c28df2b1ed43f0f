"""Top-level menu: a grid of games navigated by arrows or the mouse."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from humanbench.backend.engine.layout import TITLE_HEIGHT, Rect, centered_row
from humanbench.backend.engine.render import Border, Box, RenderModel, text
from humanbench.backend.engine.session import CONFIRM_KEYS, QUIT_KEYS, GameSession
from humanbench.backend.models.events import Direction, InputEvent, Key, Mouse, MouseButton, Resize

APP_TITLE = "HumanBenchmark-CLI"
CELL_HEIGHT = 5

_WASD = {"w": Direction.UP, "a": Direction.LEFT, "s": Direction.DOWN, "d": Direction.RIGHT}


@dataclass(frozen=True)
class MenuEntry:
    label: str
    session_cls: type[GameSession]


Launcher = Callable[[MenuEntry], None]


class Navigator:
    """Selects a game on an irregular grid and hands control to it.

    ``selected_index`` is a row-major index over the non-empty cells, or
    ``None`` when the pointer is not over any cell.
    """

    def __init__(self, rows: Sequence[Sequence[MenuEntry]], launch: Launcher) -> None:
        self.rows = [list(row) for row in rows if row]
        if not self.rows:
            raise ValueError("menu needs at least one entry")
        self.launch = launch
        self.selected_index: int | None = 0
        self.exit_requested = False
        self.area = Rect(0, 0, 80, 24)

    # -- index helpers ----------------------------------------------------------

    @property
    def entries(self) -> list[MenuEntry]:
        return [entry for row in self.rows for entry in row]

    def position(self, index: int) -> tuple[int, int]:
        for r, row in enumerate(self.rows):
            if index < len(row):
                return r, index
            index -= len(row)
        raise IndexError(index)

    def index_of(self, row: int, column: int) -> int:
        return sum(len(r) for r in self.rows[:row]) + column

    @property
    def selected(self) -> MenuEntry | None:
        if self.selected_index is None:
            return None
        return self.entries[self.selected_index]

    # -- navigation -------------------------------------------------------------

    def move(self, direction: Direction) -> None:
        if self.selected_index is None:
            self.selected_index = 0
            return

        r, c = self.position(self.selected_index)
        if direction is Direction.LEFT:
            c = max(0, c - 1)
        elif direction is Direction.RIGHT:
            c = min(len(self.rows[r]) - 1, c + 1)
        else:
            target = r - 1 if direction is Direction.UP else r + 1
            if not 0 <= target < len(self.rows):
                return
            c = self._nearest_column(r, c, target)
            r = target
        self.selected_index = self.index_of(r, c)

    def _nearest_column(self, row: int, column: int, target: int) -> int:
        """Column of *target* row whose centre is closest to ours.

        Centres are normalised to the row width so rows of different lengths
        line up; ties go to the right-hand cell.
        """
        here = (column + 0.5) / len(self.rows[row])
        width = len(self.rows[target])
        return min(
            range(width),
            key=lambda c: (abs((c + 0.5) / width - here), -c),
        )

    def cell_rects(self) -> list[list[Rect]]:
        area = self.area
        band = Rect(area.x, area.y + TITLE_HEIGHT, area.width,
                    max(0, area.height - TITLE_HEIGHT))
        block = band.centered(area.width, CELL_HEIGHT * len(self.rows))
        rects: list[list[Rect]] = []
        for r, row in enumerate(self.rows):
            strip = Rect(block.x, block.y + r * CELL_HEIGHT, block.width, CELL_HEIGHT)
            percent = 20 if len(row) >= 3 else 30
            rects.append(centered_row(strip, len(row), min(percent, 100 // len(row))))
        return rects

    def select_under_pointer(self, column: int, row: int) -> None:
        for r, cells in enumerate(self.cell_rects()):
            for c, rect in enumerate(cells):
                if rect.contains(column, row):
                    self.selected_index = self.index_of(r, c)
                    return
        self.selected_index = None

    def activate(self) -> None:
        """Run the selected game to completion (blocks)."""
        entry = self.selected
        if entry is not None:
            self.launch(entry)

    # -- run-loop contract ------------------------------------------------------

    def handle_event(self, event: InputEvent) -> None:
        if isinstance(event, Resize):
            self.area = Rect(0, 0, event.width, event.height)
        elif isinstance(event, Key):
            self._on_key(event)
        elif isinstance(event, Mouse):
            self.select_under_pointer(event.column, event.row)
            if event.pressed and event.button is MouseButton.LEFT:
                self.activate()

    def _on_key(self, key: Key) -> None:
        if key.code in QUIT_KEYS:
            self.exit_requested = True
        elif key.code in CONFIRM_KEYS:
            self.activate()
        elif key.direction is not None:
            self.move(key.direction)
        elif key.code in _WASD:
            self.move(_WASD[key.code])
        elif key.code.isdigit() and 1 <= int(key.code) <= len(self.entries):
            self.selected_index = int(key.code) - 1
            self.activate()

    def poll_timeout(self) -> float | None:
        return None

    def is_finished(self) -> bool:
        return self.exit_requested

    def close(self) -> None:
        pass

    def render_description(self) -> RenderModel:
        title = Rect(self.area.x, self.area.y, self.area.width, TITLE_HEIGHT)
        elements = [
            Box(title, Border.DOUBLE),
            text(title.inner(1, 1), APP_TITLE, "bold blue"),
        ]
        index = 0
        for cells, row in zip(self.cell_rects(), self.rows):
            for rect, entry in zip(cells, row):
                chosen = index == self.selected_index
                style = "bold bright_red" if chosen else ""
                elements.append(Box(rect, Border.HEAVY, style=style))
                elements.append(text(rect.inner(1, 1).row(1), entry.label, style))
                index += 1
        footer = Rect(self.area.x, self.area.bottom - 1, self.area.width, 1)
        elements.append(text(footer, f"←↑↓→ select   Enter play   1-{len(self.entries)} jump   Q quit", "dim"))
        return RenderModel(tuple(elements))
