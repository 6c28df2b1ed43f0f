"""Rich terminal frontend: full-screen canvas, game menu and score table.

Every screen is described by the backend as a :class:`RenderModel`; this
module paints it with :mod:`humanbench.frontend.cli.rich.canvas` and pushes
the result to the terminal through a shared :class:`rich.console.Console`.
"""

from __future__ import annotations

from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console
from rich.control import Control
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from humanbench.backend.engine import MenuEntry, Navigator, run_loop, run_session
from humanbench.backend.engine.games import ALL_GAMES, GAME_GRID
from humanbench.backend.engine.render import RenderModel
from humanbench.backend.logger import configure_logging, get_logger
from humanbench.backend.models.savestate import ScoreStore
from humanbench.config import LOG_FILE_NAME
from humanbench.frontend.cli.input_handler import TerminalInput
from humanbench.frontend.cli.rich.canvas import Canvas

console = Console()

# What each game's average is measured in, for the score table.
_UNITS = {
    "ReactionTime": "ms",
    "AimTrainer": "ms / target",
    "TypingTest": "WPM",
    "VisualMemory": "level",
    "ChimpTest": "numbers",
    "NumberMemory": "digits",
}


# -- surface ------------------------------------------------------------------


class RichSurface:
    """Full-screen drawing target backed by a rich console."""

    def __init__(self, console: Console) -> None:
        self.console = console
        self._last_size: tuple[int, int] | None = None

    @property
    def size(self) -> tuple[int, int]:
        width, height = self.console.size
        return width, height

    def draw(self, model: RenderModel) -> None:
        size = self.size
        if size != self._last_size:
            self._last_size = size
            self.console.clear()
        canvas = Canvas(*size, console=self.console).paint(model)
        self.console.control(Control.home())
        self.console.print(canvas.to_text(), end="", crop=True, overflow="crop", no_wrap=True)


# -- menu ---------------------------------------------------------------------


def menu_rows() -> list[list[MenuEntry]]:
    return [[MenuEntry(cls.title, cls) for cls in row] for row in GAME_GRID]


def run(data_dir: Path) -> None:
    """Open the game menu on the current terminal and play until quit."""
    configure_logging(data_dir / LOG_FILE_NAME)
    log = get_logger("Menu")
    store = ScoreStore(data_dir)
    surface = RichSurface(console)

    with TerminalInput() as source:

        def launch(entry: MenuEntry) -> None:
            log.info("starting %s", entry.session_cls.game_id)
            run_session(entry.session_cls, store, source, surface)

        run_loop(Navigator(menu_rows(), launch), source, surface)

    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))


# -- scores -------------------------------------------------------------------


def scores_table(store: ScoreStore) -> Table:
    """Return a Rich Table with every game's running average."""
    table = Table(
        box=rich.box.ROUNDED,
        border_style="dim",
        show_lines=False,
    )
    table.add_column("Game", style="bold cyan")
    table.add_column("Average", justify="right", style="yellow")
    table.add_column("Unit", style="dim")
    table.add_column("Runs", justify="right", style="yellow")

    records = store.load_all(cls.game_id for cls in ALL_GAMES)
    for cls in ALL_GAMES:
        record = records[cls.game_id]
        if record.count == 0:
            table.add_row(cls.title, "-", _UNITS.get(cls.game_id, "score"), "0")
        else:
            table.add_row(
                cls.title,
                f"{record.average:.1f}",
                _UNITS.get(cls.game_id, "score"),
                str(record.count),
            )
    return table


def print_scores(data_dir: Path, out: Console | None = None) -> None:
    out = out or console
    panel = Panel(
        Align.center(scores_table(ScoreStore(data_dir))),
        title="[bold]A V E R A G E S[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    out.print()
    out.print(Align.center(panel))
    out.print(Align.center(Text(str(data_dir), style="dim")))
