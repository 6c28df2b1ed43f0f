"""Verbal memory: say whether each word has been seen before."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Union

from humanbench.backend.data import WORDS
from humanbench.backend.engine.layout import Rect
from humanbench.backend.engine.render import Border, Box, Element, RenderModel, text
from humanbench.backend.engine.session import CONFIRM_KEYS, GameSession
from humanbench.backend.models.events import Key, Mouse

LIVES = 3
# One word in CHANCE is drawn from the already-seen set.
CHANCE = 5
BUTTON_WIDTH = 10


# -- modes ----------------------------------------------------------------------


@dataclass(frozen=True)
class Ready:
    pass


@dataclass(frozen=True)
class Playing:
    pass


@dataclass(frozen=True)
class Results:
    score: int


Mode = Union[Ready, Playing, Results]


class VerbalMemory(GameSession):
    game_id = "VerbalMemory"
    title = "Verbal Memory"

    def __init__(self, *args: Any, words: Sequence[str] = WORDS, **kwargs: Any) -> None:
        self.words = list(words)
        if not self.words:
            raise ValueError("word list is empty")
        super().__init__(*args, **kwargs)

    def _init_transient(self) -> None:
        self.mode: Mode = Ready()
        self.score = 0
        self.lives = LIVES
        self.seen: set[str] = set()
        self.current = ""

    # -- transitions ------------------------------------------------------------

    def _start(self) -> None:
        self.mode = Playing()
        self._new_word()

    def _new_word(self) -> None:
        if self.seen and self.rng.randrange(CHANCE) == 0:
            self.current = self.rng.choice(sorted(self.seen))
        else:
            self.current = self.rng.choice(self.words)

    def answer(self, claims_seen: bool) -> None:
        """Judge the player's SEEN (``True``) or NEW (``False``) answer."""
        if not isinstance(self.mode, Playing):
            return
        was_seen = self.current in self.seen
        self.seen.add(self.current)

        if was_seen == claims_seen:
            self.score += 1
        else:
            self.lives -= 1
            if self.lives == 0:
                self.mode = Results(self.score)
                self._record_result(self.score)
                return
        self._new_word()

    def on_key(self, key: Key) -> None:
        if key.code == "r":
            self.reset()
        elif isinstance(self.mode, Ready) and key.code in CONFIRM_KEYS:
            self._start()
        elif isinstance(self.mode, Playing) and key.code in ("s", "n"):
            self.answer(key.code == "s")
        elif isinstance(self.mode, Results) and key.code in CONFIRM_KEYS:
            self.reset()

    def on_click(self, mouse: Mouse) -> None:
        if isinstance(self.mode, Ready):
            self._start()
        elif isinstance(self.mode, Results):
            self.reset()
        else:
            seen_button, new_button = self.buttons()
            if seen_button.contains(mouse.column, mouse.row):
                self.answer(True)
            elif new_button.contains(mouse.column, mouse.row):
                self.answer(False)

    # -- geometry & drawing -----------------------------------------------------

    def buttons(self) -> tuple[Rect, Rect]:
        main = self.layout.main
        band = main.centered(main.width, 9)
        row = Rect(band.x, band.y + 6, band.width, 3)
        pair = row.centered(BUTTON_WIDTH * 2 + 4, 3)
        return (
            Rect(pair.x, pair.y, BUTTON_WIDTH, 3),
            Rect(pair.right - BUTTON_WIDTH, pair.y, BUTTON_WIDTH, 3),
        )

    def render_description(self) -> RenderModel:
        main = self.layout.main
        middle = main.centered(main.width, 3)
        elements: list[Element] = []

        if isinstance(self.mode, Ready):
            heading = "Menu"
            elements.append(text(middle.row(0), "Is the word new, or have you seen it already?", "bold"))
            elements.append(text(middle.row(2), "Click/Enter to start playing", "italic"))
        elif isinstance(self.mode, Playing):
            heading = "Playing"
            band = main.centered(main.width, 9)
            elements.append(text(band.row(0), f"Lives: {self.lives}    Score: {self.score}"))
            elements.append(text(band.row(3), self.current, "bold"))
            seen_button, new_button = self.buttons()
            elements.append(Box(seen_button, Border.ROUNDED, style="yellow"))
            elements.append(text(seen_button.inner(1, 1), "SEEN", "bold yellow"))
            elements.append(Box(new_button, Border.ROUNDED, style="green"))
            elements.append(text(new_button.inner(1, 1), "NEW", "bold green"))
        else:
            heading = "Results"
            elements.append(text(middle.row(0), f"Your score is: {self.mode.score}", "bold cyan"))
            elements.append(text(middle.row(2), f"Your avg score is: {self.record.average:.1f}"))

        return self._frame(heading, elements, "S  seen   N  new   R  restart   Q  back")
