"""Number memory: remember an ever longer number and type it back."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from humanbench.backend.engine.layout import Rect
from humanbench.backend.engine.render import Border, Box, Element, Label, RenderModel, Span, text
from humanbench.backend.engine.session import CONFIRM_KEYS, GameSession
from humanbench.backend.models.events import Key, Mouse

FADE_OUT = 2.0
ADDED_FADE = 0.6
PROGRESS_STEPS = 10


# -- modes ----------------------------------------------------------------------


@dataclass(frozen=True)
class Ready:
    pass


@dataclass(frozen=True)
class Watching:
    start: float
    until: float


@dataclass(frozen=True)
class Playing:
    pass


@dataclass(frozen=True)
class Results:
    score: int


Mode = Union[Ready, Watching, Playing, Results]


class NumberMemory(GameSession):
    game_id = "NumberMemory"
    title = "Number Memory"

    def _init_transient(self) -> None:
        self.mode: Mode = Ready()
        self.level = 0
        self.number = ""
        self.entered = ""

    def display_time(self) -> float:
        """Seconds the current number stays on screen."""
        return FADE_OUT + ADDED_FADE * max(0, len(self.number) - 1)

    # -- transitions ------------------------------------------------------------

    def _new_number(self) -> None:
        self.level += 1
        digits = [str(self.rng.randint(1, 9))]
        digits.extend(str(self.rng.randint(0, 9)) for _ in range(self.level - 1))
        self.number = "".join(digits)
        self.entered = ""
        self.mode = Watching(self.now, self.now + self.display_time())

    def type_digit(self, digit: str) -> None:
        if len(self.entered) == len(self.number) or (not self.entered and digit == "0"):
            return
        self.entered += digit

    def submit(self) -> None:
        if len(self.entered) < len(self.number):
            return
        if self.entered == self.number:
            self._new_number()
        else:
            self.mode = Results(self.level)
            self._record_result(self.level)

    def advance(self) -> None:
        if isinstance(self.mode, Watching) and self.now >= self.mode.until:
            self.mode = Playing()

    def deadline(self) -> float | None:
        if isinstance(self.mode, Watching):
            return min(self.mode.until, self.now + self.display_time() / PROGRESS_STEPS)
        return None

    def on_key(self, key: Key) -> None:
        mode = self.mode
        if key.code == "r":
            self.reset()
        elif isinstance(mode, Ready) and key.code in CONFIRM_KEYS:
            self._new_number()
        elif isinstance(mode, Watching) and key.code == " ":
            self.mode = Playing()
        elif isinstance(mode, Playing):
            if key.char is not None and key.char.isdigit():
                self.type_digit(key.char)
            elif key.code == "backspace":
                self.entered = self.entered[:-1]
            elif key.code == "enter":
                self.submit()
        elif isinstance(mode, Results) and key.code in CONFIRM_KEYS:
            self.reset()

    def on_click(self, mouse: Mouse) -> None:
        if isinstance(self.mode, Ready):
            self._new_number()

    # -- drawing ----------------------------------------------------------------

    def _progress(self, mode: Watching) -> str:
        span = mode.until - mode.start
        filled = round((self.now - mode.start) / span * PROGRESS_STEPS) if span > 0 else PROGRESS_STEPS
        bar = "".join(
            "=" if filled > i else ">" if filled == i else " "
            for i in range(1, PROGRESS_STEPS + 1)
        )
        return f"╡{bar}╞"

    def _compare(self) -> tuple[Span, ...]:
        spans = []
        for i, digit in enumerate(self.entered):
            right = i < len(self.number) and self.number[i] == digit
            spans.append(Span(digit, "bold green" if right else "bold red strike"))
        return tuple(spans)

    def render_description(self) -> RenderModel:
        main = self.layout.main
        box = main.centered(max(len(self.number), 10) + 6, 3)
        middle = main.centered(main.width, 3)
        mode = self.mode
        elements: list[Element] = []

        if isinstance(mode, Ready):
            heading = "Menu"
            elements.append(text(middle.row(1), "Press ENTER to start game...", "italic"))
        elif isinstance(mode, Watching):
            heading = f"Level {self.level}"
            elements.append(Box(box, Border.ROUNDED, title=self._progress(mode)))
            elements.append(text(box.inner(1, 1), self.number, "bold"))
        elif isinstance(mode, Playing):
            heading = f"Level {self.level}"
            elements.append(text(main.row(1), "What was the number?", "bold"))
            elements.append(Box(box, Border.ROUNDED, title="╡ Number ╞"))
            elements.append(text(box.inner(1, 1), self.entered, "bold yellow"))
        else:
            heading = "Results"
            elements.append(text(main.row(1), f"Your score is: {mode.score}", "bold cyan"))
            elements.append(text(main.row(2), f"Your avg score is: {self.record.average:.0f}"))
            elements.append(Box(box, Border.ROUNDED, title="╡ Number ╞"))
            elements.append(text(box.inner(1, 1), self.number, "bold green"))
            answer = Rect(box.x, box.bottom, box.width, 1)
            elements.append(Label(answer, self._compare()))

        return self._frame(heading, elements, "Digits  type   Enter  submit   R  restart   Q  back")
