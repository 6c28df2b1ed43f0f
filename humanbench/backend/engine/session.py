"""The contract every minigame implements.

A session is a non-blocking state machine.  The run loop owns all waiting:
it asks :meth:`GameSession.poll_timeout` how long to block, then feeds the
next event (or a :class:`Tick` when the wait ran out) to
:meth:`GameSession.handle_event`.

Subclasses provide:

* ``game_id`` / ``title`` class attributes,
* :meth:`_init_transient` building a fresh run,
* :meth:`on_key` / :meth:`on_click`, and :meth:`advance` for deadlines,
* :meth:`render_description`.

A run that reaches its results phase calls :meth:`_record_result` exactly
once, which folds the score into the in-memory historical record.
"""

from __future__ import annotations

import random
import time
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar

from humanbench.backend.engine.layout import Rect, Screen, screen
from humanbench.backend.engine.render import Border, Box, Element, RenderModel, text
from humanbench.backend.logger import get_logger
from humanbench.backend.models.events import InputEvent, Key, Mouse, Resize
from humanbench.backend.models.savestate import ScoreRecord, ScoreStore, merge

Clock = Callable[[], float]

QUIT_KEYS = frozenset({"q", "esc"})
CONFIRM_KEYS = frozenset({"enter", " "})


class GameSession(ABC):
    game_id: ClassVar[str]
    title: ClassVar[str]

    def __init__(
        self,
        record: ScoreRecord | None = None,
        *,
        store: ScoreStore | None = None,
        clock: Clock = time.monotonic,
        rng: random.Random | None = None,
    ) -> None:
        self.record = record if record is not None else ScoreRecord()
        self.store = store
        self.clock = clock
        self.rng = rng if rng is not None else random.Random()
        self.log = get_logger(self.game_id)

        self.area = Rect(0, 0, 80, 24)
        self.now = clock()
        self.exit_requested = False
        self._final: float | None = None
        self._init_transient()

    @classmethod
    def initialize(cls, store: ScoreStore, **options: Any) -> GameSession:
        """Build a fresh session seeded with the stored record."""
        return cls(store.load(cls.game_id), store=store, **options)

    # -- per-game hooks ---------------------------------------------------------

    @abstractmethod
    def _init_transient(self) -> None:
        """(Re)create everything that belongs to a single run."""

    def on_key(self, key: Key) -> None:
        pass

    def on_click(self, mouse: Mouse) -> None:
        pass

    def advance(self) -> None:
        """Apply any deadline that has passed by ``self.now``."""

    def accepts_text(self) -> bool:
        """True while ``q`` is input rather than a quit request."""
        return False

    def deadline(self) -> float | None:
        """Clock time of the next scheduled transition, if any."""
        return None

    @abstractmethod
    def render_description(self) -> RenderModel: ...

    # -- contract ---------------------------------------------------------------

    def handle_event(self, event: InputEvent) -> None:
        self.now = self.clock()
        if isinstance(event, Resize):
            self.area = Rect(0, 0, event.width, event.height)
        self.advance()

        if isinstance(event, Key):
            quit_keys = {"esc"} if self.accepts_text() else QUIT_KEYS
            if event.code in quit_keys:
                self.exit_requested = True
                return
            self.on_key(event)
        elif isinstance(event, Mouse) and event.is_click:
            self.on_click(event)

    def poll_timeout(self) -> float | None:
        deadline = self.deadline()
        if deadline is None:
            return None
        return max(0.0, deadline - self.clock())

    def is_finished(self) -> bool:
        return self.exit_requested

    def final_score(self) -> float | None:
        return self._final

    def reset(self) -> None:
        """Start over, keeping the historical record already in memory."""
        self._final = None
        self._init_transient()

    def close(self) -> None:
        if self.store is not None:
            self.store.save(self.game_id, self.record)

    # -- helpers ----------------------------------------------------------------

    def _record_result(self, score: float) -> None:
        if self._final is not None:
            return
        self._final = score
        self.record = merge(self.record, score)
        self.log.info("run finished with %s (average now %.2f over %d)",
                      score, self.record.average, self.record.count)

    @property
    def banner(self) -> str:
        return self.title if self.title.endswith("Test") else f"{self.title} Test"

    @property
    def layout(self) -> Screen:
        return screen(self.area)

    def _frame(self, heading: str, elements: list[Element], controls: str = "") -> RenderModel:
        """Wrap *elements* in the standard title/body/footer chrome."""
        layout = self.layout
        chrome: list[Element] = [
            Box(layout.title, Border.DOUBLE),
            text(layout.title.inner(1, 1), self.banner, "bold red"),
            Box(layout.body, Border.DOUBLE, title=f"╡ {heading} ╞"),
        ]
        if controls:
            chrome.append(text(layout.footer, controls, "dim"))
        return RenderModel(tuple(chrome + elements))
