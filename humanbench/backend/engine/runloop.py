"""The draw → poll → dispatch cycle shared by the menu and every game."""

from __future__ import annotations

from typing import Any, Protocol

from humanbench.backend.engine.render import RenderModel
from humanbench.backend.engine.session import GameSession
from humanbench.backend.models.events import InputEvent, Resize, Tick
from humanbench.backend.models.savestate import ScoreStore


class Component(Protocol):
    def handle_event(self, event: InputEvent) -> None: ...

    def poll_timeout(self) -> float | None: ...

    def is_finished(self) -> bool: ...

    def render_description(self) -> RenderModel: ...

    def close(self) -> None: ...


class EventSource(Protocol):
    def poll(self, timeout: float | None) -> InputEvent | None:
        """Wait up to *timeout* seconds (forever if ``None``) for an event."""
        ...


class Surface(Protocol):
    @property
    def size(self) -> tuple[int, int]: ...

    def draw(self, model: RenderModel) -> None: ...


def run_loop(component: Component, source: EventSource, surface: Surface) -> None:
    """Drive *component* until it reports finished, then close it.

    ``close`` runs even if the loop is interrupted, so scores recorded so
    far are still flushed.
    """
    last_size: tuple[int, int] | None = None
    try:
        while not component.is_finished():
            size = surface.size
            if size != last_size:
                last_size = size
                component.handle_event(Resize(*size))
                if component.is_finished():
                    break

            surface.draw(component.render_description())
            event = source.poll(component.poll_timeout())
            component.handle_event(event if event is not None else Tick())
    finally:
        component.close()


def run_session(session_cls: type[GameSession], store: ScoreStore, source: EventSource,
                surface: Surface, **options: Any) -> GameSession:
    """Load, play and persist one game.  Returns the finished session."""
    session = session_cls.initialize(store, **options)
    run_loop(session, source, surface)
    return session
