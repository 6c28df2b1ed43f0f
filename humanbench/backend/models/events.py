"""Input events consumed by the menu and every game session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Union


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class MouseButton(StrEnum):
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"
    WHEEL_UP = "wheel_up"
    WHEEL_DOWN = "wheel_down"


@dataclass(frozen=True)
class Key:
    """A key press.

    ``code`` is either a single printable character (``"a"``, ``" "``,
    ``"7"``) or one of the names ``up``, ``down``, ``left``, ``right``,
    ``enter``, ``esc``, ``backspace``, ``tab``.
    """

    code: str

    @property
    def char(self) -> str | None:
        """The typed character, or ``None`` for named keys."""
        return self.code if len(self.code) == 1 else None

    @property
    def direction(self) -> Direction | None:
        try:
            return Direction(self.code)
        except ValueError:
            return None


@dataclass(frozen=True)
class Mouse:
    """A mouse report at a zero-based terminal cell."""

    column: int
    row: int
    button: MouseButton = MouseButton.LEFT
    pressed: bool = True

    @property
    def is_click(self) -> bool:
        """True for a button press (not a release or wheel step)."""
        return self.pressed and self.button in (
            MouseButton.LEFT,
            MouseButton.MIDDLE,
            MouseButton.RIGHT,
        )


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class Tick:
    """Synthesised when a poll times out without input."""


InputEvent = Union[Key, Mouse, Resize, Tick]
