"""Drawable description of a screen.

Sessions produce a :class:`RenderModel`; the frontend paints it.  Styles are
``rich`` style strings (``"bold red"``, ``"black on green"``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Union

from humanbench.backend.engine.layout import Rect


class Border(StrEnum):
    NONE = "none"
    HEAVY = "heavy"
    DOUBLE = "double"
    ROUNDED = "rounded"


class Align(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class Span:
    text: str
    style: str = ""


@dataclass(frozen=True)
class Box:
    """A rectangle with an optional border, title and background fill."""

    rect: Rect
    border: Border = Border.HEAVY
    title: str = ""
    style: str = ""
    fill: str = ""


@dataclass(frozen=True)
class Label:
    """Styled text starting at the top of *rect*, wrapped to its width."""

    rect: Rect
    spans: tuple[Span, ...]
    align: Align = Align.CENTER


Element = Union[Box, Label]


@dataclass(frozen=True)
class RenderModel:
    elements: tuple[Element, ...] = field(default_factory=tuple)

    def __add__(self, other: RenderModel) -> RenderModel:
        return RenderModel(self.elements + other.elements)


def text(rect: Rect, content: str, style: str = "", align: Align = Align.CENTER) -> Label:
    return Label(rect, (Span(content, style),), align)
