"""Paint a :class:`RenderModel` onto a character grid and emit ``rich`` text.

Every cell holds one character and one :class:`rich.style.Style`.  Later
elements are painted over earlier ones; their styles are *added* to what is
already there, so a label drawn on a filled box keeps the box background.
"""

from __future__ import annotations

import rich.box
from rich.console import Console
from rich.style import Style
from rich.text import Text

from humanbench.backend.engine.render import Align, Border, Box, Label, RenderModel

_BOXES: dict[Border, rich.box.Box] = {
    Border.HEAVY: rich.box.HEAVY,
    Border.DOUBLE: rich.box.DOUBLE,
    Border.ROUNDED: rich.box.ROUNDED,
}


class Canvas:
    def __init__(self, width: int, height: int, console: Console | None = None) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        # Only used to measure and wrap labels.
        self.console = console or Console(width=max(1, self.width), color_system=None)
        self._chars = [[" "] * self.width for _ in range(self.height)]
        self._styles = [[Style.null()] * self.width for _ in range(self.height)]

    # -- cell access ------------------------------------------------------------

    def put(self, column: int, row: int, char: str, style: Style | None = None) -> None:
        """Write *char* at one cell, ignoring anything off the canvas."""
        if not (0 <= column < self.width and 0 <= row < self.height):
            return
        self._chars[row][column] = char
        if style is not None:
            self._styles[row][column] = self._styles[row][column] + style

    def style_at(self, column: int, row: int) -> Style:
        return self._styles[row][column]

    def row_text(self, row: int) -> str:
        return "".join(self._chars[row])

    # -- painting ---------------------------------------------------------------

    def paint(self, model: RenderModel) -> Canvas:
        for element in model.elements:
            if isinstance(element, Box):
                self._paint_box(element)
            else:
                self._paint_label(element)
        return self

    def _paint_box(self, box: Box) -> None:
        rect = box.rect
        if rect.is_empty:
            return

        if box.fill:
            fill = Style.parse(box.fill)
            for row in range(rect.y, rect.bottom):
                for column in range(rect.x, rect.right):
                    self.put(column, row, " ", fill)

        chars = _BOXES.get(box.border)
        if chars is None or rect.width < 2 or rect.height < 2:
            return

        style = Style.parse(box.style) if box.style else None
        top, bottom = rect.y, rect.bottom - 1
        left, right = rect.x, rect.right - 1
        for column in range(left + 1, right):
            self.put(column, top, chars.top, style)
            self.put(column, bottom, chars.bottom, style)
        for row in range(top + 1, bottom):
            self.put(left, row, chars.mid_left, style)
            self.put(right, row, chars.mid_right, style)
        self.put(left, top, chars.top_left, style)
        self.put(right, top, chars.top_right, style)
        self.put(left, bottom, chars.bottom_left, style)
        self.put(right, bottom, chars.bottom_right, style)

        if box.title:
            title = box.title[: max(0, rect.width - 4)]
            for offset, char in enumerate(title):
                self.put(left + 2 + offset, top, char, style)

    def _paint_label(self, label: Label) -> None:
        rect = label.rect
        if rect.is_empty:
            return

        content = Text()
        for span in label.spans:
            content.append(span.text, style=span.style or None)
        lines = content.wrap(self.console, rect.width, justify="left", overflow="fold")

        for index, line in enumerate(lines):
            if index >= rect.height:
                break
            line.rstrip()
            cells = [
                (char, segment.style)
                for segment in line.render(self.console)
                for char in segment.text
                if char != "\n"
            ]
            if label.align is Align.CENTER:
                start = rect.x + (rect.width - len(cells)) // 2
            elif label.align is Align.RIGHT:
                start = rect.right - len(cells)
            else:
                start = rect.x
            for offset, (char, style) in enumerate(cells):
                column = start + offset
                if rect.x <= column < rect.right:
                    self.put(column, rect.y + index, char, style)

    # -- output -----------------------------------------------------------------

    def to_text(self) -> Text:
        """The whole canvas as one ``rich`` :class:`Text`, rows joined by newlines."""
        out = Text(no_wrap=True, overflow="crop", end="")
        for row in range(self.height):
            if row:
                out.append("\n")
            run_chars: list[str] = []
            run_style = None
            for column in range(self.width):
                style = self._styles[row][column]
                if style != run_style and run_chars:
                    out.append("".join(run_chars), style=run_style)
                    run_chars = []
                run_style = style
                run_chars.append(self._chars[row][column])
            if run_chars:
                out.append("".join(run_chars), style=run_style)
        return out


def paint(model: RenderModel, width: int, height: int) -> Canvas:
    return Canvas(width, height).paint(model)

