"""Cell geometry shared by rendering and mouse hit-testing."""

from __future__ import annotations

from dataclasses import dataclass

TITLE_HEIGHT = 3
FOOTER_HEIGHT = 1


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, column: int, row: int) -> bool:
        return self.x <= column < self.right and self.y <= row < self.bottom

    def inner(self, horizontal: int = 1, vertical: int = 1) -> Rect:
        return Rect(
            self.x + horizontal,
            self.y + vertical,
            max(0, self.width - 2 * horizontal),
            max(0, self.height - 2 * vertical),
        )

    def centered(self, width: int, height: int) -> Rect:
        """A *width* × *height* rectangle centred inside this one (clipped)."""
        width = min(width, self.width)
        height = min(height, self.height)
        return Rect(
            self.x + (self.width - width) // 2,
            self.y + (self.height - height) // 2,
            width,
            height,
        )

    def row(self, offset: int, height: int = 1) -> Rect:
        """A full-width band starting *offset* rows down."""
        return Rect(self.x, self.y + offset, self.width, max(0, min(height, self.height - offset)))

    def fits(self, width: int, height: int) -> bool:
        return self.width >= width and self.height >= height


@dataclass(frozen=True)
class Screen:
    """Standard game chrome: title band, bordered body, one-line footer."""

    title: Rect
    body: Rect
    footer: Rect

    @property
    def main(self) -> Rect:
        """Drawable area inside the body border."""
        return self.body.inner(1, 1)


def screen(area: Rect) -> Screen:
    body_height = max(0, area.height - TITLE_HEIGHT - FOOTER_HEIGHT)
    return Screen(
        title=Rect(area.x, area.y, area.width, min(TITLE_HEIGHT, area.height)),
        body=Rect(area.x, area.y + TITLE_HEIGHT, area.width, body_height),
        footer=Rect(area.x, area.y + TITLE_HEIGHT + body_height, area.width, FOOTER_HEIGHT),
    )


def grid(area: Rect, columns: int, rows: int, cell_width: int, cell_height: int,
         gap_x: int = 0, gap_y: int = 0) -> list[Rect]:
    """Row-major cell rectangles of a grid centred in *area*."""
    total_w = columns * cell_width + (columns - 1) * gap_x
    total_h = rows * cell_height + (rows - 1) * gap_y
    origin = area.centered(total_w, total_h)
    return [
        Rect(
            origin.x + c * (cell_width + gap_x),
            origin.y + r * (cell_height + gap_y),
            cell_width,
            cell_height,
        )
        for r in range(rows)
        for c in range(columns)
    ]


def centered_row(area: Rect, count: int, percent: int) -> list[Rect]:
    """*count* cells each *percent* of *area*'s width, centred horizontally."""
    cell_width = area.width * percent // 100
    left = area.x + (area.width - cell_width * count) // 2
    return [Rect(left + i * cell_width, area.y, cell_width, area.height) for i in range(count)]
