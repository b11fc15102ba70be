# repo_credits/ui/card.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .theme import LineKind, classify_line


@dataclass(frozen=True)
class Box:
    """Half-open rectangle: rows [top, bottom), columns [left, right)."""

    top: int
    left: int
    bottom: int
    right: int

    def contains(self, y: int, x: int) -> bool:
        return self.top <= y < self.bottom and self.left <= x < self.right

    @property
    def empty(self) -> bool:
        return self.top >= self.bottom or self.left >= self.right


def center(text: str, width: int) -> str:
    """Left-pad `text` so it sits in the middle of `width` columns."""
    if len(text) >= width:
        return text
    return " " * ((width - len(text)) // 2) + text


@dataclass(frozen=True)
class Card:
    """
    One full-screen text layout.

    `rows` always holds exactly `height` strings of exactly `width`
    characters; a space is a blank cell. `kinds` gives the content class
    of each row and `cells` lists every non-blank (y, x) in row order.
    """

    width: int
    height: int
    rows: Tuple[str, ...]
    kinds: Tuple[LineKind, ...]
    cells: Tuple[Tuple[int, int], ...] = field(repr=False)
    bounds: Optional[Box] = None

    @classmethod
    def compose(cls, lines: Sequence[str], width: int, height: int) -> "Card":
        """
        Center `lines` on a width x height screen.

        Each line is centered horizontally and the block as a whole
        vertically. Anything past the screen edge is clipped.
        """
        lines = list(lines)[:height]
        top = (height - len(lines)) // 2
        rows: List[str] = [" " * width] * height
        for i, line in enumerate(lines):
            rows[top + i] = center(line, width)[:width].ljust(width)

        cells = []
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch != " ":
                    cells.append((y, x))

        bounds = None
        if cells:
            ys = [y for y, _ in cells]
            xs = [x for _, x in cells]
            bounds = Box(min(ys), min(xs), max(ys) + 1, max(xs) + 1)

        return cls(
            width=width,
            height=height,
            rows=tuple(rows),
            kinds=tuple(classify_line(r) for r in rows),
            cells=tuple(cells),
            bounds=bounds,
        )

    def glyph(self, y: int, x: int) -> str:
        return self.rows[y][x]

    def is_content(self, y: int, x: int) -> bool:
        return self.rows[y][x] != " "

    def clear_box(self, pad_x: int = 3, pad_y: int = 1, margin: int = 4) -> Optional[Box]:
        """
        Region behind the text where rain is suppressed.

        The content bounds padded by `pad_x`/`pad_y`, then kept `margin`
        columns away from both screen edges so rain stays visible there.
        """
        if self.bounds is None:
            return None
        box = Box(
            top=max(0, self.bounds.top - pad_y),
            left=max(margin, self.bounds.left - pad_x),
            bottom=min(self.height, self.bounds.bottom + pad_y),
            right=min(self.width - margin, self.bounds.right + pad_x),
        )
        return None if box.empty else box

    def text(self) -> str:
        return "\n".join(row.rstrip() for row in self.rows)
