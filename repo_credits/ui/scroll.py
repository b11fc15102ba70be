# repo_credits/ui/scroll.py
"""
Plain credits roll: the whole credits buffer scrolls up one line per tick
over a static star field, fading near the top and bottom edges.
"""

from __future__ import annotations

import random
from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Tuple

from rich.text import Text

from .theme import STAR_FIELD, LineKind, classify_line, faded_style

SCROLL_STEP = 3
FADE_ROWS = 4
DEEP_FADE_ROWS = 2


def _star_glyph(roll: int) -> str:
    if roll == 0:
        return "✦"  # bright star
    if roll <= 2:
        return "✧"
    if roll <= 4:
        return "⋆"
    if roll <= 6:
        return "·"
    return "."  # faint


class StarField:
    """Fixed random stars laid over the full height of the credits buffer."""

    def __init__(self, width: int, total_height: int, rng: random.Random) -> None:
        self.width = width
        self.rows: Dict[int, List[Tuple[int, str]]] = defaultdict(list)
        density = (width * total_height) // 40
        for _ in range(density):
            glyph = _star_glyph(rng.randrange(10))
            x = rng.randrange(width)
            y = rng.randrange(total_height)
            self.rows[y].append((x, glyph))

    def line(self, y: int) -> str:
        cells = [" "] * self.width
        for x, glyph in self.rows.get(y, ()):
            cells[x] = glyph
        return "".join(cells)


class CreditsScroll:
    def __init__(
        self,
        lines: Sequence[str],
        width: int,
        height: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.lines = list(lines)
        self.kinds = [classify_line(line) for line in self.lines]
        self.width = width
        self.height = height
        self.offset = 0
        self.finished = False
        self.stars = StarField(width, max(1, len(self.lines)), rng or random.Random())

    def advance(self) -> bool:
        self.offset += 1
        if self.offset > len(self.lines):
            self.finished = True
        return not self.finished

    def handle_key(self, key: str) -> bool:
        """Nudge the roll with the arrow keys. Returns True if the view moved."""
        before = self.offset
        if key == "up":
            self.offset = max(0, self.offset - SCROLL_STEP)
        elif key == "down":
            self.offset += SCROLL_STEP
        return self.offset != before

    def visible(self) -> range:
        start = max(0, self.offset)
        return range(start, min(start + self.height, len(self.lines)))

    def render(self) -> Text:
        text = Text(no_wrap=True, overflow="crop", end="")
        shown = self.visible()
        for row, i in enumerate(shown):
            if row:
                text.append("\n")
            kind = self.kinds[i]
            if kind is LineKind.BLANK:
                stars = self.stars.line(i)
                if stars.strip():
                    text.append(stars, style=STAR_FIELD)
                continue
            from_top = row
            from_bottom = self.height - 1 - row
            faded = from_top < FADE_ROWS or from_bottom < FADE_ROWS
            very_faded = from_top < DEEP_FADE_ROWS or from_bottom < DEEP_FADE_ROWS
            text.append(self.lines[i], style=faded_style(kind, faded, very_faded))

        # Pad so the frame always covers the screen
        for _ in range(self.height - max(1, len(shown))):
            text.append("\n")
        return text
