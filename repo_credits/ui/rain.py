# repo_credits/ui/rain.py

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, NamedTuple, Optional

from .theme import MATRIX_CHARS


@dataclass(frozen=True)
class RainSettings:
    spawn_chance: float = 0.02
    min_speed: int = 1
    max_speed: int = 3
    min_trail: int = 4
    max_trail: int = 14
    alphabet: str = MATRIX_CHARS


class RainCell(NamedTuple):
    glyph: str
    distance: int  # rows above the column head, 0 for the head itself


# Helper class to manage the state of one column of falling characters
@dataclass
class RainColumn:
    height: int
    head: int = 0
    speed: int = 1
    length: int = 4
    acc: int = 0
    active: bool = False

    def activate(self, settings: RainSettings, rng: random.Random) -> None:
        """Start a fresh trail at the top of the screen."""
        self.head = 0
        self.acc = 0
        self.speed = rng.randint(settings.min_speed, settings.max_speed)
        self.length = rng.randint(settings.min_trail, settings.max_trail)
        self.active = True

    def tick(self, settings: RainSettings, rng: random.Random) -> None:
        if not self.active:
            if rng.random() < settings.spawn_chance:
                self.activate(settings, rng)
            return

        self.acc += 1
        # Move the head down one row every `speed` ticks
        if self.acc >= self.speed:
            self.head += 1
            self.acc = 0

        # Whole trail below the bottom edge
        if self.head - self.length > self.height:
            self.active = False

    def trail_rows(self) -> range:
        """Visible rows covered by the trail, head included."""
        if not self.active:
            return range(0)
        top = max(0, self.head - self.length + 1)
        bottom = min(self.height, self.head + 1)
        return range(top, max(top, bottom))


class RainField:
    """All rain columns plus the grid of glyphs they currently cover."""

    def __init__(
        self,
        width: int,
        height: int,
        settings: Optional[RainSettings] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.settings = settings or RainSettings()
        self.rng = rng or random.Random()
        self.columns = [RainColumn(height) for _ in range(width)]
        self.grid: List[List[Optional[RainCell]]] = [
            [None] * width for _ in range(height)
        ]

    def advance(self) -> None:
        choice = self.rng.choice
        alphabet = self.settings.alphabet
        for x, col in enumerate(self.columns):
            before = col.trail_rows()
            col.tick(self.settings, self.rng)
            after = col.trail_rows()

            for y in before:
                if y not in after:
                    self.grid[y][x] = None
            # Glyphs are redrawn every tick; trails do not remember them
            for y in after:
                self.grid[y][x] = RainCell(choice(alphabet), col.head - y)

    def cell(self, y: int, x: int) -> Optional[RainCell]:
        return self.grid[y][x]
