# repo_credits/ui/reveal.py
"""
Card resolve/dissolve state machine.

Each card cycles Rain -> Resolve -> Show -> Dissolve. During Resolve the
card's glyphs solidify out of the rain one cell at a time; during
Dissolve they fall back. The controller only tracks which cells are
resolved; drawing is left to the compositor.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .card import Card

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    RAIN = "rain"
    RESOLVE = "resolve"
    SHOW = "show"
    DISSOLVE = "dissolve"


# Phases during which a card occupies the screen
CARD_PHASES = frozenset({Phase.RESOLVE, Phase.SHOW, Phase.DISSOLVE})


@dataclass(frozen=True)
class RevealTiming:
    """Phase lengths in ticks and the peak per-tick flip probability."""

    rain: int = 30
    resolve: int = 25
    show: int = 50
    dissolve: int = 20
    flip_rate: float = 0.15

    def duration(self, phase: Phase) -> int:
        return {
            Phase.RAIN: self.rain,
            Phase.RESOLVE: self.resolve,
            Phase.SHOW: self.show,
            Phase.DISSOLVE: self.dissolve,
        }[phase]


def should_flip(fraction: float, draw: float, rate: float) -> bool:
    """One Bernoulli trial: flip when `draw` falls under the ramped rate."""
    return draw < fraction * rate


class RevealController:
    """
    Walks a card sequence front to back exactly once.

    `resolved` always refers to `resolved_card`. That is the current card,
    except in the Rain phase right after a dissolve: cells the dissolve did
    not clear keep showing the previous card until the next Resolve starts
    and the map is reset.
    """

    def __init__(
        self,
        cards: Sequence[Card],
        width: int,
        height: int,
        timing: Optional[RevealTiming] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.cards = list(cards)
        self.width = width
        self.height = height
        self.timing = timing or RevealTiming()
        self.rng = rng or random.Random()

        self.index = 0
        self.phase = Phase.RAIN
        self.elapsed = 0
        self.finished = not self.cards
        self.resolved = self._fresh_map()
        self.resolved_card: Optional[Card] = self.cards[0] if self.cards else None

    # ------------------------------------------------------------------ #
    @property
    def card(self) -> Optional[Card]:
        if self.finished:
            return None
        return self.cards[self.index]

    @property
    def fraction(self) -> float:
        return self.elapsed / self.timing.duration(self.phase)

    def resolved_count(self) -> int:
        return sum(row.count(True) for row in self.resolved)

    def is_resolved(self, y: int, x: int) -> bool:
        return self.resolved[y][x]

    def _fresh_map(self) -> List[List[bool]]:
        return [[False] * self.width for _ in range(self.height)]

    def _enter(self, phase: Phase) -> None:
        logger.debug("card %d: %s -> %s", self.index, self.phase.value, phase.value)
        self.phase = phase
        self.elapsed = 0

    # ------------------------------------------------------------------ #
    def advance(self) -> bool:
        """
        Run one tick. Returns False once the last card has dissolved.
        """
        if self.finished:
            return False

        self.elapsed += 1
        expired = self.elapsed >= self.timing.duration(self.phase)

        if self.phase is Phase.RAIN:
            if expired:
                self.resolved = self._fresh_map()
                self.resolved_card = self.card
                self._enter(Phase.RESOLVE)

        elif self.phase is Phase.RESOLVE:
            if expired:
                self._resolve_all()
                self._enter(Phase.SHOW)
            else:
                self._resolve_step()

        elif self.phase is Phase.SHOW:
            if expired:
                self._enter(Phase.DISSOLVE)

        elif self.phase is Phase.DISSOLVE:
            if not expired:
                self._dissolve_step()
            elif self.index + 1 >= len(self.cards):
                logger.debug("card sequence exhausted after %d card(s)", len(self.cards))
                self.finished = True
                return False
            else:
                self.index += 1
                self._enter(Phase.RAIN)

        return True

    def _resolve_step(self) -> None:
        fraction = self.fraction
        rate = self.timing.flip_rate
        rnd = self.rng.random
        resolved = self.resolved
        for y, x in self.resolved_card.cells:
            if not resolved[y][x] and should_flip(fraction, rnd(), rate):
                resolved[y][x] = True

    def _resolve_all(self) -> None:
        for y, x in self.resolved_card.cells:
            self.resolved[y][x] = True

    def _dissolve_step(self) -> None:
        fraction = self.fraction
        rate = self.timing.flip_rate
        rnd = self.rng.random
        resolved = self.resolved
        for y, x in self.resolved_card.cells:
            if resolved[y][x] and should_flip(fraction, rnd(), rate):
                resolved[y][x] = False
