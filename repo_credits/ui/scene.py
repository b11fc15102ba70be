# repo_credits/ui/scene.py

from __future__ import annotations

import random
from typing import Optional, Sequence

from rich.text import Text

from .card import Card
from .compositor import render_frame
from .rain import RainField, RainSettings
from .reveal import RevealController, RevealTiming


class MatrixScene:
    """Rain field and card controller advanced together, one frame per tick."""

    def __init__(
        self,
        cards: Sequence[Card],
        width: int,
        height: int,
        timing: Optional[RevealTiming] = None,
        rain: Optional[RainSettings] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.field = RainField(width, height, rain, self.rng)
        self.controller = RevealController(cards, width, height, timing, self.rng)

    @property
    def finished(self) -> bool:
        return self.controller.finished

    def advance(self) -> bool:
        self.field.advance()
        return self.controller.advance()

    def handle_key(self, key: str) -> bool:
        # The reveal sequence only reacts to cancel keys, handled by the driver
        return False

    def render(self) -> Text:
        return render_frame(self.field, self.controller, self.rng)
