# repo_credits/ui/compositor.py

from __future__ import annotations

import random
from enum import Enum
from typing import List, Optional, Tuple

from rich.text import Text

from .card import Box
from .rain import RainField
from .reveal import CARD_PHASES, Phase, RevealController
from .theme import MATRIX_CHARS, SCRAMBLE, rain_style, style_for_kind


class Layer(Enum):
    """Which source a frame cell is drawn from, highest precedence first."""

    CARD = 1
    SCRAMBLE = 2
    CLEAR = 3
    RAIN = 4


def cell_layer(
    y: int, x: int, controller: RevealController, box: Optional[Box]
) -> Layer:
    """Pick the layer for one cell. Exactly one layer applies to every cell."""
    resolved_card = controller.resolved_card
    if (
        resolved_card is not None
        and controller.resolved[y][x]
        and resolved_card.is_content(y, x)
    ):
        return Layer.CARD

    card = controller.card
    phase = controller.phase
    if card is not None and phase is Phase.RESOLVE and card.is_content(y, x):
        return Layer.SCRAMBLE
    if phase in CARD_PHASES and box is not None and box.contains(y, x):
        return Layer.CLEAR
    return Layer.RAIN


def frame_cells(
    field: RainField,
    controller: RevealController,
    rng: random.Random,
    pad_x: int = 3,
    pad_y: int = 1,
    margin: int = 4,
) -> List[List[Tuple[str, Optional[str]]]]:
    """
    Composite the rain field and the current card into rows of
    (glyph, style) pairs. Blank cells carry no style.
    """
    card = controller.card
    box = card.clear_box(pad_x, pad_y, margin) if card is not None else None
    resolved_card = controller.resolved_card

    rows = []
    for y in range(field.height):
        row = []
        for x in range(field.width):
            layer = cell_layer(y, x, controller, box)
            if layer is Layer.CARD:
                row.append(
                    (resolved_card.glyph(y, x), style_for_kind(resolved_card.kinds[y]))
                )
            elif layer is Layer.SCRAMBLE:
                row.append((rng.choice(MATRIX_CHARS), SCRAMBLE))
            elif layer is Layer.CLEAR:
                row.append((" ", None))
            else:
                cell = field.cell(y, x)
                if cell is None:
                    row.append((" ", None))
                else:
                    row.append((cell.glyph, rain_style(cell.distance)))
        rows.append(row)
    return rows


def render_frame(
    field: RainField,
    controller: RevealController,
    rng: random.Random,
    pad_x: int = 3,
    pad_y: int = 1,
    margin: int = 4,
) -> Text:
    """
    Build one full-screen Text. Same-style neighbours are merged into a
    single span to keep the output small.
    """
    text = Text(no_wrap=True, overflow="crop", end="")
    cells = frame_cells(field, controller, rng, pad_x, pad_y, margin)
    for y, row in enumerate(cells):
        if y:
            text.append("\n")
        run: List[str] = []
        current_style: Optional[str] = None
        for ch, style in row:
            if style != current_style and run:
                text.append("".join(run), style=current_style)
                run.clear()
            current_style = style
            run.append(ch)
        if run:
            text.append("".join(run), style=current_style)
    return text
