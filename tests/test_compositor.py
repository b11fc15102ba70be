# tests/test_compositor.py
from __future__ import annotations

import random

import pytest

from repo_credits.ui.card import Box
from repo_credits.ui.compositor import Layer, cell_layer, frame_cells, render_frame
from repo_credits.ui.rain import RainField, RainSettings
from repo_credits.ui.reveal import Phase, RevealController, RevealTiming
from repo_credits.ui.theme import MATRIX_CHARS, SCRAMBLE, LineKind, rain_style, style_for_kind

W, H = 40, 10
# "HELLO" sits on row 4, columns 17..21; padded box is rows 3..5, columns 14..24
BOX = Box(3, 14, 6, 25)


def _controller(card, phase):
    ctrl = RevealController([card], W, H, RevealTiming(), random.Random(0))
    ctrl.phase = phase
    return ctrl


def _layers(ctrl):
    box = ctrl.card.clear_box() if ctrl.card else None
    return {(y, x): cell_layer(y, x, ctrl, box) for y in range(H) for x in range(W)}


def test_clear_box_of_the_hello_card(hello_card):
    assert hello_card.clear_box() == BOX


def test_rain_phase_shows_only_rain(hello_card):
    layers = _layers(_controller(hello_card, Phase.RAIN))
    assert set(layers.values()) == {Layer.RAIN}


def test_resolve_phase_precedence(hello_card):
    ctrl = _controller(hello_card, Phase.RESOLVE)
    ctrl.resolved[4][17] = True
    layers = _layers(ctrl)

    assert layers[(4, 17)] is Layer.CARD
    for x in range(18, 22):
        assert layers[(4, x)] is Layer.SCRAMBLE
    assert layers[(3, 14)] is Layer.CLEAR
    assert layers[(5, 24)] is Layer.CLEAR
    assert layers[(4, 25)] is Layer.RAIN
    assert layers[(2, 17)] is Layer.RAIN
    assert layers[(0, 0)] is Layer.RAIN


@pytest.mark.parametrize("phase", [Phase.SHOW, Phase.DISSOLVE])
def test_text_and_clear_box_outside_resolve(hello_card, phase):
    ctrl = _controller(hello_card, phase)
    for y, x in hello_card.cells[:3]:
        ctrl.resolved[y][x] = True
    layers = _layers(ctrl)

    assert [layers[c] for c in hello_card.cells] == [Layer.CARD] * 3 + [Layer.CLEAR] * 2
    assert Layer.SCRAMBLE not in layers.values()
    assert layers[(3, 20)] is Layer.CLEAR
    assert layers[(9, 20)] is Layer.RAIN


@pytest.mark.parametrize("phase", list(Phase))
def test_every_cell_gets_exactly_one_layer(hello_card, phase):
    ctrl = _controller(hello_card, phase)
    ctrl.resolved[4][19] = True
    box = hello_card.clear_box()

    for y in range(H):
        for x in range(W):
            content = hello_card.is_content(y, x)
            rules = [
                content and ctrl.resolved[y][x],
                content and phase is Phase.RESOLVE,
                phase is not Phase.RAIN and box.contains(y, x),
                True,
            ]
            first = rules.index(True)
            assert cell_layer(y, x, ctrl, box) is list(Layer)[first]


def test_screen_edges_keep_their_rain():
    from repo_credits.ui.card import Card

    wide = Card.compose(["=" * W], W, H)
    box = wide.clear_box(pad_x=3, pad_y=1, margin=4)
    assert box.left == 4 and box.right == W - 4
    ctrl = _controller(wide, Phase.SHOW)
    assert cell_layer(0, 0, ctrl, box) is Layer.RAIN
    assert cell_layer(4, 2, ctrl, box) is Layer.RAIN


def test_frame_cells_styles(hello_card):
    rng = random.Random(2)
    # Long trails started on the first tick still cover row 0 afterwards
    field = RainField(W, H, RainSettings(spawn_chance=1.0, min_trail=8, max_trail=8), rng)
    for _ in range(6):
        field.advance()

    ctrl = _controller(hello_card, Phase.RESOLVE)
    ctrl.resolved[4][17] = True
    cells = frame_cells(field, ctrl, rng)

    assert cells[4][17] == ("H", style_for_kind(LineKind.NAME))
    glyph, style = cells[4][18]
    assert glyph in MATRIX_CHARS and style == SCRAMBLE
    assert cells[3][14] == (" ", None)
    rain = field.cell(0, 0)
    assert cells[0][0] == (rain.glyph, rain_style(rain.distance))


def test_render_frame_covers_the_screen(hello_card):
    rng = random.Random(9)
    field = RainField(W, H, RainSettings(spawn_chance=0.5), rng)
    field.advance()
    ctrl = _controller(hello_card, Phase.SHOW)
    for y, x in hello_card.cells:
        ctrl.resolved[y][x] = True

    text = render_frame(field, ctrl, rng)
    lines = text.plain.split("\n")
    assert len(lines) == H
    assert all(len(line) == W for line in lines)
    assert lines[4][17:22] == "HELLO"


def test_rain_style_bands():
    assert rain_style(0) == "bold white"
    assert rain_style(1) == rain_style(2) == "bright_green"
    assert rain_style(3) == rain_style(6) == "green"
    assert rain_style(7) == rain_style(40) == "dim green"
