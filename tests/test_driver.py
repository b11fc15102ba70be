# tests/test_driver.py
from __future__ import annotations

import random

import pytest
from rich.text import Text

from repo_credits.ui.card import Card
from repo_credits.ui.driver import Outcome, TickDriver, key_name
from repo_credits.ui.reveal import Phase, RevealTiming
from repo_credits.ui.scene import MatrixScene


class CountingScene:
    def __init__(self, ticks=None):
        self.ticks = ticks
        self.advances = 0
        self.renders = 0
        self.keys = []

    def advance(self):
        self.advances += 1
        return self.ticks is None or self.advances < self.ticks

    def handle_key(self, key):
        self.keys.append(key)
        return True

    def render(self):
        self.renders += 1
        return Text(f"frame {self.renders}")


def test_runs_until_the_scene_is_done(null_console):
    scene = CountingScene(ticks=4)
    driver = TickDriver(scene, 0.0, console=null_console)
    assert driver.run() is Outcome.COMPLETED
    assert scene.advances == 4
    # Initial frame plus one per successful tick
    assert scene.renders == 4
    assert driver.frames == 4


@pytest.mark.parametrize("key", ["q", "esc", "ctrl+c"])
def test_cancel_key_stops_without_another_frame(null_console, scripted_keys, key):
    scene = CountingScene()
    driver = TickDriver(scene, 0.0, console=null_console, keys=scripted_keys([None, None, key]))
    assert driver.run() is Outcome.CANCELLED
    assert scene.advances == 2
    assert scene.renders == 3


def test_cancel_during_show_phase(null_console, scripted_keys):
    card = Card.compose(["HELLO"], 40, 10)
    timing = RevealTiming(rain=1, resolve=2, show=50, dissolve=2)
    scene = MatrixScene([card], 40, 10, timing=timing, rng=random.Random(0))
    while scene.controller.phase is not Phase.SHOW:
        scene.advance()

    renders = []
    original = scene.render
    scene.render = lambda: renders.append(1) or original()

    driver = TickDriver(scene, 0.0, console=null_console, keys=scripted_keys([None, None, "q"]))
    assert driver.run() is Outcome.CANCELLED
    assert scene.controller.phase is Phase.SHOW
    assert driver.ticks == 2
    assert len(renders) == 3
    assert not scene.finished


def test_other_keys_go_to_the_scene(null_console, scripted_keys):
    scene = CountingScene()
    driver = TickDriver(scene, 0.0, console=null_console, keys=scripted_keys(["down", "up", "q"]))
    assert driver.run() is Outcome.CANCELLED
    assert scene.keys == ["down", "up"]
    assert scene.advances == 0
    assert scene.renders == 3


def test_keyboard_interrupt_counts_as_cancel(null_console):
    class Interrupting:
        def poll(self, timeout):
            raise KeyboardInterrupt

    scene = CountingScene()
    driver = TickDriver(scene, 0.0, console=null_console, keys=Interrupting())
    assert driver.run() is Outcome.CANCELLED
    assert scene.advances == 0


def test_full_matrix_playback_completes(null_console):
    cards = [Card.compose(["ONE"], 40, 10), Card.compose(["TWO"], 40, 10)]
    timing = RevealTiming(rain=1, resolve=2, show=1, dissolve=2)
    scene = MatrixScene(cards, 40, 10, timing=timing, rng=random.Random(3))
    driver = TickDriver(scene, 0.0, console=null_console)
    assert driver.run() is Outcome.COMPLETED
    assert scene.finished
    assert scene.controller.index == 1
    assert driver.ticks == 2 * (1 + 2 + 1 + 2)


@pytest.mark.parametrize(
    "raw, name",
    [
        ("q", "q"),
        ("Q", "q"),
        ("\x1b", "esc"),
        ("\x03", "ctrl+c"),
        ("\x1b[A", "up"),
        ("\x1b[B", "down"),
        ("\x1b[C", "\x1b[C"),
    ],
)
def test_key_name(raw, name):
    assert key_name(raw) == name


def test_ignored_keys_do_not_redraw(null_console, scripted_keys):
    card = Card.compose(["HELLO"], 40, 10)
    scene = MatrixScene([card], 40, 10, rng=random.Random(0))
    renders = []
    original = scene.render
    scene.render = lambda: renders.append(1) or original()

    driver = TickDriver(scene, 0.0, console=null_console, keys=scripted_keys(["x", "x", "x", "q"]))
    assert driver.run() is Outcome.CANCELLED
    assert driver.ticks == 0
    # Only the initial frame
    assert len(renders) == 1
