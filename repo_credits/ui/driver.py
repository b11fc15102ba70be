# repo_credits/ui/driver.py

from __future__ import annotations

import logging
import select
import sys
import time
from enum import Enum
from typing import Callable, Optional, Protocol, TextIO

import click
from rich.console import Console, RenderableType
from rich.live import Live

from ..errors import TerminalUnavailableError

# Handle termios import for Windows compatibility
try:
    import termios
    import tty
except ImportError:
    termios = None
    tty = None

logger = logging.getLogger(__name__)

CANCEL_KEYS = frozenset({"q", "esc", "ctrl+c"})

_KEY_NAMES = {
    "\x1b": "esc",
    "\x03": "ctrl+c",
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\r": "enter",
    "\n": "enter",
}


def key_name(raw: str) -> str:
    """Translate a raw `click.getchar()` sequence into a key name."""
    if raw in _KEY_NAMES:
        return _KEY_NAMES[raw]
    if len(raw) == 1:
        return raw.lower()
    return raw


class Scene(Protocol):
    def advance(self) -> bool: ...

    def handle_key(self, key: str) -> bool: ...

    def render(self) -> RenderableType: ...


class KeySource(Protocol):
    def poll(self, timeout: float) -> Optional[str]: ...


class NoKeys:
    """Key source for non-interactive playback: just waits out the timeout."""

    def poll(self, timeout: float) -> Optional[str]:
        if timeout > 0:
            time.sleep(timeout)
        return None


class TerminalKeys:
    """
    Key source for an interactive terminal.

    The terminal stays in cbreak mode for the whole session so single
    keystrokes become readable at once; `poll` waits on stdin with
    select, which lets the driver sleep until either a key or the next
    tick, on one thread.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream or sys.stdin
        self._saved: Optional[list] = None

    @staticmethod
    def supported() -> bool:
        return termios is not None and sys.stdin.isatty()

    def __enter__(self) -> "TerminalKeys":
        fd = self.stream.fileno()
        self._saved = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        return self

    def __exit__(self, *exc_info) -> None:
        if self._saved is not None:
            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self._saved)
            self._saved = None

    def poll(self, timeout: float) -> Optional[str]:
        ready, _, _ = select.select([self.stream], [], [], max(0.0, timeout))
        if not ready:
            return None
        try:
            return key_name(click.getchar())
        except (KeyboardInterrupt, EOFError):
            return "ctrl+c"


class Outcome(str, Enum):
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TickDriver:
    """
    Fixed-period loop: wait for the next tick or a key, whichever comes
    first, then advance and redraw. Stops when the scene runs out or a
    cancel key arrives; a cancel never draws another frame.
    """

    def __init__(
        self,
        scene: Scene,
        period: float,
        console: Optional[Console] = None,
        keys: Optional[KeySource] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.scene = scene
        self.period = period
        self.console = console or Console()
        self.keys = keys or NoKeys()
        self.clock = clock
        self.frames = 0
        self.ticks = 0

    def _draw(self, live: Live) -> None:
        live.update(self.scene.render(), refresh=True)
        self.frames += 1

    def run(self) -> Outcome:
        live = Live(
            console=self.console,
            screen=True,
            auto_refresh=False,
            transient=True,
            redirect_stdout=False,
            redirect_stderr=False,
        )
        try:
            live.start()
        except OSError as exc:
            raise TerminalUnavailableError(f"Unable to start terminal session: {exc}") from exc

        try:
            self._draw(live)
            return self._loop(live)
        except KeyboardInterrupt:
            logger.info("interrupted after %d tick(s)", self.ticks)
            return Outcome.CANCELLED
        finally:
            live.stop()

    def _loop(self, live: Live) -> Outcome:
        next_tick = self.clock() + self.period
        while True:
            key = self.keys.poll(max(0.0, next_tick - self.clock()))
            if key is not None:
                if key in CANCEL_KEYS:
                    logger.info("cancelled by %r after %d tick(s)", key, self.ticks)
                    return Outcome.CANCELLED
                if self.scene.handle_key(key):
                    self._draw(live)
                continue

            if self.clock() < next_tick:
                continue

            self.ticks += 1
            if not self.scene.advance():
                logger.info("presentation finished after %d tick(s)", self.ticks)
                return Outcome.COMPLETED
            self._draw(live)

            next_tick += self.period
            now = self.clock()
            # Behind schedule: drop the missed ticks instead of catching up
            if next_tick < now:
                next_tick = now
