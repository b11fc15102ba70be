# repo_credits/commands/play.py
from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..config import CreditsConfig, Theme
from ..credits import build_cards, credits_lines
from ..errors import ConfigError, TerminalUnavailableError
from ..repo import collect_repo_info
from ..ui.driver import KeySource, Outcome, TerminalKeys, TickDriver
from ..ui.scene import MatrixScene
from ..ui.scroll import CreditsScroll
from ..util.console import console as default_console
from ..util.console import error, terminal_size
from ..util.log import console_logging_paused

logger = logging.getLogger(__name__)


def build_scene(cfg: CreditsConfig, path: Optional[Path], width: int, height: int):
    info = collect_repo_info(path)
    rng = random.Random(cfg.seed)
    if cfg.theme is Theme.scroll:
        return CreditsScroll(credits_lines(info, width), width, height, rng)
    cards = build_cards(info, width, height)
    logger.debug("built %d card(s) for %dx%d", len(cards), width, height)
    return MatrixScene(
        cards,
        width,
        height,
        timing=cfg.reveal_timing(),
        rain=cfg.rain_settings(),
        rng=rng,
    )


def run_presentation(
    cfg: CreditsConfig,
    path: Optional[Path] = None,
    console: Optional[Console] = None,
    keys: Optional[KeySource] = None,
) -> Outcome:
    console = console or default_console
    if not console.is_terminal:
        raise TerminalUnavailableError("repo-credits needs an interactive terminal")
    width, height = terminal_size()
    scene = build_scene(cfg, path, width, height)
    driver = TickDriver(scene, cfg.tick_period(), console=console, keys=keys)
    with console_logging_paused():
        outcome = driver.run()
    logger.info("%s after %d frame(s)", outcome.value, driver.frames)
    return outcome


def play(
    cfg: CreditsConfig,
    path: Optional[Path] = None,
    console: Optional[Console] = None,
    keys: Optional[KeySource] = None,
) -> Outcome:
    """Run the presentation, turning boundary failures into exit codes."""
    console = console or default_console
    try:
        cfg.validate()
        if keys is None and TerminalKeys.supported():
            with TerminalKeys() as keys:
                return run_presentation(cfg, path, console=console, keys=keys)
        return run_presentation(cfg, path, console=console, keys=keys)
    except (ConfigError, TerminalUnavailableError) as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code)


def main(
    ctx: typer.Context,
    theme: Optional[Theme] = typer.Option(None, "--theme", "-t", help="rain (matrix reveal) or scroll (classic roll)."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed the animation for reproducible playback."),
    tick_ms: Optional[int] = typer.Option(None, "--tick-ms", help="Milliseconds per frame for the chosen theme."),
    path: Optional[Path] = typer.Option(
        None, "--path", "-C", exists=True, file_okay=False, dir_okay=True,
        help="Repository directory (default: current).",
    ),
) -> None:
    """
    Play the credits full screen. Press q, Esc or Ctrl+C to stop.

    In scroll mode the arrow keys move the credits up and down.
    """
    cfg: CreditsConfig = ctx.obj
    if theme is not None:
        cfg.theme = theme
    if seed is not None:
        cfg.seed = seed
    if tick_ms is not None:
        if cfg.theme is Theme.rain:
            cfg.rain_tick_ms = tick_ms
        else:
            cfg.scroll_tick_ms = tick_ms
    play(cfg, path)
