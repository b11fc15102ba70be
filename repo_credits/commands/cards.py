# repo_credits/commands/cards.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ..credits import build_cards
from ..repo import collect_repo_info
from ..util.console import terminal_size


def main(
    width: Optional[int] = typer.Option(None, "--width", min=10, help="Card width (default: terminal width)."),
    height: Optional[int] = typer.Option(None, "--height", min=5, help="Card height (default: terminal height)."),
    path: Optional[Path] = typer.Option(
        None, "--path", "-C", exists=True, file_okay=False, dir_okay=True,
        help="Repository directory (default: current).",
    ),
) -> None:
    """
    Print every card of the matrix reveal without animating it.
    """
    term_w, term_h = terminal_size()
    width = width or term_w
    height = height or term_h

    cards = build_cards(collect_repo_info(path), width, height)
    for i, card in enumerate(cards, 1):
        typer.echo(f"── card {i}/{len(cards)} " + "─" * max(0, width - 16))
        typer.echo(card.text())
