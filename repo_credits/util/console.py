# repo_credits/util/console.py
from __future__ import annotations

from shutil import get_terminal_size
from typing import Tuple

from rich.console import Console

console = Console()
err_console = Console(stderr=True)

DEFAULT_SIZE = (80, 24)


def info(msg: str) -> None:
    console.print(f"[cyan]{msg}[/]")


def success(msg: str) -> None:
    console.print(f"[bold green]✓[/] {msg}")


def warn(msg: str) -> None:
    err_console.print(f"[yellow]! {msg}[/]")


def error(msg: str) -> None:
    err_console.print(f"[bold red]Error:[/] {msg}")


def terminal_size() -> Tuple[int, int]:
    """(width, height) of the attached terminal, 80x24 when it cannot be queried."""
    ts = get_terminal_size(fallback=DEFAULT_SIZE)
    if ts.columns <= 0 or ts.lines <= 0:
        return DEFAULT_SIZE
    return ts.columns, ts.lines
