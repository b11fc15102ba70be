# repo_credits/commands/info.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..repo import RepoInfo, collect_repo_info
from ..util.console import console, info as say, success, warn


def info_table(info: RepoInfo) -> Table:
    table = Table(title=info.name or "repository", show_header=True, header_style="bold green")
    table.add_column("Contributor", style="bold")
    table.add_column("Commits", justify="right")
    for c in info.contributors:
        table.add_row(c.name, str(c.commits))
    return table


def main(
    as_json: bool = typer.Option(False, "--json", help="Print the metadata as JSON."),
    path: Optional[Path] = typer.Option(
        None, "--path", "-C", exists=True, file_okay=False, dir_okay=True,
        help="Repository directory (default: current).",
    ),
) -> None:
    """
    Show the repository metadata the credits are built from.
    """
    info = collect_repo_info(path)
    if as_json:
        typer.echo(json.dumps(info.to_dict(), indent=2, ensure_ascii=False))
        return

    if info.description:
        say(f'"{info.description}"')
    console.print(info_table(info))
    if info.total_commits:
        success(f"{info.total_commits} commit(s), {len(info.contributors)} contributor(s).")
    else:
        warn("No git history found; is this a git repository?")
    if info.stars:
        say(f"★ {info.stars} stargazer(s)")
    if info.language:
        say(f"Written in {info.language}")
    if info.license:
        say(f"Licensed under {info.license}")
    for h in info.highlights:
        say(f"· {h}")
