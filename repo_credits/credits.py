# repo_credits/credits.py
"""
Credits layout: turns RepoInfo into either one long scroll buffer or a
sequence of full-screen cards for the rain reveal.
"""

from __future__ import annotations

from typing import List, Sequence

from .repo import Contributor, RepoInfo
from .ui.card import Card, center
from .ui.font import big_text

PROJECT_BY = "A   P R O J E C T   B Y"
STARRING = "S T A R R I N G"
NOTABLE_SCENES = "N O T A B L E   S C E N E S"
RULE = "━" * 20
EDGE_BLANKS = 20


def _title(info: RepoInfo) -> List[str]:
    lines = big_text(info.name)
    if info.description:
        lines += ["", "", f'"{info.description}"']
    return lines


def _project_by(lead: Contributor) -> List[str]:
    return [
        PROJECT_BY,
        "",
        "",
        lead.name.upper(),
        "",
        f"— {lead.commits} commits —",
    ]


def _star_entry(c: Contributor) -> List[str]:
    return [c.name.upper(), f"{c.commits} commits", ""]


def _scene_entry(highlight: str) -> List[str]:
    return [f"· {highlight} ·", ""]


def _stats(info: RepoInfo) -> List[str]:
    lines = [
        RULE,
        "",
        "",
        f"{info.total_commits}  C O M M I T S",
        "",
        f"{len(info.contributors)}  C O N T R I B U T O R S",
    ]
    if info.stars > 0:
        lines += ["", f"★  {info.stars}  S T A R G A Z E R S  ★"]
    lines += ["", ""]
    if info.language:
        lines.append(f"Written in {info.language}")
    if info.license:
        lines.append(f"Licensed under {info.license}")
    lines += ["", "", RULE]
    return lines


def _the_end() -> List[str]:
    return big_text("THE END")


def credits_lines(info: RepoInfo, width: int) -> List[str]:
    """The full credits as one scrollable buffer, each line centered."""
    lines: List[str] = [""] * EDGE_BLANKS
    lines += _title(info)
    lines += [""] * 6

    if info.contributors:
        lines += _project_by(info.contributors[0])
    lines += [""] * 6

    if len(info.contributors) > 1:
        lines += [STARRING, "", ""]
        for c in info.contributors[1:]:
            lines += _star_entry(c)
    lines += [""] * 5

    if info.highlights:
        lines += [NOTABLE_SCENES, "", ""]
        for h in info.highlights:
            lines += _scene_entry(h)
    lines += [""] * 5

    lines += _stats(info)
    lines += [""] * 6
    lines += _the_end()
    lines += [""] * EDGE_BLANKS
    return [center(line, width) if line else "" for line in lines]


def _pages(heading: str, entries: Sequence[List[str]], height: int) -> List[List[str]]:
    """Split `entries` under a repeated heading so every page fits `height` rows."""
    header = [heading, "", ""]
    pages: List[List[str]] = []
    page: List[str] = list(header)
    for entry in entries:
        if len(page) > len(header) and len(page) + len(entry) > height:
            pages.append(page)
            page = list(header)
        page += entry
    if len(page) > len(header):
        pages.append(page)
    return pages


def build_cards(info: RepoInfo, width: int, height: int) -> List[Card]:
    """
    Lay the credits out as full-screen cards, in playback order:
    title, lead contributor, the rest of the cast, notable scenes,
    production stats, the end. Sections without data are skipped.
    """
    blocks: List[List[str]] = [_title(info)]
    if info.contributors:
        blocks.append(_project_by(info.contributors[0]))
    if len(info.contributors) > 1:
        blocks += _pages(STARRING, [_star_entry(c) for c in info.contributors[1:]], height)
    if info.highlights:
        blocks += _pages(NOTABLE_SCENES, [_scene_entry(h) for h in info.highlights], height)
    blocks.append(_stats(info))
    blocks.append(_the_end())
    return [Card.compose(block, width, height) for block in blocks]
