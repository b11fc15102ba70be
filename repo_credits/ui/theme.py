# repo_credits/ui/theme.py

from __future__ import annotations

from enum import Enum

# Katakana and symbols inspired by The Matrix film
MATRIX_CHARS = (
    "ﾊﾐﾑﾒﾓﾔﾕﾖﾗﾘﾙﾚﾛﾜｦﾝ"  # Common katakana
    "ｱｲｳｴｵｶｷｸｹｺｻｼｽｾｿﾀﾁﾂﾃﾄﾅﾆﾇﾈﾉ"  # Additional katakana
    "0123456789"            # Numerals for variety
)

# Rain styling: head first, then three bands by distance from the head
RAIN_HEAD = "bold white"
RAIN_NEAR = "bright_green"
RAIN_MID = "green"
RAIN_FAR = "dim green"
SCRAMBLE = "bright_green"

# Cinematic night sky palette used by the scroll theme and the cards
TITLE = "bold #00BFFF"
SILVER = "#E0E0E0"
DIM = "#666666"
DIMMER = "#444444"
BRIGHT = "bold #FFFFFF"
ACCENT = "#87CEEB"
SCENE = "#B0C4DE"
STAR_FIELD = "#8899AA"
GOLD = "bold #FFD700"

_HEADINGS = ("A   P R O", "S T A R", "N O T A B")
_STATS = ("C O M M", "C O N T R", "S T A R G")


class LineKind(str, Enum):
    """Content class of one credits line."""

    BLANK = "blank"
    TITLE = "title"
    RULE = "rule"
    STAR = "star"
    HEADING = "heading"
    STAT = "stat"
    QUOTE = "quote"
    SCENE = "scene"
    COMMITS = "commits"
    NAME = "name"
    PLAIN = "plain"


def classify_line(line: str) -> LineKind:
    """
    Map a line to its content class by textual pattern.

    The order matters: the stargazer line starts like the "S T A R R I N G"
    heading but carries a ★, so the STAR check has to run first.
    """
    trimmed = line.strip()
    if not trimmed:
        return LineKind.BLANK
    if "█" in trimmed:
        return LineKind.TITLE
    if "━" in trimmed:
        return LineKind.RULE
    if "★" in trimmed:
        return LineKind.STAR
    if trimmed.startswith(_HEADINGS):
        return LineKind.HEADING
    if any(s in trimmed for s in _STATS):
        return LineKind.STAT
    if '"' in trimmed:
        return LineKind.QUOTE
    if "· " in trimmed and trimmed.endswith(" ·"):
        return LineKind.SCENE
    if "commits" in trimmed:
        return LineKind.COMMITS
    if trimmed == trimmed.upper() and len(trimmed) > 2 and " O " not in trimmed:
        return LineKind.NAME
    return LineKind.PLAIN


_KIND_STYLES = {
    LineKind.BLANK: "",
    LineKind.TITLE: TITLE,
    LineKind.RULE: ACCENT,
    LineKind.STAR: GOLD,
    LineKind.HEADING: BRIGHT,
    LineKind.STAT: SILVER,
    LineKind.QUOTE: ACCENT,
    LineKind.SCENE: SCENE,
    LineKind.COMMITS: ACCENT,
    LineKind.NAME: BRIGHT,
    LineKind.PLAIN: SILVER,
}

# Kinds that fade through two levels near the viewport edge; the rest only one
_DEEP_FADE = frozenset({LineKind.TITLE, LineKind.HEADING, LineKind.NAME, LineKind.PLAIN})


def style_for_kind(kind: LineKind) -> str:
    return _KIND_STYLES[kind]


def faded_style(kind: LineKind, faded: bool, very_faded: bool) -> str:
    """Style for a scrolling line given how close it sits to the viewport edge."""
    if very_faded and kind in _DEEP_FADE:
        return DIMMER
    if faded or very_faded:
        return DIM
    return style_for_kind(kind)


def rain_style(distance: int) -> str:
    """Style of a rain glyph `distance` rows above its column head."""
    if distance <= 0:
        return RAIN_HEAD
    if distance <= 2:
        return RAIN_NEAR
    if distance <= 6:
        return RAIN_MID
    return RAIN_FAR
