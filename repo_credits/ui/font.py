# repo_credits/ui/font.py

from __future__ import annotations

from typing import Dict, List

GLYPH_ROWS = 5

# Block letters, five rows each. Widths differ per letter.
LETTERS: Dict[str, List[str]] = {
    "A": ["  ██  ", " █  █ ", " ████ ", " █  █ ", " █  █ "],
    "B": [" ███  ", " █  █ ", " ███  ", " █  █ ", " ███  "],
    "C": ["  ███ ", " █    ", " █    ", " █    ", "  ███ "],
    "D": [" ███  ", " █  █ ", " █  █ ", " █  █ ", " ███  "],
    "E": [" ████ ", " █    ", " ███  ", " █    ", " ████ "],
    "F": [" ████ ", " █    ", " ███  ", " █    ", " █    "],
    "G": ["  ███ ", " █    ", " █ ██ ", " █  █ ", "  ███ "],
    "H": [" █  █ ", " █  █ ", " ████ ", " █  █ ", " █  █ "],
    "I": [" ███ ", "  █  ", "  █  ", "  █  ", " ███ "],
    "J": ["  ███ ", "    █ ", "    █ ", " █  █ ", "  ██  "],
    "K": [" █  █ ", " █ █  ", " ██   ", " █ █  ", " █  █ "],
    "L": [" █    ", " █    ", " █    ", " █    ", " ████ "],
    "M": [" █   █ ", " ██ ██ ", " █ █ █ ", " █   █ ", " █   █ "],
    "N": [" █   █ ", " ██  █ ", " █ █ █ ", " █  ██ ", " █   █ "],
    "O": ["  ██  ", " █  █ ", " █  █ ", " █  █ ", "  ██  "],
    "P": [" ███  ", " █  █ ", " ███  ", " █    ", " █    "],
    "Q": ["  ██  ", " █  █ ", " █  █ ", " █ █  ", "  █ █ "],
    "R": [" ███  ", " █  █ ", " ███  ", " █ █  ", " █  █ "],
    "S": ["  ███ ", " █    ", "  ██  ", "    █ ", " ███  "],
    "T": [" █████ ", "   █   ", "   █   ", "   █   ", "   █   "],
    "U": [" █  █ ", " █  █ ", " █  █ ", " █  █ ", "  ██  "],
    "V": [" █  █ ", " █  █ ", " █  █ ", "  ██  ", "  ██  "],
    "W": [" █   █ ", " █   █ ", " █ █ █ ", " ██ ██ ", " █   █ "],
    "X": [" █  █ ", " █  █ ", "  ██  ", " █  █ ", " █  █ "],
    "Y": [" █  █ ", " █  █ ", "  ██  ", "  █   ", "  █   "],
    "Z": [" ████ ", "   █  ", "  █   ", " █    ", " ████ "],
    "-": ["      ", "      ", " ──── ", "      ", "      "],
    " ": ["   ", "   ", "   ", "   ", "   "],
    "_": ["      ", "      ", "      ", "      ", " ████ "],
}


def big_text(text: str) -> List[str]:
    """
    Render `text` in block letters. Characters without a glyph
    (digits, punctuation, lowercase-only scripts) render as a space.
    """
    rows = [""] * GLYPH_ROWS
    for ch in text.upper():
        letter = LETTERS.get(ch, LETTERS[" "])
        for i in range(GLYPH_ROWS):
            rows[i] += letter[i]
    return rows
