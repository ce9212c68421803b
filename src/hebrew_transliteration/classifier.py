"""Combining-mark classification.

Maps each codepoint to the rank used for canonical ordering and, for Hebrew
marks, to the diacritic category that ``remove`` toggles.

Ranks:
    0  base letter or any non-combining character
    1  dagesh/mappiq, shin dot, sin dot, rafe
    2  vowel points, including qamats qatan
    3  cantillation, meteg, upper and lower dots
    4  any other combining mark
"""

from __future__ import annotations

import unicodedata

from hebrew_transliteration.chars import (
    ACCENT_NAMES,
    DAGESH,
    LOWER_DOT,
    MAQAF,
    METEG,
    NUN_HAFUKHA,
    PASEQ,
    RAFE,
    SHIN_DOT,
    SIN_DOT,
    SOF_PASUQ,
    UPPER_DOT,
    VOWEL_NAMES,
)

BASE = 0
CONSONANT_MARK = 1
VOWEL = 2
ACCENT = 3
UNCLASSIFIED = 4

_RANKS: dict[str, int] = {
    DAGESH: CONSONANT_MARK,
    SHIN_DOT: CONSONANT_MARK,
    SIN_DOT: CONSONANT_MARK,
    RAFE: CONSONANT_MARK,
    METEG: ACCENT,
    UPPER_DOT: ACCENT,
    LOWER_DOT: ACCENT,
}
_RANKS.update(dict.fromkeys(VOWEL_NAMES, VOWEL))
_RANKS.update(dict.fromkeys(ACCENT_NAMES, ACCENT))

# Diacritic category per codepoint, named after the RemoveOptions fields
CATEGORIES: dict[str, str] = {
    **ACCENT_NAMES,
    **VOWEL_NAMES,
    DAGESH: "dagesh",
    METEG: "meteg",
    RAFE: "rafe",
    SHIN_DOT: "shin_dot",
    SIN_DOT: "sin_dot",
    MAQAF: "maqaf",
    PASEQ: "paseq",
    SOF_PASUQ: "sof_pasuq",
    UPPER_DOT: "upper_dot",
    LOWER_DOT: "lower_dot",
    NUN_HAFUKHA: "nun_hafukha",
}


def rank(char: str) -> int:
    """Return the ordering rank of a single character. Never raises."""
    known = _RANKS.get(char)
    if known is not None:
        return known
    if unicodedata.combining(char) or unicodedata.category(char) == "Mn":
        return UNCLASSIFIED
    return BASE


def is_mark(char: str) -> bool:
    """Check if character combines with a preceding base."""
    return rank(char) != BASE


def category(char: str) -> str | None:
    """Return the diacritic category name, or None for non-diacritics."""
    return CATEGORIES.get(char)


__all__ = [
    "ACCENT",
    "BASE",
    "CATEGORIES",
    "CONSONANT_MARK",
    "UNCLASSIFIED",
    "VOWEL",
    "category",
    "is_mark",
    "rank",
]
