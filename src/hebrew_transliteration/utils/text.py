"""Text helpers shared by the matcher and mapper."""

from __future__ import annotations

import unicodedata

from hebrew_transliteration.chars import MATCH_IGNORED

MACRON = "\u0304"


def strip_for_matching(text: str) -> str:
    """Remove cantillation, meteg, and rafe so patterns see letters and vowels.

    Example:
        >>> strip_for_matching("ד\u05BC\u05B8ב\u05B8\u0591ר")
        'ד\u05BC\u05B8ב\u05B8ר'
    """
    return "".join(char for char in text if char not in MATCH_IGNORED)


def lengthen(value: str) -> str:
    """Add a macron to a single-letter vowel: ``"i"`` → ``"ī"``.

    Longer strings and values that already carry a macron are returned
    unchanged.
    """
    decomposed = unicodedata.normalize("NFD", value)
    if len(value) != 1 or MACRON in decomposed:
        return value
    return unicodedata.normalize("NFC", value + MACRON)


def shorten(value: str) -> str:
    """Drop a macron from a vowel: ``"ū"`` → ``"u"``."""
    decomposed = unicodedata.normalize("NFD", value)
    if MACRON not in decomposed:
        return value
    return unicodedata.normalize("NFC", decomposed.replace(MACRON, ""))
