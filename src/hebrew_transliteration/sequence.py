"""Canonical ordering of Hebrew combining marks.

Unicode normalization orders Hebrew points by their combining classes, which
puts vowels before dagesh and splits shin dots from their letter. Fonts and
the segmenter expect consonant marks, then vowels, then accents, so every
run of marks following a base character is stably sorted by rank.

Example:
    >>> sequence("\u05E9\u05B8\u05C1") == "\u05E9\u05C1\u05B8"
    True
"""

from __future__ import annotations

from hebrew_transliteration.classifier import BASE, rank


def sequence(text: str) -> str:
    """Reorder combining marks into canonical order.

    A run starts at a non-whitespace base character and extends through the
    marks that immediately follow it. Marks with no base (at the start of the
    text or after whitespace) are copied unchanged. Idempotent.

    Args:
        text: Any string

    Returns:
        The same characters with each run's marks sorted by rank
    """
    out: list[str] = []
    marks: list[str] = []
    in_run = False

    for char in text:
        char_rank = rank(char)
        if char_rank != BASE:
            if in_run:
                marks.append(char)
            else:
                out.append(char)
            continue
        if marks:
            out.extend(sorted(marks, key=rank))
            marks.clear()
        out.append(char)
        in_run = not char.isspace()

    if marks:
        out.extend(sorted(marks, key=rank))
    return "".join(out)
