"""Splitting text into words and clusters."""

from __future__ import annotations

import re

from hebrew_transliteration.chars import (
    ACCENTS,
    DAGESH,
    MASORA_CIRCLE,
    METEG,
    RAFE,
    SHIN_DOT,
    SIN_DOT,
    VOWEL_POINTS,
    is_letter,
)
from hebrew_transliteration.classifier import is_mark
from hebrew_transliteration.nodes import Cluster

_WHITESPACE = re.compile(r"(\s+)")
_MAQAF_PIECES = re.compile(r"[^\u05BE]*\u05BE|[^\u05BE]+")


def split_words(text: str) -> list[tuple[str, str]]:
    """Split text into ``(word, following_whitespace)`` pairs.

    Words split on whitespace and after each maqaf; the maqaf stays with the
    word before it and the pair is joined with no whitespace. Leading
    whitespace becomes an empty word.

    Example:
        >>> split_words("a\u05BEb c")
        [('a\u05BE', ''), ('b', ' '), ('c', '')]
    """
    parts = _WHITESPACE.split(text)
    pairs: list[tuple[str, str]] = []
    for i in range(0, len(parts), 2):
        chunk = parts[i]
        whitespace = parts[i + 1] if i + 1 < len(parts) else ""
        if not chunk and not whitespace:
            continue
        pieces = _MAQAF_PIECES.findall(chunk) or [""]
        pairs.extend((piece, "") for piece in pieces[:-1])
        pairs.append((pieces[-1], whitespace))
    return pairs


def split_clusters(text: str) -> list[Cluster]:
    """Split a word into clusters and parse each letter's marks.

    A cluster is a Hebrew letter with the marks that follow it. Any other
    character starts a cluster of its own, and stray marks stay with
    whatever cluster precedes them.
    """
    clusters: list[Cluster] = []
    for char in text:
        if is_letter(char):
            clusters.append(Cluster(text=char, letter=char))
        elif clusters and is_mark(char):
            clusters[-1].text += char
        else:
            clusters.append(Cluster(text=char))

    for cluster in clusters:
        if cluster.letter is not None:
            read_marks(cluster)
    return clusters


def read_marks(cluster: Cluster) -> None:
    """Fill a letter cluster's mark attributes from its text."""
    vowels: list[str] = []
    accents: list[str] = []
    for char in cluster.text[1:]:
        if char in VOWEL_POINTS:
            vowels.append(char)
        elif char == DAGESH:
            cluster.has_dagesh = True
        elif char == SHIN_DOT:
            cluster.has_shin_dot = True
        elif char == SIN_DOT:
            cluster.has_sin_dot = True
        elif char == METEG:
            cluster.has_meteg = True
        elif char == RAFE:
            cluster.has_rafe = True
        elif char in ACCENTS and char != MASORA_CIRCLE:
            accents.append(char)
    cluster.vowel = vowels[0] if vowels else None
    cluster.extra_vowels = "".join(vowels[1:])
    cluster.accents = "".join(accents)
