"""Segmentation flags carried by the schema and read by the syllabifier."""

from __future__ import annotations

from dataclasses import dataclass

HOLEM_HASER_MODES = ("remove", "preserve", "update")


@dataclass(frozen=True, slots=True)
class SyllableFlags:
    """Immutable switches for the default syllabifier.

    Attributes:
        allow_no_niqqud: Accept words with letters but no vowel points
        article: Treat word-initial he with patah as the definite article
        holem_haser: "remove" folds holam haser into holam, "update" marks
            a consonantal vav's holam as holam haser, "preserve" keeps input
        long_vowels: A sheva after a long vowel is vocal
        qamets_qatan: Detect qamets qatan in closed unaccented syllables
        sheva_after_meteg: A sheva after a meteg is vocal
        sqnmlvy: A sheva on a dagesh-less ס ק נ מ ל ו י after the article or
            vav-consecutive is vocal
        strict: Raise SegmentationError instead of guessing
        waw_shureq: A word-initial shureq is a bare vowel rather than vav
    """

    allow_no_niqqud: bool = True
    article: bool = True
    holem_haser: str = "remove"
    long_vowels: bool = True
    qamets_qatan: bool = True
    sheva_after_meteg: bool = True
    sqnmlvy: bool = True
    strict: bool = False
    waw_shureq: bool = True
