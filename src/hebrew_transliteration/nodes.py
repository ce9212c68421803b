"""Segmented unit tree.

A text segments into Words; each Word owns its Syllables and each Syllable
its Clusters. Units are linked to their neighbours (``previous``/``next``)
and to their parent so feature callbacks can look around.

Word (whitespace-delimited or maqaf-joined piece)
└── Syllable
    └── Cluster (one letter and its marks, or one non-Hebrew character)

The segmenter builds and annotates a fresh tree per call. The mapping stages
only read it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from hebrew_transliteration.chars import MAQAF, SHEVA, VOWEL_NAMES


@dataclass(slots=True, eq=False)
class Cluster:
    """A letter with its marks, or a single non-Hebrew character.

    The mark attributes are parsed from ``text``. The ``is_*`` annotations
    are set by the segmenter.
    """

    text: str
    letter: str | None = None
    vowel: str | None = None
    extra_vowels: str = ""
    accents: str = ""
    has_dagesh: bool = False
    has_shin_dot: bool = False
    has_sin_dot: bool = False
    has_meteg: bool = False
    has_rafe: bool = False

    is_mater: bool = False
    is_shureq: bool = False
    is_furtive: bool = False
    is_dagesh_chazaq: bool = False
    is_vocal_sheva: bool = False
    is_qamets_qatan: bool = False
    is_final: bool = False

    previous: Cluster | None = field(default=None, repr=False)
    next: Cluster | None = field(default=None, repr=False)
    syllable: Syllable | None = field(default=None, repr=False)

    @property
    def is_hebrew(self) -> bool:
        return self.letter is not None

    @property
    def is_accented(self) -> bool:
        return self.syllable is not None and self.syllable.is_accented

    @property
    def vowel_name(self) -> str | None:
        """Upper-case name of the vowel point, e.g. "TSERE"."""
        if self.vowel is None:
            return None
        return VOWEL_NAMES[self.vowel].upper()

    @property
    def has_silent_sheva(self) -> bool:
        return self.vowel == SHEVA and not self.is_vocal_sheva


@dataclass(slots=True, eq=False)
class Syllable:
    """Ordered clusters sharing one vowel nucleus."""

    clusters: list[Cluster]
    is_closed: bool = False
    is_accented: bool = False
    is_final: bool = False
    is_divine_name: bool = False

    previous: Syllable | None = field(default=None, repr=False)
    next: Syllable | None = field(default=None, repr=False)
    word: Word | None = field(default=None, repr=False)

    @property
    def text(self) -> str:
        return "".join(c.text for c in self.clusters)

    @property
    def vowel_names(self) -> list[str]:
        """Upper-case names of the vowels in this syllable.

        A shureq or holam male is reported as "SHUREQ" or "HOLAM". A silent
        sheva is not a vowel and is omitted.
        """
        names: list[str] = []
        for cluster in self.clusters:
            if cluster.is_shureq:
                names.append("SHUREQ")
            elif cluster.is_mater:
                continue
            elif cluster.vowel is not None and not cluster.has_silent_sheva:
                names.append(cluster.vowel_name)
            elif cluster.next is not None and cluster.next.is_mater and cluster.next.vowel:
                names.append(cluster.next.vowel_name)
        return names

    @property
    def hebrew_clusters(self) -> list[Cluster]:
        return [c for c in self.clusters if c.is_hebrew]

    @property
    def has_accent_mark(self) -> bool:
        return any(c.accents for c in self.clusters)


@dataclass(slots=True, eq=False)
class Word:
    """A whitespace-delimited (or maqaf-joined) piece of text.

    Attributes:
        syllables: Syllables in reading order
        whitespace: Whitespace that followed the word in the input
        divine_name: None, "plain", or "elohim"
    """

    syllables: list[Syllable]
    whitespace: str = ""
    divine_name: str | None = None

    previous: Word | None = field(default=None, repr=False)
    next: Word | None = field(default=None, repr=False)

    @property
    def text(self) -> str:
        return "".join(s.text for s in self.syllables)

    @property
    def clusters(self) -> list[Cluster]:
        return [c for s in self.syllables for c in s.clusters]

    @property
    def is_hebrew(self) -> bool:
        return any(c.is_hebrew for s in self.syllables for c in s.clusters)

    @property
    def is_final(self) -> bool:
        return self.next is None

    @property
    def is_accented(self) -> bool:
        return any(s.is_accented for s in self.syllables)

    @property
    def ends_with_maqaf(self) -> bool:
        text = self.text
        return bool(text) and text[-1] == MAQAF

    @property
    def accented_syllable(self) -> Syllable | None:
        for syllable in self.syllables:
            if syllable.is_accented:
                return syllable
        return None


Unit = Word | Syllable | Cluster


def link(units: list) -> None:
    """Chain units of one level through their previous/next pointers."""
    for prev, unit in zip(units, units[1:]):
        prev.next = unit
        unit.previous = prev


def link_word(word: Word) -> None:
    """Set parent pointers, neighbour links, and final flags inside a word."""
    link(word.clusters)
    link(word.syllables)
    for syllable in word.syllables:
        syllable.word = word
        for cluster in syllable.clusters:
            cluster.syllable = syllable
    if word.syllables:
        word.syllables[-1].is_final = True


__all__ = ["Cluster", "Syllable", "Unit", "Word", "link", "link_word"]
