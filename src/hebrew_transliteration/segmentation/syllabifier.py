"""Rule-based Hebrew syllabifier.

Builds the annotated Word tree the mapping engine consumes. Each word goes
through the same passes, left to right:

1. Clusters: one letter plus its marks (see clusters.py)
2. Matres lectionis: yod, he, and vav that only spell a vowel
3. Furtive patah under a final guttural
4. Dagesh: chazaq after a vowel, otherwise qal
5. Sheva: vocal or silent
6. Grouping: a new syllable starts at every vowel nucleus
7. Closure, accent, and qamets qatan

The divine name (with up to two prefixed particles) is kept as one syllable.

Thread Safety:
    A Syllabifier holds only its immutable flags. Every call builds a new
    tree, so one instance can serve many threads.
"""

from __future__ import annotations

from hebrew_transliteration.chars import (
    ALEF,
    AYIN,
    DIVINE_NAME_LETTERS,
    DIVINE_NAME_PREFIXES,
    HATAF_QAMATS,
    HE,
    HET,
    HIRIQ,
    HOLAM,
    HOLAM_HASER,
    PATAH,
    POSITIONAL_ACCENTS,
    QAMATS,
    SEGOL,
    SHEVA,
    SQNMLVY,
    TSERE,
    VAV,
    VOWEL_POINTS,
    YOD,
)
from hebrew_transliteration.errors import SegmentationError
from hebrew_transliteration.nodes import Cluster, Syllable, Word, link, link_word
from hebrew_transliteration.segmentation.clusters import split_clusters, split_words
from hebrew_transliteration.segmentation.flags import SyllableFlags
from hebrew_transliteration.sequence import sequence
from hebrew_transliteration.utils.logger import get_logger

logger = get_logger(__name__)

_BEFORE_YOD_MATER = frozenset((HIRIQ, TSERE, SEGOL))
_BEFORE_HE_MATER = frozenset((QAMATS, SEGOL, TSERE, PATAH))
_LONG_VOWELS = frozenset((TSERE, HOLAM, HOLAM_HASER))
_HOLAM_POINTS = frozenset((HOLAM, HOLAM_HASER))
_SHUREQ_TEXT = "ו\u05BC"


class Syllabifier:
    """Default Segmenter implementation.

    Args:
        flags: Segmentation switches. Defaults to the flags of the active
            schema (see config.get_schema).

    Example:
        >>> words = Syllabifier().segment("ש\u05C1\u05B8לו\u05B9ם")
        >>> [s.text for s in words[0].syllables]
        ['ש\u05C1\u05B8', 'לו\u05B9ם']
    """

    __slots__ = ("_flags",)

    def __init__(self, flags: SyllableFlags | None = None) -> None:
        if flags is None:
            from hebrew_transliteration.config import get_schema

            flags = get_schema().syllable_flags
        self._flags = flags

    @property
    def flags(self) -> SyllableFlags:
        return self._flags

    def segment(self, text: str) -> list[Word]:
        words = [self._word(piece, whitespace) for piece, whitespace in split_words(sequence(text))]
        link(words)
        return words

    # =========================================================================
    # Words
    # =========================================================================

    def _word(self, text: str, whitespace: str) -> Word:
        clusters = split_clusters(text)
        word = Word(syllables=[], whitespace=whitespace)
        hebrew = [c for c in clusters if c.is_hebrew]

        if not hebrew:
            if clusters:
                word.syllables = [Syllable(clusters)]
            link_word(word)
            return word

        self._check_niqqud(text)
        hebrew[-1].is_final = True

        name_start = _divine_name_start(hebrew)
        if name_start is None:
            word.syllables = self._syllabify(clusters, word_end=True)
            link_word(word)
            self._mark_accent(word)
            self._mark_qamets_qatan(word)
            return word

        first = hebrew[name_start]
        split = next(i for i, c in enumerate(clusters) if c is first)
        prefix = self._syllabify(clusters[:split], word_end=False)
        name = Syllable(clusters[split:], is_closed=True, is_accented=True, is_divine_name=True)
        word.divine_name = "elohim" if hebrew[name_start + 2].vowel == HIRIQ else "plain"
        word.syllables = [*prefix, name]
        logger.debug("Divine name (%s reading) in %r", word.divine_name, text)
        link_word(word)
        self._mark_qamets_qatan(word)
        return word

    def _check_niqqud(self, text: str) -> None:
        if self._flags.allow_no_niqqud:
            return
        if _SHUREQ_TEXT in text or any(char in VOWEL_POINTS for char in text):
            return
        if self._flags.strict:
            raise SegmentationError("word has no vowel points", text)
        logger.debug("Unpointed word %r segmented as-is", text)

    def _syllabify(self, clusters: list[Cluster], *, word_end: bool) -> list[Syllable]:
        hebrew = [c for c in clusters if c.is_hebrew]
        if not hebrew:
            return [Syllable(clusters)] if clusters else []

        self._mark_matres(hebrew, word_end)
        if word_end:
            _mark_furtive(hebrew)
        _mark_dagesh(hebrew, word_end)
        for i, cluster in enumerate(hebrew):
            if cluster.vowel == SHEVA:
                cluster.is_vocal_sheva = self._is_vocal_sheva(hebrew, i, word_end)
        self._apply_holem_haser(hebrew)

        nuclei = _nuclei(hebrew)
        syllables = _group(clusters, nuclei)
        for i, syllable in enumerate(syllables):
            following = syllables[i + 1] if i + 1 < len(syllables) else None
            syllable.is_closed = _is_closed(syllable, following, nuclei)
        return syllables

    # =========================================================================
    # Cluster annotations
    # =========================================================================

    def _mark_matres(self, hebrew: list[Cluster], word_end: bool) -> None:
        last = len(hebrew) - 1
        for i, cluster in enumerate(hebrew):
            prev = hebrew[i - 1] if i else None
            prev_is_bare = (
                prev is not None
                and prev.vowel is None
                and not prev.is_mater
                and not prev.is_shureq
            )

            if cluster.letter == VAV and cluster.has_dagesh and cluster.vowel is None:
                if prev is None:
                    cluster.is_shureq = True
                elif prev_is_bare:
                    cluster.is_shureq = True
                    cluster.is_mater = True
            elif (
                cluster.letter == VAV
                and cluster.vowel in _HOLAM_POINTS
                and not cluster.has_dagesh
                and not cluster.extra_vowels
                and prev_is_bare
            ):
                cluster.is_mater = True
            elif (
                cluster.letter == YOD
                and cluster.vowel is None
                and not cluster.has_dagesh
                and prev is not None
                and prev.vowel in _BEFORE_YOD_MATER
            ):
                cluster.is_mater = True
            elif (
                word_end
                and i == last
                and cluster.letter == HE
                and cluster.vowel is None
                and not cluster.has_dagesh
                and prev is not None
                and prev.vowel in _BEFORE_HE_MATER
            ):
                cluster.is_mater = True

    def _is_vocal_sheva(self, hebrew: list[Cluster], i: int, word_end: bool) -> bool:
        flags = self._flags
        cluster = hebrew[i]
        last = len(hebrew) - 1

        if word_end and i == last:
            return False
        if word_end and i == last - 1 and hebrew[last].vowel == SHEVA:
            return False
        if i == 0:
            return True
        if cluster.is_dagesh_chazaq:
            return True

        prev = hebrew[i - 1]
        if prev.vowel == SHEVA:
            return not prev.is_vocal_sheva
        if flags.sheva_after_meteg and prev.has_meteg:
            return True
        if (
            flags.sqnmlvy
            and i == 1
            and prev.vowel == PATAH
            and cluster.letter in SQNMLVY
            and not cluster.has_dagesh
            and (prev.letter == VAV or (flags.article and prev.letter == HE))
        ):
            return True
        if flags.long_vowels and (prev.vowel in _LONG_VOWELS or prev.is_mater or prev.is_shureq):
            return True
        return False

    def _apply_holem_haser(self, hebrew: list[Cluster]) -> None:
        mode = self._flags.holem_haser
        for cluster in hebrew:
            if mode == "remove" and cluster.vowel == HOLAM_HASER:
                cluster.vowel = HOLAM
                cluster.text = cluster.text.replace(HOLAM_HASER, HOLAM)
            elif (
                mode == "update"
                and cluster.letter == VAV
                and cluster.vowel == HOLAM
                and not cluster.is_mater
            ):
                cluster.vowel = HOLAM_HASER
                cluster.text = cluster.text.replace(HOLAM, HOLAM_HASER)

    # =========================================================================
    # Syllable annotations
    # =========================================================================

    def _mark_accent(self, word: Word) -> None:
        syllables = word.syllables
        if not syllables:
            return
        marked = [
            s
            for s in syllables
            if any(a not in POSITIONAL_ACCENTS for c in s.clusters for a in c.accents)
        ]
        if marked:
            target: Syllable | None = marked[-1]
        elif any(s.has_accent_mark for s in syllables):
            target = syllables[-1]
        elif word.ends_with_maqaf:
            target = None
        else:
            target = syllables[-1]
        if target is not None:
            target.is_accented = True

    def _mark_qamets_qatan(self, word: Word) -> None:
        if not self._flags.qamets_qatan:
            return
        for syllable in word.syllables:
            if syllable.is_divine_name:
                continue
            for cluster in syllable.hebrew_clusters:
                if cluster.vowel != QAMATS:
                    continue
                following = _next_hebrew(cluster)
                if following is not None and following.vowel == HATAF_QAMATS:
                    cluster.is_qamets_qatan = True
                elif syllable.is_closed and not syllable.is_accented and not cluster.has_meteg:
                    cluster.is_qamets_qatan = True


# =============================================================================
# Helpers
# =============================================================================


def _divine_name_start(hebrew: list[Cluster]) -> int | None:
    """Index of the divine name's yod, or None when the word is not the name."""
    letters = "".join(c.letter or "" for c in hebrew)
    if not letters.endswith(DIVINE_NAME_LETTERS):
        return None
    prefix = letters[: -len(DIVINE_NAME_LETTERS)]
    if len(prefix) > 2 or any(letter not in DIVINE_NAME_PREFIXES for letter in prefix):
        return None
    return len(prefix)


def _mark_furtive(hebrew: list[Cluster]) -> None:
    if len(hebrew) < 2:
        return
    last, prev = hebrew[-1], hebrew[-2]
    guttural = last.letter in (HET, AYIN) or (last.letter == HE and last.has_dagesh)
    prev_sounds = prev.is_mater or prev.is_shureq or (prev.vowel not in (None, SHEVA))
    if last.vowel == PATAH and guttural and prev_sounds:
        last.is_furtive = True


def _mark_dagesh(hebrew: list[Cluster], word_end: bool) -> None:
    last = len(hebrew) - 1
    for i, cluster in enumerate(hebrew):
        if not cluster.has_dagesh or cluster.is_shureq or i == 0:
            continue
        # Mappiq
        if word_end and i == last and cluster.letter == HE:
            continue
        prev = hebrew[i - 1]
        if prev.is_mater or prev.is_shureq or prev.vowel not in (None, SHEVA):
            cluster.is_dagesh_chazaq = True


def _nuclei(hebrew: list[Cluster]) -> set[Cluster]:
    """Clusters that carry a syllable's vowel."""
    nuclei: set[Cluster] = set()
    for i, cluster in enumerate(hebrew):
        if cluster.is_mater or cluster.is_furtive:
            continue
        following = hebrew[i + 1] if i + 1 < len(hebrew) else None
        if cluster.is_shureq:
            nuclei.add(cluster)
        elif cluster.vowel is not None and not cluster.has_silent_sheva:
            nuclei.add(cluster)
        elif (
            cluster.vowel is None
            and following is not None
            and following.is_mater
            and (following.is_shureq or following.vowel in _HOLAM_POINTS)
        ):
            nuclei.add(cluster)
    return nuclei


def _group(clusters: list[Cluster], nuclei: set[Cluster]) -> list[Syllable]:
    syllables: list[Syllable] = []
    current: list[Cluster] = []
    has_nucleus = False
    for cluster in clusters:
        if cluster in nuclei and has_nucleus:
            syllables.append(Syllable(current))
            current = []
            has_nucleus = False
        current.append(cluster)
        if cluster in nuclei:
            has_nucleus = True
    if current:
        syllables.append(Syllable(current))
    return syllables


def _is_closed(syllable: Syllable, following: Syllable | None, nuclei: set[Cluster]) -> bool:
    seen_nucleus = False
    for cluster in syllable.hebrew_clusters:
        if cluster in nuclei:
            seen_nucleus = True
            continue
        quiescent_alef = cluster.letter == ALEF and cluster.vowel is None
        if seen_nucleus and not cluster.is_mater and not quiescent_alef:
            return True
    if following is None:
        return False
    onset = following.hebrew_clusters
    return bool(onset) and onset[0].is_dagesh_chazaq


def _next_hebrew(cluster: Cluster) -> Cluster | None:
    following = cluster.next
    while following is not None and not following.is_hebrew:
        following = following.next
    return following

