"""Default character mapping.

Turns each syllable of a segmented word into Latin text using the active
schema. Precedence, per cluster:

1. Matres lectionis: the vowel and its mater become one digraph
   (HIRIQ_YOD, HOLAM_VAV, QAMATS_HE, MS_SUFX, ...). An unset optional
   digraph falls back to vowel + consonant.
2. BeGaDKePhaT letters with a dagesh use ``<LETTER>_DAGESH`` when set.
3. Dagesh chazaq: ``True`` doubles the consonant into the previous syllable,
   ``False`` never doubles, a string is written after the consonant.
4. Furtive patah is written before its consonant.
5. Qamets qatan, then vowel length adjustments.
6. Default: consonant + DAGESH + vowel.

The divine name is rendered as a whole by ``divine_name``. Anything the
tables do not cover is emitted unchanged; mapping never fails.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from hebrew_transliteration.chars import (
    BEGADKEFAT,
    DAGESH,
    HE,
    HIRIQ,
    HOLAM,
    HOLAM_HASER,
    LETTER_NAMES,
    LOWER_DOT,
    MAQAF,
    MATCH_IGNORED,
    PASEQ,
    PATAH,
    QAMATS,
    QUBUTS,
    SEGOL,
    SHEVA,
    SHIN,
    SHIN_DOT,
    SIN_DOT,
    SOF_PASUQ,
    TSERE,
    UPPER_DOT,
    VAV,
    VOWEL_NAMES,
    YOD,
)
from hebrew_transliteration.classifier import is_mark
from hebrew_transliteration.nodes import Cluster, Syllable, Unit, Word
from hebrew_transliteration.schema import Schema
from hebrew_transliteration.utils.text import lengthen, shorten

_DAGESH_VARIANTS: dict[str, str] = {
    "ב": "bet_dagesh",
    "ג": "gimel_dagesh",
    "ד": "dalet_dagesh",
    "ך": "kaf_dagesh",
    "כ": "kaf_dagesh",
    "ף": "pe_dagesh",
    "פ": "pe_dagesh",
    "ת": "tav_dagesh",
}

_DIGRAPHS: dict[tuple[str, str], str] = {
    (HIRIQ, YOD): "hiriq_yod",
    (TSERE, YOD): "tsere_yod",
    (SEGOL, YOD): "segol_yod",
    (QAMATS, HE): "qamats_he",
    (SEGOL, HE): "segol_he",
    (TSERE, HE): "tsere_he",
    (PATAH, HE): "patah_he",
}

_PUNCTUATION: dict[str, str] = {
    MAQAF: "maqaf",
    PASEQ: "paseq",
    SOF_PASUQ: "sof_pasuq",
    DAGESH: "dagesh",
}

_SILENT_MARKS = MATCH_IGNORED | frozenset((SHIN_DOT, SIN_DOT, UPPER_DOT, LOWER_DOT))
_HOLAM_POINTS = frozenset((HOLAM, HOLAM_HASER))


@dataclass(slots=True)
class RenderedSyllable:
    """Latin text of one syllable.

    Attributes:
        text: Rendered syllable
        vowel_index: Offset of the nucleus vowel in ``text``, if known
        body_end: Offset where trailing punctuation starts, if any
    """

    text: str
    vowel_index: int | None = None
    body_end: int | None = None


class CharacterMapper:
    """Renders clusters and syllables with one schema.

    Args:
        schema: Table to render with
    """

    __slots__ = ("_schema",)

    def __init__(self, schema: Schema) -> None:
        self._schema = schema

    # =========================================================================
    # Characters
    # =========================================================================

    def consonant(self, cluster: Cluster) -> str:
        """Transliteration of a cluster's letter, honouring dagesh and sin dot."""
        letter = cluster.letter
        if letter is None:
            return ""
        if cluster.has_dagesh and letter in BEGADKEFAT:
            variant = getattr(self._schema, _DAGESH_VARIANTS[letter])
            if variant is not None:
                return variant
        if letter == SHIN and cluster.has_sin_dot:
            return self._schema.sin
        return getattr(self._schema, LETTER_NAMES[letter])

    def vowel_value(self, point: str) -> str:
        """Transliteration of a bare vowel point (sheva counts as vocal)."""
        if point == SHEVA:
            return self._schema.vocal_sheva
        return getattr(self._schema, VOWEL_NAMES[point])

    def map_text(self, text: str) -> str:
        """Map characters one by one, outside any syllable context.

        Used for punctuation and non-Hebrew text. Letters take their plain
        value, points their table value, and unknown characters pass through.
        """
        schema = self._schema
        out: list[str] = []
        for i, char in enumerate(text):
            if char in LETTER_NAMES:
                if char == SHIN and SIN_DOT in _marks_after(text, i):
                    out.append(schema.sin)
                else:
                    out.append(getattr(schema, LETTER_NAMES[char]))
            elif char in VOWEL_NAMES:
                out.append(self.vowel_value(char))
            elif char in _PUNCTUATION:
                out.append(getattr(schema, _PUNCTUATION[char]))
            elif char not in _SILENT_MARKS:
                out.append(char)
        return "".join(out)

    # =========================================================================
    # Syllables
    # =========================================================================

    def render_syllable(
        self, syllable: Syllable, resolved: Mapping[Unit, str] | None = None
    ) -> RenderedSyllable:
        """Render one syllable.

        Args:
            syllable: Syllable to render
            resolved: Output already produced by feature rules, keyed by unit

        Returns:
            RenderedSyllable with the nucleus offset for stress placement
        """
        resolved = resolved or {}
        claimed = resolved.get(syllable)
        if claimed is not None:
            return RenderedSyllable(claimed)

        out = ""
        vowel_index: int | None = None
        body_end: int | None = None
        clusters = syllable.clusters
        skip = 0

        for index, cluster in enumerate(clusters):
            if skip:
                skip -= 1
                continue
            if cluster in resolved:
                out += resolved[cluster]
                body_end = len(out)
                continue
            if not cluster.is_hebrew:
                out += self.map_text(cluster.text)
                continue

            onset, vowel, skip = self._cluster_parts(syllable, clusters, index, resolved)
            out += onset
            if vowel and vowel_index is None:
                vowel_index = len(out)
            out += vowel
            body_end = len(out)

        doubled = self._doubling_for_next(syllable, resolved)
        if doubled:
            if body_end is None:
                body_end = len(out)
            out = out[:body_end] + doubled + out[body_end:]
            body_end += len(doubled)

        if body_end == len(out):
            body_end = None
        return RenderedSyllable(out, vowel_index, body_end)

    def divine_name(self, word: Word, syllable: Syllable) -> str:
        """Render the divine-name syllable, keeping trailing punctuation."""
        schema = self._schema
        name = schema.divine_name
        if word.divine_name == "elohim" and schema.divine_name_elohim is not None:
            name = schema.divine_name_elohim
        rest = "".join(self.map_text(c.text) for c in syllable.clusters if not c.is_hebrew)
        return name + rest

    def _cluster_parts(
        self,
        syllable: Syllable,
        clusters: list[Cluster],
        index: int,
        resolved: Mapping[Unit, str],
    ) -> tuple[str, str, int]:
        """Return (onset, vowel, clusters consumed after this one)."""
        schema = self._schema
        cluster = clusters[index]

        if cluster.is_mater:
            # Only reached when the nucleus did not absorb the mater
            if cluster.is_shureq:
                return "", schema.shureq, 0
            if cluster.letter == VAV and cluster.vowel in _HOLAM_POINTS:
                return "", schema.holam_vav, 0
            return self.consonant(cluster), "", 0

        if cluster.is_shureq:
            if schema.waw_shureq:
                return "", schema.shureq, 0
            return schema.vav, schema.shureq, 0

        consonant = self._onset(cluster, syllable, resolved)
        if cluster.is_furtive:
            return schema.furtive_patah + consonant, "", 0

        vowel, consumed = self._vowel(syllable, clusters, index)
        return consonant, vowel, consumed

    def _onset(self, cluster: Cluster, syllable: Syllable, resolved: Mapping[Unit, str]) -> str:
        schema = self._schema
        consonant = self.consonant(cluster)
        if not cluster.has_dagesh:
            return consonant
        if not cluster.is_dagesh_chazaq:
            return consonant + schema.dagesh

        policy = schema.dagesh_chazaq
        if isinstance(policy, str):
            return consonant + policy
        if policy is False:
            return consonant + schema.dagesh
        if _doubled_by_previous(cluster, syllable, resolved):
            return consonant + schema.dagesh
        return consonant + consonant + schema.dagesh

    def _vowel(self, syllable: Syllable, clusters: list[Cluster], index: int) -> tuple[str, int]:
        schema = self._schema
        cluster = clusters[index]
        point = cluster.vowel
        following = clusters[index + 1] if index + 1 < len(clusters) else None

        if point is None:
            if following is not None and following.is_mater:
                if following.is_shureq:
                    return schema.shureq, 1
                if following.letter == VAV and following.vowel in _HOLAM_POINTS:
                    return schema.holam_vav, 1
            return "", 0

        if point == SHEVA:
            return (schema.vocal_sheva if cluster.is_vocal_sheva else ""), 0

        if point == QAMATS and _is_ms_suffix(clusters, index):
            return schema.ms_sufx, 2

        if following is not None and following.is_mater and following.letter is not None:
            key = _DIGRAPHS.get((point, following.letter))
            digraph = getattr(schema, key) if key else None
            if digraph is not None:
                return digraph, 1

        if point == QAMATS and cluster.is_qamets_qatan:
            value = schema.qamats_qatan
        else:
            value = self.vowel_value(point)
            if schema.long_vowels:
                if point == HIRIQ and syllable.is_accented:
                    value = lengthen(value)
                elif point == QUBUTS and syllable.is_closed and not syllable.is_accented:
                    value = shorten(value)

        extra = "".join(self.vowel_value(p) for p in cluster.extra_vowels)
        return value + extra, 0

    def _doubling_for_next(self, syllable: Syllable, resolved: Mapping[Unit, str]) -> str:
        """Consonant copy that closes this syllable before a dagesh chazaq."""
        if self._schema.dagesh_chazaq is not True:
            return ""
        following = syllable.next
        if following is None or following in resolved or following.is_divine_name:
            return ""
        onset = _first_hebrew(following)
        if onset is None or not onset.is_dagesh_chazaq or onset in resolved:
            return ""
        return self.consonant(onset)


def _first_hebrew(syllable: Syllable) -> Cluster | None:
    for cluster in syllable.clusters:
        if cluster.is_hebrew:
            return cluster
    return None


def _doubled_by_previous(cluster: Cluster, syllable: Syllable, resolved: Mapping[Unit, str]) -> bool:
    previous = syllable.previous
    return (
        previous is not None
        and previous not in resolved
        and _first_hebrew(syllable) is cluster
    )


def _is_ms_suffix(clusters: list[Cluster], index: int) -> bool:
    """Qamets + yod + vav ending the word (the 3ms suffix on plural nouns)."""
    if index + 2 >= len(clusters):
        return False
    yod, vav = clusters[index + 1], clusters[index + 2]
    return (
        yod.letter == YOD
        and yod.vowel is None
        and not yod.has_dagesh
        and vav.letter == VAV
        and vav.vowel is None
        and not vav.has_dagesh
        and vav.is_final
    )


def _marks_after(text: str, index: int) -> str:
    end = index + 1
    while end < len(text) and is_mark(text[end]):
        end += 1
    return text[index + 1 : end]
