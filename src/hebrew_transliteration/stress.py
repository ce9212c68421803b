"""Stress marking.

Places the schema's stress mark at the accented syllable of a word. The
accented syllable comes from the segmenter; this module only decides where
in the rendered text the mark goes.

Locations:
    before-syllable / after-syllable  wrap the whole syllable
    before-vowel / after-vowel        sit on the first vowel character

Syllables whose vowel offset is unknown (for example when a feature rule
rendered them) fall back to the syllable boundaries.
"""

from __future__ import annotations

import unicodedata

from hebrew_transliteration.mapper import RenderedSyllable
from hebrew_transliteration.nodes import Syllable
from hebrew_transliteration.schema import StressMarker


def apply_stress(
    syllables: list[Syllable], rendered: list[RenderedSyllable], marker: StressMarker
) -> list[str]:
    """Return the syllable texts with the stress mark inserted.

    Args:
        syllables: Syllables of one word, aligned with ``rendered``
        rendered: Their rendered forms
        marker: Stress settings

    Returns:
        Syllable texts, one of them marked unless excluded
    """
    texts = [r.text for r in rendered]
    index = next((i for i, s in enumerate(syllables) if s.is_accented), None)
    if index is None:
        return texts
    if marker.exclude == "single" and len(syllables) == 1:
        return texts
    if marker.exclude == "final" and index == len(syllables) - 1:
        return texts
    texts[index] = place_mark(rendered[index], marker)
    return texts


def place_mark(syllable: RenderedSyllable, marker: StressMarker) -> str:
    """Insert the mark into one rendered syllable."""
    text = syllable.text
    mark = marker.mark
    location = marker.location
    vowel = syllable.vowel_index

    if location.endswith("-vowel") and vowel is not None and vowel < len(text):
        if location == "before-vowel":
            return text[:vowel] + mark + text[vowel:]
        end = vowel + 1
        # Keep combining marks with the vowel letter they belong to
        while end < len(text) and unicodedata.combining(text[end]):
            end += 1
        return text[:end] + mark + text[end:]

    if location.startswith("before"):
        return mark + text
    end = syllable.body_end if syllable.body_end is not None else len(text)
    return text[:end] + mark + text[end:]
