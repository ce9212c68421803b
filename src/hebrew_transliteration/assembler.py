"""Rendering and assembly of a segmented text.

The Renderer drives the pipeline for one schema: feature matching, default
mapping, stress marking, then assembly. Clusters join with nothing,
syllables with SYLLABLE_SEPARATOR, and words with the whitespace that
followed them in the input. A divine name is joined to any prefixed
particles with the MAQAF string.
"""

from __future__ import annotations

from collections.abc import Sequence

from hebrew_transliteration.config import get_schema
from hebrew_transliteration.features import FeatureMatcher
from hebrew_transliteration.mapper import CharacterMapper
from hebrew_transliteration.nodes import Unit, Word
from hebrew_transliteration.schema import SCOPES
from hebrew_transliteration.segmentation import Segmenter, Syllabifier
from hebrew_transliteration.stress import apply_stress


class Renderer:
    """Renders segmented words with the active schema.

    Args:
        segmenter: Segmenter used to re-segment pass-through replacement
            text. Defaults to a Syllabifier with the schema's flags.
    """

    __slots__ = ("_mapper", "_schema", "_segmenter")

    def __init__(self, segmenter: Segmenter | None = None) -> None:
        self._schema = get_schema()
        self._segmenter = segmenter or Syllabifier(self._schema.syllable_flags)
        self._mapper = CharacterMapper(self._schema)

    def render(
        self, words: Sequence[Word], scopes: Sequence[str] = SCOPES, *, stress: bool = True
    ) -> str:
        """Render words to a single string.

        Args:
            words: Segmented, linked words
            scopes: Feature scopes allowed to claim units
            stress: Apply the schema's stress marker

        Returns:
            Transliterated text
        """
        matcher = FeatureMatcher(self._schema, self._render_fragment)
        resolved = matcher.resolve(words, scopes)
        return assemble(words, [self._render_word(word, resolved, stress) for word in words])

    def _render_fragment(self, text: str, scopes: tuple[str, ...]) -> str:
        return self.render(self._segmenter.segment(text), scopes, stress=False)

    def _render_word(self, word: Word, resolved: dict[Unit, str], stress: bool) -> str:
        claimed = resolved.get(word)
        if claimed is not None:
            return claimed
        if not word.is_hebrew:
            return self._mapper.map_text(word.text)

        schema = self._schema
        syllables = [s for s in word.syllables if not s.is_divine_name]
        rendered = [self._mapper.render_syllable(s, resolved) for s in syllables]
        if stress and schema.stress_marker is not None:
            texts = apply_stress(syllables, rendered, schema.stress_marker)
        else:
            texts = [r.text for r in rendered]
        body = schema.syllable_separator.join(texts)

        if word.divine_name is None:
            return body
        name_syllable = word.syllables[-1]
        name = resolved.get(name_syllable)
        if name is None:
            name = self._mapper.divine_name(word, name_syllable)
        return f"{body}{schema.maqaf}{name}" if body else name


def assemble(words: Sequence[Word], rendered: Sequence[str]) -> str:
    """Join rendered words with their original trailing whitespace."""
    return "".join(text + word.whitespace for word, text in zip(words, rendered))
