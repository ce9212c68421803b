"""User feature rules.

Features run before the default mapping, from the widest scope down:
words first, then syllables of unclaimed words, then clusters of unclaimed
syllables. Within a scope the first feature (in declaration order) whose
pattern matches claims the unit.

Patterns are matched against the unit's text with cantillation, meteg, and
rafe removed. A Literal replacement substitutes every match; a Transform
returns the unit's new text. With ``pass_through`` the new text is mapped
again, through the lower scopes' features and the default mapper, so a
replacement may mix Latin output with Hebrew still to be transliterated.

Example:
    >>> schema = Schema.from_dict({"ADDITIONAL_FEATURES": [
    ...     {"FEATURE": "word", "HEBREW": "ה\u05B8א\u05B8ר\u05B6ץ", "TRANSLITERATION": "The Earth"},
    ... ]})
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from hebrew_transliteration.nodes import Unit, Word
from hebrew_transliteration.schema import SCOPES, AdditionalFeature, Schema
from hebrew_transliteration.utils.logger import get_logger
from hebrew_transliteration.utils.text import strip_for_matching

logger = get_logger(__name__)

_LOWER_SCOPES: dict[str, tuple[str, ...]] = {
    "word": ("syllable", "cluster"),
    "syllable": ("cluster",),
    "cluster": (),
}

FragmentRenderer = Callable[[str, tuple[str, ...]], str]


class FeatureMatcher:
    """Resolves feature rules over a segmented text.

    Args:
        schema: Schema whose additional features apply
        render_fragment: Callback mapping replacement text through the given
            scopes (used for pass-through)
    """

    __slots__ = ("_render_fragment", "_schema")

    def __init__(self, schema: Schema, render_fragment: FragmentRenderer) -> None:
        self._schema = schema
        self._render_fragment = render_fragment

    def resolve(self, words: Sequence[Word], scopes: Sequence[str] = SCOPES) -> dict[Unit, str]:
        """Claim units with the schema's features.

        Args:
            words: Segmented text
            scopes: Scopes whose features may apply

        Returns:
            Rendered output for every claimed unit, keyed by the unit
        """
        resolved: dict[Unit, str] = {}
        by_scope = {
            scope: self._schema.features_for(scope) if scope in scopes else ()
            for scope in SCOPES
        }
        if not any(by_scope.values()):
            return resolved

        for word in words:
            if not word.is_hebrew:
                continue
            if self._claim(word, by_scope["word"], resolved):
                continue
            for syllable in word.syllables:
                if self._claim(syllable, by_scope["syllable"], resolved):
                    continue
                for cluster in syllable.clusters:
                    if cluster.is_hebrew:
                        self._claim(cluster, by_scope["cluster"], resolved)
        return resolved

    def _claim(
        self,
        unit: Unit,
        features: tuple[AdditionalFeature, ...],
        resolved: dict[Unit, str],
    ) -> bool:
        if not features:
            return False
        target = strip_for_matching(unit.text)
        for feature in features:
            if feature.pattern.search(target) is None:
                continue
            text = feature.replacement.apply(unit, feature.pattern, target, self._schema)
            if feature.pass_through:
                text = self._render_fragment(text, _LOWER_SCOPES[feature.scope])
            logger.debug(
                "%s feature %r claimed %r -> %r",
                feature.scope,
                feature.pattern.pattern,
                unit.text,
                text,
            )
            resolved[unit] = text
            return True
        return False
