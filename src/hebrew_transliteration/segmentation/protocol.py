"""Segmenter protocol.

The mapping engine consumes segmented text through this one method, so the
bundled Syllabifier can be swapped for any other implementation (or a fake
in tests).

Thread Safety:
    Implementations should build a fresh tree per call and keep no state
    between calls. Multiple threads may share one instance.

Example:
    >>> class OneSyllablePerWord:
    ...     def segment(self, text):
    ...         return [Word([Syllable(split_clusters(w))]) for w in text.split()]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from hebrew_transliteration.nodes import Word


@runtime_checkable
class Segmenter(Protocol):
    """Protocol for turning text into annotated Words."""

    def segment(self, text: str) -> list[Word]:
        """Split text into linked, annotated Words.

        Args:
            text: Canonically sequenced Hebrew text

        Returns:
            Words in reading order. Each Word's ``whitespace`` holds the
            whitespace that followed it.
        """
        ...
