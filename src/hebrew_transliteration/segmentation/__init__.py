"""Segmentation of Hebrew text into words, syllables, and clusters.

Provides:
- Segmenter: protocol the mapping engine consumes
- Syllabifier: default rule-based implementation
- SyllableFlags: switches read by the Syllabifier
- split_clusters, split_words: low-level splitting helpers
"""

from hebrew_transliteration.segmentation.clusters import split_clusters, split_words
from hebrew_transliteration.segmentation.flags import SyllableFlags
from hebrew_transliteration.segmentation.protocol import Segmenter
from hebrew_transliteration.segmentation.syllabifier import Syllabifier

__all__ = [
    "Segmenter",
    "SyllableFlags",
    "Syllabifier",
    "split_clusters",
    "split_words",
]
