"""Shared fixtures for the hebrew_transliteration test suite."""

from collections.abc import Iterator

import pytest

from hebrew_transliteration import reset_schema
from hebrew_transliteration.nodes import Cluster, Syllable, Word, link, link_word
from hebrew_transliteration.segmentation import split_clusters


class FakeSegmenter:
    """Segmenter returning one syllable per whitespace-separated word.

    Records every text it was asked to segment.
    """

    def __init__(self) -> None:
        self.calls: list[str] = []

    def segment(self, text: str) -> list[Word]:
        self.calls.append(text)
        words = []
        for piece in text.split(" "):
            clusters: list[Cluster] = split_clusters(piece)
            word = Word([Syllable(clusters, is_accented=True)], whitespace=" ")
            link_word(word)
            words.append(word)
        if words:
            words[-1].whitespace = ""
        link(words)
        return words


@pytest.fixture(autouse=True)
def _reset_active_schema() -> Iterator[None]:
    """Every test starts and ends with the SBL schema active."""
    reset_schema()
    yield
    reset_schema()


@pytest.fixture
def fake_segmenter() -> FakeSegmenter:
    return FakeSegmenter()
