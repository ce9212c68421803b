"""Tests for hebrew_transliteration.serialization: segmented tree JSON round-trip."""

import json

import pytest

from hebrew_transliteration import Syllabifier, transliterate
from hebrew_transliteration.nodes import Cluster, Syllable, Word
from hebrew_transliteration.serialization import from_dict, from_json, to_dict, to_json

TEXT = "ב\u05B7\u05BC\u05BDיהו\u05B8\u0594ה כ\u05B8\u05BCל\u05BEה\u05B8ע\u05B8\u0596ם"


class TestToDict:
    """Unit to dict conversion."""

    def test_cluster(self) -> None:
        cluster = Cluster("א")
        data = to_dict(cluster)
        assert data["_type"] == "Cluster"
        assert data["text"] == "א"
        assert "next" not in data
        assert "syllable" not in data

    def test_word_nests_children(self) -> None:
        (word,) = Syllabifier().segment("ד\u05B8\u05BCב\u05B8ר")
        data = to_dict(word)
        assert data["_type"] == "Word"
        assert [s["_type"] for s in data["syllables"]] == ["Syllable", "Syllable"]
        assert data["syllables"][0]["clusters"][0]["_type"] == "Cluster"
        assert "previous" not in data["syllables"][0]
        assert "word" not in data["syllables"][0]

    def test_annotations_kept(self) -> None:
        (word,) = Syllabifier().segment("מ\u05B4נ\u05B0\u05BCז\u05B8ר")
        data = to_dict(word)
        nun = data["syllables"][1]["clusters"][0]
        assert nun["is_dagesh_chazaq"] is True
        assert nun["is_vocal_sheva"] is True


class TestFromDict:
    """Dict to unit conversion."""

    def test_relinks_word(self) -> None:
        (word,) = Syllabifier().segment("ש\u05B8\u05C1לו\u05B9ם")
        restored = from_dict(to_dict(word))
        assert isinstance(restored, Word)
        first, second = restored.syllables
        assert first.next is second
        assert first.word is restored
        assert first.clusters[0].syllable is first
        assert second.is_final

    def test_syllable(self) -> None:
        restored = from_dict({"_type": "Syllable", "clusters": [], "is_closed": True})
        assert isinstance(restored, Syllable)
        assert restored.is_closed

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type"):
            from_dict({"_type": "Verse"})


class TestJson:
    """JSON round-trip."""

    def test_round_trip_transliterates_identically(self) -> None:
        words = Syllabifier().segment(TEXT)
        restored = from_json(to_json(words))
        assert transliterate(restored) == transliterate(TEXT) == "ba-yhwh kol-hāʿām"

    def test_round_trip_is_stable(self) -> None:
        words = Syllabifier().segment(TEXT)
        source = to_json(words)
        assert to_json(from_json(source)) == source

    def test_words_relinked(self) -> None:
        words = from_json(to_json(Syllabifier().segment(TEXT)))
        assert words[0].next is words[1]
        assert words[2].previous is words[1]

    def test_deterministic_and_readable(self) -> None:
        source = to_json(Syllabifier().segment("ש\u05B8\u05C1לו\u05B9ם"), indent=2)
        assert "ש\u05C1" in source
        data = json.loads(source)
        assert list(data[0]) == sorted(data[0])
