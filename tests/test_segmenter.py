"""Tests for the default syllabifier and the Segmenter protocol.

Verifies:
- Word and cluster splitting
- Matres lectionis, furtive patah, dagesh chazaq, and sheva rules
- Each syllable flag
- Divine-name detection, accent placement, and qamets qatan
- Tree links between units
"""

import pytest

from hebrew_transliteration import (
    Segmenter,
    SegmentationError,
    Syllabifier,
    SyllableFlags,
    Word,
    sequence,
)
from hebrew_transliteration.chars import HOLAM, HOLAM_HASER, QAMATS
from hebrew_transliteration.segmentation import split_clusters, split_words


def _word(text: str, **flags: object) -> Word:
    (word,) = Syllabifier(SyllableFlags(**flags)).segment(text)  # type: ignore[arg-type]
    return word


def _syllables(text: str, **flags: object) -> list[str]:
    return [s.text for s in _word(text, **flags).syllables]


def _expect(*texts: str) -> list[str]:
    return [sequence(t) for t in texts]


class TestSplitWords:
    """Whitespace and maqaf splitting."""

    def test_whitespace(self) -> None:
        assert split_words("a b\tc") == [("a", " "), ("b", "\t"), ("c", "")]

    def test_maqaf_splits_without_whitespace(self) -> None:
        assert split_words("a\u05BEb c") == [("a\u05BE", ""), ("b", " "), ("c", "")]

    def test_leading_whitespace(self) -> None:
        assert split_words(" a") == [("", " "), ("a", "")]

    def test_trailing_whitespace(self) -> None:
        assert split_words("a  ") == [("a", "  ")]

    def test_empty(self) -> None:
        assert split_words("") == []


class TestSplitClusters:
    """One letter plus its marks per cluster."""

    def test_marks_are_parsed(self) -> None:
        (cluster,) = split_clusters(sequence("ש\u05B8\u05BC\u05C1\u0591"))
        assert cluster.letter == "ש"
        assert cluster.vowel == QAMATS
        assert cluster.has_dagesh
        assert cluster.has_shin_dot
        assert not cluster.has_sin_dot
        assert cluster.accents == "\u0591"

    def test_non_hebrew_characters(self) -> None:
        clusters = split_clusters("אב1,")
        assert [c.text for c in clusters] == ["א", "ב", "1", ","]
        assert [c.is_hebrew for c in clusters] == [True, True, False, False]

    def test_meteg_and_rafe(self) -> None:
        (cluster,) = split_clusters(sequence("ב\u05BF"))
        assert cluster.has_rafe
        (cluster,) = split_clusters(sequence("ו\u05B7\u05BD"))
        assert cluster.has_meteg
        assert cluster.accents == ""

    def test_extra_vowels(self) -> None:
        (cluster,) = split_clusters("ל\u05B8\u05B9")
        assert cluster.vowel == QAMATS
        assert cluster.extra_vowels == HOLAM


class TestSyllables:
    """Syllable boundaries for common word shapes."""

    def test_open_and_closed(self) -> None:
        assert _syllables("ש\u05B8\u05C1לו\u05B9ם") == _expect("ש\u05B8\u05C1", "לו\u05B9ם")

    def test_input_order_does_not_matter(self) -> None:
        assert _syllables("ש\u05B8\u05C1לו\u05B9ם") == _syllables(sequence("ש\u05B8\u05C1לו\u05B9ם"))

    def test_silent_sheva_closes(self) -> None:
        word = _word("מ\u05B4נ\u05B0ח\u05B8ה")
        assert [s.text for s in word.syllables] == _expect("מ\u05B4נ\u05B0", "ח\u05B8ה")
        assert word.syllables[0].is_closed
        assert not word.syllables[1].is_closed

    def test_dagesh_chazaq(self) -> None:
        word = _word("מ\u05B4נ\u05B0\u05BCז\u05B8ר")
        assert [s.text for s in word.syllables] == _expect("מ\u05B4", "נ\u05B0\u05BC", "ז\u05B8ר")
        nun = word.syllables[1].clusters[0]
        assert nun.is_dagesh_chazaq
        assert nun.is_vocal_sheva
        assert word.syllables[0].is_closed

    def test_initial_dagesh_is_not_chazaq(self) -> None:
        word = _word("ב\u05B0\u05BCר\u05B5אש\u05B4\u05C1ית")
        first = word.syllables[0].clusters[0]
        assert first.has_dagesh
        assert not first.is_dagesh_chazaq
        assert first.is_vocal_sheva

    def test_quiescent_alef_does_not_close(self) -> None:
        word = _word("ב\u05B0\u05BCר\u05B5אש\u05B4\u05C1ית")
        assert [s.text for s in word.syllables] == _expect("ב\u05B0\u05BC", "ר\u05B5א", "ש\u05B4\u05C1ית")
        assert not word.syllables[1].is_closed

    def test_final_double_sheva_is_silent(self) -> None:
        word = _word("ו\u05B7י\u05B5\u05BCש\u05B0\u05C1ת\u05B0\u05BC")
        shin, tav = word.syllables[-1].clusters[-2:]
        assert shin.has_silent_sheva
        assert tav.has_silent_sheva

    def test_furtive_patah(self) -> None:
        word = _word("נ\u05B9ח\u05B7")
        assert len(word.syllables) == 1
        assert word.clusters[-1].is_furtive

    def test_mappiq_is_not_chazaq(self) -> None:
        word = _word("ג\u05B8\u05BCב\u05B9ה\u05B7\u05BC")
        he = word.clusters[-1]
        assert he.has_dagesh
        assert not he.is_dagesh_chazaq
        assert he.is_furtive

    def test_matres(self) -> None:
        word = _word("ע\u05B2ו\u05B9נו\u05B9ת\u05B5ינו\u05BC")
        matres = [c.text for c in word.clusters if c.is_mater]
        assert matres == _expect("ו\u05B9", "י", "ו\u05BC")

    def test_initial_shureq(self) -> None:
        word = _word("ו\u05BCמ\u05B4ן")
        first = word.clusters[0]
        assert first.is_shureq
        assert not first.is_mater
        assert [s.text for s in word.syllables] == _expect("ו\u05BC", "מ\u05B4ן")

    def test_vowel_names(self) -> None:
        word = _word("ב\u05B0\u05BCר\u05B5אש\u05B4\u05C1ית")
        assert [s.vowel_names for s in word.syllables] == [["SHEVA"], ["TSERE"], ["HIRIQ"]]
        word = _word("ש\u05B8\u05C1לו\u05B9ם")
        assert word.syllables[1].vowel_names == ["HOLAM"]

    def test_non_hebrew_word(self) -> None:
        word = _word("v1.")
        assert not word.is_hebrew
        assert len(word.syllables) == 1
        assert word.text == "v1."


class TestFlags:
    """Each SyllableFlags switch changes segmentation."""

    def test_sqnmlvy(self) -> None:
        assert _syllables("ו\u05B7י\u05B0ה\u05B4י") == _expect("ו\u05B7", "י\u05B0", "ה\u05B4י")
        assert _syllables("ו\u05B7י\u05B0ה\u05B4י", sqnmlvy=False) == _expect("ו\u05B7י\u05B0", "ה\u05B4י")

    def test_article(self) -> None:
        assert _syllables("ה\u05B7מ\u05B0י\u05B7ל\u05B6\u05BCד\u05B6ת")[:2] == _expect("ה\u05B7", "מ\u05B0")
        assert _syllables("ה\u05B7מ\u05B0י\u05B7ל\u05B6\u05BCד\u05B6ת", article=False)[0] == sequence("ה\u05B7מ\u05B0")

    def test_sheva_after_meteg(self) -> None:
        text = "ו\u05B7\u05BDי\u05B0ה\u05B4י"
        assert _syllables(text, sqnmlvy=False) == _expect("ו\u05B7\u05BD", "י\u05B0", "ה\u05B4י")
        flags = {"sqnmlvy": False, "sheva_after_meteg": False}
        assert _syllables(text, **flags) == _expect("ו\u05B7\u05BDי\u05B0", "ה\u05B4י")

    def test_long_vowels(self) -> None:
        assert _syllables("ש\u05B9\u05C1מ\u05B0ר\u05B4ים") == _expect("ש\u05B9\u05C1", "מ\u05B0", "ר\u05B4ים")
        assert _syllables("ש\u05B9\u05C1מ\u05B0ר\u05B4ים", long_vowels=False) == _expect("ש\u05B9\u05C1מ\u05B0", "ר\u05B4ים")

    def test_qamets_qatan(self) -> None:
        word = _word("ח\u05B8כ\u05B0מ\u05B8ה")
        assert word.clusters[0].is_qamets_qatan
        word = _word("ח\u05B8כ\u05B0מ\u05B8ה", qamets_qatan=False)
        assert not word.clusters[0].is_qamets_qatan

    def test_holem_haser_remove(self) -> None:
        word = _word("ע\u05B8ו\u05BAן")
        vav = word.clusters[1]
        assert vav.vowel == HOLAM
        assert HOLAM_HASER not in word.text

    def test_holem_haser_preserve(self) -> None:
        word = _word("ע\u05B8ו\u05BAן", holem_haser="preserve")
        assert word.clusters[1].vowel == HOLAM_HASER

    def test_holem_haser_update(self) -> None:
        word = _word("ע\u05B8ו\u05B9ן", holem_haser="update")
        assert word.clusters[1].vowel == HOLAM_HASER
        # A holam male is left alone
        word = _word("ש\u05B8\u05C1לו\u05B9ם", holem_haser="update")
        assert word.clusters[2].vowel == HOLAM

    def test_strict_rejects_unpointed(self) -> None:
        segmenter = Syllabifier(SyllableFlags(allow_no_niqqud=False, strict=True))
        with pytest.raises(SegmentationError) as exc_info:
            segmenter.segment("שלום")
        assert exc_info.value.word == "שלום"

    def test_unpointed_allowed_without_strict(self) -> None:
        segmenter = Syllabifier(SyllableFlags(allow_no_niqqud=False))
        (word,) = segmenter.segment("שלום")
        assert word.text == "שלום"

    def test_strict_accepts_pointed(self) -> None:
        segmenter = Syllabifier(SyllableFlags(allow_no_niqqud=False, strict=True))
        assert len(segmenter.segment("ש\u05B8\u05C1לו\u05B9ם")) == 1


class TestDivineName:
    """The tetragrammaton is one syllable."""

    def test_plain(self) -> None:
        word = _word("י\u05B0הו\u05B8ה")
        assert word.divine_name == "plain"
        assert len(word.syllables) == 1
        assert word.syllables[0].is_divine_name

    def test_elohim_vocalization(self) -> None:
        assert _word("י\u05B1ה\u05B9ו\u05B4ה").divine_name == "elohim"

    def test_prefixed(self) -> None:
        word = _word("ב\u05B7\u05BCיהו\u05B8ה")
        assert word.divine_name == "plain"
        assert [s.text for s in word.syllables] == _expect("ב\u05B7\u05BC", "יהו\u05B8ה")
        assert [s.is_divine_name for s in word.syllables] == [False, True]

    def test_unpointed(self) -> None:
        assert _word("יהוה").divine_name == "plain"

    def test_not_the_name(self) -> None:
        assert _word("א\u05B1ל\u05B9ה\u05B4ים").divine_name is None
        assert _word("אבגיהוה").divine_name is None


class TestAccent:
    """Accented syllable selection."""

    def test_marked_accent(self) -> None:
        word = _word("מ\u05B6\u05A3ל\u05B6ך\u05B0")
        assert [s.is_accented for s in word.syllables] == [True, False]

    def test_default_final(self) -> None:
        word = _word("ד\u05B8\u05BCב\u05B8ר")
        assert [s.is_accented for s in word.syllables] == [False, True]

    def test_positional_accent_ignored(self) -> None:
        # Pashta sits on the last letter regardless of stress
        word = _word("מ\u05B6\u05A3ל\u05B6ך\u05B0\u0599")
        assert word.accented_syllable is word.syllables[0]

    def test_maqaf_word_unaccented(self) -> None:
        words = Syllabifier().segment("כ\u05B8\u05BCל\u05BEה\u05B8ע\u05B8ם")
        assert not words[0].is_accented
        assert words[1].is_accented


class TestLinks:
    """Neighbour and parent pointers."""

    def test_word_links(self) -> None:
        words = Syllabifier().segment("ש\u05B8\u05C1לו\u05B9ם ע\u05B2ל\u05B5יכ\u05B6ם")
        assert words[0].next is words[1]
        assert words[1].previous is words[0]
        assert words[0].whitespace == " "
        assert words[1].is_final

    def test_syllable_and_cluster_links(self) -> None:
        word = _word("ש\u05B8\u05C1לו\u05B9ם")
        first, second = word.syllables
        assert first.next is second
        assert second.previous is first
        assert first.word is word
        assert second.is_final
        assert not first.is_final
        clusters = word.clusters
        assert clusters[0].next is clusters[1]
        assert clusters[0].syllable is first
        assert clusters[-1].syllable is second

    def test_clusters_link_across_syllables(self) -> None:
        word = _word("ש\u05B8\u05C1לו\u05B9ם")
        assert word.syllables[0].clusters[-1].next is word.syllables[1].clusters[0]


class TestProtocol:
    """Segmenter protocol conformance."""

    def test_syllabifier_is_segmenter(self) -> None:
        assert isinstance(Syllabifier(), Segmenter)

    def test_fake_is_segmenter(self, fake_segmenter: Segmenter) -> None:
        assert isinstance(fake_segmenter, Segmenter)

    def test_plain_object_is_not(self) -> None:
        assert not isinstance(object(), Segmenter)
