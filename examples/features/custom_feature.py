"""Custom feature rules: a literal cluster rule and a syllable callback."""

from hebrew_transliteration import AdditionalFeature, Schema, Syllable, transliterate
from hebrew_transliteration.chars import SHEVA


def sheva_echo(syllable: Syllable, pattern, schema: Schema) -> str:
    """Pronounce a vocal sheva like the vowel of the next syllable."""
    if syllable.next is None or not syllable.next.vowel_names:
        return syllable.text
    return syllable.text.replace(SHEVA, schema[syllable.next.vowel_names[0]])


features = [
    {"FEATURE": "cluster", "HEBREW": "[צץ]", "TRANSLITERATION": "tz"},
    AdditionalFeature("syllable", "(?<![\u05B1-\u05BB\u05C7].*)\u05B0", sheva_echo),
]

print(transliterate("ב\u05B0\u05BCר\u05B5אש\u05B4\u05C1\u0596ית ב\u05B8\u05BCר\u05B8\u05A3א א\u05B1ל\u05B9ה\u05B4\u0591ים א\u05B5\u05A5ת ה\u05B7ש\u05B8\u05BC\u05C1מ\u05B7\u0596י\u05B4ם ו\u05B0א\u05B5\u05A5ת ה\u05B8א\u05B8\u05BDר\u05B6ץ\u05C3", ADDITIONAL_FEATURES=features))
