"""Transliterate pointed Hebrew in 3 lines, zero config, zero deps."""

from hebrew_transliteration import remove, transliterate

text = "ב\u05B0\u05BCר\u05B5אש\u05B4\u05C1\u0596ית ב\u05B8\u05BCר\u05B8\u05A3א א\u05B1ל\u05B9ה\u05B4\u0591ים"
print(transliterate(text))
print(remove(text))
