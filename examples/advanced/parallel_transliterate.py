"""Free-threading safe: transliterate 1000 verses in parallel."""

from concurrent.futures import ThreadPoolExecutor

from hebrew_transliteration import Transliterator

verses = ["ו\u05B7י\u05B9\u05BC\u05A5אמ\u05B6ר א\u05B1ל\u05B9ה\u05B4\u0596ים י\u05B0ה\u05B4\u05A3י א\u0591ו\u05B9ר"] * 1000
tr = Transliterator({"SHIN": "sh"}, STRESS_MARKER={"location": "after-vowel", "mark": "\u0301"})

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(tr, verses))

print(f"Transliterated {len(results)} verses in parallel")
print("First:", results[0])
