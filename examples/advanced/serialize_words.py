"""Cache segmented words to disk: JSON round-trip."""

from hebrew_transliteration import Syllabifier, from_json, to_json, transliterate

words = Syllabifier().segment("ש\u05B8\u05C1ל\u05A3ו\u05B9ם ע\u05B2ל\u05B5יכ\u05B6\u0591ם")

json_str = to_json(words)
restored = from_json(json_str)

print("Same output:", transliterate(words) == transliterate(restored))
print("JSON length:", len(json_str), "chars")
