"""Hebrew codepoint tables.

Every table is a module-level dict or frozenset so lookups are O(1) and
shared between threads without allocation.

Usage:
    from hebrew_transliteration.chars import LETTERS, VOWEL_POINTS

    if char in LETTERS:
        ...
"""

# Letters, keyed to the schema field that transliterates them
LETTER_NAMES: dict[str, str] = {
    "א": "alef",
    "ב": "bet",
    "ג": "gimel",
    "ד": "dalet",
    "ה": "he",
    "ו": "vav",
    "ז": "zayin",
    "ח": "het",
    "ט": "tet",
    "י": "yod",
    "ך": "final_kaf",
    "כ": "kaf",
    "ל": "lamed",
    "ם": "final_mem",
    "מ": "mem",
    "ן": "final_nun",
    "נ": "nun",
    "ס": "samekh",
    "ע": "ayin",
    "ף": "final_pe",
    "פ": "pe",
    "ץ": "final_tsadi",
    "צ": "tsadi",
    "ק": "qof",
    "ר": "resh",
    "ש": "shin",
    "ת": "tav",
}
LETTERS: frozenset[str] = frozenset(LETTER_NAMES)

ALEF = "א"
BET = "ב"
HE = "ה"
VAV = "ו"
HET = "ח"
YOD = "י"
AYIN = "ע"
SHIN = "ש"

# Letters whose dagesh may select a separate mapping
BEGADKEFAT: frozenset[str] = frozenset("בגדךכףפת")

# Letters that lose their dagesh after the article and vav-consecutive
SQNMLVY: frozenset[str] = frozenset("סקנמלוי")

# Inseparable prefixes that may precede the divine name
DIVINE_NAME_PREFIXES: frozenset[str] = frozenset("ובכלמשה")
DIVINE_NAME_LETTERS = "יהוה"

# Vowel points, keyed to their schema field
SHEVA = "\u05B0"
HATAF_SEGOL = "\u05B1"
HATAF_PATAH = "\u05B2"
HATAF_QAMATS = "\u05B3"
HIRIQ = "\u05B4"
TSERE = "\u05B5"
SEGOL = "\u05B6"
PATAH = "\u05B7"
QAMATS = "\u05B8"
HOLAM = "\u05B9"
HOLAM_HASER = "\u05BA"
QUBUTS = "\u05BB"
QAMATS_QATAN = "\u05C7"

VOWEL_NAMES: dict[str, str] = {
    SHEVA: "sheva",
    HATAF_SEGOL: "hataf_segol",
    HATAF_PATAH: "hataf_patah",
    HATAF_QAMATS: "hataf_qamats",
    HIRIQ: "hiriq",
    TSERE: "tsere",
    SEGOL: "segol",
    PATAH: "patah",
    QAMATS: "qamats",
    HOLAM: "holam",
    HOLAM_HASER: "holam_haser",
    QUBUTS: "qubuts",
    QAMATS_QATAN: "qamats_qatan",
}
VOWEL_POINTS: frozenset[str] = frozenset(VOWEL_NAMES)

# Points and punctuation
DAGESH = "\u05BC"
METEG = "\u05BD"
MAQAF = "\u05BE"
RAFE = "\u05BF"
PASEQ = "\u05C0"
SHIN_DOT = "\u05C1"
SIN_DOT = "\u05C2"
SOF_PASUQ = "\u05C3"
UPPER_DOT = "\u05C4"
LOWER_DOT = "\u05C5"
NUN_HAFUKHA = "\u05C6"

# Cantillation marks (te'amim)
ACCENT_NAMES: dict[str, str] = {
    "\u0591": "etnahta",
    "\u0592": "segol_accent",
    "\u0593": "shalshelet",
    "\u0594": "zaqef_qatan",
    "\u0595": "zaqef_gadol",
    "\u0596": "tipeha",
    "\u0597": "revia",
    "\u0598": "zarqa",
    "\u0599": "pashta",
    "\u059A": "yetiv",
    "\u059B": "tevir",
    "\u059C": "geresh",
    "\u059D": "geresh_muqdam",
    "\u059E": "gershayim",
    "\u059F": "qarney_para",
    "\u05A0": "telisha_gedola",
    "\u05A1": "pazer",
    "\u05A2": "atnah_hafukh",
    "\u05A3": "munah",
    "\u05A4": "mahapakh",
    "\u05A5": "merkha",
    "\u05A6": "merkha_kefula",
    "\u05A7": "darga",
    "\u05A8": "qadma",
    "\u05A9": "telisha_qetana",
    "\u05AA": "yerah_ben_yomo",
    "\u05AB": "ole",
    "\u05AC": "iluy",
    "\u05AD": "dehi",
    "\u05AE": "zinor",
    "\u05AF": "masora_circle",
}
ACCENTS: frozenset[str] = frozenset(ACCENT_NAMES)
MASORA_CIRCLE = "\u05AF"

# Accents written on the last or first letter of a word regardless of stress
POSITIONAL_ACCENTS: frozenset[str] = frozenset("\u0592\u0599\u05A9\u05AE\u059A\u05A0")

# Marks ignored when matching feature patterns
MATCH_IGNORED: frozenset[str] = ACCENTS | frozenset((METEG, RAFE))


def is_letter(char: str) -> bool:
    """Check if character is one of the 27 Hebrew letter forms."""
    return char in LETTERS
