"""Selective removal of Hebrew diacritics.

RemoveOptions holds one flag per diacritic category. Presets cover the common
cases and compose with ``|``:

    >>> remove(text, ACCENTS | VOWELS)
    >>> remove(text, RemoveOptions(shin_dot=True, sin_dot=True))

Input is put in canonical mark order before deletion, so the output is
canonically ordered whatever order the marks were typed in. Deletion never
reorders what is left.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace

from hebrew_transliteration.chars import ACCENT_NAMES, VOWEL_NAMES
from hebrew_transliteration.classifier import category
from hebrew_transliteration.sequence import sequence


@dataclass(frozen=True, slots=True)
class RemoveOptions:
    """Immutable set of diacritic categories to delete.

    All flags default to False, so ``RemoveOptions()`` removes nothing.
    """

    # Cantillation
    etnahta: bool = False
    segol_accent: bool = False
    shalshelet: bool = False
    zaqef_qatan: bool = False
    zaqef_gadol: bool = False
    tipeha: bool = False
    revia: bool = False
    zarqa: bool = False
    pashta: bool = False
    yetiv: bool = False
    tevir: bool = False
    geresh: bool = False
    geresh_muqdam: bool = False
    gershayim: bool = False
    qarney_para: bool = False
    telisha_gedola: bool = False
    pazer: bool = False
    atnah_hafukh: bool = False
    munah: bool = False
    mahapakh: bool = False
    merkha: bool = False
    merkha_kefula: bool = False
    darga: bool = False
    qadma: bool = False
    telisha_qetana: bool = False
    yerah_ben_yomo: bool = False
    ole: bool = False
    iluy: bool = False
    dehi: bool = False
    zinor: bool = False
    masora_circle: bool = False
    meteg: bool = False
    rafe: bool = False

    # Vowel points
    sheva: bool = False
    hataf_segol: bool = False
    hataf_patah: bool = False
    hataf_qamats: bool = False
    hiriq: bool = False
    tsere: bool = False
    segol: bool = False
    patah: bool = False
    qamats: bool = False
    holam: bool = False
    holam_haser: bool = False
    qubuts: bool = False
    qamats_qatan: bool = False

    # Consonant points and punctuation
    dagesh: bool = False
    shin_dot: bool = False
    sin_dot: bool = False
    maqaf: bool = False
    paseq: bool = False
    sof_pasuq: bool = False
    upper_dot: bool = False
    lower_dot: bool = False
    nun_hafukha: bool = False

    def __or__(self, other: RemoveOptions) -> RemoveOptions:
        """Union of two option sets."""
        if not isinstance(other, RemoveOptions):
            return NotImplemented
        return RemoveOptions(
            **{
                f.name: getattr(self, f.name) or getattr(other, f.name)
                for f in fields(self)
            }
        )

    def enabled(self) -> frozenset[str]:
        """Names of all categories set for removal."""
        return frozenset(f.name for f in fields(self) if getattr(self, f.name))

    @classmethod
    def from_dict(cls, options: Mapping[str, bool]) -> RemoveOptions:
        """Create options from a mapping.

        Keys may be field names or their upper-case forms (``"SHIN_DOT"``).
        Unknown keys are silently ignored.

        Example:
            >>> RemoveOptions.from_dict({"SHIN_DOT": True}).shin_dot
            True
        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k.lower(): bool(v) for k, v in options.items() if k.lower() in valid_fields}
        return cls(**filtered)


def _preset(*names: str) -> RemoveOptions:
    return replace(RemoveOptions(), **dict.fromkeys(names, True))


# Cantillation marks only
ACCENTS: RemoveOptions = _preset(*ACCENT_NAMES.values())

# Vowel points and dagesh
VOWELS: RemoveOptions = _preset(*VOWEL_NAMES.values(), "dagesh")

# Every category, including shin/sin dots and punctuation
ALL: RemoveOptions = _preset(*(f.name for f in fields(RemoveOptions)))

# Cantillation, meteg, and rafe
DEFAULT: RemoveOptions = ACCENTS | _preset("meteg", "rafe")


def remove(text: str, options: RemoveOptions | Mapping[str, bool] | None = None) -> str:
    """Delete the selected diacritic categories from text.

    Args:
        text: Hebrew text in any mark order
        options: Categories to delete. None selects DEFAULT; a mapping is read
            with RemoveOptions.from_dict. An explicit RemoveOptions is used
            exactly as given.

    Returns:
        Canonically ordered text with the selected marks removed. A removed
        maqaf becomes a space. With nothing selected, text is returned as given.
    """
    if options is None:
        options = DEFAULT
    elif not isinstance(options, RemoveOptions):
        options = RemoveOptions.from_dict(options)

    enabled = options.enabled()
    if not enabled:
        return text

    out: list[str] = []
    for char in sequence(text):
        name = category(char)
        if name is None or name not in enabled:
            out.append(char)
        elif name == "maqaf":
            out.append(" ")
    return "".join(out)


__all__ = [
    "ACCENTS",
    "ALL",
    "DEFAULT",
    "VOWELS",
    "RemoveOptions",
    "remove",
]
