"""Transliteration schema.

A Schema is an immutable table with one string per letter, vowel point,
mater-lectionis digraph, and punctuation mark, plus the dagesh-chazaq policy,
the user features, an optional stress marker, and the segmentation flags.
Its field defaults are the SBL academic style, so ``Schema()`` is the SBL
table and partial overrides are merged with ``with_defaults``:

    >>> schema = with_defaults(SBL, {"SHIN": "sh", "qamats": "a"})
    >>> schema.shin
    'sh'

Keys are accepted in snake_case (``dagesh_chazaq``), upper case
(``DAGESH_CHAZAQ``), or camelCase (``longVowels``). Unknown keys raise
SchemaError.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any

import regex

from hebrew_transliteration.errors import SchemaError
from hebrew_transliteration.segmentation.flags import HOLEM_HASER_MODES, SyllableFlags
from hebrew_transliteration.sequence import sequence

if TYPE_CHECKING:
    from hebrew_transliteration.nodes import Unit

SCOPES = ("word", "syllable", "cluster")
STRESS_LOCATIONS = ("before-syllable", "after-syllable", "before-vowel", "after-vowel")
STRESS_EXCLUSIONS = ("never", "single", "final")

# Precompiled patterns from either engine are accepted as given
Pattern = regex.Pattern | re.Pattern


@dataclass(frozen=True, slots=True)
class Literal:
    """Replacement text substituted for every match of a feature pattern."""

    text: str

    def apply(self, unit: Unit, pattern: Pattern, target: str, schema: Schema) -> str:
        # A function replacement keeps backslashes in the text literal
        return pattern.sub(lambda _match: self.text, target)


@dataclass(frozen=True, slots=True)
class Transform:
    """Callback producing the replacement text for a whole unit.

    Called as ``fn(unit, pattern, schema)``. Exceptions propagate.
    """

    fn: Callable[[Any, Pattern, Schema], str]

    def apply(self, unit: Unit, pattern: Pattern, target: str, schema: Schema) -> str:
        return self.fn(unit, pattern, schema)


Replacement = Literal | Transform


@dataclass(frozen=True, slots=True)
class AdditionalFeature:
    """User rule matched against words, syllables, or clusters.

    Attributes:
        scope: "word", "syllable", or "cluster"
        pattern: Regular expression, compiled on construction with the
            ``regex`` engine (variable-width lookbehind is supported). A str
            pattern is put in canonical mark order first, so Hebrew may be
            typed in any mark order.
        replacement: Literal or Transform (plain str and callables are wrapped)
        pass_through: Map the replaced text further instead of emitting it
    """

    scope: str
    pattern: Pattern
    replacement: Replacement
    pass_through: bool = True

    def __post_init__(self) -> None:
        if self.scope not in SCOPES:
            raise SchemaError(
                "additional_features", f"scope must be one of {SCOPES}, got {self.scope!r}"
            )
        if isinstance(self.pattern, str):
            try:
                compiled = regex.compile(sequence(self.pattern))
            except regex.error as e:
                raise SchemaError(
                    "additional_features", f"invalid pattern {self.pattern!r}: {e}"
                ) from e
            object.__setattr__(self, "pattern", compiled)
        elif not isinstance(self.pattern, (regex.Pattern, re.Pattern)):
            raise SchemaError("additional_features", "pattern must be a str or a compiled pattern")

        replacement = self.replacement
        if isinstance(replacement, str):
            object.__setattr__(self, "replacement", Literal(replacement))
        elif not isinstance(replacement, (Literal, Transform)):
            if not callable(replacement):
                raise SchemaError(
                    "additional_features", "replacement must be a str, callable, Literal, or Transform"
                )
            object.__setattr__(self, "replacement", Transform(replacement))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AdditionalFeature:
        """Create a feature from a mapping.

        Accepts ``scope/pattern/replacement/pass_through`` or the original
        ``FEATURE/HEBREW/TRANSLITERATION/PASS_THROUGH`` keys.

        Example:
            >>> f = AdditionalFeature.from_dict(
            ...     {"FEATURE": "cluster", "HEBREW": "ז\u05BC", "TRANSLITERATION": "tz"}
            ... )
            >>> f.scope
            'cluster'
        """
        aliases = {
            "feature": "scope",
            "hebrew": "pattern",
            "transliteration": "replacement",
        }
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = normalize_key(key)
            name = aliases.get(name, name)
            if name not in ("scope", "pattern", "replacement", "pass_through"):
                raise SchemaError("additional_features", f"unknown feature key {key!r}")
            values[name] = value
        missing = {"scope", "pattern", "replacement"} - values.keys()
        if missing:
            raise SchemaError("additional_features", f"feature missing {sorted(missing)}")
        return cls(**values)


@dataclass(frozen=True, slots=True)
class StressMarker:
    """Mark inserted at the accented syllable.

    Attributes:
        location: "before-syllable", "after-syllable", "before-vowel", or
            "after-vowel"
        mark: Text to insert (e.g., "\u0301" or "ˈ")
        exclude: "never", "single" (skip one-syllable words), or "final"
            (skip words stressed on the last syllable)
    """

    location: str
    mark: str
    exclude: str = "never"

    def __post_init__(self) -> None:
        if self.location not in STRESS_LOCATIONS:
            raise SchemaError(
                "stress_marker", f"location must be one of {STRESS_LOCATIONS}, got {self.location!r}"
            )
        if self.exclude not in STRESS_EXCLUSIONS:
            raise SchemaError(
                "stress_marker", f"exclude must be one of {STRESS_EXCLUSIONS}, got {self.exclude!r}"
            )
        if not isinstance(self.mark, str):
            raise SchemaError("stress_marker", "mark must be a string")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StressMarker:
        values = {normalize_key(k): v for k, v in data.items()}
        unknown = values.keys() - {"location", "mark", "exclude"}
        if unknown:
            raise SchemaError("stress_marker", f"unknown keys {sorted(unknown)}")
        if "location" not in values or "mark" not in values:
            raise SchemaError("stress_marker", "location and mark are required")
        return cls(**values)


@dataclass(frozen=True, slots=True)
class Schema:
    """Immutable transliteration table. Defaults are the SBL academic style."""

    # Vowels
    vocal_sheva: str = "ǝ"
    hataf_segol: str = "ĕ"
    hataf_patah: str = "ă"
    hataf_qamats: str = "ŏ"
    hiriq: str = "i"
    tsere: str = "ē"
    segol: str = "e"
    patah: str = "a"
    qamats: str = "ā"
    holam: str = "ō"
    holam_haser: str = "ō"
    qubuts: str = "ū"
    qamats_qatan: str = "o"
    furtive_patah: str = "a"

    # Points and punctuation
    dagesh: str = ""
    dagesh_chazaq: bool | str = True
    maqaf: str = "-"
    paseq: str = ""
    sof_pasuq: str = ""

    # Matres lectionis
    hiriq_yod: str = "î"
    tsere_yod: str = "ê"
    segol_yod: str = "ê"
    shureq: str = "û"
    holam_vav: str = "ô"
    qamats_he: str = "â"
    segol_he: str | None = None
    tsere_he: str | None = None
    patah_he: str | None = None
    ms_sufx: str = "āyw"

    # Consonants
    alef: str = "ʾ"
    bet: str = "b"
    bet_dagesh: str | None = None
    gimel: str = "g"
    gimel_dagesh: str | None = None
    dalet: str = "d"
    dalet_dagesh: str | None = None
    he: str = "h"
    vav: str = "w"
    zayin: str = "z"
    het: str = "ḥ"
    tet: str = "ṭ"
    yod: str = "y"
    final_kaf: str = "k"
    kaf: str = "k"
    kaf_dagesh: str | None = None
    lamed: str = "l"
    final_mem: str = "m"
    mem: str = "m"
    final_nun: str = "n"
    nun: str = "n"
    samekh: str = "s"
    ayin: str = "ʿ"
    final_pe: str = "p"
    pe: str = "p"
    pe_dagesh: str | None = None
    final_tsadi: str = "ṣ"
    tsadi: str = "ṣ"
    qof: str = "q"
    resh: str = "r"
    shin: str = "š"
    sin: str = "ś"
    tav: str = "t"
    tav_dagesh: str | None = None

    # Whole-word and layout
    divine_name: str = "yhwh"
    divine_name_elohim: str | None = None
    syllable_separator: str = ""
    additional_features: tuple[AdditionalFeature, ...] = ()
    stress_marker: StressMarker | None = None

    # Segmentation flags
    allow_no_niqqud: bool = True
    article: bool = True
    holem_haser: str = "remove"
    long_vowels: bool = True
    qamets_qatan: bool = True
    sheva_after_meteg: bool = True
    sqnmlvy: bool = True
    strict: bool = False
    waw_shureq: bool = True

    def __post_init__(self) -> None:
        for name in MANDATORY_KEYS:
            if not isinstance(getattr(self, name), str):
                raise SchemaError(name, "must resolve to a string")
        for name in OPTIONAL_KEYS:
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise SchemaError(name, "must be a string or None")
        if not isinstance(self.dagesh_chazaq, (bool, str)):
            raise SchemaError("dagesh_chazaq", "must be a bool or a string")
        if self.holem_haser not in HOLEM_HASER_MODES:
            raise SchemaError(
                "holem_haser", f"must be one of {HOLEM_HASER_MODES}, got {self.holem_haser!r}"
            )

        features = tuple(
            f if isinstance(f, AdditionalFeature) else AdditionalFeature.from_dict(f)
            for f in (self.additional_features or ())
        )
        object.__setattr__(self, "additional_features", features)

        if isinstance(self.stress_marker, Mapping):
            object.__setattr__(self, "stress_marker", StressMarker.from_dict(self.stress_marker))
        elif self.stress_marker is not None and not isinstance(self.stress_marker, StressMarker):
            raise SchemaError("stress_marker", "must be a StressMarker, a mapping, or None")

    def __getitem__(self, key: str) -> Any:
        """Look up a field by any accepted key spelling.

        Lets callbacks read values the way the original tables name them:

            >>> SBL["TSERE"]
            'ē'
        """
        name = normalize_key(key)
        if name not in FIELD_NAMES:
            raise KeyError(key)
        return getattr(self, name)

    @property
    def syllable_flags(self) -> SyllableFlags:
        """Segmentation flags for the default syllabifier."""
        return SyllableFlags(**{name: getattr(self, name) for name in FLAG_KEYS})

    def features_for(self, scope: str) -> tuple[AdditionalFeature, ...]:
        """Additional features of one scope, in declaration order."""
        return tuple(f for f in self.additional_features if f.scope == scope)

    @classmethod
    def from_dict(cls, overrides: Mapping[str, Any]) -> Schema:
        """Create a schema from SBL defaults plus overrides.

        Example:
            >>> Schema.from_dict({"SHIN": "sh"}).shin
            'sh'
        """
        return with_defaults(cls(), overrides)


FIELD_NAMES: frozenset[str] = frozenset(f.name for f in fields(Schema))
FLAG_KEYS: tuple[str, ...] = tuple(f.name for f in fields(SyllableFlags))
OPTIONAL_KEYS: tuple[str, ...] = (
    "segol_he",
    "tsere_he",
    "patah_he",
    "bet_dagesh",
    "gimel_dagesh",
    "dalet_dagesh",
    "kaf_dagesh",
    "pe_dagesh",
    "tav_dagesh",
    "divine_name_elohim",
)
MANDATORY_KEYS: tuple[str, ...] = tuple(
    f.name
    for f in fields(Schema)
    if f.name not in OPTIONAL_KEYS
    and f.name not in FLAG_KEYS
    and f.name not in ("dagesh_chazaq", "additional_features", "stress_marker")
)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def normalize_key(key: str) -> str:
    """Convert an accepted key spelling to the snake_case field name.

    Example:
        >>> normalize_key("VOCAL_SHEVA"), normalize_key("longVowels")
        ('vocal_sheva', 'long_vowels')
    """
    if key.isupper() or key.islower():
        return key.lower()
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def with_defaults(base: Schema, overrides: Mapping[str, Any] | None = None) -> Schema:
    """Merge overrides onto a base schema, field by field.

    The base is left untouched. A stress-marker override replaces the whole
    marker, and an additional-features override replaces the whole list.

    Args:
        base: Complete schema to start from
        overrides: Partial mapping of keys to new values

    Returns:
        New Schema

    Raises:
        SchemaError: Unknown key, or a value that fails validation
    """
    if not overrides:
        return base
    changes: dict[str, Any] = {}
    for key, value in overrides.items():
        name = normalize_key(key)
        if name not in FIELD_NAMES:
            raise SchemaError(key, "unknown schema key")
        changes[name] = value
    return replace(base, **changes)


# The built-in SBL academic table
SBL: Schema = Schema()


__all__ = [
    "SBL",
    "AdditionalFeature",
    "Literal",
    "Replacement",
    "Schema",
    "StressMarker",
    "Transform",
    "normalize_key",
    "with_defaults",
]
