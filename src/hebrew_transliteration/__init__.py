"""
hebrew-transliteration: configurable Hebrew to Latin transliteration

Transliterates pointed Hebrew with a fully configurable schema (SBL academic
style by default), and provides canonical mark ordering and selective
diacritic removal.

Quick Start:
    >>> from hebrew_transliteration import transliterate
    >>> transliterate("אֱלֹהִים")
    'ʾĕlōhîm'

    >>> # Override any part of the table
    >>> transliterate("שָׁלוֹם", {"SHIN": "sh"})
    'shālôm'

    >>> # Or build a reusable Transliterator
    >>> from hebrew_transliteration import Transliterator
    >>> tr = Transliterator(dagesh_chazaq=False)
    >>> tr("שַׁבָּת")
    'šabāt'

Other transforms:
    >>> from hebrew_transliteration import remove, sequence, ALL
    >>> remove(sequence("שָׂרַ֣י"), ALL) == "שרי"
    True
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from hebrew_transliteration.assembler import Renderer
from hebrew_transliteration.config import (
    get_schema,
    reset_schema,
    schema_context,
    set_schema,
)
from hebrew_transliteration.errors import (
    SchemaError,
    SegmentationError,
    TransliterationError,
)
from hebrew_transliteration.nodes import Cluster, Syllable, Unit, Word
from hebrew_transliteration.remove import (
    ACCENTS,
    ALL,
    DEFAULT,
    VOWELS,
    RemoveOptions,
    remove,
)
from hebrew_transliteration.schema import (
    SBL,
    AdditionalFeature,
    Literal,
    Schema,
    StressMarker,
    Transform,
    with_defaults,
)
from hebrew_transliteration.segmentation import Segmenter, Syllabifier, SyllableFlags
from hebrew_transliteration.sequence import sequence
from hebrew_transliteration.serialization import from_json, to_dict, to_json

__version__ = "0.1.0"


def resolve_schema(
    schema: Schema | Mapping[str, Any] | None = None, overrides: Mapping[str, Any] | None = None
) -> Schema:
    """Build the effective schema for a call.

    Args:
        schema: A complete Schema, a partial mapping merged onto SBL, or None
            for SBL
        overrides: Further keys merged on top

    Returns:
        Complete, validated Schema
    """
    if schema is None:
        base = SBL
    elif isinstance(schema, Schema):
        base = schema
    else:
        base = with_defaults(SBL, schema)
    return with_defaults(base, overrides)


def transliterate(
    text: str | Sequence[Word],
    schema: Schema | Mapping[str, Any] | None = None,
    *,
    segmenter: Segmenter | None = None,
    **overrides: Any,
) -> str:
    """Transliterate Hebrew text.

    Args:
        text: Raw text, or words already segmented (and linked)
        schema: Schema, partial mapping of overrides onto SBL, or None
        segmenter: Custom Segmenter (uses Syllabifier if None)
        **overrides: Extra schema keys, e.g. ``qamats="a"``

    Returns:
        Latin transliteration. Non-Hebrew text and whitespace are kept.

    Raises:
        SchemaError: Invalid schema or overrides
        SegmentationError: Strict segmentation refused a word

    Example:
        >>> transliterate("כָּל־הָעָ֖ם")
        'kol-hāʿām'
    """
    active = resolve_schema(schema, overrides)
    with schema_context(active):
        if isinstance(text, str):
            chosen = segmenter or Syllabifier(active.syllable_flags)
            words = chosen.segment(sequence(text))
        else:
            words = list(text)
        return Renderer(segmenter).render(words)


class Transliterator:
    """High-level transliterator with a fixed schema.

    Builds its schema once; calls are then cheap and thread-safe.

    Example:
        >>> tr = Transliterator({"SHIN": "sh"})
        >>> tr("שָׁלוֹם")
        'shālôm'
        >>> tr.transliterate_many(["שָׁלוֹם", "שַׁבָּת"])
        ['shālôm', 'shabbāt']
    """

    __slots__ = ("_schema", "_segmenter")

    def __init__(
        self,
        schema: Schema | Mapping[str, Any] | None = None,
        *,
        segmenter: Segmenter | None = None,
        **overrides: Any,
    ) -> None:
        self._schema = resolve_schema(schema, overrides)
        self._segmenter = segmenter

    @property
    def schema(self) -> Schema:
        return self._schema

    def __call__(self, text: str | Sequence[Word]) -> str:
        return transliterate(text, self._schema, segmenter=self._segmenter)

    def transliterate_many(self, texts: Iterable[str]) -> list[str]:
        """Transliterate several texts with the same schema."""
        return [self(text) for text in texts]


__all__ = [
    "ACCENTS",
    "ALL",
    "DEFAULT",
    "SBL",
    "VOWELS",
    "AdditionalFeature",
    "Cluster",
    "Literal",
    "RemoveOptions",
    "Renderer",
    "Schema",
    "SchemaError",
    "SegmentationError",
    "Segmenter",
    "StressMarker",
    "Syllabifier",
    "Syllable",
    "SyllableFlags",
    "Transform",
    "TransliterationError",
    "Transliterator",
    "Unit",
    "Word",
    "__version__",
    "from_json",
    "get_schema",
    "remove",
    "reset_schema",
    "resolve_schema",
    "schema_context",
    "sequence",
    "set_schema",
    "to_dict",
    "to_json",
    "transliterate",
    "with_defaults",
]
