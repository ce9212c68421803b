"""Serialization of segmented trees.

Converts Words, Syllables, and Clusters to JSON-compatible dicts and back.
Useful for:
- Inspecting what the segmenter decided for a word
- Capturing segmented fixtures to feed ``transliterate`` without a segmenter

Neighbour and parent links are not stored; ``from_dict`` rebuilds them.
All output is deterministic (sorted keys).

Example:
    from hebrew_transliteration import Syllabifier
    from hebrew_transliteration.serialization import from_json, to_json

    words = Syllabifier().segment("ש\u05B8\u05C1לו\u05B9ם")
    restored = from_json(to_json(words))

Thread Safety:
    All functions are pure and safe to call from any thread.
"""

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

from hebrew_transliteration.nodes import Cluster, Syllable, Unit, Word, link, link_word

_LINK_FIELDS = frozenset({"previous", "next", "syllable", "word"})

_NODE_TYPES: dict[str, type] = {
    "Word": Word,
    "Syllable": Syllable,
    "Cluster": Cluster,
}


def to_dict(unit: Unit) -> dict[str, Any]:
    """Convert a unit and its children to a dict with a ``_type`` field."""
    result: dict[str, Any] = {"_type": type(unit).__name__}
    for f in fields(unit):
        if f.name in _LINK_FIELDS:
            continue
        value = getattr(unit, f.name)
        if isinstance(value, list):
            value = [to_dict(child) for child in value]
        result[f.name] = value
    return result


def from_dict(data: dict[str, Any]) -> Unit:
    """Rebuild a unit from ``to_dict`` output.

    Raises:
        ValueError: Unknown ``_type``
    """
    type_name = data.get("_type")
    cls = _NODE_TYPES.get(type_name)  # type: ignore[arg-type]
    if cls is None:
        raise ValueError(f"Unknown node type: {type_name!r}")

    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key == "_type":
            continue
        if key in ("syllables", "clusters"):
            value = [from_dict(child) for child in value]
        kwargs[key] = value
    unit = cls(**kwargs)
    if isinstance(unit, Word):
        link_word(unit)
    return unit


def to_json(words: list[Word], *, indent: int | None = None) -> str:
    """Serialize segmented words to a JSON string."""
    return json.dumps(
        [to_dict(word) for word in words],
        sort_keys=True,
        ensure_ascii=False,
        indent=indent,
    )


def from_json(source: str) -> list[Word]:
    """Deserialize words produced by ``to_json`` and relink them."""
    words = [from_dict(item) for item in json.loads(source)]
    link(words)
    return words  # type: ignore[return-value]
