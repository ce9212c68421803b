"""ContextVar-based active schema.

``transliterate`` sets the schema for the duration of a call. The segmenter,
feature matcher, and mapper read it with ``get_schema`` so the schema never
has to be threaded through every helper.

Thread Safety:
    ContextVars are thread-local by design. Each thread (and asyncio task)
    has independent storage, so no locks are needed.

Usage:
    with schema_context(with_defaults(SBL, {"SHIN": "sh"})):
        words = Syllabifier().segment(text)
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from hebrew_transliteration.schema import SBL, Schema

_schema: ContextVar[Schema] = ContextVar("schema", default=SBL)


def get_schema() -> Schema:
    """Get the active schema for this thread/context. Defaults to SBL."""
    return _schema.get()


def set_schema(schema: Schema) -> None:
    """Set the active schema for the current context."""
    _schema.set(schema)


def reset_schema() -> None:
    """Reset the current context to the SBL schema."""
    _schema.set(SBL)


@contextmanager
def schema_context(schema: Schema) -> Iterator[None]:
    """Context manager for a temporary active schema.

    Restores the previous schema even if an exception is raised.

    Example:
        >>> with schema_context(Schema.from_dict({"SHIN": "sh"})):
        ...     get_schema().shin
        'sh'
    """
    previous = _schema.get()
    _schema.set(schema)
    try:
        yield
    finally:
        _schema.set(previous)


__all__ = [
    "get_schema",
    "reset_schema",
    "schema_context",
    "set_schema",
]
