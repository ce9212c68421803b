"""Exception classes for hebrew_transliteration.

Rendering a cluster never fails, and neither do ``sequence`` or ``remove``.
Errors come from configuration (a bad schema) or from strict segmentation.
Exceptions raised inside user transform callbacks are not wrapped.
"""

from __future__ import annotations


class TransliterationError(Exception):
    """Base exception for all hebrew_transliteration errors."""

    pass


class SchemaError(TransliterationError):
    """Invalid transliteration schema.

    Raised for unknown keys, mandatory keys that do not resolve to a string,
    feature patterns that do not compile, and malformed stress-marker
    settings.
    """

    def __init__(self, key: str | None, message: str) -> None:
        """Initialize schema error.

        Args:
            key: Schema key at fault (e.g., "shin", "additional_features")
            message: Description of the problem
        """
        self.key = key
        self.message = message
        prefix = f"[{key}] " if key else ""
        super().__init__(f"{prefix}{message}")


class SegmentationError(TransliterationError):
    """The segmenter refused a word in strict mode."""

    def __init__(self, message: str, word: str | None = None) -> None:
        """Initialize segmentation error.

        Args:
            message: Description of the failure
            word: Text of the offending word (optional)
        """
        self.message = message
        self.word = word
        suffix = f": {word!r}" if word is not None else ""
        super().__init__(f"{message}{suffix}")


__all__ = [
    "SchemaError",
    "SegmentationError",
    "TransliterationError",
]
