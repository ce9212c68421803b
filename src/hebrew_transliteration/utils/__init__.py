"""Utility modules for hebrew_transliteration.

Provides:
- logger: get_logger for namespaced logging
- text: strip_for_matching, lengthen, shorten
"""

from hebrew_transliteration.utils.logger import get_logger
from hebrew_transliteration.utils.text import lengthen, shorten, strip_for_matching

__all__ = [
    "get_logger",
    "lengthen",
    "shorten",
    "strip_for_matching",
]
