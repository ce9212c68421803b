"""Package loggers.

Every module logs through ``get_logger(__name__)`` so all records sit under
the ``hebrew_transliteration`` logger. Only debug records are emitted (feature
claims, divine-name matches, unpointed words); enable them with:

    logging.getLogger("hebrew_transliteration").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging

_ROOT = "hebrew_transliteration"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, under the package namespace.

    Names already inside the namespace are used as is, so ``__name__`` works
    from any module; short names such as ``"mapper"`` get the prefix. No
    handlers are installed.

        >>> get_logger("mapper").name
        'hebrew_transliteration.mapper'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
