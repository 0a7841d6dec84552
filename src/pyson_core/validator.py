"""Non-throwing well-formedness checks.

These only check syntax line by line: ``is_valid_document`` accepts a text
with repeated names even though :func:`pyson_core.parse_document` rejects it.
"""

from __future__ import annotations

import logging

from .codec import parse_entry
from .errors import PysonError
from .model import LINE_SEPARATOR

logger = logging.getLogger(__name__)


def is_valid_entry(line: str) -> bool:
    try:
        parse_entry(line)
    except PysonError as exc:
        logger.debug("Invalid pyson entry %r: %s", line, exc)
        return False
    return True


def is_valid_document(text: str) -> bool:
    return all(
        not line or is_valid_entry(line) for line in text.split(LINE_SEPARATOR)
    )
