"""Document builders: whole pyson texts as ordered lists or name mappings."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from .codec import parse_entry
from .errors import DuplicateNameError, EntryError, PysonError
from .model import LINE_SEPARATOR, Value
from .named_value import NamedValue

logger = logging.getLogger(__name__)


def check_unique_names(entries: Iterable[NamedValue]) -> None:
    """Raise DuplicateNameError on the first name seen twice."""
    seen: set[str] = set()
    for entry in entries:
        if entry.name in seen:
            logger.debug("Duplicate name %r in document", entry.name)
            raise DuplicateNameError(entry.name)
        seen.add(entry.name)


# -- Parsing -----------------------------------------------------------------

def parse_document(text: str) -> list[NamedValue]:
    """Parse *text* into NamedValues, in line order.

    Blank lines are skipped. The first bad line aborts the parse with an
    EntryError carrying its 0-based index; names must be unique across
    the whole document.
    """
    entries: list[NamedValue] = []
    for index, line in enumerate(text.split(LINE_SEPARATOR)):
        if not line:
            continue
        try:
            entries.append(parse_entry(line))
        except PysonError as exc:
            logger.debug("Rejected line %d: %s", index + 1, exc)
            raise EntryError(index, exc) from exc

    check_unique_names(entries)
    logger.debug("Parsed pyson document with %d entries", len(entries))
    return entries


def parse_document_as_map(text: str) -> dict[str, Value]:
    """Same as :func:`parse_document` but keyed by name."""
    return {entry.name: entry.value for entry in parse_document(text)}


# -- Encoding ----------------------------------------------------------------

def encode_document(entries: Iterable[NamedValue] | Mapping[str, Value]) -> str:
    """Encode NamedValues (or a name → Value mapping) as a pyson text.

    Lines are joined with ``\\n``; there is no trailing newline.
    """
    if isinstance(entries, Mapping):
        items = [NamedValue(name, value) for name, value in entries.items()]
    else:
        items = list(entries)
    check_unique_names(items)
    return LINE_SEPARATOR.join(entry.encode() for entry in items)
