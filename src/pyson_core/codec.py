"""Entry codec: one pyson line <-> one NamedValue."""

from __future__ import annotations

import re

from .errors import EmbeddedNewlineError, InvalidNumberError, MalformedEntryError
from .model import (
    ENTRY_SEPARATOR,
    INT_MAX,
    INT_MIN,
    LINE_SEPARATOR,
    LIST_DELIMITER,
    Type,
    to_value,
)
from .named_value import NamedValue


_INT_RE = re.compile(r"^[+-]?\d+$")
_INT_MAX_DIGITS = len(str(INT_MAX))
_FLOAT_RE = re.compile(
    r"^[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|nan)$"
)


# ---------------------------------------------------------------------------
# Content decoding
# ---------------------------------------------------------------------------

def _parse_int(raw: str) -> int:
    # re's \d accepts non-ASCII digits, which int() also understands
    if not _INT_RE.match(raw) or not raw.isascii():
        raise InvalidNumberError("int", raw)
    # bound the digit count first: int() refuses very long strings
    if len(raw.lstrip("+-").lstrip("0")) > _INT_MAX_DIGITS:
        raise InvalidNumberError("int", raw)
    value = int(raw)
    if not INT_MIN <= value <= INT_MAX:
        raise InvalidNumberError("int", raw)
    return value


def _parse_float(raw: str) -> float:
    if not _FLOAT_RE.match(raw) or not raw.isascii():
        raise InvalidNumberError("float", raw)
    return float(raw)


def decode_content(type_: Type, raw: str) -> object:
    """Turn raw wire content into a plain payload for *type_*."""
    if type_ is Type.Int:
        return _parse_int(raw)
    if type_ is Type.Float:
        return _parse_float(raw)
    if type_ is Type.List:
        return raw.split(LIST_DELIMITER)
    return raw


# ---------------------------------------------------------------------------
# parse / encode
# ---------------------------------------------------------------------------

def parse_entry(line: str) -> NamedValue:
    """Parse one ``<name>:<type>:<content>`` line.

    Only the first two colons are structural; the content keeps any
    further colons. Raises a PysonError subclass on any failure.
    """
    if LINE_SEPARATOR in line:
        raise EmbeddedNewlineError(line)

    fields = line.split(ENTRY_SEPARATOR, 2)
    if len(fields) < 3:
        raise MalformedEntryError(line)
    name, tag, raw = fields

    type_ = Type.from_tag(tag)
    return NamedValue(name, to_value(decode_content(type_, raw)))


def encode_entry(entry: NamedValue) -> str:
    """Inverse of :func:`parse_entry`."""
    return entry.encode()
