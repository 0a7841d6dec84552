"""pyson Core — typed ``name:type:value`` line format."""

from .codec import encode_entry, parse_entry
from .document import (
    check_unique_names,
    encode_document,
    parse_document,
    parse_document_as_map,
)
from .errors import (
    DocumentError,
    DuplicateNameError,
    EmbeddedNewlineError,
    EntryError,
    InvalidArgumentError,
    InvalidListElementError,
    InvalidNumberError,
    InvalidTypeError,
    MalformedEntryError,
    ParseError,
    PysonError,
    PysonFileNotFoundError,
    UnsupportedValueTypeError,
)
from .files import load_document, load_document_as_map
from .model import (
    LIST_DELIMITER,
    Type,
    Value,
    VFloat,
    VInt,
    VList,
    VStr,
    is_value,
    to_value,
)
from .named_value import NamedValue
from .validator import is_valid_document, is_valid_entry

__all__ = [
    "parse_entry",
    "encode_entry",
    "parse_document",
    "parse_document_as_map",
    "check_unique_names",
    "encode_document",
    "load_document",
    "load_document_as_map",
    "is_valid_entry",
    "is_valid_document",
    "Type",
    "Value",
    "VInt",
    "VFloat",
    "VStr",
    "VList",
    "is_value",
    "to_value",
    "LIST_DELIMITER",
    "NamedValue",
    "PysonError",
    "InvalidTypeError",
    "UnsupportedValueTypeError",
    "InvalidListElementError",
    "InvalidArgumentError",
    "ParseError",
    "EmbeddedNewlineError",
    "MalformedEntryError",
    "InvalidNumberError",
    "DocumentError",
    "EntryError",
    "DuplicateNameError",
    "PysonFileNotFoundError",
]
