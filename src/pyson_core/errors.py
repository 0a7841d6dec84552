"""Exception hierarchy for pyson Core."""

from __future__ import annotations


class PysonError(Exception):
    """Base class for every error raised by pyson Core."""


# ---------------------------------------------------------------------------
# Model errors
# ---------------------------------------------------------------------------

class InvalidTypeError(PysonError, ValueError):
    """Unknown type tag."""

    def __init__(self, tag: object) -> None:
        super().__init__(f"Invalid pyson type: {tag!r}")
        self.tag = tag


class UnsupportedValueTypeError(PysonError, TypeError):
    """Payload does not match any Value variant."""

    def __init__(self, payload: object, reason: str | None = None) -> None:
        msg = reason or f"Unsupported pyson value type: {type(payload).__name__}"
        super().__init__(msg)
        self.payload = payload


class InvalidListElementError(UnsupportedValueTypeError):
    """A list payload holds something other than a string."""

    def __init__(self, element: object, index: int) -> None:
        super().__init__(
            element,
            f"Lists in pyson must contain only strings "
            f"(item {index} is {type(element).__name__})",
        )
        self.element = element
        self.index = index


class InvalidArgumentError(PysonError, ValueError):
    """Bad input to a NamedValue constructor or mutator."""


# ---------------------------------------------------------------------------
# Entry syntax errors
# ---------------------------------------------------------------------------

class ParseError(PysonError, ValueError):
    """Base class for entry-level syntax errors."""


class EmbeddedNewlineError(ParseError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Pyson entries cannot contain newlines: {text!r}")
        self.line = text


class MalformedEntryError(ParseError):
    def __init__(self, line: str) -> None:
        super().__init__(f"Expected '<name>:<type>:<value>', got {line!r}")
        self.line = line


class InvalidNumberError(ParseError):
    def __init__(self, type_tag: str, raw_value: str) -> None:
        super().__init__(f"Invalid {type_tag} literal: {raw_value!r}")
        self.type_tag = type_tag
        self.raw_value = raw_value


# ---------------------------------------------------------------------------
# Document errors
# ---------------------------------------------------------------------------

class DocumentError(PysonError, ValueError):
    """Base class for document-level errors."""


class EntryError(DocumentError):
    """An entry failed to parse; wraps the underlying error."""

    def __init__(self, line_index: int, cause: PysonError) -> None:
        super().__init__(f"line {line_index + 1}: {cause}")
        self.line_index = line_index
        self.cause = cause


class DuplicateNameError(DocumentError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Duplicate name found: {name!r}")
        self.name = name


# ---------------------------------------------------------------------------
# File errors
# ---------------------------------------------------------------------------

class PysonFileNotFoundError(PysonError, FileNotFoundError):
    def __init__(self, path: object) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path
