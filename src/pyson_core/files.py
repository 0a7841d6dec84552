"""Loading pyson documents from disk."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .document import parse_document, parse_document_as_map
from .errors import PysonFileNotFoundError
from .model import Value
from .named_value import NamedValue

logger = logging.getLogger(__name__)


def _read_text(path: str | os.PathLike[str], encoding: str) -> str:
    try:
        with open(path, encoding=encoding) as fh:
            text = fh.read()
    except FileNotFoundError as exc:
        raise PysonFileNotFoundError(path) from exc
    logger.debug("Loaded %s (%d chars)", Path(path), len(text))
    return text


def load_document(
    path: str | os.PathLike[str], encoding: str = "utf-8"
) -> list[NamedValue]:
    """Read *path* and parse it with :func:`parse_document`."""
    return parse_document(_read_text(path, encoding))


def load_document_as_map(
    path: str | os.PathLike[str], encoding: str = "utf-8"
) -> dict[str, Value]:
    """Read *path* and parse it with :func:`parse_document_as_map`."""
    return parse_document_as_map(_read_text(path, encoding))
