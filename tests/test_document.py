"""Tests for the document builders."""

import pytest

from pyson_core import (
    NamedValue,
    VFloat,
    VInt,
    VList,
    VStr,
    check_unique_names,
    encode_document,
    parse_document,
    parse_document_as_map,
)
from pyson_core.errors import (
    DocumentError,
    DuplicateNameError,
    EntryError,
    InvalidNumberError,
    MalformedEntryError,
)


SAMPLE = "host:str:localhost\nport:int:8080\n\nratio:float:0.75\ntags:list:a(*)b\n"


# ---------------------------------------------------------------------------
# parse_document
# ---------------------------------------------------------------------------

def test_two_entries():
    entries = parse_document("a:int:1\nb:int:2")
    assert entries == [NamedValue("a", VInt(1)), NamedValue("b", VInt(2))]


def test_keeps_line_order():
    names = [nv.name for nv in parse_document("z:int:1\na:int:2\nm:int:3")]
    assert names == ["z", "a", "m"]


def test_blank_lines_skipped():
    entries = parse_document(SAMPLE)
    assert [nv.name for nv in entries] == ["host", "port", "ratio", "tags"]
    assert entries[3].value == VList(("a", "b"))


@pytest.mark.parametrize("text", ["", "\n", "\n\n"])
def test_empty_document(text):
    assert parse_document(text) == []


def test_duplicate_name():
    with pytest.raises(DuplicateNameError) as exc_info:
        parse_document("a:int:1\na:int:2")
    assert exc_info.value.name == "a"


def test_duplicate_name_different_types():
    with pytest.raises(DuplicateNameError):
        parse_document("a:int:1\nb:str:x\na:str:y")


def test_bad_line_wrapped_with_index():
    with pytest.raises(EntryError) as exc_info:
        parse_document("a:int:1\n\nb:int:oops\nc:int:3")
    err = exc_info.value
    assert err.line_index == 2
    assert isinstance(err.cause, InvalidNumberError)
    assert err.__cause__ is err.cause
    assert "line 3" in str(err)


def test_first_error_wins():
    with pytest.raises(EntryError) as exc_info:
        parse_document("garbage\na:int:x")
    assert isinstance(exc_info.value.cause, MalformedEntryError)


def test_entry_error_beats_duplicate():
    with pytest.raises(EntryError):
        parse_document("a:int:1\na:int:2\nbroken")


def test_document_errors_share_base():
    for text in ("a:int:1\na:int:1", "x"):
        with pytest.raises(DocumentError):
            parse_document(text)


# ---------------------------------------------------------------------------
# parse_document_as_map
# ---------------------------------------------------------------------------

def test_as_map():
    mapping = parse_document_as_map(SAMPLE)
    assert mapping == {
        "host": VStr("localhost"),
        "port": VInt(8080),
        "ratio": VFloat(0.75),
        "tags": VList(("a", "b")),
    }


def test_as_map_empty():
    assert parse_document_as_map("\n\n") == {}


def test_as_map_duplicate():
    with pytest.raises(DuplicateNameError):
        parse_document_as_map("a:int:1\na:int:2")


# ---------------------------------------------------------------------------
# check_unique_names / encode_document
# ---------------------------------------------------------------------------

def test_check_unique_names_ok():
    check_unique_names([NamedValue("a", VInt(1)), NamedValue("b", VInt(1))])


def test_check_unique_names_reports_first_repeat():
    entries = [
        NamedValue("a", VInt(1)),
        NamedValue("b", VInt(1)),
        NamedValue("b", VInt(2)),
        NamedValue("a", VInt(2)),
    ]
    with pytest.raises(DuplicateNameError) as exc_info:
        check_unique_names(entries)
    assert exc_info.value.name == "b"


def test_encode_document_round_trip():
    entries = parse_document(SAMPLE)
    text = encode_document(entries)
    assert text == "host:str:localhost\nport:int:8080\nratio:float:0.75\ntags:list:a(*)b"
    assert parse_document(text) == entries


def test_encode_document_from_mapping():
    text = encode_document({"a": VInt(1), "b": VStr("x")})
    assert parse_document_as_map(text) == {"a": VInt(1), "b": VStr("x")}


def test_encode_document_empty():
    assert encode_document([]) == ""


def test_encode_document_duplicate():
    with pytest.raises(DuplicateNameError):
        encode_document([NamedValue("a", VInt(1)), NamedValue("a", VInt(2))])
