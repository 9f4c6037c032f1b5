from __future__ import annotations

from io import StringIO

import pytest

from bookshelf.console import INVALID_INT_MESSAGE, LineReader


def _reader(text: str) -> tuple[LineReader, StringIO]:
    out = StringIO()
    return LineReader(stdin=StringIO(text), stdout=out), out


def test_read_int_trims_whitespace() -> None:
    reader, out = _reader("  1984  \n")
    assert reader.read_int("Year: ") == 1984
    assert out.getvalue() == "Year: "


def test_read_int_reprompts_until_valid() -> None:
    reader, out = _reader("abc\n\n12.5\n-7\n")

    assert reader.read_int("Year: ") == -7
    assert out.getvalue().count(INVALID_INT_MESSAGE) == 3
    assert out.getvalue().count("Year: ") == 4


def test_read_int_raises_on_end_of_input() -> None:
    reader, _ = _reader("nope\n")
    with pytest.raises(EOFError):
        reader.read_int("Year: ")


def test_read_str_trims_whitespace() -> None:
    reader, out = _reader("   The Hobbit \t\n")
    assert reader.read_str("Title: ") == "The Hobbit"
    assert out.getvalue() == "Title: "


def test_read_str_returns_empty_on_end_of_input() -> None:
    reader, _ = _reader("")
    assert reader.read_str("Title: ") == ""


def test_read_str_handles_last_line_without_newline() -> None:
    reader, _ = _reader("first\nsecond")
    assert reader.read_str("> ") == "first"
    assert reader.read_str("> ") == "second"


def test_read_optional_int_blank_keeps_default() -> None:
    reader, _ = _reader("   \n")
    assert reader.read_optional_int("Year [1965]: ", default=1965) == 1965


def test_read_optional_int_reprompts_then_parses() -> None:
    reader, out = _reader("soon\n 2001 \n")
    assert reader.read_optional_int("Year: ", default=0) == 2001
    assert INVALID_INT_MESSAGE in out.getvalue()


def test_read_optional_int_end_of_input_keeps_default() -> None:
    reader, _ = _reader("")
    assert reader.read_optional_int("Year: ", default=5) == 5
