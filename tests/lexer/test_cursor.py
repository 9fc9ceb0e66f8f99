"""Tests for the character cursor and its single-slot pushback."""

from __future__ import annotations

import pytest

from pullxml.buffer import TextBuffer
from pullxml.cursor import CharCursor
from pullxml.errors import PushbackOverflowError
from pullxml.lexing import parse_text
from pullxml.stream import StringStream


class TestGetAndPeek:
    """Basic consumption."""

    def test_get_char_sequence(self) -> None:
        cursor = CharCursor(StringStream("ab"))
        assert cursor.get_char() == "a"
        assert cursor.get_char() == "b"
        assert cursor.get_char() is None

    def test_peek_does_not_consume(self) -> None:
        cursor = CharCursor(StringStream("x"))
        assert cursor.peek_char() == "x"
        assert cursor.peek_char() == "x"
        assert cursor.get_char() == "x"
        assert cursor.peek_char() is None

    def test_nul_is_not_end_of_stream(self) -> None:
        cursor = CharCursor(StringStream("\0"))
        assert cursor.get_char() == "\0"
        assert cursor.get_char() is None


class TestPushback:
    """The pushback slot holds at most one character."""

    def test_unget_then_get(self) -> None:
        cursor = CharCursor(StringStream("b"))
        cursor.unget_char("a")
        assert cursor.pending == "a"
        assert cursor.peek_char() == "a"
        assert cursor.get_char() == "a"
        assert cursor.pending is None
        assert cursor.get_char() == "b"

    def test_second_unget_raises(self) -> None:
        cursor = CharCursor(StringStream(""))
        cursor.unget_char("<")
        with pytest.raises(PushbackOverflowError) as excinfo:
            cursor.unget_char("x")
        assert excinfo.value.pending == "<"
        assert excinfo.value.rejected == "x"
        # The original character is still pending
        assert cursor.get_char() == "<"

    def test_text_scan_pushes_back_tag_open_once(self) -> None:
        cursor = CharCursor(StringStream("hello<a>"))
        assert parse_text(cursor, TextBuffer()) == "hello"
        assert cursor.get_char() == "<"
        assert cursor.get_char() == "a"


class TestSeekAndOffset:
    """seek_char() and offset bookkeeping."""

    def test_seek_skips_one(self) -> None:
        cursor = CharCursor(StringStream("abc"))
        cursor.seek_char()
        assert cursor.get_char() == "b"
        assert cursor.offset == 2

    def test_seek_drains_pushback_first(self) -> None:
        cursor = CharCursor(StringStream("b"))
        cursor.unget_char("a")
        cursor.seek_char()
        assert cursor.get_char() == "b"

    def test_seek_at_end_is_noop(self) -> None:
        cursor = CharCursor(StringStream(""))
        cursor.seek_char()
        assert cursor.offset == 0
        assert cursor.get_char() is None

    def test_offset_accounts_for_pushback(self) -> None:
        cursor = CharCursor(StringStream("ab"))
        cursor.get_char()
        cursor.get_char()
        assert cursor.offset == 2
        cursor.unget_char("b")
        assert cursor.offset == 1
        cursor.get_char()
        assert cursor.offset == 2
