"""Tests for TextBuffer."""

from pullxml.buffer import TextBuffer


class TestTextBuffer:
    def test_append_and_value(self) -> None:
        buf = TextBuffer()
        buf.append("a").append("b").append("")
        assert buf.value == "ab"
        assert len(buf) == 2

    def test_value_cached_until_mutation(self) -> None:
        buf = TextBuffer("ab")
        first = buf.value
        assert buf.value is first
        buf.append("c")
        assert buf.value == "abc"

    def test_clear(self) -> None:
        buf = TextBuffer("abc")
        buf.clear()
        assert buf.value == ""
        assert not buf
        assert len(buf) == 0

    def test_assign_replaces(self) -> None:
        buf = TextBuffer("old")
        assert buf.assign("new").value == "new"

    def test_search_and_slice(self) -> None:
        buf = TextBuffer('version="1.0"')
        assert buf.find('"') == 8
        assert buf.find('"', 9) == 12
        assert buf.find("missing") == -1
        assert buf.slice(9, 12) == "1.0"
        assert buf.startswith("version")
        assert buf.endswith('"')

    def test_repr(self) -> None:
        buf = TextBuffer("x")
        assert repr(buf) == "TextBuffer('x')"
