"""Character cursor with single-slot pushback.

Wraps an InputStream so the lexer can "unget" one character. The text
lexer uses this to hand the ``<`` that ends a text run back to the next
tag scan.

Thread Safety:
Cursor instances are owned by a single Reader.

"""

from __future__ import annotations

from pullxml.errors import PushbackOverflowError
from pullxml.stream import InputStream


class CharCursor:
    """Cursor over an InputStream with at most one pending pushback.

    Usage:
            >>> from pullxml.stream import StringStream
            >>> cur = CharCursor(StringStream("ab"))
            >>> cur.get_char()
            'a'
            >>> cur.unget_char("a")
            >>> cur.peek_char(), cur.get_char(), cur.get_char()
            ('a', 'a', 'b')
            >>> cur.get_char() is None
            True

    """

    __slots__ = ("_stream", "_pushback", "_offset")

    def __init__(self, stream: InputStream) -> None:
        self._stream = stream
        self._pushback: str | None = None
        self._offset = 0

    def get_char(self) -> str | None:
        """Consume one character; pushback is drained first.

        Returns:
            The character, or None at end of stream.
        """
        if self._pushback is not None:
            ch = self._pushback
            self._pushback = None
            self._offset += 1
            return ch

        ch = self._stream.read_one()
        if ch is not None:
            self._offset += 1
        return ch

    def peek_char(self) -> str | None:
        """Return the next character without consuming it."""
        if self._pushback is not None:
            return self._pushback
        return self._stream.peek_one()

    def seek_char(self) -> None:
        """Consume the next character without materializing it."""
        if self._pushback is not None:
            self._pushback = None
            self._offset += 1
            return
        if self._stream.peek_one() is not None:
            self._offset += 1
        self._stream.skip_forward(1)

    def unget_char(self, ch: str) -> None:
        """Push ``ch`` back so the next get/peek returns it.

        Raises:
            PushbackOverflowError: If a character is already pending.
        """
        if self._pushback is not None:
            raise PushbackOverflowError(self._pushback, ch)
        self._pushback = ch
        self._offset -= 1

    @property
    def pending(self) -> str | None:
        """The character held in the pushback slot, if any."""
        return self._pushback

    @property
    def offset(self) -> int:
        """Number of characters consumed so far."""
        return self._offset
