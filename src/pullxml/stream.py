"""Input streams consumed by the reader.

The reader needs only three operations from its source: read one
character, peek at the next character without consuming it, and skip
forward. ``InputStream`` is that contract; the concrete classes here cover
in-memory text, encoded bytes, and open text or binary files.

End of stream is reported as ``None`` rather than a sentinel character,
so ``"\\0"`` is ordinary data.

Thread Safety:
    Streams hold a mutable position. Do not share one across threads.

"""

from __future__ import annotations

import codecs
from typing import BinaryIO, Protocol, TextIO, runtime_checkable


@runtime_checkable
class InputStream(Protocol):
    """Sequential character source with one character of lookahead."""

    def read_one(self) -> str | None:
        """Consume and return the next character, or None at end of stream."""
        ...

    def peek_one(self) -> str | None:
        """Return the next character without consuming it, or None."""
        ...

    def skip_forward(self, n: int) -> None:
        """Advance past ``n`` characters (stopping at end of stream)."""
        ...


class StringStream:
    """InputStream over an in-memory string.

    Usage:
            >>> st = StringStream("<a>")
            >>> st.peek_one(), st.read_one(), st.read_one()
            ('<', '<', 'a')

    """

    __slots__ = ("_source", "_source_len", "_pos")

    def __init__(self, source: str) -> None:
        self._source = source
        self._source_len = len(source)
        self._pos = 0

    def read_one(self) -> str | None:
        if self._pos >= self._source_len:
            return None
        ch = self._source[self._pos]
        self._pos += 1
        return ch

    def peek_one(self) -> str | None:
        if self._pos >= self._source_len:
            return None
        return self._source[self._pos]

    def skip_forward(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"skip_forward() requires n >= 0, got {n}")
        self._pos = min(self._pos + n, self._source_len)

    @property
    def position(self) -> int:
        """Index of the next character to be read."""
        return self._pos

    def __repr__(self) -> str:
        return f"StringStream(pos={self._pos}, len={self._source_len})"


class BytesStream(StringStream):
    """InputStream over encoded bytes, decoded up front.

    Args:
        data: Raw bytes
        encoding: Codec used to decode ``data``
        errors: Decoding error handler passed to ``bytes.decode``
    """

    __slots__ = ("encoding",)

    def __init__(
        self,
        data: bytes | bytearray,
        encoding: str = "utf-8",
        errors: str = "strict",
    ) -> None:
        self.encoding = encoding
        super().__init__(bytes(data).decode(encoding, errors))


class FileStream:
    """InputStream over an open text or binary file object.

    Reads one unit at a time and keeps decoded lookahead for ``peek_one``.
    Binary files (``read`` returning ``bytes``) are decoded incrementally
    with ``encoding``. The file is never closed by the stream.

    Args:
        fileobj: Object with a ``read(size)`` method returning ``str`` or ``bytes``
        encoding: Codec for binary files
        errors: Decoding error handler for binary files
    """

    __slots__ = ("_file", "_pending", "_eof", "_decoder", "encoding", "errors")

    def __init__(
        self,
        fileobj: TextIO | BinaryIO,
        encoding: str = "utf-8",
        errors: str = "strict",
    ) -> None:
        self._file = fileobj
        self._pending = ""
        self._eof = False
        self._decoder: codecs.IncrementalDecoder | None = None
        self.encoding = encoding
        self.errors = errors

    def _decode(self, raw: bytes) -> str:
        if self._decoder is None:
            self._decoder = codecs.getincrementaldecoder(self.encoding)(self.errors)
        return self._decoder.decode(raw, final=not raw)

    def _fill(self) -> None:
        # A multi-byte character may need several reads before it decodes
        while not self._pending and not self._eof:
            raw = self._file.read(1)
            text = self._decode(raw) if isinstance(raw, (bytes, bytearray)) else raw
            if text:
                self._pending += text
            if not raw:
                self._eof = True

    def read_one(self) -> str | None:
        self._fill()
        if not self._pending:
            return None
        ch = self._pending[0]
        self._pending = self._pending[1:]
        return ch

    def peek_one(self) -> str | None:
        self._fill()
        return self._pending[0] if self._pending else None

    def skip_forward(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"skip_forward() requires n >= 0, got {n}")
        for _ in range(n):
            if self.read_one() is None:
                break


def as_stream(
    source: InputStream | str | bytes | bytearray | TextIO | BinaryIO,
) -> InputStream:
    """Wrap ``source`` in the matching InputStream.

    Args:
        source: A string, bytes (decoded as UTF-8), a text or binary file
            object, or an existing InputStream (returned unchanged)

    Returns:
        An InputStream over ``source``

    Raises:
        TypeError: If ``source`` is none of the supported kinds
    """
    if isinstance(source, str):
        return StringStream(source)
    if isinstance(source, (bytes, bytearray)):
        return BytesStream(source)
    if isinstance(source, InputStream):
        return source
    if hasattr(source, "read"):
        return FileStream(source)
    raise TypeError(f"Cannot read markup from {type(source).__name__}")


__all__ = ["InputStream", "StringStream", "BytesStream", "FileStream", "as_stream"]
