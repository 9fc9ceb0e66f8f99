"""Pull reader: a cursor over an input stream that lexes on demand.

The caller drives the reader one event at a time and queries the typed
accessor that matches the current event. Opening a reader primes the
first event.

    >>> reader = open_reader('<?xml version="1.0" encoding="utf-8"?><a>hi</a>')
    >>> reader.current_event()
    <EventKind.DOCUMENT_BEGIN: 2>
    >>> reader.next(), reader.element_name()
    (<EventKind.ELEMENT_BEGIN: 3>, 'a')
    >>> reader.next(), reader.characters_text()
    (<EventKind.CHARACTERS: 6>, 'hi')

End of input and malformed markup both end the event stream with
``EventKind.NONE``; neither raises. Once ``next()`` has returned NONE the
reader is exhausted and should be closed.

Thread Safety:
    A Reader holds one mutable cursor and one set of scratch buffers.
    It is not safe for concurrent use; serialize access externally.

"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import BinaryIO, TextIO

from pullxml.buffer import TextBuffer
from pullxml.config import ReaderConfig, get_reader_config
from pullxml.cursor import CharCursor
from pullxml.errors import EventMismatchError, ReaderClosedError, ReaderContractError
from pullxml.events import (
    Characters,
    Comment,
    DocumentBegin,
    ElementBegin,
    ElementEnd,
    Event,
    EventKind,
)
from pullxml.lexing import (
    COMMENT_PREFIX,
    COMMENT_SUFFIX,
    END_TAG_PREFIX,
    TAG_OPEN,
    classify_tag,
    leading_name,
    parse_element,
    parse_key_value,
    parse_text,
)
from pullxml.stream import InputStream, as_stream
from pullxml.utils.logger import get_logger

logger = get_logger(__name__)

_ELEMENT_EVENTS = (EventKind.ELEMENT_BEGIN, EventKind.ELEMENT_END)


class Reader:
    """Pull-style lexer over a restricted subset of XML.

    Usage:
            >>> from pullxml.stream import StringStream
            >>> reader = Reader(StringStream("<!-- note --><a/>"))
            >>> reader.current_event(), reader.comment_text()
            (<EventKind.COMMENT: 5>, ' note ')
            >>> reader.next(), reader.element_name()
            (<EventKind.ELEMENT_BEGIN: 3>, 'a/')

    Attribute accessors are stubs: ``attribute_count()`` is always 0.

    """

    __slots__ = (
        "_stream",
        "_cursor",
        "_event",
        "_config",
        # Scratch buffers, cleared and refilled by each lexing step
        "_tag_body",
        "_name",
        "_name_cached",  # _name is valid for the current event
        "_text",
        "_version",
        "_encoding",
    )

    def __init__(self, stream: InputStream | None, *, config: ReaderConfig | None = None) -> None:
        """Open a reader on ``stream`` and prime the first event.

        Args:
            stream: Character source. The reader never closes it.
            config: Reader configuration (defaults to the active context config)

        Raises:
            ReaderContractError: If ``stream`` is None
        """
        if stream is None:
            raise ReaderContractError("Reader requires an input stream")

        self._stream: InputStream | None = stream
        self._cursor: CharCursor | None = CharCursor(stream)
        self._event = EventKind.NONE
        self._config = config if config is not None else get_reader_config()

        self._tag_body = TextBuffer()
        self._name = TextBuffer()
        self._name_cached = False
        self._text = TextBuffer()
        self._version = TextBuffer()
        self._encoding = TextBuffer()

        self.next()

    @classmethod
    def open(cls, stream: InputStream | None, *, config: ReaderConfig | None = None) -> Reader:
        """Alias for the constructor, mirroring ``close()``."""
        return cls(stream, config=config)

    def close(self) -> None:
        """Release scratch buffers and detach the stream without closing it.

        Closing twice is a no-op.
        """
        if self._cursor is None:
            return
        self._stream = None
        self._cursor = None
        self._event = EventKind.NONE
        self._name_cached = False
        for buf in (self._tag_body, self._name, self._text, self._version, self._encoding):
            buf.clear()

    @property
    def closed(self) -> bool:
        return self._cursor is None

    @property
    def config(self) -> ReaderConfig:
        return self._config

    def __enter__(self) -> Reader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # =========================================================================
    # Iteration
    # =========================================================================

    def has_next(self) -> bool:
        """Return True while the current event is not NONE."""
        self._require_open("has_next")
        return self._event is not EventKind.NONE

    def next(self) -> EventKind:
        """Advance to the next event.

        Returns:
            The new current event kind; NONE at end of input or on a
            truncated or malformed construct.
        """
        cursor = self._require_open("next")
        self._event = EventKind.NONE
        self._name_cached = False

        ch = cursor.peek_char()
        if ch is None:
            return self._event

        if ch == TAG_OPEN:
            if parse_element(cursor, self._tag_body) is None:
                logger.debug("Unterminated tag at offset %d", cursor.offset)
                return self._event

            kind = classify_tag(self._tag_body)
            if kind is EventKind.DOCUMENT_BEGIN and not self._lex_declaration():
                return self._event
            self._event = kind
        else:
            if parse_text(cursor, self._text) is None:
                logger.debug("Character data without a following tag at offset %d", cursor.offset)
                return self._event
            self._event = EventKind.CHARACTERS

        if self._config.log_events and logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s at offset %d", self._event.name, cursor.offset)
        return self._event

    def _lex_declaration(self) -> bool:
        body = self._tag_body
        version = parse_key_value(body, "version", self._version)
        encoding = parse_key_value(body, "encoding", self._encoding)
        if version is None or encoding is None:
            logger.debug("Document declaration missing version or encoding: %r", body.value)
            return False

        # Skip ahead to the first element; the text itself is discarded
        parse_text(self._cursor, self._text)
        return True

    def current_event(self) -> EventKind:
        self._require_open("current_event")
        return self._event

    def __iter__(self) -> Iterator[Event]:
        """Yield typed events from the current one until NONE."""
        while self.has_next():
            event = self.event_value()
            if event is not None:
                yield event
            self.next()

    def event_value(self) -> Event | None:
        """Return the current event as a typed value, or None at NONE."""
        kind = self.current_event()
        if kind is EventKind.DOCUMENT_BEGIN:
            return DocumentBegin(version=self._version.value, encoding=self._encoding.value)
        if kind is EventKind.ELEMENT_BEGIN:
            return ElementBegin(name=self.element_name() or "", body=self._tag_body.value)
        if kind is EventKind.ELEMENT_END:
            return ElementEnd(name=self.element_name() or "")
        if kind is EventKind.COMMENT:
            return Comment(text=self.comment_text() or "")
        if kind is EventKind.CHARACTERS:
            return Characters(text=self._text.value)
        return None

    # =========================================================================
    # Typed accessors
    # =========================================================================

    def version(self) -> str:
        """Version captured at the most recent declaration ("" if none)."""
        self._require_open("version")
        return self._version.value

    def encoding(self) -> str:
        """Encoding captured at the most recent declaration ("" if none)."""
        self._require_open("encoding")
        return self._encoding.value

    def element_name(self) -> str | None:
        """Name of the current start or end tag.

        End tags drop the leading ``/``. Start tags yield the leading
        non-whitespace run of the tag body, so ``<foo attr="x">`` gives
        ``foo``.

        Returns:
            The name, or None for an empty or all-whitespace start tag.
        """
        if not self._check_event("element_name", _ELEMENT_EVENTS):
            return None

        if not self._name_cached:
            body = self._tag_body.value
            if self._event is EventKind.ELEMENT_END:
                self._name.assign(body[len(END_TAG_PREFIX) :])
            else:
                self._name.assign(leading_name(body))
            self._name_cached = True

        if self._event is EventKind.ELEMENT_BEGIN and not self._name:
            return None
        return self._name.value

    def comment_text(self) -> str | None:
        """Body of the current comment without its delimiters."""
        if not self._check_event("comment_text", (EventKind.COMMENT,)):
            return None

        body = self._tag_body
        size = len(body)
        if size < len(COMMENT_PREFIX) + len(COMMENT_SUFFIX) + 1:
            return None
        return self._text.assign(body.slice(len(COMMENT_PREFIX), size - len(COMMENT_SUFFIX))).value

    def characters_text(self) -> str | None:
        """Text of the current character-data run, verbatim."""
        if not self._check_event("characters_text", (EventKind.CHARACTERS,)):
            return None
        return self._text.value

    def attribute_count(self) -> int:
        """Attributes are not parsed; always 0."""
        return 0

    def attribute_name(self, index: int) -> str | None:
        """Attributes are not parsed; always None."""
        return None

    def attribute_value(self, index: int) -> str | None:
        """Attributes are not parsed; always None."""
        return None

    # =========================================================================
    # Contract checks
    # =========================================================================

    def _require_open(self, operation: str) -> CharCursor:
        if self._cursor is None:
            raise ReaderClosedError(operation)
        return self._cursor

    def _check_event(self, accessor: str, expected: tuple[EventKind, ...]) -> bool:
        self._require_open(accessor)
        if self._event in expected:
            return True
        if self._config.strict_accessors:
            raise EventMismatchError(accessor, expected, self._event)
        logger.warning(
            "%s() called under %s; valid only under %s",
            accessor,
            self._event.name,
            "/".join(kind.name for kind in expected),
        )
        return False

    def __repr__(self) -> str:
        if self.closed:
            return "Reader(closed)"
        return f"Reader(event={self._event.name})"


def open_reader(
    source: InputStream | str | bytes | bytearray | TextIO | BinaryIO,
    *,
    config: ReaderConfig | None = None,
) -> Reader:
    """Open a reader on a string, bytes, text file, or InputStream.

    Example:
        >>> open_reader("<a>").element_name()
        'a'
    """
    return Reader(as_stream(source), config=config)


def iter_events(
    source: InputStream | str | bytes | bytearray | TextIO | BinaryIO,
    *,
    config: ReaderConfig | None = None,
) -> Iterator[Event]:
    """Yield typed events from ``source`` until the stream is exhausted.

    Example:
        >>> [type(e).__name__ for e in iter_events("<a>x</a>")]
        ['ElementBegin', 'Characters', 'ElementEnd']
    """
    with open_reader(source, config=config) as reader:
        yield from reader


__all__ = ["Reader", "open_reader", "iter_events"]
