"""Lexing primitives for the reader.

Each scanner clears its target buffer, fills it from the cursor, and
returns the buffer's value, or None when the stream ends before the
construct is complete. Classification happens after a whole tag body has
been captured; tag bodies are short, so nothing is streamed partially.

No regex in the hot path.

"""

from __future__ import annotations

from pullxml.buffer import TextBuffer
from pullxml.cursor import CharCursor
from pullxml.events import EventKind

TAG_OPEN = "<"
TAG_CLOSE = ">"
QUOTE = '"'

DECLARATION_PREFIX = "?xml"
END_TAG_PREFIX = "/"
COMMENT_PREFIX = "!--"
COMMENT_SUFFIX = "--"

# Whitespace that ends an element name
NAME_TERMINATORS = frozenset(" \t\n\v\f\r")


def parse_element(cursor: CharCursor, body: TextBuffer) -> str | None:
    """Scan one ``<...>`` construct and return its interior.

    Characters before the first ``<`` are skipped. The delimiters are not
    included in the result.

    Args:
        cursor: Character source
        body: Buffer receiving the tag body (cleared first)

    Returns:
        The tag body, or None if the stream ends before ``>``.
    """
    body.clear()

    inside = False
    while (ch := cursor.get_char()) is not None:
        if not inside:
            if ch == TAG_OPEN:
                inside = True
        elif ch == TAG_CLOSE:
            return body.value
        else:
            body.append(ch)
    return None


def parse_text(cursor: CharCursor, text: TextBuffer) -> str | None:
    """Scan character data up to, not including, the next ``<``.

    The ``<`` that ends the run is pushed back onto the cursor so the next
    tag scan sees it.

    Args:
        cursor: Character source
        text: Buffer receiving the text (cleared first)

    Returns:
        The text run (possibly empty), or None if the stream ends first.
    """
    text.clear()

    while (ch := cursor.get_char()) is not None:
        if ch == TAG_OPEN:
            cursor.unget_char(ch)
            return text.value
        text.append(ch)
    return None


def parse_key_value(data: TextBuffer, key: str, value: TextBuffer) -> str | None:
    """Extract the double-quoted value that follows ``key`` in ``data``.

    Not an attribute parser: no escapes, no single quotes, no unquoted
    values, first occurrence of ``key`` wins. ``value`` is only touched on
    success.

    Args:
        data: Tag body to search
        key: Key name, e.g. ``"version"``
        value: Buffer receiving the extracted value

    Returns:
        The value, or None if the key or either quote is missing.

    Example:
        >>> body = TextBuffer('?xml version="1.0"?')
        >>> parse_key_value(body, "version", TextBuffer())
        '1.0'
    """
    pos = data.find(key)
    if pos < 0:
        return None

    begin = data.find(QUOTE, pos + len(key))
    if begin < 0:
        return None
    begin += 1

    end = data.find(QUOTE, begin)
    if end < 0:
        return None

    return value.assign(data.slice(begin, end)).value


def classify_tag(body: TextBuffer) -> EventKind:
    """Classify a captured tag body by its shape.

    Checked in priority order: declaration, end tag, comment, start tag.
    Self-closing tags are not recognized; ``b/`` is a start tag.
    """
    size = len(body)
    if size > 4 and body.startswith(DECLARATION_PREFIX):
        return EventKind.DOCUMENT_BEGIN
    if size > 1 and body.startswith(END_TAG_PREFIX):
        return EventKind.ELEMENT_END
    if size > 5 and body.startswith(COMMENT_PREFIX) and body.endswith(COMMENT_SUFFIX):
        return EventKind.COMMENT
    return EventKind.ELEMENT_BEGIN


def leading_name(body: str) -> str:
    """Return the leading run of characters of ``body`` up to ASCII whitespace.

    Only space, tab, newline, vertical tab, form feed and carriage return
    end a name; other Unicode separators are part of it.
    """
    end = 0
    size = len(body)
    while end < size and body[end] not in NAME_TERMINATORS:
        end += 1
    return body[:end]


__all__ = [
    "parse_element",
    "parse_text",
    "parse_key_value",
    "classify_tag",
    "leading_name",
]
