"""
pullxml — Pull-style lexer for a small subset of XML

The caller drives a cursor one event at a time and decides whether to
descend, skip, or stop. Events are the document declaration, start tags,
end tags, comments, and character data. Truncated or malformed input ends
the event stream instead of raising. Zero runtime dependencies.

Quick Start:
    >>> from pullxml import EventKind, open_reader
    >>> reader = open_reader("<greeting>hello</greeting>")
    >>> while reader.has_next():
    ...     if reader.current_event() is EventKind.CHARACTERS:
    ...         print(reader.characters_text())
    ...     reader.next()
    hello

    >>> # Or iterate typed events
    >>> from pullxml import iter_events
    >>> [e.kind.name for e in iter_events("<a><!-- c --></a>")]
    ['ELEMENT_BEGIN', 'COMMENT', 'ELEMENT_END']

Not supported: namespaces, entities, CDATA, DTDs, self-closing tag
detection, and attribute parsing (attribute accessors always report zero
attributes).
"""

from pullxml.buffer import TextBuffer
from pullxml.config import (
    ReaderConfig,
    get_reader_config,
    reader_config_context,
    reset_reader_config,
    set_reader_config,
)
from pullxml.cursor import CharCursor
from pullxml.errors import (
    EventMismatchError,
    PullXmlError,
    PushbackOverflowError,
    ReaderClosedError,
    ReaderContractError,
)
from pullxml.events import (
    Characters,
    Comment,
    DocumentBegin,
    ElementBegin,
    ElementEnd,
    Event,
    EventKind,
)
from pullxml.reader import Reader, iter_events, open_reader
from pullxml.stream import BytesStream, FileStream, InputStream, StringStream, as_stream

__version__ = "0.1.0"

__all__ = [
    # Reader
    "Reader",
    "open_reader",
    "iter_events",
    # Events
    "EventKind",
    "Event",
    "DocumentBegin",
    "ElementBegin",
    "ElementEnd",
    "Comment",
    "Characters",
    # Streams
    "InputStream",
    "StringStream",
    "BytesStream",
    "FileStream",
    "as_stream",
    # Building blocks
    "CharCursor",
    "TextBuffer",
    # Configuration
    "ReaderConfig",
    "get_reader_config",
    "set_reader_config",
    "reset_reader_config",
    "reader_config_context",
    # Errors
    "PullXmlError",
    "ReaderContractError",
    "EventMismatchError",
    "ReaderClosedError",
    "PushbackOverflowError",
    "__version__",
]
