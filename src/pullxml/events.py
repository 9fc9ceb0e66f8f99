"""Event kinds and typed event values produced by the reader.

``EventKind`` is what ``Reader.next()`` returns. The dataclasses below are
a tagged union over the non-terminal kinds: each carries only the fields
that are valid for its kind, so a caller iterating typed events cannot
read stale data left over from a different event.

Thread Safety:
Events are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass
from enum import Enum, auto


class EventKind(Enum):
    """Lexical event kinds.

    NONE is both the terminal state (end of input or malformed markup) and
    the transient state before the first event is primed.

    """

    NONE = auto()
    DOCUMENT_BEGIN = auto()  # <?xml version="..." encoding="..."?>
    ELEMENT_BEGIN = auto()  # <name ...>
    ELEMENT_END = auto()  # </name>
    COMMENT = auto()  # <!-- text -->
    CHARACTERS = auto()  # text between tags


@dataclass(frozen=True, slots=True)
class Event:
    """Base class for typed events."""

    @property
    def kind(self) -> EventKind:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class DocumentBegin(Event):
    """Document declaration with its captured version and encoding."""

    version: str
    encoding: str

    @property
    def kind(self) -> EventKind:
        return EventKind.DOCUMENT_BEGIN


@dataclass(frozen=True, slots=True)
class ElementBegin(Event):
    """Start tag.

    ``body`` is the raw tag interior, attributes included; ``name`` is its
    leading non-whitespace run.

    """

    name: str
    body: str

    @property
    def kind(self) -> EventKind:
        return EventKind.ELEMENT_BEGIN


@dataclass(frozen=True, slots=True)
class ElementEnd(Event):
    """End tag."""

    name: str

    @property
    def kind(self) -> EventKind:
        return EventKind.ELEMENT_END


@dataclass(frozen=True, slots=True)
class Comment(Event):
    """Comment body without the ``<!--`` and ``-->`` delimiters."""

    text: str

    @property
    def kind(self) -> EventKind:
        return EventKind.COMMENT


@dataclass(frozen=True, slots=True)
class Characters(Event):
    """Character data, verbatim."""

    text: str

    @property
    def kind(self) -> EventKind:
        return EventKind.CHARACTERS


__all__ = [
    "EventKind",
    "Event",
    "DocumentBegin",
    "ElementBegin",
    "ElementEnd",
    "Comment",
    "Characters",
]
