"""Exception classes for pullxml.

End of input and malformed markup are not exceptions: both surface as
``EventKind.NONE`` from ``Reader.next()``. Exceptions are reserved for
caller contract violations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pullxml.events import EventKind


class PullXmlError(Exception):
    """Base exception for all pullxml errors.

    Subclass this for specific error categories.
    """

    pass


class ReaderContractError(PullXmlError):
    """A reader was used in a way its contract forbids.

    Raised for a missing stream, or operations on a closed reader.
    """

    pass


class EventMismatchError(ReaderContractError):
    """A typed accessor was called under the wrong current event.

    Only raised when ``ReaderConfig.strict_accessors`` is enabled;
    lenient readers log a warning and return ``None`` instead.
    """

    def __init__(
        self,
        accessor: str,
        expected: tuple[EventKind, ...],
        actual: EventKind,
    ) -> None:
        """Initialize event mismatch error.

        Args:
            accessor: Name of the accessor that was called
            expected: Event kinds under which the accessor is valid
            actual: The reader's current event kind
        """
        self.accessor = accessor
        self.expected = expected
        self.actual = actual

        wanted = " or ".join(kind.name for kind in expected)
        super().__init__(f"{accessor}() requires {wanted}, current event is {actual.name}")


class ReaderClosedError(ReaderContractError):
    """Operation attempted on a reader that has been closed."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot call {operation}() on a closed reader")


class PushbackOverflowError(PullXmlError):
    """A second character was pushed back before the first was drained.

    The cursor's pushback slot holds exactly one character.
    """

    def __init__(self, pending: str, rejected: str) -> None:
        """Initialize pushback overflow error.

        Args:
            pending: Character already held in the pushback slot
            rejected: Character whose pushback was refused
        """
        self.pending = pending
        self.rejected = rejected
        super().__init__(
            f"Pushback slot already holds {pending!r}; cannot push back {rejected!r}"
        )
