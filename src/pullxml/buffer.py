"""Growable text buffer for lexer scratch space.

Appends characters to a list and joins on demand: O(n) total vs O(n²)
for repeated string concatenation. The joined value is cached until the
next mutation, so repeated reads of an unchanged buffer are free.

Thread Safety:
TextBuffer instances are owned by a single Reader.
No shared mutable state.

"""

from __future__ import annotations


class TextBuffer:
    """Efficient string accumulator with clear-then-fill semantics.

    Usage:
            >>> buf = TextBuffer()
            >>> buf.append("ab").append("c")
            TextBuffer('abc')
            >>> buf.value
            'abc'
            >>> buf.assign("xyz").value
            'xyz'

    """

    __slots__ = ("_parts", "_cache", "_size")

    def __init__(self, initial: str = "") -> None:
        self._parts: list[str] = []
        self._cache: str | None = None
        self._size = 0
        if initial:
            self.append(initial)

    def append(self, s: str) -> TextBuffer:
        """Append a string (typically one character) to the buffer.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._size += len(s)
            self._cache = None
        return self

    def assign(self, s: str) -> TextBuffer:
        """Replace the buffer contents with ``s``."""
        self.clear()
        return self.append(s)

    def clear(self) -> TextBuffer:
        """Clear all accumulated text.

        Returns:
            self for method chaining
        """
        self._parts.clear()
        self._size = 0
        self._cache = ""
        return self

    @property
    def value(self) -> str:
        """The accumulated text."""
        if self._cache is None:
            self._cache = "".join(self._parts)
            # Collapse to one part so later joins stay cheap
            self._parts[:] = [self._cache] if self._cache else []
        return self._cache

    def find(self, sub: str, start: int = 0) -> int:
        """Return the lowest index of ``sub`` at or after ``start``, or -1."""
        return self.value.find(sub, start)

    def slice(self, start: int, end: int | None = None) -> str:
        """Return the substring ``[start:end]``."""
        return self.value[start:end]

    def startswith(self, prefix: str) -> bool:
        return self.value.startswith(prefix)

    def endswith(self, suffix: str) -> bool:
        return self.value.endswith(suffix)

    def __len__(self) -> int:
        """Return the number of characters held."""
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"TextBuffer({self.value!r})"
