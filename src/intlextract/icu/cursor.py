"""Position tracking over ICU message text.

A Cursor never mutates; every move hands back a new one, so a rule that
fails can simply discard its cursor and the caller still holds the position
it started from. Line and column are only computed when an error is built.
"""

from collections.abc import Callable
from dataclasses import dataclass

from intlextract.diagnostics import ErrorTemplate

__all__ = ["WHITESPACE", "Cursor", "ParseResult"]

# Whitespace accepted between argument and option tokens.
WHITESPACE: frozenset[str] = frozenset(" \t\n\r")


@dataclass(frozen=True, slots=True)
class Cursor:
    """A read position inside one message.

    Example:
        >>> start = Cursor("{count, plural, one {#}}", 0)
        >>> start.advance().take_while(str.isalpha).value
        'count'
        >>> start.current
        '{'
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Character under the cursor.

        Raises:
            EOFError: If the message is exhausted
        """
        if self.is_eof:
            raise EOFError(ErrorTemplate.unexpected_eof(self.pos).message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character ``offset`` places ahead, or None past the end."""
        index = self.pos + offset
        return self.source[index] if index < len(self.source) else None

    def advance(self, count: int = 1) -> "Cursor":
        return Cursor(self.source, min(self.pos + count, len(self.source)))

    def slice_ahead(self, n: int) -> str:
        return self.source[self.pos : self.pos + n]

    def skip_whitespace(self) -> "Cursor":
        end = self.pos
        while end < len(self.source) and self.source[end] in WHITESPACE:
            end += 1
        return self if end == self.pos else Cursor(self.source, end)

    def take_while(self, predicate: Callable[[str], bool]) -> "ParseResult[str]":
        """Consume the longest run of characters matching ``predicate``.

        The consumed run may be empty; callers decide whether that is an error.
        """
        end = self.pos
        while end < len(self.source) and predicate(self.source[end]):
            end += 1
        return ParseResult(self.source[self.pos : end], Cursor(self.source, end))

    def expect(self, char: str) -> "Cursor | None":
        """Step over ``char`` if it is next, else None."""
        if self.peek() == char:
            return self.advance()
        return None

    def compute_line_col(self) -> tuple[int, int]:
        """1-based (line, column) of the cursor, for error reports.

        Example:
            >>> Cursor("one\\n{x", 5).compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        column = self.pos - self.source.rfind("\n", 0, self.pos)
        return (line, column)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """A parsed value paired with the cursor just past it."""

    value: T
    cursor: Cursor
