"""Space-delimited lexer for daemon IPC messages.

A token is the maximal run of non-space characters starting at the
cursor. After a token the cursor skips exactly one trailing space, so
two adjacent spaces produce an empty token in between. An empty token
also signals "no more input" once the cursor reaches the end.
"""

from __future__ import annotations

from dataclasses import dataclass

_DELIMITER = " "


class LexerError(ValueError):
    """Raised when the cursor is driven past the end of its message."""


@dataclass(frozen=True)
class Token:
    """A view into the message buffer; nothing is copied until :meth:`text`."""

    source: str
    offset: int
    length: int

    def text(self) -> str:
        """Materialize the token as an owned string."""
        return self.source[self.offset : self.offset + self.length]

    def equals(self, match: str) -> bool:
        """Return True if the token spells exactly *match*."""
        return self.length == len(match) and self.source.startswith(match, self.offset)

    def __bool__(self) -> bool:
        return self.length > 0


class Cursor:
    """Forward-only position over an immutable message."""

    def __init__(self, message: str, position: int = 0) -> None:
        self._message = message
        self._position = position

    @property
    def message(self) -> str:
        return self._message

    @property
    def position(self) -> int:
        """Offset of the next unread character."""
        return self._position

    @property
    def exhausted(self) -> bool:
        """True once the cursor sits on the end of the message."""
        return self._position >= len(self._message)

    def rest(self) -> str:
        """The unread remainder of the message."""
        return self._message[self._position :]

    def next_token(self) -> Token:
        """Extract the next token and advance past one trailing space.

        At the end of the message an empty token is returned and the
        cursor stays put. Raises :class:`LexerError` if the position was
        moved beyond the end of the buffer.
        """
        message = self._message
        n = len(message)
        start = self._position
        if start > n:
            raise LexerError(f"cursor at {start} is past end of message (length {n})")

        end = message.find(_DELIMITER, start)
        if end == -1:
            end = n
        token = Token(message, start, end - start)

        if end < n:
            end += 1  # skip exactly one delimiter
        self._position = end
        return token

    def __iter__(self) -> Cursor:
        return self

    def __next__(self) -> Token:
        if self.exhausted:
            raise StopIteration
        return self.next_token()


def next_token(cursor: Cursor) -> Token:
    """Functional spelling of :meth:`Cursor.next_token`."""
    return cursor.next_token()


def tokenize(message: str) -> list[str]:
    """Split *message* into materialized tokens.

    Examples
    --------
    >>> tokenize("window -f east")
    ['window', '-f', 'east']
    >>> tokenize("a  b")
    ['a', '', 'b']
    """
    return [token.text() for token in Cursor(message)]
