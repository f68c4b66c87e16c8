"""Build getopt-style argument vectors from a message."""

from __future__ import annotations

from tiling_ipc.lexer import Cursor

#: Placeholder occupying slot 0, where getopt conventions expect a program name.
PROGRAM_PLACEHOLDER = ""


class ArgumentOverflow(ValueError):
    """Raised when a message carries more tokens than allowed."""

    def __init__(self, count: int, limit: int) -> None:
        super().__init__(f"message has {count} arguments, limit is {limit}")
        self.count = count
        self.limit = limit


def build_arguments(message: str, *, max_arguments: int | None = None) -> list[str]:
    """Lex *message* into ``[placeholder, token1, ..., tokenN]``.

    Tokens are materialized in order starting at index 1. When
    *max_arguments* is given, more than that many tokens raises
    :class:`ArgumentOverflow`.
    """
    argv = [PROGRAM_PLACEHOLDER]
    argv.extend(token.text() for token in Cursor(message))
    if max_arguments is not None and len(argv) - 1 > max_arguments:
        raise ArgumentOverflow(len(argv) - 1, max_arguments)
    return argv
