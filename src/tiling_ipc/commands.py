"""Command chain types and the flag-message parser.

Produces a :class:`CommandChain` on success or a :class:`ParseError` on
failure. A failed parse never yields a partial chain.
"""

from __future__ import annotations

import getopt
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from tiling_ipc.arguments import ArgumentOverflow, build_arguments
from tiling_ipc.formatter import did_you_mean
from tiling_ipc.grammar import FlagGrammar

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Recoverable failure categories reported for a single message."""

    INVALID_SELECTOR = "invalid_selector"
    UNRECOGNIZED_FLAG = "unrecognized_flag"
    MISSING_VALUE = "missing_value"
    INVALID_VALUE = "invalid_value"
    UNRECOGNIZED_CONFIG_KEY = "unrecognized_config_key"
    UNRECOGNIZED_MESSAGE = "unrecognized_message"
    TOO_MANY_ARGUMENTS = "too_many_arguments"


@dataclass(frozen=True)
class Command:
    """A validated flag and its argument."""

    flag: str
    argument: str


@dataclass
class CommandChain:
    """Validated commands of one message, in the order they appeared."""

    domain: str
    commands: list[Command] = field(default_factory=list)

    def append(self, command: Command) -> None:
        self.commands.append(command)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)


@dataclass
class ParseError:
    """Parsing failure."""

    success: bool = field(default=False, init=False)
    error: str = ""
    raw: str = ""
    kind: ErrorKind = ErrorKind.INVALID_SELECTOR


def parse_command(
    message: str,
    grammar: FlagGrammar,
    *,
    max_arguments: int | None = None,
) -> CommandChain | ParseError:
    """Parse the flag part of a ``window``/``space`` message.

    *message* is what follows the message-type token, e.g. ``'-f east -r 0.1'``.
    Every flag argument must pass the grammar's rule for that flag; the
    first violation aborts the whole parse.

    Parameters
    ----------
    message : str
        Flag-and-argument text.
    grammar : FlagGrammar
        Grammar for the message's domain.
    max_arguments : int, optional
        Reject messages with more tokens than this.

    Returns
    -------
    CommandChain | ParseError
    """
    try:
        argv = build_arguments(message, max_arguments=max_arguments)
    except ArgumentOverflow as exc:
        logger.warning("%s message rejected: %s", grammar.domain, exc)
        return ParseError(error=str(exc), raw=message, kind=ErrorKind.TOO_MANY_ARGUMENTS)

    try:
        options, _operands = getopt.gnu_getopt(argv[1:], grammar.short_options)
    except getopt.GetoptError as exc:
        error = f"{exc.msg} for {grammar.domain} command"
        if exc.msg.endswith("requires argument"):
            kind = ErrorKind.MISSING_VALUE
        else:
            kind = ErrorKind.UNRECOGNIZED_FLAG
            hint = did_you_mean(exc.opt, grammar.flags, prefix="-")
            if not hint:
                hint = f" (expected one of {', '.join('-' + f for f in grammar.flags)})"
            error += hint
        logger.warning("%s", error)
        return ParseError(error=error, raw=message, kind=kind)

    chain = CommandChain(domain=grammar.domain)
    for option, argument in options:
        flag = option.lstrip("-")
        spec = grammar.lookup(flag)
        if spec is None or not spec.accepts(argument):
            error = f"invalid selector '{argument}' for {grammar.domain} flag '{flag}'"
            logger.warning("%s", error)
            return ParseError(error=error, raw=message, kind=ErrorKind.INVALID_SELECTOR)
        chain.append(Command(flag=flag, argument=argument))

    return chain
