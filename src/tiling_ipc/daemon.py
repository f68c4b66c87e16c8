"""Daemon message entry point.

The IPC host calls :meth:`TilingDaemon.handle_message` once per message,
one message at a time. The first token picks the route: ``config``
messages go to the config router, ``window`` and ``space`` messages are
parsed into a command chain and dispatched. Nothing is dispatched from a
message that fails to parse.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from tiling_ipc.commands import CommandChain, ErrorKind, ParseError, parse_command
from tiling_ipc.config_router import route_config
from tiling_ipc.config_store import ConfigStore
from tiling_ipc.dispatcher import Dispatcher, SpaceHandlers, WindowHandlers
from tiling_ipc.grammar import SPACE_GRAMMAR, WINDOW_GRAMMAR, FlagGrammar
from tiling_ipc.lexer import Cursor
from tiling_ipc.settings import DaemonSettings

logger = logging.getLogger(__name__)

MESSAGE_TYPES = ("config", "window", "space")


@dataclass
class OpResult:
    """Result of handling a single message."""

    success: bool
    message: str
    kind: ErrorKind | None = None


class TilingDaemon:
    """Parses daemon messages and routes them to handlers or the config store."""

    def __init__(
        self,
        window: WindowHandlers,
        space: SpaceHandlers,
        store: ConfigStore,
        settings: DaemonSettings | None = None,
    ) -> None:
        self._store = store
        self._settings = settings or DaemonSettings()
        self._dispatcher = Dispatcher(window, space, store)

    @property
    def store(self) -> ConfigStore:
        return self._store

    @property
    def settings(self) -> DaemonSettings:
        return self._settings

    def handle_message(self, message: str, connection: Any = None) -> OpResult:
        """Handle one IPC message.

        *connection* is the host's handle for the client; it is accepted
        for the callback signature and never used here.
        """
        if self._settings.strip_line_endings:
            message = message.rstrip("\r\n")

        cursor = Cursor(message)
        kind_token = cursor.next_token()
        message_type = kind_token.text()

        match message_type:
            case "config":
                update = route_config(cursor, self._store)
                return OpResult(update.success, update.message, update.kind)
            case "window":
                return self._handle_command(cursor.rest(), WINDOW_GRAMMAR)
            case "space":
                return self._handle_command(cursor.rest(), SPACE_GRAMMAR)
            case _:
                error = f"no match for '{message_type}'"
                logger.warning("%s", error)
                return OpResult(False, error, ErrorKind.UNRECOGNIZED_MESSAGE)

    def parse(self, message_type: str, rest: str) -> CommandChain | ParseError:
        """Parse the flags of a ``window`` or ``space`` message without dispatching."""
        match message_type:
            case "window":
                grammar = WINDOW_GRAMMAR
            case "space":
                grammar = SPACE_GRAMMAR
            case _:
                return ParseError(
                    error=f"no flag grammar for '{message_type}'",
                    raw=rest,
                    kind=ErrorKind.UNRECOGNIZED_MESSAGE,
                )
        return parse_command(rest, grammar, max_arguments=self._settings.max_arguments)

    def _handle_command(self, rest: str, grammar: FlagGrammar) -> OpResult:
        parsed = self.parse(grammar.domain, rest)
        if isinstance(parsed, ParseError):
            return OpResult(False, parsed.error, parsed.kind)

        count = self._dispatcher.dispatch(parsed)
        return OpResult(True, f"{grammar.domain}: {count} command(s) dispatched")
