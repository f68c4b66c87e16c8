"""Execute command chains against window and space handlers.

Window batches may change the split ratio temporarily (``-r``); the
dispatcher restores the ratio captured before the batch once the batch
is done, so later tree operations see the persisted value.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from tiling_ipc.commands import CommandChain
from tiling_ipc.config_store import SPLIT_RATIO, ConfigStore
from tiling_ipc.grammar import SPACE_GRAMMAR, WINDOW_GRAMMAR, FlagGrammar

logger = logging.getLogger(__name__)


class WindowHandlers(Protocol):
    """Window actions provided by the tiling layer."""

    def focus_window(self, direction: str) -> None:
        ...

    def swap_window(self, direction: str) -> None:
        ...

    def use_insertion_point(self, direction: str) -> None:
        ...

    def move_window(self, direction: str) -> None:
        """Detach the focused window and reinsert it in *direction*."""
        ...

    def toggle_window(self, state: str) -> None:
        ...

    def temporary_ratio(self, ratio: str) -> None:
        """Apply *ratio* as the split ratio for the current batch."""
        ...


class SpaceHandlers(Protocol):
    """Space actions provided by the tiling layer."""

    def rotate_window_tree(self, degrees: str) -> None:
        ...


def _bind(grammar: FlagGrammar, handlers: object) -> dict[str, Callable[[str], None]]:
    """Map each flag of *grammar* to its bound handler method."""
    table: dict[str, Callable[[str], None]] = {}
    for spec in grammar.specs:
        handler = getattr(handlers, spec.handler, None)
        if handler is None:
            raise TypeError(
                f"{type(handlers).__name__} has no handler '{spec.handler}' "
                f"for {grammar.domain} flag '{spec.flag}'"
            )
        table[spec.flag] = handler
    return table


class Dispatcher:
    """Routes validated commands to the external handlers."""

    def __init__(
        self,
        window: WindowHandlers,
        space: SpaceHandlers,
        store: ConfigStore,
    ) -> None:
        self._store = store
        self._tables = {
            WINDOW_GRAMMAR.domain: _bind(WINDOW_GRAMMAR, window),
            SPACE_GRAMMAR.domain: _bind(SPACE_GRAMMAR, space),
        }

    def dispatch(self, chain: CommandChain) -> int:
        """Invoke the handler of every command in *chain*, in order.

        Returns the number of commands dispatched.
        """
        match chain.domain:
            case "window":
                return self._dispatch_window(chain)
            case "space":
                return self._run(chain)
            case _:
                raise ValueError(f"Unknown command domain: {chain.domain!r}")

    def _dispatch_window(self, chain: CommandChain) -> int:
        ratio = self._store.float_value(SPLIT_RATIO)
        try:
            return self._run(chain)
        finally:
            if self._store.float_value(SPLIT_RATIO) != ratio:
                logger.debug("restoring %s to %s", SPLIT_RATIO, ratio)
                self._store.update(SPLIT_RATIO, ratio)

    def _run(self, chain: CommandChain) -> int:
        table = self._tables[chain.domain]
        for command in chain:
            logger.debug("%s command: '%s', arg: '%s'", chain.domain, command.flag, command.argument)
            table[command.flag](command.argument)
        return len(chain)
