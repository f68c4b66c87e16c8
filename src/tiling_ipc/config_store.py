"""Typed configuration store with per-space overrides.

The router only talks to the :class:`ConfigStore` protocol. The
in-memory implementation keeps global values and layers per-space
overrides over them; a lookup for a space without an override falls
back to the global value.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Protocol, Union

logger = logging.getLogger(__name__)


class SpaceMode(IntEnum):
    """Layout mode of a space."""

    BSP = 0
    MONOCLE = 1
    FLOAT = 2


class SplitMode(IntEnum):
    """How a new split is oriented."""

    OPTIMAL = 0
    VERTICAL = 1
    HORIZONTAL = 2


ConfigValue = Union[SpaceMode, SplitMode, int, float, str]

SPLIT_RATIO = "bsp_split_ratio"


class ConfigStore(Protocol):
    """Protocol that configuration stores must satisfy."""

    def update(self, key: str, value: ConfigValue, *, space: int | None = None) -> None:
        """Set *key* globally, or for one space when *space* is given."""
        ...

    def value(self, key: str, *, space: int | None = None) -> ConfigValue:
        """Return the effective value of *key*."""
        ...

    def float_value(self, key: str, *, space: int | None = None) -> float:
        """Return the effective value of *key* as a float."""
        ...


class InMemoryConfigStore:
    """Dictionary-backed :class:`ConfigStore`.

    Only keys present in *defaults* can be updated; anything else raises
    :class:`KeyError`, so typos surface instead of creating new settings.
    """

    def __init__(self, defaults: dict[str, ConfigValue]) -> None:
        self._globals: dict[str, ConfigValue] = dict(defaults)
        self._spaces: dict[int, dict[str, ConfigValue]] = {}

    @classmethod
    def with_defaults(cls) -> InMemoryConfigStore:
        """Create a store seeded from :class:`~tiling_ipc.settings.ConfigDefaults`."""
        from tiling_ipc.settings import ConfigDefaults

        return cls(ConfigDefaults().as_store_values())

    def _check(self, key: str) -> None:
        if key not in self._globals:
            raise KeyError(key)

    def update(self, key: str, value: ConfigValue, *, space: int | None = None) -> None:
        self._check(key)
        if space is None:
            self._globals[key] = value
            logger.debug("config %s = %r", key, value)
        else:
            self._spaces.setdefault(space, {})[key] = value
            logger.debug("config %s = %r (space %d)", key, value, space)

    def value(self, key: str, *, space: int | None = None) -> ConfigValue:
        self._check(key)
        if space is not None:
            overrides = self._spaces.get(space, {})
            if key in overrides:
                return overrides[key]
        return self._globals[key]

    def float_value(self, key: str, *, space: int | None = None) -> float:
        return float(self.value(key, space=space))

    def overrides(self, space: int) -> dict[str, ConfigValue]:
        """Return a copy of the overrides set for *space*."""
        return dict(self._spaces.get(space, {}))

    def clear_overrides(self, space: int | None = None) -> None:
        """Drop overrides for one space, or for every space."""
        if space is None:
            self._spaces.clear()
        else:
            self._spaces.pop(space, None)
