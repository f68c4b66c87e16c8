"""Route ``config <key> <value>`` messages to the configuration store.

Keys are either one of the well-known global names, or a scoped key
``<space-index>_<suffix>`` that applies a space or mode setting to a
single space. The value type is decided by the key.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from tiling_ipc.commands import ErrorKind
from tiling_ipc.config_store import ConfigStore, ConfigValue, SpaceMode, SplitMode
from tiling_ipc.formatter import did_you_mean
from tiling_ipc.grammar import INT_RE, is_float
from tiling_ipc.lexer import Cursor

logger = logging.getLogger(__name__)

_SCOPED_KEY_RE = re.compile(r"([0-9]+)_(\S+)")


class InvalidValue(ValueError):
    """Raised by a coercion when the value text does not fit the key's type."""


def _coerce_int(text: str) -> int:
    if INT_RE.fullmatch(text) is None:
        raise InvalidValue(f"expected an integer, got '{text}'")
    return int(text)


def _coerce_float(text: str) -> float:
    if not is_float(text):
        raise InvalidValue(f"expected a finite number, got '{text}'")
    return float(text)


def _mode_coercion(modes: dict[str, Enum]) -> Callable[[str], ConfigValue]:
    def coerce(text: str) -> ConfigValue:
        try:
            return modes[text]  # type: ignore[return-value]
        except KeyError:
            choices = ", ".join(modes)
            raise InvalidValue(f"expected one of {choices}, got '{text}'") from None

    return coerce


SPACE_MODES: dict[str, Enum] = {
    "bsp": SpaceMode.BSP,
    "monocle": SpaceMode.MONOCLE,
    "float": SpaceMode.FLOAT,
}
SPLIT_MODES: dict[str, Enum] = {
    "optimal": SplitMode.OPTIMAL,
    "vertical": SplitMode.VERTICAL,
    "horizontal": SplitMode.HORIZONTAL,
}


@dataclass(frozen=True)
class ConfigKeySpec:
    """A well-known configuration key and how its value is coerced."""

    key: str
    kind: str
    coerce: Callable[[str], ConfigValue]
    suffix: str = ""  # non-empty if the key may be scoped to one space


def _mode(key: str, modes: dict[str, Enum], suffix: str = "") -> ConfigKeySpec:
    return ConfigKeySpec(key, "mode", _mode_coercion(modes), suffix)


def _float(key: str, suffix: str = "") -> ConfigKeySpec:
    return ConfigKeySpec(key, "float", _coerce_float, suffix)


def _int(key: str) -> ConfigKeySpec:
    return ConfigKeySpec(key, "int", _coerce_int)


CONFIG_KEYS: dict[str, ConfigKeySpec] = {
    spec.key: spec
    for spec in (
        _mode("space_mode", SPACE_MODES, suffix="mode"),
        _float("space_offset_top", suffix="top"),
        _float("space_offset_bottom", suffix="bottom"),
        _float("space_offset_left", suffix="left"),
        _float("space_offset_right", suffix="right"),
        _float("space_offset_gap", suffix="gap"),
        _int("bsp_spawn_left"),
        _float("bsp_optimal_ratio"),
        _float("bsp_split_ratio"),
        _mode("bsp_split_mode", SPLIT_MODES),
        _int("window_float_topmost"),
        _int("window_float_next"),
        _int("mouse_follows_focus"),
    )
}

SCOPED_SUFFIXES: dict[str, ConfigKeySpec] = {
    spec.suffix: spec for spec in CONFIG_KEYS.values() if spec.suffix
}


@dataclass
class ConfigUpdate:
    """Outcome of routing one config message."""

    success: bool
    message: str
    key: str = ""
    value: ConfigValue | None = None
    space: int | None = None
    kind: ErrorKind | None = None


def resolve_key(key: str) -> tuple[ConfigKeySpec, int | None] | None:
    """Classify *key* as global or scoped.

    Returns ``(spec, space)`` where *space* is None for global keys, or
    None if *key* is not a valid config option.
    """
    spec = CONFIG_KEYS.get(key)
    if spec is not None:
        return spec, None

    match = _SCOPED_KEY_RE.fullmatch(key)
    if match is None:
        return None
    spec = SCOPED_SUFFIXES.get(match.group(2))
    if spec is None:
        return None
    return spec, int(match.group(1))


def route_config(cursor: Cursor, store: ConfigStore) -> ConfigUpdate:
    """Read ``<key> <value>`` from *cursor* and apply it to *store*.

    Nothing is written to the store unless the key is known and the
    value coerces to the key's type.
    """
    key = cursor.next_token().text()

    resolved = resolve_key(key)
    if resolved is None:
        message = f"'{key}' is not a valid config option" + did_you_mean(key, list(CONFIG_KEYS))
        logger.warning("%s", message)
        return ConfigUpdate(False, message, key=key, kind=ErrorKind.UNRECOGNIZED_CONFIG_KEY)

    spec, space = resolved
    value_token = cursor.next_token()
    if not value_token:
        message = f"missing value for '{key}'"
        logger.warning("%s", message)
        return ConfigUpdate(False, message, key=key, space=space, kind=ErrorKind.MISSING_VALUE)

    try:
        value = spec.coerce(value_token.text())
    except InvalidValue as exc:
        message = f"invalid value for '{key}': {exc}"
        logger.warning("%s", message)
        return ConfigUpdate(False, message, key=key, space=space, kind=ErrorKind.INVALID_VALUE)

    store.update(spec.key, value, space=space)
    if space is None:
        logger.info("config %s = %r", spec.key, value)
        message = f"{spec.key} = {_display(value)}"
    else:
        logger.info("config %s = %r for space %d", spec.key, value, space)
        message = f"{spec.key} = {_display(value)} (space {space})"
    return ConfigUpdate(True, message, key=spec.key, value=value, space=space)


def _display(value: ConfigValue) -> str:
    if isinstance(value, Enum):
        return value.name.lower()
    return str(value)
