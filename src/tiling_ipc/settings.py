"""Daemon settings, config-store defaults and logging setup."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tiling_ipc.config_store import ConfigValue, SpaceMode, SplitMode

logger = logging.getLogger(__name__)

ENV_PREFIX = "TILING_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class DaemonSettings(BaseModel):
    """Settings for the message front end."""

    model_config = ConfigDict(frozen=True)

    max_arguments: int = Field(default=64, ge=1)
    log_level: str = "INFO"
    strip_line_endings: bool = True

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DaemonSettings:
        """Build settings from ``TILING_*`` environment variables."""
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        if f"{ENV_PREFIX}MAX_ARGUMENTS" in env:
            values["max_arguments"] = env[f"{ENV_PREFIX}MAX_ARGUMENTS"]
        if f"{ENV_PREFIX}LOG_LEVEL" in env:
            values["log_level"] = env[f"{ENV_PREFIX}LOG_LEVEL"]
        if f"{ENV_PREFIX}STRIP_LINE_ENDINGS" in env:
            raw = env[f"{ENV_PREFIX}STRIP_LINE_ENDINGS"]
            values["strip_line_endings"] = raw.strip().lower() in _TRUE_VALUES
        return cls.model_validate(values)


class ConfigDefaults(BaseModel):
    """Global default of every well-known configuration key."""

    space_mode: SpaceMode = SpaceMode.BSP
    space_offset_top: float = 40.0
    space_offset_bottom: float = 20.0
    space_offset_left: float = 20.0
    space_offset_right: float = 20.0
    space_offset_gap: float = 10.0
    bsp_spawn_left: int = 1
    bsp_optimal_ratio: float = Field(default=1.618, gt=0)
    bsp_split_ratio: float = Field(default=0.5, gt=0, lt=1)
    bsp_split_mode: SplitMode = SplitMode.OPTIMAL
    window_float_topmost: int = 1
    window_float_next: int = 0
    mouse_follows_focus: int = 1

    def as_store_values(self) -> dict[str, ConfigValue]:
        return dict(self)


def configure_logging(settings: DaemonSettings) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logger.debug("logging configured at %s", settings.log_level)
