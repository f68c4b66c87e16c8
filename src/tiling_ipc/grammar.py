"""Flag grammars for ``window`` and ``space`` messages.

Each grammar is the single source of truth for its flags: which
arguments a flag accepts, which handler it drives, and the reference
card text shown to users.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Callable

DIRECTIONS = ("west", "east", "north", "south")
ROTATIONS = ("90", "180", "270")

# Plain ASCII decimal notation; no digit separators, no nan/inf spellings.
INT_RE = re.compile(r"[+-]?[0-9]+")
FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def is_float(argument: str) -> bool:
    """Return True if *argument* is a finite decimal number."""
    if FLOAT_RE.fullmatch(argument) is None:
        return False
    return math.isfinite(float(argument))


@dataclass(frozen=True)
class FlagSpec:
    """Specification for a single-character flag.

    The argument is accepted if it is one of *values*, or, when
    *validator* is set, if the validator returns True.
    """

    flag: str
    handler: str
    values: tuple[str, ...] = ()
    validator: Callable[[str], bool] | None = None
    syntax: str = ""
    description: str = ""

    def accepts(self, argument: str) -> bool:
        if self.validator is not None:
            return self.validator(argument)
        return argument in self.values


@dataclass
class FlagGrammar:
    """Ordered set of flag specifications for one domain."""

    domain: str
    specs: list[FlagSpec] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._map: dict[str, FlagSpec] = {}
        for spec in self.specs:
            self._index(spec)

    def _index(self, spec: FlagSpec) -> None:
        if len(spec.flag) != 1:
            raise ValueError(f"flag must be a single character, got {spec.flag!r}")
        if spec.flag in self._map:
            raise ValueError(f"duplicate flag '{spec.flag}' in {self.domain} grammar")
        self._map[spec.flag] = spec

    def register(self, spec: FlagSpec) -> None:
        """Register a single flag specification."""
        self._index(spec)
        self.specs.append(spec)

    def lookup(self, flag: str) -> FlagSpec | None:
        """Look up a flag specification by its character."""
        return self._map.get(flag)

    @property
    def flags(self) -> list[str]:
        """All registered flag characters (insertion order)."""
        return [spec.flag for spec in self.specs]

    @property
    def short_options(self) -> str:
        """getopt option string; every flag requires an argument."""
        return "".join(f"{spec.flag}:" for spec in self.specs)

    def generate_reference_card(self) -> str:
        """Generate a formatted reference card for this grammar."""
        lines = [f"### {self.domain.title()}"]
        for spec in self.specs:
            syntax = spec.syntax or f"-{spec.flag} <{'|'.join(spec.values)}>"
            line = f"  {self.domain} {syntax}"
            if spec.description:
                line += f"  # {spec.description}"
            lines.append(line)
        lines.append("")
        return "\n".join(lines)


WINDOW_GRAMMAR = FlagGrammar(
    domain="window",
    specs=[
        FlagSpec("f", "focus_window", DIRECTIONS, description="focus window in direction"),
        FlagSpec("s", "swap_window", DIRECTIONS, description="swap with window in direction"),
        FlagSpec("i", "use_insertion_point", DIRECTIONS, description="set insertion point"),
        FlagSpec("w", "move_window", DIRECTIONS, description="detach and reinsert in direction"),
        FlagSpec("t", "toggle_window", ("float",), description="toggle window state"),
        FlagSpec(
            "r",
            "temporary_ratio",
            validator=is_float,
            syntax="-r <ratio>",
            description="split ratio for this batch only",
        ),
    ],
)

SPACE_GRAMMAR = FlagGrammar(
    domain="space",
    specs=[
        FlagSpec("r", "rotate_window_tree", ROTATIONS, description="rotate tree by degrees"),
    ],
)
