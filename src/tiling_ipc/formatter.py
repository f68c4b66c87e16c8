"""Diagnostic text for message results.

A result renders as one line: ``+ <message>`` when the message was
applied, ``! <kind>: <message>`` when it was rejected.
"""

from __future__ import annotations

import difflib
from enum import Enum


def format_result(success: bool, message: str, kind: Enum | None = None) -> str:
    """Render a message result as a single line.

    >>> format_result(True, "space_mode = bsp")
    '+ space_mode = bsp'
    >>> format_result(False, "no match for 'desktop'")
    "! no match for 'desktop'"
    """
    if success:
        return f"+ {message}"
    if kind is None:
        return f"! {message}"
    return f"! {kind.value}: {message}"


def suggest(input_str: str, candidates: list[str]) -> str | None:
    """Closest of *candidates* to *input_str*, or None below a 0.6 similarity."""
    if not input_str or not candidates:
        return None
    matches = difflib.get_close_matches(input_str, candidates, n=1, cutoff=0.6)
    return matches[0] if matches else None


def did_you_mean(input_str: str, candidates: list[str], *, prefix: str = "") -> str:
    """Hint suffix for an unknown name, or ``""`` when nothing is close.

    *prefix* is prepended to the suggested name, e.g. ``"-"`` for flags.
    """
    hint = suggest(input_str, candidates)
    if hint is None:
        return ""
    return f" (did you mean '{prefix}{hint}'?)"
