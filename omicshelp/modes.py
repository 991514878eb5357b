"""Detect whether help was requested and in which output mode."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import Enum

from omicshelp.ansi import no_color_env

_HELP_ARGS = frozenset({"--help", "-h", "help"})


class HelpMode(Enum):
    """How help output is rendered."""

    RICH = "rich"
    PLAIN = "plain"
    JSON = "json"


def wants_help(args: Sequence[str]) -> bool:
    """True if any argument after the program name asks for help."""
    return any(a in _HELP_ARGS for a in args[1:])


def detect_mode(args: Sequence[str]) -> HelpMode:
    """Pick the help mode: --json wins, then --plain, NO_COLOR or a non-terminal stdout."""
    if "--json" in args:
        return HelpMode.JSON
    if "--plain" in args or no_color_env() or not sys.stdout.isatty():
        return HelpMode.PLAIN
    return HelpMode.RICH


def intercept_help(args: Sequence[str]) -> HelpMode | None:
    """Return the help mode if help was requested, otherwise None."""
    return detect_mode(args) if wants_help(args) else None