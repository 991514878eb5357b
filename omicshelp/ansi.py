"""ANSI styling helpers and the family colour palette."""

from __future__ import annotations

import os

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
DIM = "\x1b[2m"

RGB = tuple[int, int, int]


def no_color_env() -> bool:
    """Return True when the NO_COLOR environment variable is set (to anything)."""
    return "NO_COLOR" in os.environ


class Palette:
    """Named 24-bit colours shared by the help renderer."""

    TEAL: RGB = (96, 218, 220)
    SKY: RGB = (96, 165, 250)
    VIOLET: RGB = (167, 139, 250)
    MAGENTA: RGB = (217, 119, 233)
    GREEN: RGB = (74, 222, 128)
    YELLOW: RGB = (250, 204, 21)
    SLATE: RGB = (148, 163, 184)

    # RGB approximations of ANSI-16 bright cyan, cyan, bright blue, bright magenta.
    FAMILY_GRADIENT: tuple[RGB, ...] = (
        (85, 255, 255),
        (0, 205, 205),
        (95, 135, 255),
        (255, 95, 255),
    )


def rgb(color: bool, rgb: RGB, s: str) -> str:
    """Wrap ``s`` in a 24-bit foreground colour when ``color`` is true."""
    if not color:
        return s
    r, g, b = rgb
    return f"\x1b[38;2;{r};{g};{b}m{s}{RESET}"


def bold(color: bool, s: str) -> str:
    """Make ``s`` bold when ``color`` is true."""
    return f"{BOLD}{s}{RESET}" if color else s


def dim(color: bool, s: str) -> str:
    """Make ``s`` dim when ``color`` is true."""
    return f"{DIM}{s}{RESET}" if color else s