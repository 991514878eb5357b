"""FIGlet banner with a vertical colour gradient."""

from __future__ import annotations

import math
import shutil
from dataclasses import dataclass, field
from functools import lru_cache

from omicshelp.ansi import RGB, Palette, rgb
from omicshelp.figlet import FigletFont, find_font

FALLBACK_TERM_WIDTH = 80

# Preferred fonts first; "term" is always available and keeps the banner visible
# on systems without FIGlet font files installed.
_FONT_ORDER = ("slant", "small", "term")


@lru_cache(maxsize=None)
def _font(name: str) -> FigletFont | None:
    return find_font(name)


def _round_half_away(v: float) -> int:
    return int(math.floor(v + 0.5)) if v >= 0 else -int(math.floor(-v + 0.5))


@dataclass(frozen=True)
class Gradient:
    """Piecewise-linear colour gradient through evenly spaced stops."""

    stops: tuple[RGB, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "stops", tuple(self.stops))

    @classmethod
    def family_default(cls) -> Gradient:
        """The gradient shared by every tool in the family."""
        return cls(Palette.FAMILY_GRADIENT)

    def at(self, t: float) -> RGB:
        """Colour at position ``t`` in [0, 1]; values outside are clamped."""
        if not self.stops:
            return (255, 255, 255)
        if len(self.stops) == 1:
            return self.stops[0]
        t = min(max(t, 0.0), 1.0)
        n_segs = len(self.stops) - 1
        scaled = t * n_segs
        idx = min(int(math.floor(scaled)), n_segs - 1)
        local_t = scaled - idx
        lo, hi = self.stops[idx], self.stops[idx + 1]

        def lerp(a: int, b: int) -> int:
            v = a + (b - a) * local_t
            return min(max(_round_half_away(v), 0), 255)

        return (lerp(lo[0], hi[0]), lerp(lo[1], hi[1]), lerp(lo[2], hi[2]))


@dataclass(frozen=True)
class Banner:
    """Large-letter rendering of a tool name."""

    text: str
    gradient: Gradient = field(default_factory=Gradient.family_default)

    @classmethod
    def family(cls, text: str) -> Banner:
        """A banner using the family gradient."""
        return cls(text, Gradient.family_default())

    def render(self, color: bool) -> str:
        """Render the banner, or return an empty string if nothing fits the terminal."""
        term_width = shutil.get_terminal_size((FALLBACK_TERM_WIDTH, 24)).columns
        for name in _FONT_ORDER:
            font = _font(name)
            if font is None:
                continue
            out = self._try_render(font, color, term_width)
            if out is not None:
                return out
        return ""

    def _try_render(self, font: FigletFont, color: bool, term_width: int) -> str | None:
        figure = font.render(self.text)
        if figure is None:
            return None
        lines = figure.splitlines()
        non_empty = [i for i, line in enumerate(lines) if line.strip()]
        if not non_empty:
            return None
        last = non_empty[-1]
        kept = lines[: last + 1]
        if max(len(line) for line in kept) > term_width:
            return None
        painted = (
            rgb(color, self.gradient.at(i / last if last else 0.0), line)
            for i, line in enumerate(kept)
        )
        return "\n".join(painted)