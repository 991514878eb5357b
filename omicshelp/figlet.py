"""Minimal FIGlet (.flf) font reader and renderer."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from itertools import islice
from pathlib import Path
from typing import Iterator

_REQUIRED_ASCII = range(32, 127)
_GERMAN_CODES = (196, 214, 220, 228, 246, 252, 223)

_FONT_DIRS = (
    "/usr/share/figlet",
    "/usr/share/figlet/fonts",
    "/usr/local/share/figlet",
    "/usr/local/share/figlet/fonts",
    "/opt/homebrew/share/figlet/fonts",
    "/usr/share/figlet-fonts",
)


def _strip_endmark(line: str) -> str:
    s = line.rstrip()
    if s:
        s = s.rstrip(s[-1])
    return s


def _parse_code(token: str) -> int:
    sign = -1 if token.startswith("-") else 1
    digits = token.lstrip("+-")
    if digits[:2].lower() == "0x":
        value = int(digits[2:], 16)
    elif len(digits) > 1 and digits.startswith("0"):
        value = int(digits[1:], 8)
    else:
        value = int(digits, 10)
    return sign * value


@dataclass(frozen=True)
class FigletFont:
    """A parsed FIGlet font: glyph rows keyed by code point."""

    hardblank: str
    height: int
    baseline: int
    glyphs: dict[int, tuple[str, ...]] = field(default_factory=dict)
    comment: str = ""

    @classmethod
    def parse(cls, text: str) -> FigletFont:
        """Parse the contents of a .flf font file."""
        lines = text.split("\n")
        header = lines[0].rstrip("\r")
        if not header.startswith("flf2a") or len(header) < 6:
            raise ValueError("not a FIGlet font: bad signature")
        hardblank = header[5]
        fields = header[6:].split()
        try:
            height = int(fields[0])
            baseline = int(fields[1])
            comment_lines = int(fields[4])
        except (IndexError, ValueError) as exc:
            raise ValueError("malformed FIGlet header") from exc
        if height < 1 or comment_lines < 0:
            raise ValueError("malformed FIGlet header")
        if len(lines) < 1 + comment_lines:
            raise ValueError("FIGlet font truncated in comment block")

        comment = "\n".join(l.rstrip("\r") for l in lines[1 : 1 + comment_lines])
        body: Iterator[str] = iter(lines[1 + comment_lines :])

        def read_glyph() -> tuple[str, ...]:
            return tuple(_strip_endmark(l) for l in islice(body, height))

        glyphs: dict[int, tuple[str, ...]] = {}
        for code in _REQUIRED_ASCII:
            glyph = read_glyph()
            if len(glyph) < height:
                raise ValueError(f"FIGlet font truncated at character {code}")
            glyphs[code] = glyph

        for code in _GERMAN_CODES:
            glyph = read_glyph()
            if not glyph or (len(glyph) == 1 and not glyph[0]):
                return cls(hardblank, height, baseline, glyphs, comment)
            if len(glyph) < height:
                raise ValueError(f"FIGlet font truncated at character {code}")
            glyphs[code] = glyph

        for tag in body:
            tag = tag.strip()
            if not tag:
                continue
            try:
                code = _parse_code(tag.split()[0])
            except ValueError as exc:
                raise ValueError(f"bad code tag {tag!r}") from exc
            glyph = read_glyph()
            if len(glyph) < height:
                raise ValueError(f"FIGlet font truncated at character {code}")
            glyphs[code] = glyph

        return cls(hardblank, height, baseline, glyphs, comment)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> FigletFont:
        """Read and parse a .flf file."""
        return cls.parse(Path(path).read_text(encoding="latin-1"))

    def render(self, text: str) -> str | None:
        """Render ``text`` as rows, each ending in a newline.

        Characters missing from the font are skipped; None if none are known.
        """
        glyphs = [self.glyphs[ord(ch)] for ch in text if ord(ch) in self.glyphs]
        if not glyphs:
            return None
        rows = ("".join(parts).replace(self.hardblank, " ") for parts in zip(*glyphs))
        return "".join(f"{row}\n" for row in rows)


def _font_dirs() -> Iterator[Path]:
    env = os.environ.get("FIGLET_FONTDIR")
    if env:
        yield Path(env)
    for d in _FONT_DIRS:
        yield Path(d)


def _term_font_source() -> str:
    lines = ["flf2a\x7f 1 1 2 0 0"]
    for code in (*_REQUIRED_ASCII, *_GERMAN_CODES):
        ch = chr(code)
        end = "#" if ch == "@" else "@"
        lines.append(f"{ch}{end}{end}")
    return "\n".join(lines) + "\n"


def find_font(name: str) -> FigletFont | None:
    """Locate and load a font by name from the usual FIGlet font directories.

    The single-row ``term`` font is always available, built in if no file exists.
    """
    filename = name if name.endswith(".flf") else f"{name}.flf"
    for directory in _font_dirs():
        path = directory / filename
        if path.is_file():
            try:
                return FigletFont.load(path)
            except (OSError, ValueError):
                continue
    if name == "term":
        return FigletFont.parse(_term_font_source())
    return None