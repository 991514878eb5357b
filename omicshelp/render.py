"""Render a HelpSpec in rich, plain or JSON form."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from typing import Any, TextIO

from omicshelp.ansi import Palette, bold, dim, no_color_env, rgb
from omicshelp.banner import Banner
from omicshelp.modes import HelpMode
from omicshelp.spec import HELP_SCHEMA_VERSION, FlagSpec, HelpSpec


def render(spec: HelpSpec, mode: HelpMode, stream: TextIO | None = None) -> None:
    """Write the help for ``spec`` to ``stream`` (standard output by default)."""
    out = sys.stdout if stream is None else stream
    if mode is HelpMode.RICH:
        _render_rich(spec, out)
    elif mode is HelpMode.PLAIN:
        _render_plain(spec, out)
    elif mode is HelpMode.JSON:
        _render_json(spec, out)
    else:
        raise ValueError(f"unknown help mode: {mode!r}")


def json_envelope(spec: HelpSpec) -> dict[str, Any]:
    """The JSON document for ``spec``, tagged with the schema version."""
    return {"schema_version": HELP_SCHEMA_VERSION, **spec.to_dict()}


def render_flag_table(flags: Sequence[FlagSpec], color: bool) -> str:
    """Lay out flags in rows with descriptions aligned in one column."""
    widest = max((_visible_flag_width(f) for f in flags), default=0)
    desc_col = widest + 2
    return "\n".join(_render_flag_row(f, color, desc_col) for f in flags)


def _render_rich(spec: HelpSpec, out: TextIO) -> None:
    color = not no_color_env()
    emit = lambda s="": print(s, file=out)  # noqa: E731
    banner = Banner.family(spec.name).render(color)
    if banner:
        emit()
        emit(banner)
    emit()
    emit(f"  {_rich_tagline(spec.name, spec.version, spec.tagline, color)}")
    emit()
    emit(bold(color, "USAGE:"))
    for line in spec.usage_lines:
        emit(f"  {rgb(color, Palette.GREEN, spec.name)} {line}")
    for section in spec.sections:
        emit()
        emit(bold(color, f"{section.title}:"))
        emit(render_flag_table(section.flags, color))
    if spec.examples:
        emit()
        emit(bold(color, "EXAMPLES:"))
        for ex in spec.examples:
            emit(f"  {dim(color, f'# {ex.description}')}")
            emit(f"  {rgb(color, Palette.GREEN, ex.command)}")
    emit()


def _render_plain(spec: HelpSpec, out: TextIO) -> None:
    emit = lambda s="": print(s, file=out)  # noqa: E731
    emit(f"{spec.name} {spec.version} — {spec.tagline}")
    emit()
    emit("USAGE")
    for line in spec.usage_lines:
        emit(f"  {spec.name} {line}")
    for section in spec.sections:
        emit()
        emit(section.title)
        emit(render_flag_table(section.flags, False))
    if spec.examples:
        emit()
        emit("EXAMPLES")
        widest = max(len(e.command) for e in spec.examples)
        for ex in spec.examples:
            pad = widest - len(ex.command) + 4
            emit(f"  {ex.command}{' ' * pad}# {ex.description}")
    emit()


def _render_json(spec: HelpSpec, out: TextIO) -> None:
    out.write(json.dumps(json_envelope(spec), indent=2, ensure_ascii=False))
    out.write("\n")


def _rich_tagline(name: str, version: str, description: str, color: bool) -> str:
    name_part = bold(color, rgb(color, Palette.TEAL, name))
    version_part = dim(color, f"v{version}")
    sep = dim(color, "─")
    desc_part = dim(color, description)
    return f"{name_part} {version_part}  {sep}  {desc_part}"


def _visible_flag_width(f: FlagSpec) -> int:
    # indent (2) + "-x, " or four spaces (4) + "--" (2) + long name + " value"
    return 2 + 4 + 2 + len(f.long) + (1 + len(f.value) if f.value is not None else 0)


def _render_flag_row(f: FlagSpec, color: bool, desc_col: int) -> str:
    pad = max(desc_col - _visible_flag_width(f), 2)
    short_part = (
        f"{rgb(color, Palette.GREEN, f'-{f.short}')}, " if f.short is not None else "    "
    )
    long_painted = rgb(color, Palette.GREEN, f"--{f.long}")
    value_part = f" {dim(color, f.value)}" if f.value is not None else ""
    desc_part = dim(color, f.description)
    return f"  {short_part}{long_painted}{value_part}{' ' * pad}{desc_part}"