"""Declarative description of a command's help text."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

HELP_SCHEMA_VERSION = "1.0"


@dataclass(frozen=True)
class Origin:
    """Where a tool comes from and under which licences."""

    upstream: str
    upstream_license: str
    our_license: str
    paper_doi: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "upstream": self.upstream,
            "upstream_license": self.upstream_license,
            "our_license": self.our_license,
        }
        if self.paper_doi is not None:
            out["paper_doi"] = self.paper_doi
        return out


@dataclass(frozen=True)
class FlagSpec:
    """One command-line flag."""

    long: str
    description: str
    short: str | None = None
    aliases: tuple[str, ...] = ()
    value: str | None = None
    type_hint: str | None = None
    required: bool = False
    default: str | None = None
    why_default: str | None = None

    def __post_init__(self) -> None:
        if self.short is not None and len(self.short) != 1:
            raise ValueError(f"short flag must be a single character, got {self.short!r}")
        object.__setattr__(self, "aliases", tuple(self.aliases))

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.short is not None:
            out["short"] = self.short
        out["long"] = self.long
        if self.aliases:
            out["aliases"] = list(self.aliases)
        if self.value is not None:
            out["value"] = self.value
        if self.type_hint is not None:
            out["type_hint"] = self.type_hint
        out["required"] = self.required
        if self.default is not None:
            out["default"] = self.default
        out["description"] = self.description
        if self.why_default is not None:
            out["why_default"] = self.why_default
        return out


@dataclass(frozen=True)
class Section:
    """A titled group of flags."""

    title: str
    flags: tuple[FlagSpec, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "flags", tuple(self.flags))

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "flags": [f.to_dict() for f in self.flags]}


@dataclass(frozen=True)
class Example:
    """A usage example with its explanation."""

    description: str
    command: str

    def to_dict(self) -> dict[str, Any]:
        return {"description": self.description, "command": self.command}


@dataclass(frozen=True)
class HelpSpec:
    """Everything needed to render a tool's help."""

    name: str
    version: str
    tagline: str
    usage_lines: tuple[str, ...] = ()
    sections: tuple[Section, ...] = ()
    examples: tuple[Example, ...] = ()
    origin: Origin | None = None
    json_result_schema_doc: str | None = None
    _extra: None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "usage_lines", tuple(self.usage_lines))
        object.__setattr__(self, "sections", tuple(self.sections))
        object.__setattr__(self, "examples", tuple(self.examples))

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "tool": self.name,
            "tool_version": self.version,
            "tagline": self.tagline,
        }
        if self.origin is not None:
            out["origin"] = self.origin.to_dict()
        out["usage_lines"] = list(self.usage_lines)
        out["sections"] = [s.to_dict() for s in self.sections]
        out["examples"] = [e.to_dict() for e in self.examples]
        if self.json_result_schema_doc is not None:
            out["json_result_schema_doc"] = self.json_result_schema_doc
        return out