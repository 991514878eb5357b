# omicshelp

One `--help` screen for a whole family of command-line tools. You describe a tool once as a
`HelpSpec`, and the same description can be printed three ways:

- **rich**: a FIGlet banner of the tool name shaded with a colour gradient, then a coloured
  tagline, usage lines, aligned flag tables and examples;
- **plain**: the same content with no escape codes, for pipes, logs and `NO_COLOR` users;
- **json**: a machine-readable document with a `schema_version` field, for scripts and AI
  agents that need to find out how to call the tool.

The package uses only the Python standard library.

## Describing a tool

```python
from omicshelp.spec import Example, FlagSpec, HelpSpec, Section

SPEC = HelpSpec(
    name="mytool",
    version="1.2.0",
    tagline="count records in a FASTA file",
    usage_lines=["[OPTIONS] <FILE>"],
    sections=[
        Section(
            title="OPTIONS",
            flags=[
                FlagSpec(
                    short="a",
                    long="all",
                    type_hint="bool",
                    default="false",
                    description="do everything",
                ),
                FlagSpec(
                    long="threads",
                    value="<n>",
                    type_hint="usize",
                    default="1",
                    description="worker threads",
                ),
            ],
        )
    ],
    examples=[Example(description="basic run", command="mytool input.fa")],
)
```

All spec classes are frozen dataclasses; lists passed in are stored as tuples. `FlagSpec.short`
must be a single character or `None`, otherwise `ValueError` is raised. `HelpSpec` also takes
an optional `origin` (an `Origin` with `upstream`, `upstream_license`, `our_license` and an
optional `paper_doi`) and an optional `json_result_schema_doc` string.

`HelpSpec.to_dict()` (and `to_dict()` on each part) gives the JSON-ready form. Optional fields
that are unset, and empty alias lists, are left out of it.

## Printing help

```python
import sys

from omicshelp.modes import intercept_help
from omicshelp.render import render


def main(argv=None):
    args = sys.argv if argv is None else argv
    mode = intercept_help(args)
    if mode is not None:
        render(SPEC, mode)
        return 0
    ...
```

`render(spec, mode, stream=None)` writes to `stream`, or to standard output when no stream is
given.

`intercept_help(args)` looks at the arguments after the program name (`args[0]` is skipped).
If any of them is `--help`, `-h` or `help`, it returns a `HelpMode`; otherwise it returns
`None`. `wants_help(args)` makes just that check. `detect_mode(args)` chooses the mode:

| Condition                                                       | Mode             |
|-----------------------------------------------------------------|------------------|
| `--json` is present                                             | `HelpMode.JSON`  |
| `--plain` is present, `NO_COLOR` is set, or stdout is not a TTY | `HelpMode.PLAIN` |
| otherwise                                                       | `HelpMode.RICH`  |

If both `--json` and `--plain` are given, `--json` is used. In rich mode, colour is switched off
when `NO_COLOR` is set.

## The JSON document

`json_envelope(spec)` returns the object that JSON mode writes (indented by two spaces,
non-ASCII characters kept as they are). It has:

- `schema_version` (currently `"1.0"`, also available as `omicshelp.spec.HELP_SCHEMA_VERSION`);
- `tool` and `tool_version`;
- `tagline`, `usage_lines`, `sections` and `examples`;
- `origin` and `json_result_schema_doc`, when they are set.

## Building blocks

- `omicshelp.ansi`: `bold`, `dim` and 24-bit `rgb` wrappers, each taking a `color` flag and
  returning the text unchanged when it is false. `no_color_env()` tells whether `NO_COLOR` is
  set. `Palette` holds the family colours, including `FAMILY_GRADIENT`.
- `omicshelp.banner`: `Gradient.at(t)` interpolates between evenly spaced colour stops for `t`
  from 0 to 1 (values outside are clamped; no stops gives white). `Gradient.family_default()`
  uses `Palette.FAMILY_GRADIENT`. `Banner.family(text).render(color)` draws the banner, one
  gradient colour per row, trying the `slant` font, then `small`, then the single-row `term`
  font. A font is skipped if it cannot be found or its output is wider than the terminal (80
  columns when the width cannot be determined). If none fits, it returns an empty string and
  the banner is left out.
- `omicshelp.figlet`: a small FIGlet font reader. `FigletFont.parse(text)` reads the contents
  of a `.flf` file and raises `ValueError` on a malformed one; `FigletFont.load(path)` reads a
  file. `FigletFont.render(text)` places glyphs side by side, skipping characters the font does
  not have, and returns `None` if none of them are known. `find_font(name)` looks for
  `<name>.flf` in the directory named by `FIGLET_FONTDIR` and then in the usual system FIGlet
  font directories, returning `None` if it is not found; `term` is always available, built in.
- `omicshelp.render`: `render(spec, mode, stream)` writes the help, and
  `render_flag_table(flags, color)` lays out one flag table with descriptions aligned in one
  column.

## What it does not do

- No FIGlet fonts ship with the package. The `slant` and `small` banners appear only when those
  font files are installed on the system; otherwise the banner falls back to the plain `term`
  font.
- Glyphs are placed at full width: there is no kerning or smushing, so banners are wider than
  those of the `figlet` program.
- It parses no arguments other than the help and mode flags described above, and installs no
  command of its own.