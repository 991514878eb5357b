import io
import json

import pytest

from omicshelp.modes import HelpMode
from omicshelp.render import json_envelope, render, render_flag_table
from omicshelp.spec import Example, FlagSpec, HelpSpec, Origin, Section

SAMPLE = HelpSpec(
    name="rsomics-test",
    version="0.0.0",
    tagline="test tool",
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
                    long="verbose-output",
                    value="<n>",
                    type_hint="usize",
                    default="0",
                    description="verbosity",
                ),
            ],
        )
    ],
    examples=[Example(description="basic", command="rsomics-test input.fa")],
)


def _render(spec, mode):
    buf = io.StringIO()
    render(spec, mode, buf)
    return buf.getvalue()


def test_json_envelope_has_schema_version():
    s = json.dumps(json_envelope(SAMPLE), separators=(",", ":"))
    assert '"schema_version":"1.0"' in s
    assert '"tool"' in s


def test_json_envelope_key_order():
    keys = list(json_envelope(SAMPLE))
    assert keys == ["schema_version", "tool", "tool_version", "tagline", "usage_lines", "sections", "examples"]


def test_json_envelope_includes_origin_when_present():
    spec = HelpSpec(
        name="t",
        version="1",
        tagline="x",
        origin=Origin(upstream="up", upstream_license="MIT", our_license="MIT"),
    )
    assert json_envelope(spec)["origin"] == {
        "upstream": "up",
        "upstream_license": "MIT",
        "our_license": "MIT",
    }


def test_plain_table_aligns_to_widest():
    lines = render_flag_table(SAMPLE.sections[0].flags, False).split("\n")
    assert lines[0].index("do everything") == lines[1].index("verbosity")


def test_plain_table_exact_rows():
    table = render_flag_table(SAMPLE.sections[0].flags, False)
    assert table == (
        "  -a, --all" + " " * 17 + "do everything\n"
        "      --verbose-output <n>  verbosity"
    )


def test_empty_flag_table():
    assert render_flag_table([], False) == ""


def test_colored_table_contains_escapes():
    assert "\x1b[" in render_flag_table(SAMPLE.sections[0].flags, True)


def test_plain_render_exact():
    expected = "\n".join(
        [
            "rsomics-test 0.0.0 — test tool",
            "",
            "USAGE",
            "  rsomics-test [OPTIONS] <FILE>",
            "",
            "OPTIONS",
            "  -a, --all" + " " * 17 + "do everything",
            "      --verbose-output <n>  verbosity",
            "",
            "EXAMPLES",
            "  rsomics-test input.fa    # basic",
            "",
        ]
    ) + "\n"
    assert _render(SAMPLE, HelpMode.PLAIN) == expected


def test_plain_render_without_examples_omits_section():
    spec = HelpSpec(name="t", version="1", tagline="x", usage_lines=["ARG"])
    assert _render(spec, HelpMode.PLAIN) == "t 1 — x\n\nUSAGE\n  t ARG\n\n"


def test_json_render_parses_back():
    out = _render(SAMPLE, HelpMode.JSON)
    assert out.endswith("\n")
    data = json.loads(out)
    assert data["schema_version"] == "1.0"
    assert data["tool"] == "rsomics-test"
    assert data["sections"][0]["flags"][1]["value"] == "<n>"
    assert "origin" not in data


def test_rich_render_respects_no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    out = _render(SAMPLE, HelpMode.RICH)
    assert "\x1b[" not in out
    assert "USAGE:" in out
    assert "rsomics-test v0.0.0  ─  test tool" in out
    assert "  # basic\n  rsomics-test input.fa\n" in out


def test_rich_render_colors_by_default(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    out = _render(SAMPLE, HelpMode.RICH)
    assert "\x1b[38;2;74;222;128m--all\x1b[0m" in out
    assert out.endswith("\n\n")


def test_render_rejects_unknown_mode():
    with pytest.raises(ValueError):
        render(SAMPLE, "bogus", io.StringIO())