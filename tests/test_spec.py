import json

import pytest

from omicshelp.spec import Example, FlagSpec, HelpSpec, Origin, Section


def _sample():
    return HelpSpec(
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


def test_helpspec_uses_renamed_keys_in_order():
    d = _sample().to_dict()
    assert list(d) == ["tool", "tool_version", "tagline", "usage_lines", "sections", "examples"]
    assert d["tool"] == "rsomics-test"
    assert d["tool_version"] == "0.0.0"


def test_optional_helpspec_fields_appear_when_set():
    spec = HelpSpec(
        name="t",
        version="1",
        tagline="x",
        origin=Origin(upstream="up", upstream_license="MIT", our_license="MIT"),
        json_result_schema_doc="doc",
    )
    d = spec.to_dict()
    assert d["origin"] == {"upstream": "up", "upstream_license": "MIT", "our_license": "MIT"}
    assert d["json_result_schema_doc"] == "doc"
    assert list(d)[3] == "origin"
    assert list(d)[-1] == "json_result_schema_doc"


def test_origin_includes_doi_when_present():
    o = Origin(upstream="u", upstream_license="a", our_license="b", paper_doi="10.1/x")
    assert o.to_dict()["paper_doi"] == "10.1/x"


def test_flag_skips_absent_optionals():
    d = FlagSpec(long="all", description="do everything").to_dict()
    assert d == {"long": "all", "required": False, "description": "do everything"}


def test_flag_full_key_order():
    f = FlagSpec(
        short="x",
        long="long",
        aliases=["l"],
        value="<v>",
        type_hint="str",
        required=True,
        default="d",
        description="desc",
        why_default="because",
    )
    assert list(f.to_dict()) == [
        "short",
        "long",
        "aliases",
        "value",
        "type_hint",
        "required",
        "default",
        "description",
        "why_default",
    ]
    assert f.to_dict()["aliases"] == ["l"]


def test_flag_short_must_be_single_char():
    with pytest.raises(ValueError):
        FlagSpec(long="x", description="d", short="ab")


def test_sequences_are_stored_as_tuples():
    spec = _sample()
    assert isinstance(spec.sections, tuple)
    assert spec.usage_lines == ("[OPTIONS] <FILE>",)


def test_to_dict_is_json_round_trippable():
    d = _sample().to_dict()
    assert json.loads(json.dumps(d)) == d
    assert d["sections"][0]["flags"][1]["value"] == "<n>"
    assert d["examples"] == [{"description": "basic", "command": "rsomics-test input.fa"}]