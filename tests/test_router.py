"""Tests for slug dispatch and the error taxonomy."""

import pytest

from syntax_shift import router
from syntax_shift.errors import MalformedToken, ParseError, TransformError, UnknownEngineFailure, UnsupportedMode
from syntax_shift.registry import all_converters, default_input
from syntax_shift.router import TransformResult, transform

ALL_SLUGS = [c.slug for c in all_converters()]


@pytest.mark.parametrize("slug", ALL_SLUGS + ["css-to-tailwind"])
@pytest.mark.parametrize("text", ["", "   \n\t"])
def test_blank_input_is_always_empty(slug, text):
    assert transform(slug, text) == TransformResult("")

def test_unknown_slug():
    with pytest.raises(UnsupportedMode, match="css-to-tailwind"):
        transform("css-to-tailwind", "x")

@pytest.mark.parametrize("slug", ALL_SLUGS)
def test_every_sample_converts(slug):
    assert transform(slug, default_input(slug)).output

@pytest.mark.parametrize("slug", ["json-schema-to-openapi-schema", "json-schema-to-protobuf"])
def test_placeholder_output(slug):
    output = transform(slug, default_input(slug)).output
    assert len(output.splitlines()) == 3
    assert slug in output
    assert "placeholder" in output

def test_registered_converter_without_engine_is_unsupported(monkeypatch):
    monkeypatch.delitem(router.ENGINES, "rot13-decode")
    with pytest.raises(UnsupportedMode):
        transform("rot13-decode", "abc")

def test_round_trip_pairs():
    assert transform("base64-decode", transform("base64-encode", "héllo").output).output == "héllo"
    assert transform("url-decode", transform("url-encode", "a b/c").output).output == "a b/c"
    assert transform("rot13-decode", transform("rot13-encode", "Hi").output).output == "Hi"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

def test_malformed_token():
    with pytest.raises(MalformedToken):
        transform("jwt-decode", "a.b")

@pytest.mark.parametrize("slug", ["json-to-typescript", "json-to-yaml", "json-prettify", "json-to-zod",
                                  "json-schema-to-typescript"])
def test_unparseable_json(slug):
    with pytest.raises(ParseError, match="Invalid JSON input"):
        transform(slug, "{{{")

def test_invalid_schema_combinator():
    with pytest.raises(UnknownEngineFailure):
        transform("json-schema-to-typescript", '{"oneOf": {"type": "string"}}')

def test_unexpected_engine_errors_are_wrapped(monkeypatch):
    def boom(text, settings):
        raise RuntimeError("boom")

    monkeypatch.setitem(router.ENGINES, "json-to-yaml", boom)
    with pytest.raises(UnknownEngineFailure, match="JSON to YAML failed: boom") as info:
        transform("json-to-yaml", "{}")
    assert isinstance(info.value.__cause__, RuntimeError)

def test_errors_share_a_base_class():
    for error in (ParseError, UnsupportedMode, MalformedToken, UnknownEngineFailure):
        assert issubclass(error, TransformError)


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

SVG = "<svg>  <!-- note --><rect/></svg>"

def test_svgo_defaults_on():
    assert transform("svg-to-jsx", SVG).output == "<svg> <rect/></svg>"

def test_svgo_off():
    assert "<!-- note -->" in transform("svg-to-jsx", SVG, {"svgo": False}).output

def test_minify_setting():
    assert transform("json-prettify", '{"a": 1}').output == '{\n  "a": 1\n}'
    assert transform("json-prettify", '{"a": 1}', {"minify": True}).output == '{"a":1}'

def test_unknown_settings_are_ignored():
    assert transform("base64-encode", "x", {"minify": True, "svgo": False}).output == "eA=="

def test_prettify_refuses_non_standard_constants():
    with pytest.raises(ParseError):
        transform("json-prettify", '{"a": NaN, "b": Infinity}')

def test_url_decode_malformed_escape():
    with pytest.raises(ParseError):
        transform("url-decode", "100%zz")
