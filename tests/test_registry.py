"""Tests for the converter catalogue."""

import pytest

from syntax_shift.registry import (
    DEFAULT_CONVERTER_SLUG,
    SAMPLES_BY_SOURCE,
    all_converters,
    converter_categories,
    default_input,
    default_settings,
    get_converter_by_slug,
    resolve_settings,
    reverse_slug,
)


def test_catalogue_size_and_unique_slugs():
    slugs = [c.slug for c in all_converters()]
    assert len(slugs) == 21
    assert len(set(slugs)) == 21

def test_empty_categories_are_hidden():
    categories = converter_categories()
    assert "CSS" not in categories
    assert "GraphQL" not in categories
    assert categories[0] == "SVG"

def test_converters_follow_category_order():
    categories = converter_categories()
    positions = [categories.index(c.category) for c in all_converters()]
    assert positions == sorted(positions)

def test_default_converter_exists():
    assert get_converter_by_slug(DEFAULT_CONVERTER_SLUG).title == "SVG to JSX"

def test_unknown_slug():
    assert get_converter_by_slug("css-to-tailwind") is None
    assert default_settings("css-to-tailwind") == {}
    assert default_input("css-to-tailwind") == ""

def test_placeholder_converters_are_flagged():
    pending = sorted(c.slug for c in all_converters() if not c.implemented)
    assert pending == ["json-schema-to-openapi-schema", "json-schema-to-protobuf"]

def test_every_converter_has_a_sample():
    for converter in all_converters():
        assert converter.source_label in SAMPLES_BY_SOURCE
        assert default_input(converter.slug) == SAMPLES_BY_SOURCE[converter.source_label]


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

def test_default_settings():
    assert default_settings("svg-to-jsx") == {"svgo": True}
    assert default_settings("json-prettify") == {"minify": False}
    assert default_settings("json-to-yaml") == {}

@pytest.mark.parametrize("given, expected", [
    (None, {"minify": False}),
    ({}, {"minify": False}),
    ({"minify": True}, {"minify": True}),
    ({"minify": 1}, {"minify": True}),
    ({"minify": ""}, {"minify": False}),
    ({"minify": True, "svgo": False, "extra": "x"}, {"minify": True}),
])
def test_resolve_settings(given, expected):
    assert resolve_settings("json-prettify", given) == expected

def test_resolve_settings_for_converter_without_settings():
    assert resolve_settings("base64-encode", {"minify": True}) == {}


# ---------------------------------------------------------------------------
# Reverse direction
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("slug, reverse", [
    ("base64-encode", "base64-decode"),
    ("base64-decode", "base64-encode"),
    ("url-encode", "url-decode"),
    ("rot13-encode", "rot13-decode"),
    ("json-to-yaml", "yaml-to-json"),
    ("yaml-to-json", "json-to-yaml"),
    ("python-to-javascript", "javascript-to-python"),
    ("javascript-to-python", "python-to-javascript"),
])
def test_reverse_slug(slug, reverse):
    assert reverse_slug(slug) == reverse

@pytest.mark.parametrize("slug", ["svg-to-jsx", "json-to-typescript", "jwt-decode", "json-prettify", "nope"])
def test_no_reverse(slug):
    assert reverse_slug(slug) is None
