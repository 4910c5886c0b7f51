"""Tests for SVG/HTML to JSX, XML to JSON and Markdown to HTML."""

import json

import pytest

from syntax_shift.errors import ParseError
from syntax_shift.markup import html_to_jsx, markdown_to_html, optimize_svg, svg_to_jsx, xml_to_json

SVG = '<svg class="icon">  <!-- drawn by hand -->\n  <path stroke-width="2" fill-rule="evenodd" d="M0 0"/></svg>'


# ---------------------------------------------------------------------------
# SVG / HTML
# ---------------------------------------------------------------------------

def test_svg_to_jsx_optimized():
    assert svg_to_jsx(SVG) == '<svg className="icon"> <path strokeWidth="2" fillRule="evenodd" d="M0 0"/></svg>'

def test_svg_to_jsx_without_optimization_keeps_comments():
    output = svg_to_jsx(SVG, optimize=False)
    assert "<!-- drawn by hand -->" in output
    assert 'strokeWidth="2"' in output

def test_optimize_svg_strips_multiline_comments():
    assert optimize_svg("<svg><!--\nA\nB\n--></svg>") == "<svg></svg>"

def test_svg_attribute_renames():
    output = svg_to_jsx('<path stroke-linecap="round" stroke-linejoin="round" clip-rule="evenodd"/>')
    assert output == '<path strokeLinecap="round" strokeLinejoin="round" clipRule="evenodd"/>'

def test_html_to_jsx():
    html = '<label for="x" class="y" onclick="go()"><input onChange="f()"></label>'
    assert html_to_jsx(html) == '<label htmlFor="x" className="y" onClick="go()"><input onChange="f()"></label>'

def test_html_to_jsx_leaves_other_markup_alone():
    assert html_to_jsx("<p>classes for everyone</p>") == "<p>classes for everyone</p>"


# ---------------------------------------------------------------------------
# XML
# ---------------------------------------------------------------------------

def test_xml_to_json_scalars():
    output = json.loads(xml_to_json("<user><id>1</id><name>SyntaxShift</name></user>"))
    assert output == {"user": {"id": 1, "name": "SyntaxShift"}}

def test_xml_to_json_is_indented():
    assert xml_to_json("<a>x</a>") == '{\n  "a": "x"\n}'

def test_xml_attributes_and_text():
    output = json.loads(xml_to_json('<link href="/x">home</link>'))
    assert output == {"link": {"@_href": "/x", "#text": "home"}}

def test_xml_repeated_tags_become_lists():
    output = json.loads(xml_to_json("<list><i>1</i><i>2</i><i>3</i><j>x</j></list>"))
    assert output == {"list": {"i": [1, 2, 3], "j": "x"}}

def test_xml_value_types():
    output = json.loads(xml_to_json(
        "<v><f>1.5</f><t>true</t><n>false</n><z>007</z><e/><neg>-3</neg></v>"
    ))
    assert output == {"v": {"f": 1.5, "t": True, "n": False, "z": "007", "e": "", "neg": -3}}

def test_xml_namespaces_are_dropped_from_names():
    output = json.loads(xml_to_json('<r xmlns="urn:x"><a>1</a></r>'))
    assert output == {"r": {"a": 1}}

@pytest.mark.parametrize("text", ["<a>", "<a></b>", "not xml"])
def test_invalid_xml(text):
    with pytest.raises(ParseError):
        xml_to_json(text)


# ---------------------------------------------------------------------------
# Markdown
# ---------------------------------------------------------------------------

def test_markdown_heading_and_paragraph():
    assert markdown_to_html("# SyntaxShift\n\nConvert anything.") == "<h1>SyntaxShift</h1>\n<p>Convert anything.</p>"

def test_markdown_fenced_code():
    assert "<pre><code>" in markdown_to_html("```\nx = 1\n```")

def test_markdown_tables():
    html = markdown_to_html("| a | b |\n| --- | --- |\n| 1 | 2 |")
    assert "<table>" in html
    assert "<td>1</td>" in html
