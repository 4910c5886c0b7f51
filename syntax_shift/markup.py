from __future__ import annotations

import json
import re
import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Set

import markdown

from .errors import ParseError

ATTRIBUTE_PREFIX = '@_'
TEXT_KEY = '#text'

_NUMBER_RE = re.compile(r'^-?(0|[1-9]\d*)(\.\d+)?$')

SVG_ATTRIBUTES = [
    (re.compile(r'\bclass='), 'className='),
    (re.compile(r'\bstroke-width='), 'strokeWidth='),
    (re.compile(r'\bstroke-linecap='), 'strokeLinecap='),
    (re.compile(r'\bstroke-linejoin='), 'strokeLinejoin='),
    (re.compile(r'\bfill-rule='), 'fillRule='),
    (re.compile(r'\bclip-rule='), 'clipRule='),
]

HTML_ATTRIBUTES = [
    (re.compile(r'\bclass='), 'className='),
    (re.compile(r'\bfor='), 'htmlFor='),
    (re.compile(r'\bonchange=', re.IGNORECASE), 'onChange='),
    (re.compile(r'\bonclick=', re.IGNORECASE), 'onClick='),
]


# ─── SVG / HTML to JSX ─────────────────────────────────────────────

def optimize_svg(text: str) -> str:
    """Drop comments and collapse whitespace runs."""
    text = re.sub(r'<!--[\s\S]*?-->', '', text)
    return re.sub(r'\s{2,}', ' ', text).strip()


def svg_to_jsx(text: str, optimize: bool = True) -> str:
    if optimize:
        text = optimize_svg(text)
    for pattern, replacement in SVG_ATTRIBUTES:
        text = pattern.sub(replacement, text)
    return text


def html_to_jsx(text: str) -> str:
    for pattern, replacement in HTML_ATTRIBUTES:
        text = pattern.sub(replacement, text)
    return text


# ─── XML to JSON ──────────────────────────────────────────────────

def _local_name(tag: str) -> str:
    if tag.startswith('{'):
        return tag[tag.index('}') + 1:]
    return tag


def _scalar(text: str) -> Any:
    if _NUMBER_RE.match(text):
        return float(text) if '.' in text else int(text)
    if text == 'true':
        return True
    if text == 'false':
        return False
    return text


def _element_text(elem: ET.Element) -> str:
    pieces = [elem.text or '']
    pieces.extend(child.tail or '' for child in elem)
    return ''.join(piece.strip() for piece in pieces)


def element_to_value(elem: ET.Element) -> Any:
    """Convert an element the way fast-xml-parser shapes its output.

    Attributes become '@_name' keys, repeated child tags become lists, and an
    element with nothing but text collapses to that text as a scalar.
    """
    children = list(elem)
    text = _element_text(elem)
    if not children and not elem.attrib:
        return _scalar(text)

    node: Dict[str, Any] = {}
    for name, value in elem.attrib.items():
        node[ATTRIBUTE_PREFIX + _local_name(name)] = value

    repeated: Set[str] = set()
    for child in children:
        key = _local_name(child.tag)
        value = element_to_value(child)
        if key not in node:
            node[key] = value
        elif key in repeated:
            node[key].append(value)
        else:
            node[key] = [node[key], value]
            repeated.add(key)

    if text:
        node[TEXT_KEY] = _scalar(text)
    return node


def xml_to_json(text: str) -> str:
    try:
        root = ET.fromstring(text.strip())
    except ET.ParseError as exc:
        raise ParseError(f"Invalid XML input: {exc}") from exc
    return json.dumps({_local_name(root.tag): element_to_value(root)}, indent=2, ensure_ascii=False)


# ─── Markdown to HTML ─────────────────────────────────────────────

MARKDOWN_EXTENSIONS: List[str] = ['fenced_code', 'tables']


def markdown_to_html(text: str) -> str:
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)
