"""Best-effort guess of what format a blob of text is in.

Checks run in a fixed order and the first one that matches wins; several
patterns overlap (a JWT is also valid Base64, an SVG is also XML), so the
order is part of the behavior.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .lenient_json import strict_loads
from .registry import ConverterDescriptor, all_converters

HIGH = 'high'
MEDIUM = 'medium'
MIN_LENGTH = 3


@dataclass(frozen=True)
class DetectedFormat:
    label: str
    confidence: str  # "high"|"medium"


_JWT_RE = re.compile(r'^[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+$')
_SVG_RE = re.compile(r'^<svg[\s>]', re.IGNORECASE)
_DOCTYPE_RE = re.compile(r'^<!doctype\s+html', re.IGNORECASE)
_HTML_TAG_RE = re.compile(
    r'<(div|span|p|h[1-6]|section|article|main|header|footer|nav|form|input|button|img|a)\b',
    re.IGNORECASE,
)
_XML_PROLOG_RE = re.compile(r'^<\?xml', re.IGNORECASE)
_PYTHON_RE = re.compile(r'^(def |import |from |class |print\(|if __name__)', re.MULTILINE)
_JAVASCRIPT_RE = re.compile(r'^(function |const |let |var |export |import )', re.MULTILINE)
_MARKDOWN_RES = (
    re.compile(r'^#{1,6}\s', re.MULTILINE),
    re.compile(r'\*\*[^*]+\*\*'),
    re.compile(r'\[[^\]]+\]\([^)]+\)'),
)
_YAML_RE = re.compile(r'^[a-zA-Z_]\w*:\s', re.MULTILINE)
_BASE64_RE = re.compile(r'^[A-Za-z0-9+/]{20,}={0,2}$')


def _present(value) -> bool:
    """Truthiness where empty objects and arrays still count as present."""
    if value is None or value is False:
        return False
    if isinstance(value, (int, float, str)) and not isinstance(value, bool):
        return bool(value)
    return True


def _detect_json(text: str) -> Optional[DetectedFormat]:
    if not text.startswith(('{', '[')):
        return None
    try:
        parsed = strict_loads(text)
    except (ValueError, RecursionError):
        if re.search(r'[{\[]', text) and re.search(r'[}\]]', text):
            return DetectedFormat('JSON', MEDIUM)
        return None
    if isinstance(parsed, dict) and _present(parsed.get('type')) and (
        _present(parsed.get('properties')) or _present(parsed.get('items'))
    ):
        return DetectedFormat('JSON Schema', MEDIUM)
    return DetectedFormat('JSON', HIGH)


def _is_html(text: str) -> bool:
    if _DOCTYPE_RE.match(text):
        return True
    return text.startswith('<') and bool(_HTML_TAG_RE.search(text))


def _is_xml(text: str) -> bool:
    if _XML_PROLOG_RE.match(text):
        return True
    return bool(re.match(r'^<[a-zA-Z]', text)) and bool(re.search(r'</[a-zA-Z]', text))


def _is_javascript(text: str) -> bool:
    return bool(_JAVASCRIPT_RE.search(text)) or '=>' in text or 'console.' in text


def _is_markdown(text: str) -> bool:
    return any(pattern.search(text) for pattern in _MARKDOWN_RES)


def _is_yaml(text: str) -> bool:
    return bool(_YAML_RE.search(text)) and not text.startswith('{')


def _is_base64(text: str) -> bool:
    return bool(_BASE64_RE.match(re.sub(r'\s', '', text)))


def _fixed(label: str, confidence: str, predicate: Callable[[str], bool]) -> Callable[[str], Optional[DetectedFormat]]:
    def check(text: str) -> Optional[DetectedFormat]:
        return DetectedFormat(label, confidence) if predicate(text) else None
    return check


CHECKS: Tuple[Callable[[str], Optional[DetectedFormat]], ...] = (
    _fixed('JWT', HIGH, lambda text: bool(_JWT_RE.match(text))),
    _detect_json,
    _fixed('SVG', HIGH, lambda text: bool(_SVG_RE.match(text))),
    _fixed('HTML', HIGH, _is_html),
    _fixed('XML', MEDIUM, _is_xml),
    _fixed('Python', MEDIUM, lambda text: bool(_PYTHON_RE.search(text))),
    _fixed('JavaScript', MEDIUM, _is_javascript),
    _fixed('Markdown', MEDIUM, _is_markdown),
    _fixed('YAML', MEDIUM, _is_yaml),
    _fixed('Base64', MEDIUM, _is_base64),
)


def detect(text: str) -> Optional[DetectedFormat]:
    trimmed = (text or '').strip()
    if len(trimmed) < MIN_LENGTH:
        return None
    for check in CHECKS:
        found = check(trimmed)
        if found is not None:
            return found
    return None


def suggested_converters(label: str, current_slug: str) -> List[ConverterDescriptor]:
    return [c for c in all_converters() if c.source_label == label and c.slug != current_slug]
