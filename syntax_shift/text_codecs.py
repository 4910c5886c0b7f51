from __future__ import annotations

import base64
import binascii
import codecs
import json
import re
from typing import Any
from urllib.parse import quote, unquote

from .errors import MalformedToken, ParseError

# Characters encodeURIComponent leaves alone on top of quote()'s defaults.
_URI_COMPONENT_SAFE = "!*'()"
_BAD_ESCAPE_RE = re.compile(r'%(?![0-9A-Fa-f]{2})')


def _pad(data: str) -> str:
    return data + '=' * (-len(data) % 4)


def base64_encode(text: str) -> str:
    return base64.b64encode(text.encode('utf-8')).decode('ascii')


def base64_decode(text: str) -> str:
    data = re.sub(r'\s+', '', text)
    try:
        return base64.b64decode(_pad(data), validate=True).decode('utf-8')
    except (binascii.Error, ValueError) as exc:
        raise ParseError(f"Invalid Base64 input: {exc}") from exc


def url_encode(text: str) -> str:
    return quote(text, safe=_URI_COMPONENT_SAFE)


def url_decode(text: str) -> str:
    bad = _BAD_ESCAPE_RE.search(text)
    if bad:
        raise ParseError(f"Invalid URL-encoded input: malformed escape at position {bad.start()}")
    try:
        return unquote(text, errors='strict')
    except UnicodeDecodeError as exc:
        raise ParseError(f"Invalid URL-encoded input: {exc}") from exc


def rot13(text: str) -> str:
    return codecs.encode(text, 'rot_13')


def _decode_segment(segment: str, label: str) -> Any:
    data = segment.replace('-', '+').replace('_', '/')
    try:
        raw = base64.b64decode(_pad(data), validate=True)
        return json.loads(raw.decode('utf-8'))
    except (binascii.Error, ValueError) as exc:
        raise MalformedToken(f"Invalid JWT {label}: {exc}") from exc


def jwt_decode(text: str) -> str:
    """Decode (without verifying) a JWT into its header, payload and signature."""
    parts = text.strip().split('.')
    if len(parts) != 3:
        raise MalformedToken("Invalid JWT: expected 3 dot-separated parts.")

    header = _decode_segment(parts[0], 'header')
    payload = _decode_segment(parts[1], 'payload')
    return json.dumps(
        {'header': header, 'payload': payload, 'signature': parts[2]},
        indent=2,
        ensure_ascii=False,
    )
