from __future__ import annotations

import datetime
import json
from typing import Any

import yaml

from .errors import ParseError
from .lenient_json import parse_lenient

DOCUMENT_END = "\n...\n"


def _json_default(value: Any) -> Any:
    # YAML timestamps load as date/datetime objects.
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def as_pretty_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False, default=_json_default)


def json_to_yaml(text: str) -> str:
    data = parse_lenient(text)
    dumped = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    # Scalar documents end with an explicit "..." marker.
    if dumped.endswith(DOCUMENT_END):
        dumped = dumped[:-len(DOCUMENT_END)]
    return dumped.rstrip()


def yaml_to_json(text: str) -> str:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ParseError(f"Invalid YAML input: {exc}") from exc
    return as_pretty_json(data)


def json_prettify(text: str, minify: bool = False) -> str:
    data = parse_lenient(text)
    if minify:
        return json.dumps(data, separators=(',', ':'), ensure_ascii=False)
    return json.dumps(data, indent=2, ensure_ascii=False)
