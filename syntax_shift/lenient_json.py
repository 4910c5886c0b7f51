from __future__ import annotations

import json
import logging
import re
from typing import Any, List

from .errors import ParseError

logger = logging.getLogger(__name__)

_TRAILING_COMMA_RE = re.compile(r',\s*([}\]])')


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name} in JSON")


def strict_loads(text: str) -> Any:
    """`json.loads` without the NaN, Infinity and -Infinity extensions."""
    return json.loads(text, parse_constant=_reject_constant)


def strip_trailing_commas(text: str) -> str:
    return _TRAILING_COMMA_RE.sub(r'\1', text)


def repair_candidates(text: str) -> List[str]:
    """Texts to try, in order: as-is, without trailing commas, brace-wrapped, both."""
    trimmed = text.strip()
    wrapped = '{' + trimmed + '}'
    return [
        trimmed,
        strip_trailing_commas(trimmed),
        wrapped,
        strip_trailing_commas(wrapped),
    ]


def parse_lenient(text: str) -> Any:
    """Decode near-valid JSON.

    The first candidate from `repair_candidates` that decodes wins. When none
    does, the ParseError carries the message of the strict attempt.
    """
    first_error = None
    for index, candidate in enumerate(repair_candidates(text)):
        try:
            return strict_loads(candidate)
        except ValueError as exc:
            logger.debug("JSON candidate %d rejected: %s", index, exc)
            if first_error is None:
                first_error = exc

    raise ParseError(f"Invalid JSON input: {first_error}") from first_error
