from __future__ import annotations

import json
import re
from typing import Dict, List

_IDENTIFIER_RE = re.compile(r'^[A-Za-z_$][A-Za-z0-9_$]*$')
_WORD_SEPARATOR_RE = re.compile(r'[^A-Za-z0-9]+')


def to_pascal_case(value: str, default: str = 'Root') -> str:
    """Turn a JSON key into a type name.

    - Runs of non-alphanumeric characters separate words ('user_profile' -> 'UserProfile').
    - Only the first letter of each word is upper-cased, so 'usersItem' -> 'UsersItem'.
    - A name that would start with a digit gets a leading underscore.
    - Falls back to `default` when nothing usable remains.
    """
    if value is None:
        return default
    if not isinstance(value, str):
        value = str(value)

    words: List[str] = []
    for part in _WORD_SEPARATOR_RE.split(value):
        if not part:
            continue
        words.append(part[0].upper() + part[1:])

    name = ''.join(words)
    if not name:
        return default
    if name[0].isdigit():
        name = '_' + name
    return name


def is_valid_identifier(value: str) -> bool:
    return bool(_IDENTIFIER_RE.match(value))


def format_property_name(key: str) -> str:
    """Emit a property name bare when it is an identifier, else as a quoted string."""
    if is_valid_identifier(key):
        return key
    return quote(key)


def quote(key: str) -> str:
    return json.dumps(key, ensure_ascii=False)


class NameRegistry:
    """Hands out unique declaration names for one inference run.

    The first claim of a base name returns it unchanged; later claims
    return 'Base2', 'Base3', ...
    """

    def __init__(self) -> None:
        self._counts: Dict[str, int] = {}

    def claim(self, base: str) -> str:
        current = self._counts.get(base, 0)
        self._counts[base] = current + 1
        if current == 0:
            return base
        return f"{base}{current + 1}"

    def __contains__(self, base: str) -> bool:
        return base in self._counts
