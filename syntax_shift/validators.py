from __future__ import annotations

from typing import Any

from .lenient_json import parse_lenient
from .naming import format_property_name

INDENT = '  '


def is_integral(value: Any) -> bool:
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def infer_validator(value: Any, depth: int = 0) -> str:
    """Build a zod expression describing `value`.

    Arrays are described by their first element only.
    """
    if value is None:
        return 'z.null()'
    if isinstance(value, bool):
        return 'z.boolean()'
    if isinstance(value, (int, float)):
        return 'z.number().int()' if is_integral(value) else 'z.number()'
    if isinstance(value, str):
        return 'z.string()'

    if isinstance(value, list):
        if not value:
            return 'z.array(z.unknown())'
        return f"z.array({infer_validator(value[0], depth)})"

    if isinstance(value, dict):
        if not value:
            return 'z.object({})'
        inner = INDENT * (depth + 1)
        fields = ',\n'.join(
            f"{inner}{format_property_name(key)}: {infer_validator(child, depth + 1)}"
            for key, child in value.items()
        )
        return f"z.object({{\n{fields},\n{INDENT * depth}}})"

    return 'z.unknown()'


def json_to_zod(text: str) -> str:
    schema = infer_validator(parse_lenient(text))
    return (
        'import { z } from "zod";\n'
        '\n'
        f"const schema = {schema};\n"
        '\n'
        'type Schema = z.infer<typeof schema>;'
    )
