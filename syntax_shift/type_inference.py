from __future__ import annotations

from typing import Any, List, Tuple

from .lenient_json import parse_lenient
from .naming import NameRegistry, to_pascal_case
from .type_nodes import (
    BOOLEAN,
    NULL,
    NUMBER,
    STRING,
    UNKNOWN,
    ArrayOf,
    Declaration,
    EmptyRecord,
    Field,
    InlineRecord,
    NamedRecord,
    TypeNode,
    render,
    render_declaration,
    union_of,
)


def infer_primitive(value: Any) -> TypeNode:
    if value is None:
        return NULL
    # bool before int: True is an int in Python.
    if isinstance(value, bool):
        return BOOLEAN
    if isinstance(value, (int, float)):
        return NUMBER
    if isinstance(value, str):
        return STRING
    return UNKNOWN


def infer_named(
    value: Any,
    suggested_name: str,
    declarations: List[Declaration],
    registry: NameRegistry,
) -> TypeNode:
    """Infer a type, lifting every object into its own named declaration.

    The object's name is claimed before its children are visited, while the
    declaration itself is appended after them, so nested records precede the
    records that reference them in `declarations`.
    """
    if isinstance(value, list):
        if not value:
            return ArrayOf(UNKNOWN)
        members = [
            infer_named(item, f"{suggested_name}Item", declarations, registry)
            for item in value
        ]
        return ArrayOf(union_of(members))

    if isinstance(value, dict):
        name = registry.claim(to_pascal_case(suggested_name))
        fields = tuple(
            Field(key, infer_named(child, key, declarations, registry))
            for key, child in value.items()
        )
        declarations.append(Declaration(name, fields))
        return NamedRecord(name)

    return infer_primitive(value)


def infer_inline(value: Any) -> TypeNode:
    """Infer a single type expression with objects written out in place."""
    if isinstance(value, list):
        if not value:
            return ArrayOf(UNKNOWN)
        return ArrayOf(union_of(infer_inline(item) for item in value))

    if isinstance(value, dict):
        if not value:
            return EmptyRecord()
        return InlineRecord(tuple(Field(key, infer_inline(child)) for key, child in value.items()))

    return infer_primitive(value)


def infer_types(value: Any) -> Tuple[str, List[str]]:
    """Return `(root_type, declarations)` for a decoded JSON value.

    For an object the root type is the name of the root interface and
    `declarations` holds every rendered interface, root first. Any other value
    yields its inline type expression and no declarations.
    """
    if not isinstance(value, dict):
        return render(infer_inline(value)), []

    registry = NameRegistry()
    root_name = registry.claim('Root')
    nested: List[Declaration] = []
    fields = tuple(
        Field(key, infer_named(child, key, nested, registry))
        for key, child in value.items()
    )
    root = Declaration(root_name, fields)
    return root_name, [render_declaration(decl) for decl in [root, *nested]]


def json_to_typescript(text: str) -> str:
    root_type, declarations = infer_types(parse_lenient(text))
    if not declarations:
        return f"export type Root = {root_type};\n"
    return '\n\n'.join(declarations) + '\n'
