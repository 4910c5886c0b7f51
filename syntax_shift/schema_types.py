"""JSON Schema (or plain JSON that merely looks like data) to TypeScript."""
from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Tuple

from .errors import UnknownEngineFailure
from .lenient_json import parse_lenient
from .naming import NameRegistry, to_pascal_case
from .type_inference import infer_inline
from .type_nodes import (
    BOOLEAN,
    NULL,
    NUMBER,
    STRING,
    UNKNOWN,
    ArrayOf,
    Field,
    InlineRecord,
    Literal,
    NamedRecord,
    TypeNode,
    intersection_of,
    render,
    union_of,
)

SCHEMA_KEYWORDS = (
    '$schema', 'type', 'properties', 'required', 'items',
    '$defs', 'definitions', 'allOf', 'anyOf', 'oneOf', 'enum',
)
DEFINITION_CONTAINERS = ('$defs', 'definitions')

_PRIMITIVES = {
    'string': STRING,
    'number': NUMBER,
    'integer': NUMBER,
    'boolean': BOOLEAN,
    'null': NULL,
}


def is_schema_like(value: Any) -> bool:
    return isinstance(value, dict) and any(key in value for key in SCHEMA_KEYWORDS)


def literal(value: Any) -> Literal:
    return Literal(json.dumps(value, ensure_ascii=False))


class SchemaConverter:
    """Converts one schema document; holds its definitions for `$ref` lookups."""

    def __init__(self, document: Dict[str, Any]) -> None:
        self._definitions: Dict[str, Any] = {}
        for container in DEFINITION_CONTAINERS:
            defs = document.get(container)
            if isinstance(defs, dict):
                for name, schema in defs.items():
                    self._definitions.setdefault(name, schema)

        registry = NameRegistry()
        registry.claim('Root')
        self._names = {name: registry.claim(to_pascal_case(name)) for name in self._definitions}

    def definitions(self) -> List[Tuple[str, Any]]:
        return [(self._names[name], schema) for name, schema in self._definitions.items()]

    def convert(self, schema: Any) -> TypeNode:
        if not isinstance(schema, dict):
            return UNKNOWN

        enum = schema.get('enum')
        if isinstance(enum, list):
            return union_of(literal(item) for item in enum)

        if '$ref' in schema:
            return self._resolve_ref(schema['$ref'])
        if 'const' in schema:
            return literal(schema['const'])

        for keyword in ('anyOf', 'oneOf'):
            if keyword in schema:
                return union_of(self.convert(s) for s in self._subschemas(schema, keyword))
        if 'allOf' in schema:
            return intersection_of(self.convert(s) for s in self._subschemas(schema, 'allOf'))

        schema_type = schema.get('type')
        if isinstance(schema_type, list):
            return union_of(self._convert_typed(schema, t) for t in schema_type)
        return self._convert_typed(schema, schema_type)

    def _convert_typed(self, schema: Dict[str, Any], schema_type: Any) -> TypeNode:
        if schema_type == 'array':
            return self._convert_array(schema)
        if schema_type == 'object' or 'properties' in schema:
            return self._convert_object(schema)
        if schema_type is None and 'items' in schema:
            return self._convert_array(schema)
        if isinstance(schema_type, str) and schema_type in _PRIMITIVES:
            return _PRIMITIVES[schema_type]
        return UNKNOWN

    def _convert_array(self, schema: Dict[str, Any]) -> TypeNode:
        items = schema.get('items', {})
        if isinstance(items, list):
            # Tuple-style items: any of the positional schemas.
            return ArrayOf(union_of(self.convert(s) for s in items), grouped=True)
        return ArrayOf(self.convert(items), grouped=True)

    def _convert_object(self, schema: Dict[str, Any]) -> TypeNode:
        required = schema.get('required')
        required_keys = set(k for k in required if isinstance(k, str)) if isinstance(required, list) else set()
        properties = schema.get('properties')
        if not isinstance(properties, dict):
            properties = {}
        return InlineRecord(tuple(
            Field(key, self.convert(child), optional=key not in required_keys)
            for key, child in properties.items()
        ))

    def _subschemas(self, schema: Dict[str, Any], keyword: str) -> Iterable[Any]:
        members = schema[keyword]
        if not isinstance(members, list) or not all(isinstance(m, (dict, bool)) for m in members):
            raise UnknownEngineFailure(f"'{keyword}' must be a list of schemas.")
        return members

    def _resolve_ref(self, ref: Any) -> TypeNode:
        if ref == '#':
            return NamedRecord('Root')
        if not isinstance(ref, str) or not ref.startswith('#/'):
            return UNKNOWN
        parts = ref[2:].split('/')
        if len(parts) != 2 or parts[0] not in DEFINITION_CONTAINERS:
            return UNKNOWN
        name = parts[1].replace('~1', '/').replace('~0', '~')
        if name not in self._definitions:
            return UNKNOWN
        return NamedRecord(self._names[name])


def infer_from_schema_like(value: Any) -> str:
    """Render TypeScript for a schema document, or for plain data wrapped in `Root`."""
    if not is_schema_like(value):
        node = infer_inline(value)
        if isinstance(node, InlineRecord):
            return f"export interface Root {render(node)}\n"
        return f"export interface Root {{\n  value: {render(node, 1)};\n}}\n"

    converter = SchemaConverter(value)
    root = converter.convert(value)
    if isinstance(root, InlineRecord):
        parts = [f"export interface Root {render(root)}"]
    else:
        parts = [f"export type Root = {render(root)};"]
    for name, schema in converter.definitions():
        parts.append(f"export type {name} = {render(converter.convert(schema))};")
    return '\n\n'.join(parts) + '\n'


def json_schema_to_typescript(text: str) -> str:
    return infer_from_schema_like(parse_lenient(text))
