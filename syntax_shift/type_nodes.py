"""Inferred TypeScript types and their rendering.

Nodes are frozen dataclasses so that equal structures compare (and hash)
equal; union construction relies on that for de-duplication.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from .naming import format_property_name, quote

INDENT = '  '


@dataclass(frozen=True)
class Primitive:
    kind: str  # "string"|"number"|"boolean"|"null"


@dataclass(frozen=True)
class Literal:
    text: str  # already rendered, e.g. '"red"' or '42'


@dataclass(frozen=True)
class Unknown:
    pass


@dataclass(frozen=True)
class EmptyRecord:
    pass


@dataclass(frozen=True)
class NamedRecord:
    """Reference to a lifted `Declaration`."""

    name: str


@dataclass(frozen=True)
class ArrayOf:
    item: 'TypeNode'
    grouped: bool = False  # always wrap the item in parentheses


@dataclass(frozen=True)
class UnionOf:
    members: Tuple['TypeNode', ...]


@dataclass(frozen=True)
class IntersectionOf:
    members: Tuple['TypeNode', ...]


@dataclass(frozen=True)
class Field:
    key: str
    type: 'TypeNode'
    optional: bool = False


@dataclass(frozen=True)
class InlineRecord:
    fields: Tuple[Field, ...]


@dataclass(frozen=True)
class Declaration:
    name: str
    fields: Tuple[Field, ...]


TypeNode = Union[
    Primitive, Literal, Unknown, EmptyRecord, NamedRecord,
    ArrayOf, UnionOf, IntersectionOf, InlineRecord,
]

STRING = Primitive('string')
NUMBER = Primitive('number')
BOOLEAN = Primitive('boolean')
NULL = Primitive('null')
UNKNOWN = Unknown()


def distinct(nodes: Iterable[TypeNode]) -> List[TypeNode]:
    """Drop structural duplicates, keeping first-seen order."""
    seen: List[TypeNode] = []
    for node in nodes:
        if node not in seen:
            seen.append(node)
    return seen


def union_of(nodes: Iterable[TypeNode]) -> TypeNode:
    members = distinct(nodes)
    if not members:
        return UNKNOWN
    if len(members) == 1:
        return members[0]
    return UnionOf(tuple(members))


def intersection_of(nodes: Iterable[TypeNode]) -> TypeNode:
    members = distinct(nodes)
    if not members:
        return UNKNOWN
    if len(members) == 1:
        return members[0]
    return IntersectionOf(tuple(members))


def render(node: TypeNode, depth: int = 0) -> str:
    """Render a type expression; `depth` is the nesting level of the enclosing block."""
    if isinstance(node, Primitive):
        return node.kind
    if isinstance(node, Literal):
        return node.text
    if isinstance(node, NamedRecord):
        return node.name
    if isinstance(node, EmptyRecord):
        return 'Record<string, unknown>'
    if isinstance(node, ArrayOf):
        item = render(node.item, depth)
        if node.grouped or isinstance(node.item, (UnionOf, IntersectionOf)):
            return f"({item})[]"
        return f"{item}[]"
    if isinstance(node, UnionOf):
        return ' | '.join(render(m, depth) for m in node.members)
    if isinstance(node, IntersectionOf):
        return ' & '.join(render(m, depth) for m in node.members)
    if isinstance(node, InlineRecord):
        return render_inline_record(node, depth)
    return 'unknown'


def render_inline_record(node: InlineRecord, depth: int = 0) -> str:
    if not node.fields:
        return '{}'
    pad = INDENT * (depth + 1)
    lines = []
    for field in node.fields:
        marker = '?' if field.optional else ''
        lines.append(f"{pad}{quote(field.key)}{marker}: {render(field.type, depth + 1)};")
    return '{\n' + '\n'.join(lines) + '\n' + INDENT * depth + '}'


def render_declaration(decl: Declaration) -> str:
    if not decl.fields:
        return f"export interface {decl.name} {{}}"
    lines = []
    for field in decl.fields:
        marker = '?' if field.optional else ''
        lines.append(f"{INDENT}{format_property_name(field.key)}{marker}: {render(field.type, 1)}")
    return f"export interface {decl.name} {{\n" + '\n'.join(lines) + '\n}'
