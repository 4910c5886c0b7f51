"""Catalogue of converters: slugs, labels, settings and sample inputs."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

SettingValue = Union[bool, str]


@dataclass(frozen=True)
class ConverterSetting:
    key: str
    label: str
    type: str  # "boolean"|"select"|"text"
    default_value: SettingValue
    options: Tuple[Tuple[str, str], ...] = ()  # (label, value) for "select"


@dataclass(frozen=True)
class ConverterDescriptor:
    slug: str
    title: str
    source_label: str
    target_label: str
    category: str
    settings: Tuple[ConverterSetting, ...] = ()
    implemented: bool = True  # False: recognized, answered with a placeholder


def _converter(slug, title, source, target, category, settings=(), implemented=True):
    return ConverterDescriptor(slug, title, source, target, category, tuple(settings), implemented)


SVGO_SETTING = ConverterSetting('svgo', 'SVGO optimization', 'boolean', True)
MINIFY_SETTING = ConverterSetting('minify', 'Minify output', 'boolean', False)

CONVERTERS_BY_CATEGORY: Dict[str, Tuple[ConverterDescriptor, ...]] = {
    'SVG': (
        _converter('svg-to-jsx', 'SVG to JSX', 'SVG', 'JSX', 'SVG', [SVGO_SETTING]),
    ),
    'HTML': (
        _converter('html-to-jsx', 'HTML to JSX', 'HTML', 'JSX', 'HTML'),
    ),
    'JSON': (
        _converter('json-to-typescript', 'JSON to TypeScript', 'JSON', 'TypeScript', 'JSON'),
        _converter('json-to-yaml', 'JSON to YAML', 'JSON', 'YAML', 'JSON'),
        _converter('json-prettify', 'JSON Prettify / Minify', 'JSON', 'JSON', 'JSON', [MINIFY_SETTING]),
        _converter('json-to-zod', 'JSON to Zod Schema', 'JSON', 'Zod', 'JSON'),
    ),
    'JSON Schema': (
        _converter('json-schema-to-typescript', 'JSON Schema to TypeScript', 'JSON Schema', 'TypeScript', 'JSON Schema'),
        _converter('json-schema-to-openapi-schema', 'JSON Schema to OpenAPI Schema', 'JSON Schema', 'OpenAPI Schema',
                   'JSON Schema', implemented=False),
        _converter('json-schema-to-protobuf', 'JSON Schema to Protobuf', 'JSON Schema', 'Protobuf', 'JSON Schema',
                   implemented=False),
    ),
    'Programming Languages': (
        _converter('python-to-javascript', 'Python to JavaScript', 'Python', 'JavaScript', 'Programming Languages'),
        _converter('javascript-to-python', 'JavaScript to Python', 'JavaScript', 'Python', 'Programming Languages'),
    ),
    'CSS': (),
    'GraphQL': (),
    'Utilities': (
        _converter('base64-encode', 'Base64 Encode', 'Text', 'Base64', 'Utilities'),
        _converter('base64-decode', 'Base64 Decode', 'Base64', 'Text', 'Utilities'),
        _converter('url-encode', 'URL Encode', 'Text', 'URL-encoded', 'Utilities'),
        _converter('url-decode', 'URL Decode', 'URL-encoded', 'Text', 'Utilities'),
        _converter('rot13-encode', 'ROT13 Encode', 'Text', 'ROT13', 'Utilities'),
        _converter('rot13-decode', 'ROT13 Decode', 'ROT13', 'Text', 'Utilities'),
        _converter('jwt-decode', 'JWT Decode', 'JWT', 'JSON', 'Utilities'),
    ),
    'Others': (
        _converter('markdown-to-html', 'Markdown to HTML', 'Markdown', 'HTML', 'Others'),
        _converter('xml-to-json', 'XML to JSON', 'XML', 'JSON', 'Others'),
        _converter('yaml-to-json', 'YAML to JSON', 'YAML', 'JSON', 'Others'),
    ),
}

DEFAULT_CONVERTER_SLUG = 'svg-to-jsx'

SAMPLES_BY_SOURCE: Dict[str, str] = {
    'SVG': '<svg width="100" height="100"><rect x="10" y="10" width="80" height="80" fill="#4f46e5" /></svg>',
    'HTML': '<div class="card"><h1>Hello</h1></div>',
    'JSON': '{\n  "id": 1,\n  "name": "SyntaxShift",\n  "active": true,\n  "tags": ["tools", "convert"]\n}',
    'JSON Schema': (
        '{\n  "title": "User",\n  "type": "object",\n  "properties": {\n'
        '    "id": { "type": "number" },\n    "name": { "type": "string" }\n  },\n'
        '  "required": ["id", "name"]\n}'
    ),
    'Python': 'def greet(name):\n    return f"Hello, {name}"',
    'JavaScript': 'function greet(name) {\n  return `Hello, ${name}`;\n}',
    'Text': 'Hello, SyntaxShift!',
    'Base64': 'SGVsbG8sIFN5bnRheFNoaWZ0IQ==',
    'URL-encoded': 'Hello%2C%20SyntaxShift!',
    'ROT13': 'Uryyb, FlagnkFuvsg!',
    'JWT': (
        'eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.'
        'eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IlN5bnRheFNoaWZ0IiwiaWF0IjoxNTE2MjM5MDIyfQ.'
        'SflKxwRJSMeKKF2QT4fwpMeJf36POk6yJV_adQssw5c'
    ),
    'Markdown': '# SyntaxShift\n\nConvert anything.',
    'XML': '<user><id>1</id><name>SyntaxShift</name></user>',
    'YAML': 'id: 1\nname: SyntaxShift',
}


def converter_categories() -> List[str]:
    return [category for category, converters in CONVERTERS_BY_CATEGORY.items() if converters]


def all_converters() -> List[ConverterDescriptor]:
    return [c for category in converter_categories() for c in CONVERTERS_BY_CATEGORY[category]]


def get_converter_by_slug(slug: str) -> Optional[ConverterDescriptor]:
    for converter in all_converters():
        if converter.slug == slug:
            return converter
    return None


def default_settings(slug: str) -> Dict[str, SettingValue]:
    converter = get_converter_by_slug(slug)
    if converter is None:
        return {}
    return {setting.key: setting.default_value for setting in converter.settings}


def resolve_settings(slug: str, settings: Optional[Mapping[str, Any]] = None) -> Dict[str, SettingValue]:
    """Settings the converter actually reads.

    Unknown keys are dropped, missing keys take the default and boolean
    settings are coerced by truthiness.
    """
    converter = get_converter_by_slug(slug)
    if converter is None:
        return {}

    settings = settings or {}
    resolved: Dict[str, SettingValue] = {}
    for setting in converter.settings:
        value = settings.get(setting.key, setting.default_value)
        if setting.type == 'boolean':
            value = bool(value)
        elif value is None:
            value = setting.default_value
        else:
            value = str(value)
        resolved[setting.key] = value
    return resolved


def default_input(slug: str) -> str:
    converter = get_converter_by_slug(slug)
    if converter is None:
        return ''
    return SAMPLES_BY_SOURCE.get(converter.source_label, '')


def reverse_slug(slug: str) -> Optional[str]:
    """Slug of the converter going the other way, if one is registered."""
    converter = get_converter_by_slug(slug)
    if converter is None:
        return None
    for candidate in all_converters():
        if (
            candidate.slug != slug
            and candidate.source_label == converter.target_label
            and candidate.target_label == converter.source_label
        ):
            return candidate.slug
    return None
