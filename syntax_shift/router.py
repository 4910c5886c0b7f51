"""Dispatch a converter slug and input text to the engine that handles it."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from . import data_formats, markup, text_codecs, transpiler
from .errors import TransformError, UnknownEngineFailure, UnsupportedMode
from .registry import get_converter_by_slug, resolve_settings
from .schema_types import json_schema_to_typescript
from .type_inference import json_to_typescript
from .validators import json_to_zod

logger = logging.getLogger(__name__)

Engine = Callable[[str, Dict[str, Any]], str]


@dataclass
class TransformResult:
    output: str


ENGINES: Dict[str, Engine] = {
    'svg-to-jsx': lambda text, settings: markup.svg_to_jsx(text, optimize=settings['svgo']),
    'html-to-jsx': lambda text, settings: markup.html_to_jsx(text),
    'json-to-typescript': lambda text, settings: json_to_typescript(text),
    'json-to-yaml': lambda text, settings: data_formats.json_to_yaml(text),
    'json-prettify': lambda text, settings: data_formats.json_prettify(text, minify=settings['minify']),
    'json-to-zod': lambda text, settings: json_to_zod(text),
    'json-schema-to-typescript': lambda text, settings: json_schema_to_typescript(text),
    'python-to-javascript': lambda text, settings: transpiler.blocks_from_indentation(text),
    'javascript-to-python': lambda text, settings: transpiler.indentation_from_blocks(text),
    'base64-encode': lambda text, settings: text_codecs.base64_encode(text),
    'base64-decode': lambda text, settings: text_codecs.base64_decode(text),
    'url-encode': lambda text, settings: text_codecs.url_encode(text),
    'url-decode': lambda text, settings: text_codecs.url_decode(text),
    'rot13-encode': lambda text, settings: text_codecs.rot13(text),
    'rot13-decode': lambda text, settings: text_codecs.rot13(text),
    'jwt-decode': lambda text, settings: text_codecs.jwt_decode(text),
    'markdown-to-html': lambda text, settings: markup.markdown_to_html(text),
    'xml-to-json': lambda text, settings: markup.xml_to_json(text),
    'yaml-to-json': lambda text, settings: data_formats.yaml_to_json(text),
}


def unsupported_transform(slug: str) -> str:
    return '\n'.join([
        f"// {slug} is routed and recognized in SyntaxShift.",
        "// This converter currently ships with a best-effort placeholder output.",
        "// Full fidelity implementation for this target is pending.",
    ])


def transform(slug: str, text: str, settings: Optional[Mapping[str, Any]] = None) -> TransformResult:
    """Convert `text` with the converter registered under `slug`.

    Raises a TransformError subclass on failure. Blank input always yields
    an empty result, whatever the slug.
    """
    if text is None or not text.strip():
        return TransformResult('')

    converter = get_converter_by_slug(slug)
    engine = ENGINES.get(slug)
    if converter is None or (engine is None and converter.implemented):
        raise UnsupportedMode(f"Unsupported transform mode: {slug}")
    if engine is None:
        return TransformResult(unsupported_transform(slug))

    resolved = resolve_settings(slug, settings)
    logger.debug("Transforming %d chars with %s %s", len(text), slug, resolved)
    try:
        return TransformResult(engine(text, resolved))
    except TransformError:
        raise
    except Exception as exc:
        logger.warning("Converter %s failed: %s", slug, exc)
        raise UnknownEngineFailure(f"{converter.title} failed: {exc}") from exc
