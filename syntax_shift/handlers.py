from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import gradio as gr

from .detection import detect, suggested_converters
from .errors import TransformError
from .io_utils import read_text_content, write_output_file
from .registry import all_converters, default_input, default_settings, get_converter_by_slug, reverse_slug
from .router import transform

logger = logging.getLogger(__name__)

EXTENSIONS = {
    'TypeScript': '.ts',
    'Zod': '.ts',
    'JavaScript': '.js',
    'JSX': '.jsx',
    'Python': '.py',
    'JSON': '.json',
    'YAML': '.yaml',
    'HTML': '.html',
}


def converter_choices() -> List[Tuple[str, str]]:
    return [(f"{c.category} · {c.title}", c.slug) for c in all_converters()]


def settings_updates(slug: str):
    """Show the checkboxes the converter reads, reset to their defaults."""
    defaults = default_settings(slug)
    return (
        gr.update(visible='svgo' in defaults, value=defaults.get('svgo', True)),
        gr.update(visible='minify' in defaults, value=defaults.get('minify', False)),
    )


def select_converter_handler(slug: str):
    svgo_update, minify_update = settings_updates(slug)
    return default_input(slug), svgo_update, minify_update


def convert_handler(slug: str, text: str, svgo: bool = True, minify: bool = False):
    converter = get_converter_by_slug(slug)
    try:
        result = transform(slug, text or '', {'svgo': svgo, 'minify': minify})
    except TransformError as exc:
        logger.info("Conversion with %s failed: %s", slug, exc)
        return "", f"Error: {exc}"

    if not result.output:
        return "", ""
    title = converter.title if converter else slug
    return result.output, f"Converted with {title}."


def detect_handler(text: str, slug: str) -> str:
    found = detect(text or '')
    if found is None:
        return ""

    suggestions = suggested_converters(found.label, slug)
    message = f"Detected **{found.label}** ({found.confidence} confidence)."
    if suggestions:
        message += " Try: " + ", ".join(f"`{c.title}`" for c in suggestions)
    return message


def swap_direction_handler(slug: str, text: str, output: str):
    """Switch to the reverse converter, feeding the current output back in."""
    reverse = reverse_slug(slug)
    if reverse is None:
        return gr.update(), text, f"No reverse converter for {slug}."
    return gr.update(value=reverse), output or "", ""


def load_file_handler(file_obj):
    try:
        content = read_text_content(file_obj)
    except (ValueError, OSError) as e:
        return gr.update(), f"Error reading file: {str(e)}"
    return content, "File loaded."


def export_output_handler(output: str, slug: str, file_name: Optional[str] = None):
    if not output:
        return None, "Nothing to export."

    converter = get_converter_by_slug(slug)
    ext = EXTENSIONS.get(converter.target_label, '.txt') if converter else '.txt'

    if not file_name or not file_name.strip():
        file_name = "output"
    file_name = file_name.strip()
    if not file_name.lower().endswith(ext):
        file_name += ext

    try:
        path = write_output_file(output, file_name)
    except OSError as e:
        return None, f"Error during export: {str(e)}"
    return path, f"Export successful! Saved to {path}"
