from __future__ import annotations

import os
import tempfile


def read_text_content(file_obj) -> str:
    """Read text from an uploaded file object or a file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8')
        return content

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def write_output_file(content: str, file_name: str) -> str:
    """Write `content` under the temp directory and return the path."""
    path = os.path.join(tempfile.gettempdir(), os.path.basename(file_name))
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)
    return path
