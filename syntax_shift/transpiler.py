"""Line-level rewriting between indentation blocks (Python-like) and brace blocks (JavaScript-like).

Both directions look at one trimmed line at a time. They do not parse
expressions and do not know about strings or comments, so block syntax
inside a string literal is rewritten like any other line.
"""
from __future__ import annotations

import re
from typing import List, Pattern, Tuple

INDENT = '  '
BLOCK_WIDTH = 4

Rewrite = Tuple[Pattern[str], str]

TO_BRACES: List[Rewrite] = [
    (re.compile(r'^def\s+([A-Za-z_]\w*)\(([^)]*)\):$'), r'function \1(\2) {'),
    (re.compile(r'^if\s+(.+):$'), r'if (\1) {'),
    (re.compile(r'^elif\s+(.+):$'), r'} else if (\1) {'),
    (re.compile(r'^else:$'), r'} else {'),
    (re.compile(r'^for\s+(\w+)\s+in\s+range\((.+)\):$'), r'for (let \1 = 0; \1 < \2; \1 += 1) {'),
    (re.compile(r'^while\s+(.+):$'), r'while (\1) {'),
    (re.compile(r'^print\((.*)\)$'), r'console.log(\1);'),
    (re.compile(r'\bTrue\b'), 'true'),
    (re.compile(r'\bFalse\b'), 'false'),
    (re.compile(r'\bNone\b'), 'null'),
    (re.compile(r'^return\s+(.+)$'), r'return \1;'),
]

TO_INDENTATION: List[Rewrite] = [
    (re.compile(r'^function\s+([A-Za-z_]\w*)\(([^)]*)\)\s*\{$'), r'def \1(\2):'),
    (re.compile(r'^if\s*\((.+)\)\s*\{$'), r'if \1:'),
    (re.compile(r'^\}\s*else if\s*\((.+)\)\s*\{$'), r'elif \1:'),
    (re.compile(r'^\}\s*else\s*\{$'), 'else:'),
    (re.compile(r'^else\s*\{$'), 'else:'),
    (re.compile(r'^while\s*\((.+)\)\s*\{$'), r'while \1:'),
    (re.compile(r'^for\s*\(let\s+(\w+)\s*=\s*0;\s*\1\s*<\s*(.+);\s*\1\s*\+=\s*1\)\s*\{$'), r'for \1 in range(\2):'),
    (re.compile(r'^console\.log\((.*)\)$'), r'print(\1)'),
    (re.compile(r'\btrue\b'), 'True'),
    (re.compile(r'\bfalse\b'), 'False'),
    (re.compile(r'\bnull\b'), 'None'),
]

_OPENS_BRACE_RE = re.compile(r'\{\s*$')
_TERMINATED_RE = re.compile(r'[;{}]$')
_OPENS_COLON_RE = re.compile(r':\s*$')


def split_lines(text: str) -> List[str]:
    return text.replace('\r\n', '\n').split('\n')


def apply_rewrites(line: str, rewrites: List[Rewrite]) -> str:
    for pattern, replacement in rewrites:
        line = pattern.sub(replacement, line)
    return line


def blocks_from_indentation(text: str) -> str:
    """Rewrite indentation-delimited blocks as brace-delimited blocks.

    `stack` holds the column at which each open block's body starts; the
    bottom frame (0) is never popped. Dedenting below the top frame closes
    blocks until it no longer is.
    """
    output: List[str] = []
    stack = [0]

    for raw in split_lines(text):
        trimmed = raw.strip()
        if not trimmed:
            output.append('')
            continue

        leading = len(raw) - len(raw.lstrip())
        while leading < stack[-1]:
            stack.pop()
            output.append(f"{INDENT * (len(stack) - 1)}}}")

        converted = apply_rewrites(trimmed, TO_BRACES)
        line = f"{INDENT * (len(stack) - 1)}{converted}"
        if _OPENS_BRACE_RE.search(converted):
            stack.append(leading + BLOCK_WIDTH)
        elif not _TERMINATED_RE.search(converted):
            line += ';'
        output.append(line)

    while len(stack) > 1:
        stack.pop()
        output.append(f"{INDENT * (len(stack) - 1)}}}")

    return '\n'.join(output)


def indentation_from_blocks(text: str) -> str:
    """Rewrite brace-delimited blocks as indentation-delimited blocks.

    Only a line consisting of a lone `}` closes a block.
    """
    output: List[str] = []
    level = 0

    for raw in split_lines(text):
        trimmed = raw.strip()
        if not trimmed:
            output.append('')
            continue

        if trimmed == '}':
            level = max(0, level - 1)
            continue

        converted = apply_rewrites(re.sub(r';$', '', trimmed), TO_INDENTATION)
        output.append(f"{INDENT * level}{converted}")
        if _OPENS_COLON_RE.search(converted):
            level += 1

    return '\n'.join(output)
