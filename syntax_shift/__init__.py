"""Core logic for SyntaxShift.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- repair and parse near-valid JSON
- infer TypeScript interfaces and zod schemas from JSON samples
- compile JSON Schema documents to TypeScript
- rewrite Python-like code as JavaScript-like code and back
- guess what format a piece of text is in
- route a converter slug to the engine that handles it
"""
