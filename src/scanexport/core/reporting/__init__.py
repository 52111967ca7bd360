"""Markdown rendering of findings for report help text.

Provides:
- MarkdownRenderer: Jinja2 based renderer
- markdown_description: Render a finding with the bundled templates
"""

from .generator import MarkdownRenderer, markdown_description

__all__ = ["MarkdownRenderer", "markdown_description"]
