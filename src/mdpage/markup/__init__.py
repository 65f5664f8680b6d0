"""Markup rendering: the second stage of the rendering pipeline.

Renderers sit behind the MarkupRenderer interface so the markdown engine
can be swapped or replaced with a fake in tests.
"""

from mdpage.markup.base import MarkupRenderer
from mdpage.markup.python_markdown import MarkdownRenderer
from mdpage.markup.sanitize import SafeMarkupExtension, is_safe_url

__all__ = ["MarkupRenderer", "MarkdownRenderer", "SafeMarkupExtension", "is_safe_url"]
