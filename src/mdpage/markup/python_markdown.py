"""Markdown renderer backed by Python-Markdown.

A new ``markdown.Markdown`` instance is built for every call. Extensions such
as ``toc`` keep per-instance state (generated heading ids), so reusing one
instance would make output depend on earlier documents and would not be safe
across concurrent requests.
"""

import logging
from collections.abc import Iterable
from typing import Any

import markdown

from mdpage.config import DEFAULT_EXTENSION_CONFIGS, DEFAULT_EXTENSIONS
from mdpage.errors import RenderError
from mdpage.markup.base import MarkupRenderer
from mdpage.markup.sanitize import SafeMarkupExtension
from mdpage.models.page import SanitizedHtml

logger = logging.getLogger(__name__)


class MarkdownRenderer(MarkupRenderer):
    """Renders markdown to sanitized HTML.

    Usage:
        renderer = MarkdownRenderer(extensions=["tables"])
        fragment = renderer.render("# Hello")
    """

    def __init__(
        self,
        extensions: Iterable[str] | None = None,
        extension_configs: dict[str, dict[str, Any]] | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            extensions: Python-Markdown extension names (defaults to the
                GitHub-flavoured set in DEFAULT_EXTENSIONS)
            extension_configs: Per-extension settings
        """
        super().__init__("python-markdown")
        self.extensions = list(DEFAULT_EXTENSIONS if extensions is None else extensions)
        if extension_configs is None:
            extension_configs = DEFAULT_EXTENSION_CONFIGS if extensions is None else {}
        self.extension_configs = {k: dict(v) for k, v in extension_configs.items()}

    def _build(self) -> markdown.Markdown:
        return markdown.Markdown(
            extensions=[*self.extensions, SafeMarkupExtension()],
            extension_configs={k: dict(v) for k, v in self.extension_configs.items()},
            output_format="html",
        )

    def render(self, text: str) -> SanitizedHtml:
        """Convert markdown text to a sanitized HTML fragment.

        Args:
            text: Markdown source

        Returns:
            Sanitized HTML fragment (empty for empty input)

        Raises:
            RenderError: If an extension cannot be loaded or conversion fails
        """
        try:
            html = self._build().convert(text)
        except Exception as e:
            logger.error("Markdown conversion failed: %s", e)
            raise RenderError(str(e)) from e

        logger.debug("Rendered %d characters of markdown to %d characters of HTML",
                     len(text), len(html))
        return SanitizedHtml(html)
