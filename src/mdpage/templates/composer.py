"""Page composer: the last stage of the rendering pipeline.

Loads the document, renders it and embeds the fragment in the package
``page.html`` template. Each ``compose`` call re-reads and re-renders; there
is no memoization between calls.
"""

import logging
from pathlib import Path

from jinja2 import Environment, PackageLoader, TemplateError, select_autoescape

from mdpage.config import MdpageConfig
from mdpage.document.loader import DocumentLoader
from mdpage.errors import RenderError
from mdpage.markup.base import MarkupRenderer
from mdpage.markup.python_markdown import MarkdownRenderer
from mdpage.models.page import Logo, PageHeader, PageTheme, SanitizedHtml

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "page.html"


def header_from_config(config: MdpageConfig) -> PageHeader:
    """Build the banner content from configuration."""
    page = config.page
    return PageHeader(
        title=page.title,
        subtitle=page.subtitle,
        head_title=page.head_title,
        logo=Logo(
            src=page.logo.src,
            width=page.logo.width,
            height=page.logo.height,
            alt=page.logo.alt,
        ),
    )


def theme_from_config(config: MdpageConfig) -> PageTheme:
    """Build the presentation settings from configuration."""
    theme = config.theme
    return PageTheme(
        stylesheets=tuple(theme.stylesheets),
        color_mode=theme.color_mode,
        light_theme=theme.light_theme,
        dark_theme=theme.dark_theme,
    )


class PageComposer:
    """Composes the final page from a loader and a renderer.

    Usage:
        composer = PageComposer.from_config(config)
        html = composer.compose()
    """

    def __init__(
        self,
        loader: DocumentLoader,
        renderer: MarkupRenderer,
        header: PageHeader | None = None,
        theme: PageTheme | None = None,
        template_name: str = DEFAULT_TEMPLATE,
    ) -> None:
        """Initialize the composer.

        Args:
            loader: Reads the source document
            renderer: Converts document text to sanitized HTML
            header: Banner content (defaults to the configured defaults)
            theme: Presentation settings
            template_name: Package template to render
        """
        defaults = MdpageConfig()
        self.loader = loader
        self.renderer = renderer
        self.header = header or header_from_config(defaults)
        self.theme = theme or theme_from_config(defaults)
        self.template_name = template_name

        self._env = Environment(
            loader=PackageLoader("mdpage", "templates"),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    @classmethod
    def from_config(
        cls,
        config: MdpageConfig,
        document_path: Path | None = None,
    ) -> "PageComposer":
        """Create a composer wired to the Python-Markdown renderer.

        Args:
            config: mdpage configuration
            document_path: Override for the configured document path

        Returns:
            PageComposer instance
        """
        loader = DocumentLoader(
            document_path or config.document.path,
            encoding=config.document.encoding,
        )
        renderer = MarkdownRenderer(
            extensions=config.markup.extensions,
            extension_configs=config.markup.extension_configs,
        )
        return cls(
            loader,
            renderer,
            header=header_from_config(config),
            theme=theme_from_config(config),
        )

    def compose(self) -> str:
        """Produce the page for a single request.

        Returns:
            Complete HTML page

        Raises:
            DocumentReadError: If the document cannot be read
            RenderError: If markdown conversion or templating fails
        """
        text = self.loader.load()
        fragment = self.renderer.render(text)
        return self.embed(fragment)

    def embed(self, fragment: SanitizedHtml) -> str:
        """Embed a rendered fragment in the page layout.

        Args:
            fragment: Renderer output, inserted without further escaping

        Returns:
            Complete HTML page

        Raises:
            RenderError: If the page template cannot be loaded or rendered
        """
        try:
            template = self._env.get_template(self.template_name)
            page = template.render(header=self.header, theme=self.theme, content=fragment)
        except TemplateError as e:
            logger.error("Page template %s failed: %s", self.template_name, e)
            raise RenderError(str(e), stage="template") from e

        logger.info("Composed page (%d characters)", len(page))
        return page

    def compose_to_file(self, output_path: Path) -> Path:
        """Compose the page and write it to a file.

        Args:
            output_path: Destination HTML file

        Returns:
            Path to written file
        """
        page = self.compose()

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(page, encoding="utf-8")
        logger.info("Wrote page to %s", output_path)

        return output_path
