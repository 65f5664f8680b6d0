"""Page entities: the sanitized fragment and the fixed layout around it.

SanitizedHtml is the only way markup reaches the page unescaped. Jinja2's
autoescaping honours the ``__html__`` protocol, so plain ``str`` values are
always escaped and only renderer output is embedded verbatim.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SanitizedHtml:
    """HTML fragment produced by a MarkupRenderer.

    Attributes:
        html: The rendered markup, exactly as the renderer returned it
    """

    html: str = ""

    def __html__(self) -> str:
        return self.html

    def __str__(self) -> str:
        return self.html

    def __len__(self) -> int:
        return len(self.html)


@dataclass(frozen=True)
class Logo:
    """Static image reference shown in the banner."""

    src: str
    width: int
    height: int
    alt: str


@dataclass(frozen=True)
class PageHeader:
    """Fixed decorative banner content.

    Attributes:
        title: Banner heading (appears once in the page)
        subtitle: Line under the heading
        logo: Banner image
        head_title: Text of the HTML <title> element
    """

    title: str
    subtitle: str
    logo: Logo
    head_title: str = "README"


@dataclass(frozen=True)
class PageTheme:
    """Presentation class names and theme attributes, emitted verbatim."""

    stylesheets: tuple[str, ...] = ()
    header_class: str = "px-4 py-8 mx-auto bg-[#0d1117] text-white"
    banner_class: str = "max-w-screen-md mx-auto flex flex-col items-center justify-center"
    logo_class: str = "my-6"
    title_class: str = "text-4xl font-bold"
    subtitle_class: str = "my-4"
    main_class: str = " w-10/12 xl:max-w-4xl my-12 mx-auto "
    content_class: str = "markdown-body"
    color_mode: str = "auto"
    light_theme: str = "light"
    dark_theme: str = "dark"
