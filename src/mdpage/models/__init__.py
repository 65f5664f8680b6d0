"""mdpage data models.

- SanitizedHtml: Renderer output that may be embedded unescaped
- PageHeader / Logo: Fixed banner content
- PageTheme: Presentation strings emitted verbatim
"""

from mdpage.models.page import Logo, PageHeader, PageTheme, SanitizedHtml

__all__ = [
    "Logo",
    "PageHeader",
    "PageTheme",
    "SanitizedHtml",
]
