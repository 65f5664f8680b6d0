"""mdpage page composition.

Jinja2 renders the package ``page.html`` template with autoescaping on;
only SanitizedHtml fragments are embedded unescaped.
"""

from mdpage.templates.composer import PageComposer

__all__ = ["PageComposer"]
