"""mdpage - Render a markdown document as a single styled HTML page.

The rendering pipeline has three stages:
- DocumentLoader: reads the configured file on every request
- MarkupRenderer: converts markdown to a sanitized HTML fragment
- PageComposer: embeds the fragment in a fixed header + content layout

The page can be served over HTTP (``mdpage serve``) or written to a file
(``mdpage render``).
"""

__version__ = "0.1.0"
__author__ = "mdpage Contributors"
