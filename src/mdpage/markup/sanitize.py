"""Python-Markdown extension that keeps active content out of rendered HTML.

Raw HTML in the source is not passed through: the block-level HTML
preprocessor and the inline HTML pattern are removed, so tags such as
``<script>`` reach the serializer as text and come out escaped. Links and
images whose URL scheme is not allow-listed lose the offending attribute,
and event-handler attributes are dropped.
"""

import html
import re
from urllib.parse import urlsplit
from xml.etree.ElementTree import Element

from markdown import Markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

SAFE_SCHEMES = frozenset({"", "http", "https", "mailto"})

URL_ATTRIBUTES = ("href", "src")

# Browsers ignore ASCII whitespace and control characters inside a scheme
_IGNORED_URL_CHARS_RE = re.compile(r"[\x00-\x20\x7f]+")


def is_safe_url(url: str) -> bool:
    """Check whether a link or image URL may be emitted.

    Args:
        url: Attribute value as produced by the markdown parser

    Returns:
        True for relative URLs and http(s)/mailto URLs

    Examples:
        >>> is_safe_url("https://example.com")
        True
        >>> is_safe_url("java\\tscript:alert(1)")
        False
    """
    cleaned = _IGNORED_URL_CHARS_RE.sub("", html.unescape(url))
    try:
        scheme = urlsplit(cleaned).scheme
    except ValueError:
        return False
    return scheme.lower() in SAFE_SCHEMES


class UnsafeAttributeTreeprocessor(Treeprocessor):
    """Removes script-capable attributes from the element tree."""

    def run(self, root: Element) -> None:
        for element in root.iter():
            for attr in list(element.attrib):
                if attr.lower().startswith("on"):
                    del element.attrib[attr]
                elif attr in URL_ATTRIBUTES and not is_safe_url(element.attrib[attr]):
                    del element.attrib[attr]


class SafeMarkupExtension(Extension):
    """Disable raw HTML passthrough and strip unsafe URLs.

    Must be registered after every other extension so that HTML handlers
    installed by them (e.g. md_in_html) are removed as well.
    """

    def extendMarkdown(self, md: Markdown) -> None:
        md.preprocessors.deregister("html_block", strict=False)
        md.inlinePatterns.deregister("html", strict=False)
        # After "inline" (20) has built links and images
        md.treeprocessors.register(UnsafeAttributeTreeprocessor(md), "unsafe_attributes", 5)
