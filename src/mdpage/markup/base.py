"""Abstract base class for markup renderers.

A renderer turns markup text into a SanitizedHtml fragment. Implementations
MUST be:
1. Deterministic: identical text yields identical HTML
2. Sanitizing: no active script content survives from the input
3. Side-effect free: no file or network access, no shared mutable state

Swapping the markdown engine MUST NOT require changes outside the renderer
module.
"""

from abc import ABC, abstractmethod

from mdpage.models.page import SanitizedHtml


class MarkupRenderer(ABC):
    """Narrow interface around a markup-to-HTML engine.

    Attributes:
        name: Engine identifier (e.g., "python-markdown")
    """

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def render(self, text: str) -> SanitizedHtml:
        """Convert markup text to a sanitized HTML fragment.

        Args:
            text: Raw markup text

        Returns:
            Sanitized HTML fragment

        Raises:
            RenderError: If the engine rejects the input or fails internally
        """
        pass
