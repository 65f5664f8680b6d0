"""Document loading: the first stage of the rendering pipeline."""

from mdpage.document.loader import DocumentLoader

__all__ = ["DocumentLoader"]
