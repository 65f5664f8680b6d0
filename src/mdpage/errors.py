"""Exceptions raised by the rendering pipeline.

Both error kinds propagate unchanged to the request boundary (HTTP handler or
CLI command). Nothing in the pipeline substitutes fallback content.
"""

from pathlib import Path


class MdpageError(Exception):
    """Base class for pipeline failures."""


class DocumentReadError(MdpageError):
    """Raised when the source document is missing or unreadable.

    Attributes:
        path: Resolved path that was read
        kind: "not_found" or "io_error"
    """

    NOT_FOUND = "not_found"
    IO_ERROR = "io_error"

    def __init__(self, path: Path, kind: str, message: str | None = None) -> None:
        self.path = path
        self.kind = kind
        self.message = message or f"Cannot read document: {path}"
        super().__init__(f"{self.message} ({kind})")


class RenderError(MdpageError):
    """Raised when markup conversion or page templating fails."""

    def __init__(self, message: str, stage: str = "markup") -> None:
        self.stage = stage
        self.message = message
        super().__init__(f"Render failed [{stage}]: {message}")
