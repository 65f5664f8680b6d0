"""Reads the source document from disk.

Every call to ``load`` performs exactly one read. Nothing is cached, so an
edited or replaced file is picked up on the next request.
"""

import logging
from pathlib import Path

from mdpage.errors import DocumentReadError

logger = logging.getLogger(__name__)


class DocumentLoader:
    """Loads the full text of a configured markdown file.

    Relative paths are resolved against the process working directory at
    the time of each ``load`` call, not when the loader is created.

    Usage:
        loader = DocumentLoader("README.md")
        text = loader.load()
    """

    def __init__(self, path: Path | str, encoding: str = "utf-8") -> None:
        """Initialize the loader.

        Args:
            path: Document path (trusted configuration value)
            encoding: Text encoding of the document
        """
        self.path = Path(path)
        self.encoding = encoding

    def resolve(self) -> Path:
        """Return the absolute path the next ``load`` will read."""
        if self.path.is_absolute():
            return self.path
        return Path.cwd() / self.path

    def load(self) -> str:
        """Read the document.

        Returns:
            Complete file contents (empty string for an empty file)

        Raises:
            DocumentReadError: If the file is missing, not a regular file,
                unreadable, or not valid text in the configured encoding
        """
        path = self.resolve()

        try:
            text = path.read_text(encoding=self.encoding)
        except FileNotFoundError as e:
            raise DocumentReadError(
                path, DocumentReadError.NOT_FOUND, f"Document not found: {path}"
            ) from e
        except LookupError as e:
            raise DocumentReadError(
                path,
                DocumentReadError.IO_ERROR,
                f"Unknown encoding {self.encoding!r} for document {path}",
            ) from e
        except UnicodeDecodeError as e:
            raise DocumentReadError(
                path,
                DocumentReadError.IO_ERROR,
                f"Document is not valid {self.encoding}: {path}",
            ) from e
        except OSError as e:
            raise DocumentReadError(
                path, DocumentReadError.IO_ERROR, f"Failed to read document {path}: {e}"
            ) from e

        logger.debug("Loaded document %s (%d characters)", path, len(text))
        return text
