"""Test fixtures for mdpage.

Sample Documents:
- documents/interview.md: A multi-section markdown document with a table,
  fenced code and links
"""

from pathlib import Path

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent

# Path to sample documents
DOCUMENTS_DIR = FIXTURES_DIR / "documents"

INTERVIEW_DOCUMENT = DOCUMENTS_DIR / "interview.md"


def get_sample_document(name: str) -> Path:
    """Get path to a sample document.

    Args:
        name: File name of the sample document

    Returns:
        Path to the sample document

    Raises:
        ValueError: If the document doesn't exist
    """
    path = DOCUMENTS_DIR / name
    if not path.exists():
        raise ValueError(f"Sample document not found: {name}")
    return path
