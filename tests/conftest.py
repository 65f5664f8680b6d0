"""Shared pytest fixtures for mdpage tests.

Fixtures are organized by category:
- Path fixtures: Sample documents shipped with the tests
- Document fixtures: Temporary markdown files
- Configuration fixtures: Config dictionaries for various scenarios
- Pipeline fixtures: Fake renderers for composer and server tests
"""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from mdpage.utils.logging import ROOT_LOGGER, SERVER_LOGGERS
from tests.fixtures.renderers import FakeRenderer

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def documents_dir(fixtures_dir: Path) -> Path:
    """Return the path to sample markdown documents."""
    return fixtures_dir / "documents"


# =============================================================================
# Document Fixtures
# =============================================================================


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that writes a markdown file under tmp_path."""

    def _write(text: str, name: str = "README.md") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def hello_document(write_document: Callable[..., Path]) -> Path:
    """Create a document with a heading and a paragraph."""
    return write_document("# Hello\n\nWorld")


@pytest.fixture
def empty_document(write_document: Callable[..., Path]) -> Path:
    """Create an empty document."""
    return write_document("")


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def minimal_config() -> dict[str, Any]:
    """Return a minimal valid mdpage configuration."""
    return {
        "document": {
            "path": "README.md",
        }
    }


@pytest.fixture
def full_config() -> dict[str, Any]:
    """Return a complete mdpage configuration with all options."""
    return {
        "document": {
            "path": "docs/INTERVIEW.md",
            "encoding": "utf-8",
        },
        "markup": {
            "extensions": ["tables", "fenced_code"],
        },
        "page": {
            "title": "Mastering Python Interview",
            "subtitle": "50 Questions",
            "head_title": "Python Interview",
            "logo": {
                "src": "/static/python.svg",
                "width": 64,
                "height": 64,
                "alt": "Python logo",
            },
        },
        "theme": {
            "stylesheets": ["/static/site.css"],
            "color_mode": "dark",
            "light_theme": "light_high_contrast",
            "dark_theme": "dark_dimmed",
        },
        "server": {
            "host": "0.0.0.0",
            "port": 9000,
        },
    }


# =============================================================================
# Pipeline Fixtures
# =============================================================================


@pytest.fixture
def fake_renderer() -> FakeRenderer:
    """Return a renderer that always yields <p>fake</p>."""
    return FakeRenderer()


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo handlers installed by setup_logging (CLI runs install them)."""
    yield
    for name in (ROOT_LOGGER, *SERVER_LOGGERS):
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
