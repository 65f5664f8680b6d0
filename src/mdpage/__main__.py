"""Entry point for running mdpage as a module.

Usage:
    python -m mdpage [command] [options]

Example:
    python -m mdpage render --output site/index.html
    python -m mdpage serve --port 8080
"""

from mdpage.cli import app

if __name__ == "__main__":
    app()
