"""mdpage CLI interface.

Commands:
- render: Compose the page once and write it to a file or stdout
- serve: Serve the page over HTTP
- init: Write a default configuration file

Global options:
- --config: Path to configuration file
- --verbose: Enable verbose output with timestamps
- --quiet: Suppress info messages
- --ci: JSON log output
- --version: Show version and exit
"""

from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from mdpage import __version__
from mdpage.config import DocumentConfig, MdpageConfig, create_default_config, load_config
from mdpage.errors import MdpageError
from mdpage.utils.logging import configure_from_cli, get_logger

app = typer.Typer(
    name="mdpage",
    help="Render a markdown document as a styled HTML page",
    add_completion=False,
    no_args_is_help=True,
)

# Global state
_config: MdpageConfig | None = None
_logger = get_logger()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"mdpage {__version__}")
        raise typer.Exit()


def _get_config(document: Path | None = None) -> MdpageConfig:
    """Return a copy of the loaded config with the --document override applied."""
    config = _config or MdpageConfig()
    if document is not None:
        config = replace(
            config,
            document=DocumentConfig(path=str(document), encoding=config.document.encoding),
        )
    return config


@app.callback()
def main(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output with timestamps",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress info messages (warnings and errors only)",
        ),
    ] = False,
    ci: Annotated[
        bool,
        typer.Option(
            "--ci",
            help="Enable CI mode with JSON output",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """mdpage - Render a markdown document as a styled HTML page."""
    global _config

    configure_from_cli(verbose=verbose, quiet=quiet, ci=ci)

    try:
        _config = load_config(config_path=config)
        if _config.config_path:
            _logger.debug(f"Loaded config from: {_config.config_path}")
    except FileNotFoundError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except (ValueError, OSError) as e:
        _logger.error(f"Failed to load config: {e}")
        raise typer.Exit(1)


# =============================================================================
# render command
# =============================================================================


@app.command()
def render(
    document: Annotated[
        Path | None,
        typer.Option(
            "--document",
            "-d",
            help="Markdown file to render (overrides config)",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the page to this file instead of stdout",
        ),
    ] = None,
) -> None:
    """Compose the page once.

    Exit codes:
        0: Page rendered
        1: Document missing/unreadable or rendering failed
    """
    from mdpage.templates import PageComposer

    config = _get_config(document)
    _logger.info(f"Rendering {config.document.path}")

    composer = PageComposer.from_config(config)

    try:
        if output is not None:
            written = composer.compose_to_file(output)
            typer.echo(f"Page written to: {written}")
        else:
            typer.echo(composer.compose(), nl=False)
    except MdpageError as e:
        _logger.error(str(e))
        raise typer.Exit(1)


# =============================================================================
# serve command
# =============================================================================


@app.command()
def serve(
    host: Annotated[
        str | None,
        typer.Option(
            "--host",
            help="Bind address (overrides config)",
        ),
    ] = None,
    port: Annotated[
        int | None,
        typer.Option(
            "--port",
            "-p",
            help="Bind port (overrides config)",
            min=1,
            max=65535,
        ),
    ] = None,
    document: Annotated[
        Path | None,
        typer.Option(
            "--document",
            "-d",
            help="Markdown file to serve (overrides config)",
        ),
    ] = None,
) -> None:
    """Serve the page over HTTP on a single route (/)."""
    from mdpage.document import DocumentLoader
    from mdpage.server import run_server

    config = _get_config(document)
    document_path = DocumentLoader(config.document.path).resolve()
    if not document_path.exists():
        # Checked again on every request
        _logger.warning(f"Document does not exist yet: {document_path}")

    run_server(config, host=host, port=port)


# =============================================================================
# init command
# =============================================================================


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Overwrite existing config",
        ),
    ] = False,
) -> None:
    """Initialize mdpage configuration in ./.mdpage/config.yaml."""
    config_dir = Path(".mdpage")
    config_file = config_dir / "config.yaml"

    if config_file.exists() and not force:
        _logger.error(f"Config already exists: {config_file}")
        _logger.info("Use --force to overwrite")
        raise typer.Exit(1)

    config_dir.mkdir(exist_ok=True)
    config_file.write_text(create_default_config(), encoding="utf-8")
    _logger.info(f"Created config: {config_file}")

    typer.echo(f"Config written to: {config_file}")


if __name__ == "__main__":
    app()
