"""mdpage HTTP server.

Serves the composed page on a single fixed route. Every request re-reads and
re-renders the document; pipeline failures become a plain-text 500 response.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from mdpage import __version__
from mdpage.config import MdpageConfig
from mdpage.errors import DocumentReadError, RenderError
from mdpage.templates.composer import PageComposer

logger = logging.getLogger(__name__)


def create_app(
    config: MdpageConfig | None = None,
    composer: PageComposer | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: mdpage configuration (defaults apply when omitted)
        composer: Prebuilt composer; built from config when omitted

    Returns:
        Configured application instance
    """
    config = config or MdpageConfig()

    app = FastAPI(
        title="mdpage",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.composer = composer or PageComposer.from_config(config)

    @app.exception_handler(DocumentReadError)
    async def document_read_error(request: Request, exc: DocumentReadError) -> PlainTextResponse:
        logger.error("Document unavailable: %s", exc)
        return PlainTextResponse(f"Document unavailable ({exc.kind})", status_code=500)

    @app.exception_handler(RenderError)
    async def render_error(request: Request, exc: RenderError) -> PlainTextResponse:
        logger.error("%s", exc)
        return PlainTextResponse(f"Document could not be rendered ({exc.stage})", status_code=500)

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request) -> HTMLResponse:
        """Render the document page."""
        page = request.app.state.composer.compose()
        logger.info(
            "Served %s",
            request.url.path,
            extra={"extra_data": {"path": request.url.path, "bytes": len(page.encode("utf-8"))}},
        )
        return HTMLResponse(page)

    return app


def run_server(config: MdpageConfig, host: str | None = None, port: int | None = None) -> None:
    """Run the page server until interrupted.

    Args:
        config: mdpage configuration
        host: Bind address (overrides config)
        port: Bind port (overrides config)
    """
    import uvicorn

    host = host or config.server.host
    port = port or config.server.port

    logger.info("Serving %s on http://%s:%d/", config.document.path, host, port)
    # log_config=None keeps the handlers installed by setup_logging
    uvicorn.run(create_app(config), host=host, port=port, log_config=None)
