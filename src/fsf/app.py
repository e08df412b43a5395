"""
FastAPI Application
===================
Serves builder-rendered pages inside the page shell, plus static assets.

Run with:
    fsf serve --port 8080
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from fsf.config import ServerConfig
from fsf.errors import ServeError
from fsf.manifest import Manifest, load_manifest
from fsf.routes import RouteTable, create_default_routes
from fsf.shell import PageShell
from fsf.utils.logger import get_logger

logger = get_logger(__name__)


def create_app(
    config: ServerConfig,
    routes: RouteTable | None = None,
    manifest: Manifest | None = None,
) -> FastAPI:
    """Create the application for a configuration.

    Every GET outside the static prefix renders through the route table.
    Unknown paths render the not-found fragment with status 200.

    Args:
        config: Server configuration
        routes: Route table (defaults to create_default_routes())
        manifest: Build manifest (defaults to loading config.manifest_path)

    Returns:
        Configured FastAPI application
    """
    routes = routes if routes is not None else create_default_routes()
    manifest = manifest if manifest is not None else load_manifest(config.manifest_path)
    shell = PageShell(config, manifest)

    app = FastAPI(
        title=config.title,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        debug=config.debug,
    )
    app.state.config = config
    app.state.routes = routes
    app.state.shell = shell

    # Mounted before the catch-all so static paths match first.
    if config.static_dir.is_dir():
        app.mount(
            config.static_prefix,
            StaticFiles(directory=config.static_dir),
            name="static",
        )
        logger.info("Serving %s at %s", config.static_dir, config.static_prefix)
    else:
        logger.warning("Static directory %s not found, static assets disabled", config.static_dir)

    @app.get("/{full_path:path}", response_class=HTMLResponse)
    def page(request: Request, full_path: str) -> HTMLResponse:
        """Render the page for the request path."""
        path = request.url.path
        fragment = routes.render(path)
        return HTMLResponse(shell.render(fragment, path=path))

    logger.info("Application created with %d route(s)", len(routes))
    return app


def serve(
    config: ServerConfig,
    routes: RouteTable | None = None,
    manifest: Manifest | None = None,
) -> None:
    """Run the application with uvicorn until interrupted.

    Raises:
        ServeError: If the server cannot start
    """
    import uvicorn

    app = create_app(config, routes, manifest)
    logger.info("Starting server on %s:%d", config.host, config.port)
    try:
        uvicorn.run(
            app,
            host=config.host,
            port=config.port,
            log_level="debug" if config.debug else "info",
        )
    except OSError as e:
        logger.error("Server failed to start: %s", e)
        raise ServeError(f"cannot serve on {config.host}:{config.port}: {e}") from e
    except SystemExit as e:
        # uvicorn exits instead of raising when it cannot bind.
        if e.code:
            logger.error("Server exited with status %s", e.code)
            raise ServeError(f"cannot serve on {config.host}:{config.port}") from e
        raise


__all__ = [
    "create_app",
    "serve",
]
