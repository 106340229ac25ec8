"""HTTP server for the file explorer.

``create_app()`` builds the FastAPI application: the files router under the configured
prefix, CORS, security headers and uniform ``{"error": ...}`` bodies for failures.
``run_server()`` starts it under uvicorn, optionally with TLS.
"""

from __future__ import annotations

import logging
import os

from fileexplorer import __version__
from fileexplorer.config import CONFIG_ENV_VAR, Settings, get_settings
from fileexplorer.core.context import ExplorerContext

logger = logging.getLogger(__name__)

# Local browser clients on any port are always allowed.
_LOCAL_ORIGIN_REGEX = r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$"


def create_app(settings: Settings | None = None):
    """Build the FastAPI application serving ``settings.home_directory``."""
    from fastapi import FastAPI
    from fastapi.middleware.cors import CORSMiddleware

    from fileexplorer.api.errors import install_error_handlers
    from fileexplorer.api.middleware import (
        security_headers_middleware,
        unhandled_error_middleware,
    )
    from fileexplorer.api.v1 import mount_v1_routers

    if settings is None:
        settings = get_settings()
    prefix = settings.route_prefix

    app = FastAPI(
        title="File Explorer API",
        description="Browse, search, upload and download files under a home directory.",
        version=__version__,
        docs_url=f"{prefix}/docs",
        redoc_url=f"{prefix}/redoc",
        openapi_url=f"{prefix}/openapi.json",
    )

    # The root is fixed here for the lifetime of the app; handlers receive it via
    # the get_context dependency.
    app.state.settings = settings
    app.state.context = ExplorerContext(root=settings.home_directory)

    # --- CORS -----------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(set(settings.cors_allowed_origins)),
        allow_origin_regex=_LOCAL_ORIGIN_REGEX,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    # --- Middleware and error bodies -------------------------------------
    # Last registered runs outermost, so error responses also get the headers.
    app.middleware("http")(unhandled_error_middleware)
    app.middleware("http")(security_headers_middleware)
    install_error_handlers(app)

    # --- Routers -----------------------------------------------------------
    mount_v1_routers(app, prefix=prefix)

    logger.info("Serving %s at %s/", settings.home_directory, prefix)
    return app


def run_server(settings: Settings, dev: bool = False, config_path: str | None = None) -> None:
    """Start the file explorer server.

    ``config_path`` is the JSON file *settings* came from; dev mode hands it to the
    reloader child.
    """
    import uvicorn

    scheme = "https" if settings.ssl_certfile and settings.ssl_keyfile else "http"
    ssl_options = {}
    if scheme == "https":
        ssl_options = {
            "ssl_certfile": str(settings.ssl_certfile),
            "ssl_keyfile": str(settings.ssl_keyfile),
        }

    print("\n" + "=" * 50)
    print("FILE EXPLORER")
    print("=" * 50)
    print(f"\nServing {settings.home_directory}")
    display_host = "localhost" if settings.host in ("127.0.0.1", "0.0.0.0") else settings.host
    print(f"Listening on {scheme}://{display_host}:{settings.port}{settings.route_prefix}/\n")

    if dev:
        import pathlib

        # The reloader re-imports the app factory in a child process, which rebuilds
        # settings from the environment and the same JSON file.
        os.environ["FILEEXPLORER_HOME_DIRECTORY"] = str(settings.home_directory)
        os.environ["FILEEXPLORER_ROUTE_PREFIX"] = settings.route_prefix
        if config_path:
            os.environ[CONFIG_ENV_VAR] = str(pathlib.Path(config_path).expanduser().resolve())
        src_dir = str(pathlib.Path(__file__).resolve().parent.parent)
        uvicorn.run(
            "fileexplorer.api.serve:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            reload=True,
            reload_dirs=[src_dir],
            reload_includes=["*.py"],
            log_level="debug",
            **ssl_options,
        )
    else:
        app = create_app(settings)
        uvicorn.run(
            app,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
            **ssl_options,
        )
