from __future__ import annotations

import logging
import socket
from typing import Optional

import uvicorn
from fastapi import FastAPI

from timeserver.config import ServerConfig, load_config
from timeserver.http.problem import handle_unexpected_error
from timeserver.logging_setup import configure_logging
from timeserver.routes import build_router
from timeserver.routes.time import time_handler

logger = logging.getLogger(__name__)


def create_app(config: Optional[ServerConfig] = None) -> FastAPI:
    """Build the ASGI application with a locally constructed router."""
    # Configure logging before app instantiation so all modules emit
    configure_logging()
    config = config or load_config()
    # Only the exact path /time is served: no docs routes, no trailing-slash redirect
    app = FastAPI(
        title="timeserver",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.add_exception_handler(Exception, handle_unexpected_error)
    app.include_router(build_router(time_handler(config.layout)))
    return app


def bind_listener(config: ServerConfig) -> socket.socket:
    """Bind and listen on ``config.host:config.port``.

    Raises ``OSError`` when the address is unavailable. The socket is put in
    listening state here so a second bind on the same port fails at once.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((config.host, config.port))
        sock.listen()
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def build_server(app: FastAPI, config: ServerConfig) -> uvicorn.Server:
    # log_config=None keeps uvicorn from replacing configure_logging()'s setup
    return uvicorn.Server(
        uvicorn.Config(app, host=config.host, port=config.port, log_config=None)
    )


def run(config: Optional[ServerConfig] = None) -> None:
    """Serve until the process is terminated; exit 1 if the port cannot be bound."""
    configure_logging()
    config = config or load_config()
    app = create_app(config)
    try:
        sock = bind_listener(config)
    except OSError:
        logger.error("listen_failed host=%s port=%s", config.host, config.port, exc_info=True)
        raise SystemExit(1)
    host, port = sock.getsockname()[:2]
    logger.info("Listening... http://%s:%s", host, port)
    build_server(app, config).run(sockets=[sock])


# Intentionally do not instantiate the app at import time to prevent side effects.
