"""
PostSearch Backend: FastAPI Application Factory
=================================================

What:  Builds the FastAPI application around one PostsController and wires
       the production OpenSearch store for the process entry point.
How:   create_app(posts_controller) is the server factory; build_app()
       constructs store, controller and app explicitly; main() serves it
       with uvicorn.
Who:   `python -m app`, the `postsearch-api` console script, or
       `uvicorn app.main:build_app --factory`. Tests call create_app()
       with a stub controller.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │ Req ID   │→│  Logging        │→│  CORS        │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────────────────────────┐ ┌─────────────────┐ │
    │  │ /posts, /posts/{id}        │ │ GET /health     │ │
    │  └────────────────────────────┘ └─────────────────┘ │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ NotFound→404 │ Store→502 │ Unavailable→503   │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Serving:   main() logs the address uvicorn is started on
    Startup:   configure logging, validate settings, log the configured address
    Shutdown:  close the document store's HTTP session
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from app import __version__
from app.config import settings
from app.exceptions import DocumentStoreError, NotFoundError, StoreUnavailableError
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import health, posts
from app.services.opensearch_store import OpenSearchStore
from app.services.posts_controller import PostsController

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger for the whole application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Third-party clients log every HTTP round trip at INFO/DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("opensearch").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: logging, configuration check, configured-address log line.
    Shutdown: close the controller's document store.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("PostSearch Backend starting up...")

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving: /health reports the store as disconnected
        logger.error("Configuration error: %s", str(e))

    logger.info(
        "%s configured for http://%s:%d",
        app.title,
        settings.backend_host,
        settings.backend_port,
    )

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("PostSearch Backend shutting down...")
    await app.state.posts_controller.store.close()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP responses.

    Handler hierarchy:
        NotFoundError          → 404, empty body
        StoreUnavailableError  → 503 Service Unavailable
        DocumentStoreError     → 502 Bad Gateway
        Exception (fallback)   → 500 Internal Server Error

    Store error details (status, error body) are logged, never returned.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        """The id stays server-side; the client gets a bare 404."""
        rid = request_id_var.get("")
        logger.info("[%s] %s", rid, exc.message)
        return Response(status_code=404)

    @app.exception_handler(StoreUnavailableError)
    async def handle_store_unavailable(request: Request, exc: StoreUnavailableError):
        rid = request_id_var.get("")
        logger.error("[%s] Store unavailable: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=503,
            content={
                "error": "service_unavailable",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(DocumentStoreError)
    async def handle_store_error(request: Request, exc: DocumentStoreError):
        rid = request_id_var.get("")
        logger.error("[%s] Store error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=502,
            content={
                "error": "store_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: stack trace to the log, generic message to the client."""
        rid = request_id_var.get("")
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(posts_controller: PostsController) -> FastAPI:
    """
    Build the HTTP application bound to one controller instance.

    The controller is stored on app.state and reached by route handlers
    through routes.posts.get_posts_controller.
    """
    app = FastAPI(
        title="PostSearch API",
        description="RESTful CRUD for posts stored in an OpenSearch index.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.posts_controller = posts_controller

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(posts.router)
    app.include_router(health.router)

    return app


# ══════════════════════════════════════════════════════════════════════════
# Process Entry Point
# ══════════════════════════════════════════════════════════════════════════

def build_app() -> FastAPI:
    """Wire the production OpenSearch store, the posts controller and the app."""
    store = OpenSearchStore.from_settings(settings)
    posts_controller = PostsController(store, settings.posts_index, settings.posts_type)
    return create_app(posts_controller)


def main() -> None:
    setup_logging()
    app = build_app()
    logger.info(
        "%s listening at http://%s:%d",
        app.title,
        settings.backend_host,
        settings.backend_port,
    )
    uvicorn.run(
        app,
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
