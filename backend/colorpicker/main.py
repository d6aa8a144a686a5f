"""
Color Picker API - FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and routers and
       attaches the lifespan; `app` is the module-level instance uvicorn loads.
Who:   Started with `colorpicker` (console script) or
       `uvicorn colorpicker.main:app`.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │ Req ID   │→│  Access Log     │→│  CORS        │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────┐ ┌──────────────────┐ ┌─────────────────┐  │
    │  │ GET /│ │ /api/v1/projects │ │ /api/v1/palettes│  │
    │  └──────┘ └──────────────────┘ └─────────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→422 │ NotFound→404 │ Database→500 │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, log the database target
    Shutdown: dispose the database engine (close pooled connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import make_url

from colorpicker import __version__
from colorpicker.config import settings
from colorpicker.database import dispose_engine
from colorpicker.exceptions import (
    ColorPickerError,
    ValidationError,
    NotFoundError,
    DatabaseError,
)
from colorpicker.middleware.request_id import RequestIDMiddleware, request_id_var
from colorpicker.middleware.logging import RequestLoggingMiddleware
from colorpicker.routes import root, projects, palettes, health
from colorpicker.services.validation import NOT_AN_OBJECT_MESSAGE

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,  # Override any existing logging config
    )

    # Our access log replaces uvicorn's; SQL echo is opt-in via LOG_LEVEL=DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    if settings.log_level != "DEBUG":
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: logging. Shutdown: release the connection pool."""
    setup_logging()
    logger.info("=" * 60)
    logger.info("Color Picker API %s starting up...", __version__)
    # Password is masked by render_as_string(hide_password=True)
    logger.info(
        "Database: %s",
        make_url(settings.database_url).render_as_string(hide_password=True),
    )
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield  # Application runs here

    logger.info("Color Picker API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to status codes and `{"error": ...}` bodies.

    Handler hierarchy:
        ValidationError         → 422 Unprocessable Entity
        RequestValidationError  → 422 (body is not a JSON object)
        NotFoundError           → 404 Not Found
        DatabaseError           → 500 (generic message, details logged)
        ColorPickerError (base) → 500
        Exception (fallback)    → 500 (generic message, traceback logged)
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(
            status_code=422,
            content={"error": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        logger.warning("[%s] Malformed request body: %s", request_id_var.get(""), exc.errors())
        return JSONResponse(
            status_code=422,
            content={"error": NOT_AN_OBJECT_MESSAGE},
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=404,
            content={"error": exc.message},
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        # Context goes to the log only; it may name tables and constraints
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""), exc.message, exc.context,
        )
        return JSONResponse(
            status_code=500,
            content={"error": "An internal error occurred. Please try again later."},
        )

    @app.exception_handler(ColorPickerError)
    async def handle_app_error(request: Request, exc: ColorPickerError):
        logger.error("[%s] %s: %s", request_id_var.get(""), type(exc).__name__, exc.message)
        return JSONResponse(
            status_code=500,
            content={"error": exc.message},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={"error": "An unexpected error occurred."},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Assemble middleware, exception handlers and routers into a FastAPI app."""
    app = FastAPI(
        title="Color Picker API",
        description="CRUD API for projects and their five-color palettes.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS → routes
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

    register_exception_handlers(app)

    app.include_router(root.router)
    app.include_router(projects.router)
    app.include_router(palettes.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve `app` with uvicorn on the configured host/port."""
    import uvicorn

    uvicorn.run(
        "colorpicker.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
