"""
Employee App Backend: FastAPI Application Factory
====================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   uvicorn serves the module-level `app` (uvicorn employee_app.main:app);
       tests call create_app() with their own Database handle.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────────────────────┐                   │
    │  │ Request context (ID + log)   │                   │
    │  └──────────────────────────────┘                   │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────────────┐ ┌─────────────┐ ┌────────────┐  │
    │  │ /employees     │ │ GET /health │ │ / (static) │  │
    │  └────────────────┘ └─────────────┘ └────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ DatabaseError→500 │ Exception→500            │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Build the Database handle (unless one was passed to create_app)
    3. Await the schema bootstrap; requests are accepted only after it completes
    4. Log the listening port

    Shutdown:
    1. Dispose the database engine (close all pooled connections)
"""

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from employee_app import __version__
from employee_app.config import settings
from employee_app.database import Database
from employee_app.exceptions import DatabaseError
from employee_app.middleware.request_context import RequestContextMiddleware, request_id_var
from employee_app.routes import employees, health
from employee_app.routes.frontend import mount_frontend

logger = logging.getLogger(__name__)

# Fixed listening port; not exposed as a setting
SERVER_PORT = 3000


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during startup, before anything else logs.
    """
    log_format = (
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle: startup and shutdown procedures.

    Code before `yield` runs on startup, code after it on shutdown. uvicorn
    does not accept connections until startup has returned, so the schema
    bootstrap is complete before the first request is handled.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Employee App backend starting up...")

    if app.state.database is None:
        app.state.database = Database.from_settings(settings)

    await app.state.database.create_schema()
    app.state.started_at = time.time()

    logger.info("Employee app running on port %d", SERVER_PORT)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Employee App backend shutting down...")
    await app.state.database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers.

    Handler hierarchy:
        DatabaseError           → 500 (generic message, context logged)
        Exception (fallback)    → 500 (summary logged, traceback left to the server)

    Responses never carry SQL, driver messages or stack traces.
    """

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        """Database error: generic message to user, details logged server-side."""
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for unexpected errors.

        Runs inside ServerErrorMiddleware, which re-raises afterwards so the
        server logs the traceback; only a one-line summary is logged here.
        """
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s: %s", rid, type(exc).__name__, str(exc))
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    database: Optional[Database] = None,
    frontend_dir: Optional[str] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database:     Database handle to serve requests with. When None, one is
                      built from settings during startup.
        frontend_dir: Static asset directory; defaults to settings.frontend_dir.

    Returns:
        Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Employee App API",
        description="Create, list and delete employee records.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.database = database
    # Reset again at startup; covers apps served without a lifespan
    app.state.started_at = time.time()

    # ── Register Middleware ───────────────────────────────────────────────
    app.add_middleware(RequestContextMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(employees.router)
    app.include_router(health.router)

    # Static mount claims every remaining path, so it goes last
    mount_frontend(app, frontend_dir or settings.frontend_dir)

    return app


app = create_app()
