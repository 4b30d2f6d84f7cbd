"""
FastAPI Application Entry Point.

This module creates and configures the FastAPI application instance.
It handles:
1. Application initialization
2. Router registration
3. Middleware configuration (CORS and audit)
4. Exception handlers (every failure becomes a JSON error envelope)
5. Startup/shutdown events

Run with: uvicorn yoda_api.api.main:app --reload
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from yoda_api import __version__
from yoda_api.core.config import get_settings
from yoda_api.core.logging_config import setup_logging, get_logger
from yoda_api.core.exceptions import RouteNotFound, ValidationError, YodaException
from yoda_api.core.middleware import CORS_HEADERS, AuditMiddleware, CORSHeadersMiddleware
from yoda_api.api.routes import AVAILABLE_ROUTES, ai_router, clients_router, status_router, tasks_router


# Initialize logging before anything else
settings = get_settings()
setup_logging(settings.log_level, settings.log_dir)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    - Startup: create missing tables when AUTO_INIT_DB is enabled
    - Shutdown: dispose both store engines
    """
    logger.info(f"Starting {settings.app_name} {__version__} in {settings.app_env} mode")
    logger.info(f"Revenue rate: {settings.automation.revenue_rate}/min")
    logger.info(f"Audit Logging: {settings.enable_audit_logging}")

    if settings.auto_init_db:
        from yoda_api.database import init_tables
        try:
            init_tables()
            logger.info("Checked/Initialized clinical and memory tables.")
        except Exception as e:
            logger.error(f"Failed to auto-init tables: {e}")

    yield  # Application runs here

    logger.info(f"Shutting down {settings.app_name}")

    from yoda_api.database import close_all_databases
    try:
        close_all_databases()
    except Exception as e:
        logger.error(f"Error closing database connections: {e}")


app = FastAPI(
    title="YODA Practice API",
    description="""
    Practice status, client and task listings, keyword-routed questions,
    and bulk auto-completion of routine tasks.

    ## Features

    - **Status**: client, memory, and pending task counts plus today's revenue
    - **Questions**: ask about clients, tasks, or automation in plain text
    - **Auto-completion**: complete flagged tasks and bill their estimates
    """,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ============================================================
# Middleware Configuration (Order matters!)
# ============================================================

if settings.enable_audit_logging:
    app.add_middleware(AuditMiddleware)
    logger.info("Audit logging middleware enabled")

# Added last so it is outermost: OPTIONS never reaches routing.
app.add_middleware(CORSHeadersMiddleware)


# ============================================================
# Exception Handlers
# ============================================================

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Unknown paths and known paths with the wrong method both get the route listing."""
    if exc.status_code in (404, 405):
        not_found = RouteNotFound(request.url.path, AVAILABLE_ROUTES)
        logger.debug(f"No route: {request.method} {request.url.path}")
        return JSONResponse(status_code=not_found.status_code, content=not_found.to_dict())

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Translate FastAPI body validation failures into the ValidationError envelope."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(location) or None

    error = ValidationError(
        message=f"Invalid request body: {first.get('msg', 'expected a JSON object with a string query')}",
        field=field,
    )
    logger.warning(f"Rejected request to {request.url.path}: {error.message} ({field})")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


@app.exception_handler(YodaException)
async def yoda_exception_handler(request: Request, exc: YodaException):
    """Handle all custom API exceptions."""
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Handle uncaught exceptions globally.

    This runs outside the middleware stack, so the CORS headers are
    attached here.
    """
    logger.exception(f"Unhandled exception: {exc}")

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": str(exc),
        },
        headers=CORS_HEADERS,
    )


# ============================================================
# Routers
# ============================================================

app.include_router(status_router)
app.include_router(ai_router)
app.include_router(clients_router)
app.include_router(tasks_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "yoda_api.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development()
    )
