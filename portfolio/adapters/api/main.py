# portfolio\adapters\api\main.py
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from portfolio import __version__
from portfolio.shared.container import container
from portfolio.shared.config import settings, AppEnv
from portfolio.shared.logging_config import configure_logging
from portfolio.shared.telemetry import setup_telemetry, shutdown_telemetry, instrument_fastapi

# Import Routers
# Note: We import the modules directly to ensure 'container.wire' works correctly
from portfolio.adapters.api.routers import pages, insights, admin, health

logger = structlog.get_logger()

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages the application lifecycle.
    1. Startup: Telemetry, DI container wiring.
    2. Shutdown: Unwires the container, flushes pending spans.
    """
    setup_telemetry()
    logger.info("app_startup", env=settings.APP_ENV.value, base_url=settings.BASE_URL)

    # Modules that use Provide[...] markers
    container.wire(modules=[
        "portfolio.adapters.api.dependencies",
    ])

    yield

    logger.info("app_shutdown")
    container.unwire()
    shutdown_telemetry()

def create_app() -> FastAPI:
    """Factory function to create the FastAPI application."""
    configure_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        description="Personal portfolio: projects, insights, about, contact and admin sign-in",
        lifespan=lifespan,
        docs_url="/docs" if settings.APP_ENV != AppEnv.PRODUCTION else None,
        redoc_url=None,
    )

    # Global Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.DEBUG else [settings.BASE_URL],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next):
        """Binds request_id and path to every log line emitted for this request."""
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id, path=request.url.path)
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    instrument_fastapi(app)

    # Global Exception Handlers
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """
        Standardizes HTTP errors (unknown routes, bad methods).
        """
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "status": "error",
                "code": exc.status_code,
                "message": exc.detail,
            },
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catches unhandled exceptions so stack traces never reach visitors.
        """
        logger.error("unhandled_exception", error=str(exc), exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "code": 500,
                "message": "Internal Server Error" if not settings.DEBUG else str(exc),
            },
        )

    # Register Routers
    app.include_router(health.router)
    app.include_router(pages.router)
    app.include_router(insights.router)
    app.include_router(admin.router)

    return app
