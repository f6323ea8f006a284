"""
FastAPI application factory.

Creates and configures the main application instance.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from src.api.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from src.api.middleware.error_handler import setup_exception_handlers
from src.api.routes import (
    health_router,
    products_router,
    report_router,
    sales_router,
    stock_router,
)
from src.config import configure_logging, get_logger, get_settings

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent


def _resolve(path: Path) -> Path:
    """Resolve a configured directory relative to the project root."""
    return path if path.is_absolute() else PROJECT_ROOT / path


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.

    Prepares storage on startup and releases it on shutdown.
    """
    configure_logging()
    settings = get_settings()

    logger.info(
        "application_starting",
        host=settings.api.host,
        port=settings.api.port,
        backend=settings.storage.backend,
    )

    from src.infrastructure.storage import bootstrap_storage, shutdown_storage

    try:
        await bootstrap_storage()
        logger.info("storage_ready", backend=settings.storage.backend)
    except Exception as e:
        logger.error("storage_init_failed", error=str(e))
        raise

    logger.info("application_started")

    yield

    logger.info("application_stopping")

    try:
        await shutdown_storage()
    except Exception as e:
        logger.warning("storage_shutdown_failed", error=str(e))

    logger.info("application_stopped")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title="POS Ledger API",
        description="Product catalog, sale recording against a stock ledger, and sales reports",
        version=settings.app_version,
        docs_url="/docs" if settings.api.debug else None,
        redoc_url="/redoc" if settings.api.debug else None,
        lifespan=lifespan,
    )

    # Add middleware
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)

    # CORS allow-list
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )

    setup_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(products_router)
    app.include_router(sales_router)
    app.include_router(report_router)
    app.include_router(stock_router)

    public_dir = _resolve(settings.api.public_dir)
    assets_dir = _resolve(settings.api.assets_dir)

    @app.get("/health")
    async def root_health() -> dict[str, str]:
        """Simple health check at root level."""
        return {
            "status": "healthy",
            "version": settings.app_version,
        }

    @app.get("/admin", response_model=None, include_in_schema=False)
    async def admin_page() -> FileResponse:
        """Serve the admin dashboard page."""
        admin_html = public_dir / "admin.html"
        if not admin_html.is_file():
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Admin page not found",
            )
        return FileResponse(admin_html)

    # Static mounts go last so API routes take priority
    if assets_dir.is_dir():
        app.mount("/assets", StaticFiles(directory=str(assets_dir)), name="assets")

    if public_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(public_dir), html=True), name="public")

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "src.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.debug,
    )
