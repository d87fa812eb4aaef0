"""
FastAPI application setup for the location discovery service.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
import logging
from contextlib import asynccontextmanager

from app.config.loader import load_config_for_environment
from app.config.settings import Settings, get_settings
from app.core.dependencies import ServiceContainer
from app.core.error_handlers import setup_error_handlers
from app.core.logging import configure_logging
from app.middleware import RateLimitMiddleware, RequestContextMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Build the service container on startup and release it on shutdown.
    """
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.app_name} v{settings.app_version} ({settings.environment.value})")

    service_container = ServiceContainer(settings)
    try:
        await service_container.initialize_services()
        app.state.service_container = service_container
        logger.info("Application startup complete")

        yield

    except Exception as e:
        logger.error(f"Application startup failed: {e}", exc_info=True)
        raise

    finally:
        logger.info("Shutting down application")
        await service_container.cleanup_services()
        if hasattr(app.state, 'service_container'):
            del app.state.service_container
        logger.info("Application shutdown complete")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Settings to use; defaults to the process-wide settings

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()
    configure_logging(settings)

    docs_enabled = not settings.is_production()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Find nearby places sorted by distance, with category, radius and limit filters.",
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.state.settings = settings

    # Registered inner to outer: rate limit, gzip, CORS, request context
    app.add_middleware(
        RateLimitMiddleware,
        max_requests=settings.security.rate_limit_requests,
        window_seconds=settings.security.rate_limit_window_seconds,
        exempt_paths={
            "/", "/docs", "/redoc", "/openapi.json",
            f"{settings.api_prefix}/health", f"{settings.api_prefix}/health/detailed",
        },
        enabled=settings.security.rate_limit_enabled,
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(CORSMiddleware, **settings.get_cors_config())
    app.add_middleware(RequestContextMiddleware, strict_transport=settings.is_production())

    setup_error_handlers(app)

    from app.api import discovery_router, health_router
    app.include_router(discovery_router, prefix=settings.api_prefix)
    app.include_router(health_router, prefix=settings.api_prefix)

    @app.get("/", include_in_schema=False)
    async def root():
        """Root endpoint for basic service information."""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "status": "running",
            "docs": "/docs" if docs_enabled else None,
            "api_prefix": settings.api_prefix,
        }

    return app


# Create application instance; honours .env.<ENVIRONMENT> when present
app = create_app(load_config_for_environment())
