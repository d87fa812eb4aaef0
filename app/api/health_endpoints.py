"""
Health check endpoints.

- GET /health: liveness with process memory usage
- GET /health/detailed: service wiring status, runtime info and error counts
"""

from fastapi import APIRouter, Depends
import logging
import platform
import time
from datetime import datetime, timezone

import psutil

from app.config.settings import Settings
from app.core.dependencies import ServiceContainer, get_app_settings, get_service_container
from app.core.error_handlers import error_handler
from app.schemas.health import DetailedHealthResponse, HealthResponse, MemoryUsage, SystemInfo

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])

# Application start time for uptime calculation
_app_start_time = time.time()


def _uptime_seconds() -> float:
    return round(time.time() - _app_start_time, 3)


def _memory_usage() -> MemoryUsage:
    """Resident memory of this process against total system memory, in MB."""
    used = psutil.Process().memory_info().rss
    total = psutil.virtual_memory().total
    return MemoryUsage(
        used=round(used / 1024 / 1024, 2),
        total=round(total / 1024 / 1024, 2),
        percentage=round(used / total * 100, 2) if total else 0.0,
    )


@router.get(
    "",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns the current health status of the application",
)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        uptime=_uptime_seconds(),
        version=settings.app_version,
        environment=settings.environment.value,
        memory=_memory_usage(),
    )


@router.get(
    "/detailed",
    response_model=DetailedHealthResponse,
    summary="Detailed health check",
    description="Returns detailed health information including service status",
)
async def detailed_health_check(
    container: ServiceContainer = Depends(get_service_container),
) -> DetailedHealthResponse:
    services = {"api": "healthy"}

    try:
        repository = container.get_place_repository()
        services["placeRepository"] = "healthy" if repository.list_places() else "empty"
    except RuntimeError as e:
        logger.warning(f"Place repository unavailable: {e}")
        services["placeRepository"] = "unavailable"

    try:
        container.get_discovery_service()
        services["discovery"] = "healthy"
    except RuntimeError as e:
        logger.warning(f"Discovery service unavailable: {e}")
        services["discovery"] = "unavailable"

    overall = "ok" if all(status == "healthy" for status in services.values()) else "degraded"

    return DetailedHealthResponse(
        status=overall,
        timestamp=datetime.now(timezone.utc).isoformat(),
        services=services,
        system=SystemInfo(
            platform=platform.system().lower(),
            pythonVersion=platform.python_version(),
            uptime=_uptime_seconds(),
        ),
        error_statistics=error_handler.get_error_statistics(),
    )
