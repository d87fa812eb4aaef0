"""
Dependency injection setup for FastAPI.
Provides dependency providers for the place repository and discovery service.
"""

from fastapi import Depends, Request, HTTPException
from typing import Optional
import logging
import asyncio

from app.config.settings import Settings, get_settings
from app.services.place_repository import PlaceRepository
from app.services.discovery_service import DiscoveryService


logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Owns the application's long-lived services. Built once on startup and
    torn down on shutdown.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings
        self._place_repository: Optional[PlaceRepository] = None
        self._discovery_service: Optional[DiscoveryService] = None
        self._initialized = False
        self._initialization_lock = asyncio.Lock()

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize_services(self) -> None:
        """Create the repository and discovery service; safe to call twice."""
        async with self._initialization_lock:
            if self._initialized:
                return

            logger.info("Initializing service container")

            try:
                settings = self._settings or get_settings()
                self._place_repository = PlaceRepository()
                self._discovery_service = DiscoveryService(
                    self._place_repository,
                    settings.discovery
                )

                self._initialized = True
                logger.info("Service container initialization completed")

            except Exception as e:
                logger.error(f"Service container initialization failed: {e}", exc_info=True)
                raise

    async def cleanup_services(self) -> None:
        logger.info("Cleaning up service container")
        self._discovery_service = None
        self._place_repository = None
        self._initialized = False
        logger.info("Service container cleanup completed")

    def get_place_repository(self) -> PlaceRepository:
        """Get place repository instance."""
        if not self._initialized or self._place_repository is None:
            raise RuntimeError("Service container not initialized")
        return self._place_repository

    def get_discovery_service(self) -> DiscoveryService:
        """Get discovery service instance."""
        if not self._initialized or self._discovery_service is None:
            raise RuntimeError("Service container not initialized")
        return self._discovery_service


def get_service_container(request: Request) -> ServiceContainer:
    """
    Get the service container from application state.

    Args:
        request: FastAPI request object

    Returns:
        ServiceContainer: Application service container

    Raises:
        HTTPException: If service container is not available
    """
    if not hasattr(request.app.state, 'service_container'):
        logger.error("Service container not initialized")
        raise HTTPException(
            status_code=503,
            detail="Service container not available"
        )

    return request.app.state.service_container


def get_discovery_service(
    container: ServiceContainer = Depends(get_service_container)
) -> DiscoveryService:
    """
    Dependency provider for DiscoveryService.

    Raises:
        HTTPException: If the container has not finished starting up
    """
    try:
        return container.get_discovery_service()
    except RuntimeError as e:
        logger.error(f"Discovery service not available: {e}")
        raise HTTPException(
            status_code=503,
            detail="Discovery service not available"
        )


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return getattr(request.app.state, "settings", None) or get_settings()


def get_request_id(request: Request) -> str:
    """
    Get request ID from request state.

    Args:
        request: FastAPI request object

    Returns:
        str: Request ID or 'unknown' if not set
    """
    return getattr(request.state, 'request_id', 'unknown')
