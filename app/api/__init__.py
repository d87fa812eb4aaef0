# API endpoints and routers

from .discovery_endpoints import router as discovery_router
from .health_endpoints import router as health_router

__all__ = [
    "discovery_router",
    "health_router",
]
