# Business logic services

from .place_repository import PlaceRepository
from .discovery_service import DiscoveryService

__all__ = [
    "PlaceRepository",
    "DiscoveryService",
]
