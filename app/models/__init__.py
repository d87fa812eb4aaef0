"""
Models package for the location discovery service.

Domain types shared by the repository, the discovery engine and the
API schemas.
"""

from .place import (
    PlaceCategory,
    Coordinates,
    Location,
    Place,
    DiscoveryQuery,
    EffectiveQuery,
    DiscoveryMetadata,
    DiscoveryResult,
)

__all__ = [
    "PlaceCategory",
    "Coordinates",
    "Location",
    "Place",
    "DiscoveryQuery",
    "EffectiveQuery",
    "DiscoveryMetadata",
    "DiscoveryResult",
]
