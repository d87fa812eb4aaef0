"""
Domain models for place discovery.

Places are frozen dataclasses so the fixture table can be shared across
concurrent requests; per-query distances are attached to copies made with
``dataclasses.replace``.
"""

from dataclasses import dataclass
from typing import List, Optional
from enum import Enum


class PlaceCategory(str, Enum):
    """Categories a place can be filed under"""
    RESTAURANT = "restaurant"
    CAFE = "cafe"
    BAR = "bar"
    SHOP = "shop"
    HOTEL = "hotel"
    ATTRACTION = "attraction"
    PARK = "park"
    HOSPITAL = "hospital"
    GAS_STATION = "gas_station"
    BANK = "bank"
    GYM = "gym"
    PHARMACY = "pharmacy"
    EVENT = "event"
    ENTERTAINMENT = "entertainment"
    SERVICE = "service"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


@dataclass(frozen=True)
class Coordinates:
    """A point in decimal degrees"""
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Location(Coordinates):
    """Coordinates with a human-readable address"""
    address: str = ""


@dataclass(frozen=True)
class Place:
    """A point of interest. ``distance_km`` is only meaningful on query results."""
    id: str
    name: str
    category: PlaceCategory
    description: str
    location: Location
    open_now: bool
    image_url: str
    distance_km: float = 0.0


@dataclass(frozen=True)
class DiscoveryQuery:
    """
    A discovery request.

    ``None`` for radius, category or limit means the configured default applies.
    """
    latitude: float
    longitude: float
    radius: Optional[float] = None
    category: Optional[str] = None
    limit: Optional[int] = None

    @property
    def center(self) -> Coordinates:
        return Coordinates(latitude=self.latitude, longitude=self.longitude)


@dataclass(frozen=True)
class EffectiveQuery:
    """Query parameters after defaults and clamping were applied"""
    latitude: float
    longitude: float
    radius: float
    limit: int
    category: Optional[str] = None


@dataclass(frozen=True)
class DiscoveryMetadata:
    processing_time_ms: float
    timestamp: str


@dataclass(frozen=True)
class DiscoveryResult:
    """Outcome of a single discovery call"""
    results: List[Place]
    total: int
    query: EffectiveQuery
    metadata: DiscoveryMetadata
