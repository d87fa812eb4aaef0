from pydantic import BaseModel

from app.models.place import DiscoveryResult
from app.schemas.place import PlaceRead


class DiscoveryQueryRead(BaseModel):
    latitude: float
    longitude: float
    radius: float
    category: str | None = None
    limit: int


class DiscoveryMetadataRead(BaseModel):
    processing_time_ms: float
    timestamp: str


class DiscoveryResponse(BaseModel):
    results: list[PlaceRead]
    total: int
    query: DiscoveryQueryRead
    metadata: DiscoveryMetadataRead

    @classmethod
    def from_result(cls, result: DiscoveryResult) -> "DiscoveryResponse":
        return cls(
            results=[PlaceRead.from_domain(place) for place in result.results],
            total=result.total,
            query=DiscoveryQueryRead(
                latitude=result.query.latitude,
                longitude=result.query.longitude,
                radius=result.query.radius,
                category=result.query.category,
                limit=result.query.limit,
            ),
            metadata=DiscoveryMetadataRead(
                processing_time_ms=result.metadata.processing_time_ms,
                timestamp=result.metadata.timestamp,
            ),
        )


class CategoriesResponse(BaseModel):
    categories: list[str]
    total: int


class DataStats(BaseModel):
    totalPlaces: int
    categoriesCount: int
    openPlaces: int
    closedPlaces: int


class DiscoveryConfigRead(BaseModel):
    defaultRadius: float
    maxRadius: float
    maxResults: int
    defaultLimit: int


class StatsResponse(BaseModel):
    dataStats: DataStats
    config: DiscoveryConfigRead
