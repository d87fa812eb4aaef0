"""
Discovery endpoints.

- GET /discover: nearby places sorted by distance
- GET /discover/categories: categories present in the data
- GET /discover/stats: data statistics and effective limits
- GET /discover/nearest: single closest place, or null
- GET /discover/places/{place_id}: one place by id
"""
from fastapi import APIRouter, Depends, Query
from typing import Optional
import logging

from app.core.dependencies import get_discovery_service, get_request_id
from app.models.place import DiscoveryQuery
from app.schemas.base import ErrorResponse
from app.schemas.discovery import CategoriesResponse, DiscoveryResponse, StatsResponse
from app.schemas.place import NearestPlaceResponse, PlaceRead
from app.services.discovery_service import DiscoveryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/discover", tags=["discovery"])


@router.get(
    "",
    response_model=DiscoveryResponse,
    summary="Discover nearby places",
    description=(
        "Places near a point, closest first. Optional category filter, "
        "radius in kilometers and result limit."
    ),
    responses={400: {"model": ErrorResponse}},
)
async def discover_places(
    latitude: float = Query(..., description="Latitude coordinate (-90 to 90)", examples=[40.7128]),
    longitude: float = Query(..., description="Longitude coordinate (-180 to 180)", examples=[-74.0060]),
    radius: Optional[float] = Query(None, description="Search radius in kilometers (0.1 to 50)"),
    category: Optional[str] = Query(None, description="Category filter (restaurant, cafe, bar, ...)"),
    limit: Optional[int] = Query(None, description="Maximum number of results (1 to 50)"),
    service: DiscoveryService = Depends(get_discovery_service),
    request_id: str = Depends(get_request_id),
) -> DiscoveryResponse:
    logger.info(
        f"Discovery request {request_id}: lat={latitude} lng={longitude} radius={radius} "
        f"category={category} limit={limit}",
        extra={'request_id': request_id}
    )
    result = service.discover(
        DiscoveryQuery(
            latitude=latitude,
            longitude=longitude,
            radius=radius,
            category=category,
            limit=limit,
        )
    )
    return DiscoveryResponse.from_result(result)


@router.get("/categories", response_model=CategoriesResponse, summary="Get available categories")
async def get_categories(
    service: DiscoveryService = Depends(get_discovery_service),
) -> CategoriesResponse:
    categories = service.available_categories()
    return CategoriesResponse(categories=categories, total=len(categories))


@router.get("/stats", response_model=StatsResponse, summary="Get service statistics")
async def get_statistics(
    service: DiscoveryService = Depends(get_discovery_service),
) -> StatsResponse:
    return StatsResponse(**service.statistics())


@router.get(
    "/nearest",
    response_model=NearestPlaceResponse,
    summary="Find nearest place",
    responses={400: {"model": ErrorResponse}},
)
async def find_nearest(
    latitude: float = Query(..., description="Latitude coordinate (-90 to 90)"),
    longitude: float = Query(..., description="Longitude coordinate (-180 to 180)"),
    category: Optional[str] = Query(None, description="Optional category filter"),
    service: DiscoveryService = Depends(get_discovery_service),
) -> NearestPlaceResponse:
    place = service.find_nearest(latitude, longitude, category)
    return NearestPlaceResponse(place=PlaceRead.from_domain(place) if place else None)


@router.get(
    "/places/{place_id}",
    response_model=PlaceRead,
    summary="Get a place by id",
    responses={404: {"model": ErrorResponse}},
)
async def get_place(
    place_id: str,
    service: DiscoveryService = Depends(get_discovery_service),
) -> PlaceRead:
    return PlaceRead.from_domain(service.get_place(place_id))
