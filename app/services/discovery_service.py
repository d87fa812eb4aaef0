"""
Discovery service: nearby place search over the place repository.

Pipeline per query: validate, fetch candidates (optionally by category),
attach distances to copies, keep those inside the radius, stable-sort by
distance, truncate to the limit and wrap the result with timing metadata.
"""

import dataclasses
import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from app.config.settings import DiscoverySettings
from app.core.exceptions import PlaceNotFoundError
from app.core.geo import haversine_km
from app.core.validation import validate_discovery_query
from app.models.place import (
    Coordinates,
    DiscoveryMetadata,
    DiscoveryQuery,
    DiscoveryResult,
    EffectiveQuery,
    Place,
)
from app.services.place_repository import PlaceRepository

logger = logging.getLogger(__name__)


class DiscoveryService:
    """Location-based place discovery with filtering, sorting and limits."""

    def __init__(self, repository: PlaceRepository, config: Optional[DiscoverySettings] = None):
        self.repository = repository
        self.config = config or DiscoverySettings()

    def discover(self, query: DiscoveryQuery) -> DiscoveryResult:
        """
        Discover places near a point.

        Args:
            query: Discovery query parameters

        Returns:
            DiscoveryResult with places sorted closest first

        Raises:
            InvalidArgumentError: If any query parameter is out of range
        """
        start_time = time.perf_counter()
        logger.info(f"Starting discovery query: {query}")

        try:
            category = validate_discovery_query(
                query, self.config.max_radius, self.config.max_results
            )

            radius = query.radius if query.radius is not None else self.config.default_radius
            limit = min(
                query.limit if query.limit is not None else self.config.default_limit,
                self.config.max_results,
            )

            candidates = self.repository.list_places(category)
            with_distance = self._attach_distances(candidates, query.center)
            in_radius = [place for place in with_distance if place.distance_km <= radius]
            # sorted() is stable: equal distances keep repository order
            ordered = sorted(in_radius, key=lambda place: place.distance_km)
            limited = ordered[:limit]

            processing_time_ms = round((time.perf_counter() - start_time) * 1000, 3)
            result = DiscoveryResult(
                results=limited,
                total=len(limited),
                query=EffectiveQuery(
                    latitude=query.latitude,
                    longitude=query.longitude,
                    radius=radius,
                    limit=limit,
                    category=category,
                ),
                metadata=DiscoveryMetadata(
                    processing_time_ms=processing_time_ms,
                    timestamp=datetime.now(timezone.utc).isoformat(),
                ),
            )

            logger.info(
                f"Discovery completed: {result.total} results in {processing_time_ms}ms",
                extra={"results": result.total, "processing_time_ms": processing_time_ms},
            )
            return result

        except Exception as e:
            logger.error(f"Discovery failed: {e}")
            raise

    def find_nearest(
        self,
        latitude: float,
        longitude: float,
        category: Optional[str] = None,
    ) -> Optional[Place]:
        """
        Nearest place within the maximum radius.

        Returns:
            Nearest place or None if nothing is in range
        """
        response = self.discover(
            DiscoveryQuery(
                latitude=latitude,
                longitude=longitude,
                radius=self.config.max_radius,
                category=category,
                limit=1,
            )
        )
        return response.results[0] if response.results else None

    def get_place(self, place_id: str) -> Place:
        """
        Look up a single place.

        Raises:
            PlaceNotFoundError: If no place has this id
        """
        place = self.repository.get_by_id(place_id)
        if place is None:
            raise PlaceNotFoundError(place_id)
        return place

    def available_categories(self) -> List[str]:
        return self.repository.available_categories()

    def statistics(self) -> Dict[str, Any]:
        return {
            "dataStats": self.repository.data_statistics(),
            "config": {
                "defaultRadius": self.config.default_radius,
                "maxRadius": self.config.max_radius,
                "maxResults": self.config.max_results,
                "defaultLimit": self.config.default_limit,
            },
        }

    def _attach_distances(self, places: List[Place], center: Coordinates) -> List[Place]:
        return [
            dataclasses.replace(place, distance_km=haversine_km(center, place.location))
            for place in places
        ]
