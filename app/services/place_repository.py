"""Read-only place repository backed by the fixture table."""
import logging
from typing import Iterable, Optional

from app.core.geo import is_valid_coordinates
from app.models.place import Place
from app.services.place_fixtures import PLACE_FIXTURES

logger = logging.getLogger(__name__)


class PlaceRepository:
    """
    In-memory place store.

    Records are never mutated; ``distance_km`` on returned places is a
    placeholder until the discovery engine recomputes it for a query.
    """

    def __init__(self, places: Optional[Iterable[Place]] = None):
        self._places: tuple[Place, ...] = tuple(PLACE_FIXTURES if places is None else places)

        seen_ids = set()
        for place in self._places:
            if place.id in seen_ids:
                raise ValueError(f"Duplicate place id: {place.id}")
            if not is_valid_coordinates(place.location):
                raise ValueError(f"Place {place.id} has out-of-range coordinates")
            seen_ids.add(place.id)

        logger.info(f"Place repository loaded with {len(self._places)} places")

    def list_places(self, category: Optional[str] = None) -> list[Place]:
        """
        All places, optionally restricted to one category.

        Args:
            category: Category to match exactly, ignoring case

        Returns:
            Places in repository order
        """
        return self.query_places(category=category)

    def get_by_id(self, place_id: str) -> Optional[Place]:
        """Place with the given id, or None."""
        return next((place for place in self._places if place.id == place_id), None)

    def query_places(
        self,
        category: Optional[str] = None,
        open_now: Optional[bool] = None,
        limit: Optional[int] = None,
    ) -> list[Place]:
        """
        Filter places by category and opening state.

        Args:
            category: Category to match exactly, ignoring case
            open_now: Keep only places whose open state matches
            limit: Keep at most this many; ignored when not positive

        Returns:
            Matching places in repository order
        """
        results = list(self._places)

        if category:
            wanted = category.lower()
            results = [place for place in results if place.category.value.lower() == wanted]

        if open_now is not None:
            results = [place for place in results if place.open_now == open_now]

        if limit and limit > 0:
            results = results[:limit]

        return results

    def available_categories(self) -> list[str]:
        """Unique categories present in the data, in first-seen order."""
        return list(dict.fromkeys(place.category.value for place in self._places))

    def data_statistics(self) -> dict:
        open_places = len(self.query_places(open_now=True))
        return {
            "totalPlaces": len(self._places),
            "categoriesCount": len(self.available_categories()),
            "openPlaces": open_places,
            "closedPlaces": len(self._places) - open_places,
        }
