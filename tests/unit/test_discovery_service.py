"""
Unit tests for the discovery pipeline: radius filter, ordering, limits,
nearest lookup and aggregate reads.
"""
import pytest

from app.config.settings import DiscoverySettings
from app.core.exceptions import InvalidArgumentError, PlaceNotFoundError
from app.models.place import DiscoveryQuery, Location, Place, PlaceCategory
from app.services.discovery_service import DiscoveryService
from app.services.place_repository import PlaceRepository

NYC_LAT, NYC_LNG = 40.7128, -74.0060


def _query(**overrides):
    params = {"latitude": NYC_LAT, "longitude": NYC_LNG}
    params.update(overrides)
    return DiscoveryQuery(**params)


def test_results_within_radius_sorted_ascending(discovery_service):
    result = discovery_service.discover(_query(radius=5))

    distances = [p.distance_km for p in result.results]
    assert all(d <= 5 for d in distances)
    assert distances == sorted(distances)
    assert result.total == len(result.results)
    # Central Park and Mount Sinai are several km uptown
    ids = {p.id for p in result.results}
    assert "park_007" not in ids
    assert "hosp_008" not in ids


def test_expected_order_near_city_hall(discovery_service):
    result = discovery_service.discover(_query(radius=5))
    assert [p.id for p in result.results] == [
        "rest_001", "cafe_002", "bar_003", "shop_004", "hotel_005",
        "bank_010", "gas_009", "pharm_012", "gym_011", "attr_006",
    ]


def test_equal_distances_keep_repository_order(discovery_service):
    result = discovery_service.discover(_query(radius=0.4))
    tied = [p for p in result.results if p.distance_km == 0.39]
    assert [p.id for p in tied] == ["hotel_005", "bank_010"]


def test_small_radius(discovery_service):
    result = discovery_service.discover(_query(radius=0.2))
    assert [p.id for p in result.results] == ["rest_001", "cafe_002", "bar_003"]
    assert result.results[0].distance_km == pytest.approx(0.09)


def test_defaults_applied_to_effective_query(discovery_service):
    result = discovery_service.discover(_query())
    assert result.query.radius == 5.0
    assert result.query.limit == 10
    assert result.query.category is None
    assert len(result.results) <= 10


def test_limit_truncates_and_total_counts_after_limit(discovery_service):
    result = discovery_service.discover(_query(radius=50, limit=3))
    assert len(result.results) == 3
    assert result.total == 3
    assert [p.id for p in result.results] == ["rest_001", "cafe_002", "bar_003"]


def test_limit_capped_by_max_results():
    service = DiscoveryService(
        PlaceRepository(),
        DiscoverySettings(default_radius=5.0, max_radius=50.0, max_results=2, default_limit=10),
    )
    result = service.discover(_query(radius=50))
    assert result.query.limit == 2
    assert len(result.results) == 2


def test_category_filter_case_insensitive(discovery_service):
    result = discovery_service.discover(_query(category="Restaurant"))
    assert result.results
    assert all(p.category == PlaceCategory.RESTAURANT for p in result.results)
    assert result.query.category == "restaurant"


@pytest.mark.parametrize("overrides", [
    {"latitude": 91},
    {"longitude": -181},
    {"radius": 0.05},
    {"limit": 0},
    {"category": "spaceport"},
])
def test_invalid_queries_raise(discovery_service, overrides):
    with pytest.raises(InvalidArgumentError):
        discovery_service.discover(_query(**overrides))


def test_validation_runs_before_repository_access():
    class ExplodingRepository(PlaceRepository):
        def list_places(self, category=None):
            raise AssertionError("repository should not be queried")

    service = DiscoveryService(ExplodingRepository(), DiscoverySettings())
    with pytest.raises(InvalidArgumentError):
        service.discover(_query(latitude=-95))


def test_repository_records_not_mutated(discovery_service, repository):
    discovery_service.discover(_query(radius=50))
    assert all(p.distance_km == 0.0 for p in repository.list_places())


def test_repeated_queries_are_idempotent(discovery_service):
    first = discovery_service.discover(_query(radius=2, category="cafe"))
    second = discovery_service.discover(_query(radius=2, category="cafe"))
    assert first.results == second.results
    assert first.total == second.total


def test_metadata_populated(discovery_service):
    result = discovery_service.discover(_query())
    assert result.metadata.processing_time_ms >= 0
    assert result.metadata.timestamp.endswith("+00:00")


class TestFindNearest:
    def test_nearest_place(self, discovery_service):
        place = discovery_service.find_nearest(NYC_LAT, NYC_LNG)
        assert place is not None
        assert place.id == "rest_001"
        assert place.distance_km == pytest.approx(0.09)

    def test_nearest_with_category(self, discovery_service):
        place = discovery_service.find_nearest(NYC_LAT, NYC_LNG, "park")
        assert place.id == "park_007"

    def test_nothing_in_range_returns_none(self, discovery_service):
        assert discovery_service.find_nearest(0.0, 0.0) is None

    def test_known_category_without_places_returns_none(self, discovery_service):
        assert discovery_service.find_nearest(NYC_LAT, NYC_LNG, "event") is None

    def test_invalid_coordinates_still_raise(self, discovery_service):
        with pytest.raises(InvalidArgumentError):
            discovery_service.find_nearest(120.0, 0.0)


def test_get_place(discovery_service):
    assert discovery_service.get_place("gym_011").name == "Equinox Fitness"
    with pytest.raises(PlaceNotFoundError):
        discovery_service.get_place("nope")


def test_available_categories(discovery_service):
    categories = discovery_service.available_categories()
    assert categories[0] == "restaurant"
    assert len(categories) == len(set(categories)) == 12


def test_statistics_include_config(discovery_service):
    stats = discovery_service.statistics()
    assert stats["dataStats"]["totalPlaces"] == 12
    assert stats["config"] == {
        "defaultRadius": 5.0,
        "maxRadius": 50.0,
        "maxResults": 50,
        "defaultLimit": 10,
    }


def test_custom_repository_places():
    far = Place(
        id="far",
        name="Far",
        category=PlaceCategory.SHOP,
        description="",
        location=Location(latitude=41.5, longitude=-74.0, address=""),
        open_now=True,
        image_url="",
    )
    service = DiscoveryService(PlaceRepository([far]), DiscoverySettings())
    assert service.discover(_query(radius=50)).results == []
