"""
Input validation for discovery queries.

Every check raises InvalidArgumentError naming the offending field; nothing
here touches the place repository.
"""
import math
from typing import Optional

from app.core.exceptions import InvalidArgumentError
from app.core.geo import is_valid_latitude, is_valid_longitude
from app.models.place import DiscoveryQuery, PlaceCategory

MIN_RADIUS_KM = 0.1
MIN_LIMIT = 1


def validate_latitude(lat: float) -> float:
    """
    Validate latitude coordinate

    Args:
        lat: Latitude value

    Returns:
        Validated latitude

    Raises:
        InvalidArgumentError: If latitude is out of range or not a number
    """
    if not is_valid_latitude(lat):
        raise InvalidArgumentError(
            "latitude", f"Invalid latitude: {lat}. Must be between -90 and 90.", lat
        )
    return lat


def validate_longitude(lon: float) -> float:
    """
    Validate longitude coordinate

    Args:
        lon: Longitude value

    Returns:
        Validated longitude

    Raises:
        InvalidArgumentError: If longitude is out of range or not a number
    """
    if not is_valid_longitude(lon):
        raise InvalidArgumentError(
            "longitude", f"Invalid longitude: {lon}. Must be between -180 and 180.", lon
        )
    return lon


def validate_radius(radius: Optional[float], max_radius: float) -> Optional[float]:
    """
    Validate search radius in kilometers. ``None`` passes through.

    Raises:
        InvalidArgumentError: If radius is outside [0.1, max_radius]
    """
    if radius is None:
        return None
    if not math.isfinite(radius) or radius < MIN_RADIUS_KM or radius > max_radius:
        raise InvalidArgumentError(
            "radius",
            f"Invalid radius: {radius}. Must be between {MIN_RADIUS_KM} and {max_radius} km.",
            radius,
        )
    return radius


def validate_limit(limit: Optional[int], max_results: int) -> Optional[int]:
    """
    Validate result limit. ``None`` passes through.

    Raises:
        InvalidArgumentError: If limit is outside [1, max_results]
    """
    if limit is None:
        return None
    if limit < MIN_LIMIT or limit > max_results:
        raise InvalidArgumentError(
            "limit",
            f"Invalid limit: {limit}. Must be between {MIN_LIMIT} and {max_results}.",
            limit,
        )
    return limit


def validate_category(category: Optional[str]) -> Optional[str]:
    """
    Validate category filter against the known categories.

    Returns:
        The category lower-cased, or None when no filter was given

    Raises:
        InvalidArgumentError: If category is not a known PlaceCategory
    """
    if category is None:
        return None
    normalized = category.strip().lower()
    if normalized not in PlaceCategory.values():
        raise InvalidArgumentError(
            "category",
            f"Invalid category: {category}. Must be one of: {', '.join(PlaceCategory.values())}.",
            category,
        )
    return normalized


def validate_discovery_query(
    query: DiscoveryQuery, max_radius: float, max_results: int
) -> Optional[str]:
    """
    Run every discovery check, in field order.

    Args:
        query: Query to validate
        max_radius: Largest accepted radius in kilometers
        max_results: Largest accepted limit

    Returns:
        Normalized category filter (or None)

    Raises:
        InvalidArgumentError: On the first failing field
    """
    validate_latitude(query.latitude)
    validate_longitude(query.longitude)
    validate_radius(query.radius, max_radius)
    validate_limit(query.limit, max_results)
    return validate_category(query.category)
