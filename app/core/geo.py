"""Great-circle distance and coordinate range checks."""
import math

from app.models.place import Coordinates

EARTH_RADIUS_KM = 6371.0


def haversine_km(a: Coordinates, b: Coordinates) -> float:
    """Haversine distance between two points in kilometers, rounded to 2 decimals."""
    phi1, phi2 = math.radians(a.latitude), math.radians(b.latitude)
    dphi = math.radians(b.latitude - a.latitude)
    dlam = math.radians(b.longitude - a.longitude)
    h = math.sin(dphi/2)**2 + math.cos(phi1)*math.cos(phi2)*math.sin(dlam/2)**2
    distance = EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1-h))
    return round(distance, 2)


def is_valid_latitude(lat: float) -> bool:
    return math.isfinite(lat) and -90.0 <= lat <= 90.0


def is_valid_longitude(lon: float) -> bool:
    return math.isfinite(lon) and -180.0 <= lon <= 180.0


def is_valid_coordinates(coordinates: Coordinates) -> bool:
    return is_valid_latitude(coordinates.latitude) and is_valid_longitude(coordinates.longitude)
