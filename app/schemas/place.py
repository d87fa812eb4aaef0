from pydantic import BaseModel

from app.models.place import Place


class LocationRead(BaseModel):
    lat: float
    lng: float
    address: str


class PlaceRead(BaseModel):
    id: str
    name: str
    category: str
    description: str
    distance_km: float
    open_now: bool
    image_url: str
    location: LocationRead

    @classmethod
    def from_domain(cls, place: Place) -> "PlaceRead":
        return cls(
            id=place.id,
            name=place.name,
            category=place.category.value,
            description=place.description,
            distance_km=place.distance_km,
            open_now=place.open_now,
            image_url=place.image_url,
            location=LocationRead(
                lat=place.location.latitude,
                lng=place.location.longitude,
                address=place.location.address,
            ),
        )


class NearestPlaceResponse(BaseModel):
    place: PlaceRead | None = None
