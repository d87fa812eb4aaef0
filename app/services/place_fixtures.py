"""Sample places around lower Manhattan, loaded once at import."""
from app.models.place import Location, Place, PlaceCategory

PLACE_FIXTURES: tuple[Place, ...] = (
    Place(
        id="rest_001",
        name="Trattoria Alfredo",
        category=PlaceCategory.RESTAURANT,
        description="Authentic Italian pasta, great ambiance and fresh ingredients.",
        location=Location(latitude=40.7130, longitude=-74.0050, address="123 Main St, New York, NY 10001"),
        open_now=True,
        image_url="https://cdn.onspotx.ai/spots/alfredo.jpg",
    ),
    Place(
        id="cafe_002",
        name="Blue Bottle Coffee",
        category=PlaceCategory.CAFE,
        description="Artisanal coffee roasters with specialty single-origin beans.",
        location=Location(latitude=40.7140, longitude=-74.0070, address="456 Broadway, New York, NY 10012"),
        open_now=True,
        image_url="https://cdn.onspotx.ai/spots/blue-bottle.jpg",
    ),
    Place(
        id="bar_003",
        name="The Rooftop Lounge",
        category=PlaceCategory.BAR,
        description="Upscale cocktail bar with stunning city views.",
        location=Location(latitude=40.7120, longitude=-74.0040, address="789 5th Ave, New York, NY 10019"),
        open_now=False,
        image_url="https://cdn.onspotx.ai/spots/rooftop-lounge.jpg",
    ),
    Place(
        id="shop_004",
        name="Central Park Bookstore",
        category=PlaceCategory.SHOP,
        description="Independent bookstore with rare finds and cozy reading nooks.",
        location=Location(latitude=40.7150, longitude=-74.0030, address="321 Park Ave, New York, NY 10016"),
        open_now=True,
        image_url="https://cdn.onspotx.ai/spots/bookstore.jpg",
    ),
    Place(
        id="hotel_005",
        name="The Plaza Hotel",
        category=PlaceCategory.HOTEL,
        description="Luxury hotel with world-class amenities and service.",
        location=Location(latitude=40.7160, longitude=-74.0080, address="768 5th Ave, New York, NY 10019"),
        open_now=True,
        image_url="https://cdn.onspotx.ai/spots/plaza-hotel.jpg",
    ),
    Place(
        id="attr_006",
        name="Brooklyn Bridge",
        category=PlaceCategory.ATTRACTION,
        description="Historic suspension bridge offering breathtaking views.",
        location=Location(latitude=40.7061, longitude=-73.9969, address="Brooklyn Bridge, New York, NY 10038"),
        open_now=True,
        image_url="https://cdn.onspotx.ai/spots/brooklyn-bridge.jpg",
    ),
    Place(
        id="park_007",
        name="Central Park",
        category=PlaceCategory.PARK,
        description="Iconic urban park perfect for walking, jogging, and relaxation.",
        location=Location(latitude=40.7829, longitude=-73.9654, address="Central Park, New York, NY 10024"),
        open_now=True,
        image_url="https://cdn.onspotx.ai/spots/central-park.jpg",
    ),
    Place(
        id="hosp_008",
        name="Mount Sinai Hospital",
        category=PlaceCategory.HOSPITAL,
        description="Leading medical center with comprehensive healthcare services.",
        location=Location(latitude=40.7903, longitude=-73.9503, address="1 Gustave L. Levy Pl, New York, NY 10029"),
        open_now=True,
        image_url="https://cdn.onspotx.ai/spots/mount-sinai.jpg",
    ),
    Place(
        id="gas_009",
        name="Shell Gas Station",
        category=PlaceCategory.GAS_STATION,
        description="Full-service gas station with convenience store.",
        location=Location(latitude=40.7100, longitude=-74.0100, address="555 West St, New York, NY 10014"),
        open_now=True,
        image_url="https://cdn.onspotx.ai/spots/shell-station.jpg",
    ),
    Place(
        id="bank_010",
        name="Chase Bank",
        category=PlaceCategory.BANK,
        description="Full-service bank with ATM and financial advisory services.",
        location=Location(latitude=40.7110, longitude=-74.0020, address="999 Wall St, New York, NY 10005"),
        open_now=True,
        image_url="https://cdn.onspotx.ai/spots/chase-bank.jpg",
    ),
    Place(
        id="gym_011",
        name="Equinox Fitness",
        category=PlaceCategory.GYM,
        description="Premium fitness club with state-of-the-art equipment.",
        location=Location(latitude=40.7170, longitude=-74.0010, address="222 Broadway, New York, NY 10038"),
        open_now=True,
        image_url="https://cdn.onspotx.ai/spots/equinox.jpg",
    ),
    Place(
        id="pharm_012",
        name="CVS Pharmacy",
        category=PlaceCategory.PHARMACY,
        description="Full-service pharmacy with prescription and over-the-counter medications.",
        location=Location(latitude=40.7080, longitude=-74.0060, address="111 Houston St, New York, NY 10012"),
        open_now=True,
        image_url="https://cdn.onspotx.ai/spots/cvs-pharmacy.jpg",
    ),
)
