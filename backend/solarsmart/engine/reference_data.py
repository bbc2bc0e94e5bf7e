"""
Static reference data: regional insolation, orientation factors and cities.

All tables are built once at import time and exposed as read-only mappings.
"""

from types import MappingProxyType

from solarsmart.config import Orientation, Region
from solarsmart.engine.errors import LocationNotFoundError
from solarsmart.models.calculation import City

# Average peak-sun-hours per day
INSOLATION_BY_REGION = MappingProxyType({
    Region.MEDITERRANEAN: 5.5,
    Region.SOUTHEASTERN_ANATOLIA: 5.2,
    Region.AEGEAN: 5.0,
    Region.CENTRAL_ANATOLIA: 4.8,
    Region.EASTERN_ANATOLIA: 4.6,
    Region.MARMARA: 4.0,
    Region.BLACK_SEA: 3.8,
})

# Yield multiplier relative to a due-south roof
DIRECTION_FACTOR = MappingProxyType({
    Orientation.SOUTH: 1.0,
    Orientation.SOUTH_EAST: 0.95,
    Orientation.SOUTH_WEST: 0.95,
    Orientation.EAST: 0.85,
    Orientation.WEST: 0.85,
    Orientation.NORTH: 0.60,
})

CITIES: tuple[City, ...] = (
    City(id=1, name="Adana", region=Region.MEDITERRANEAN),
    City(id=6, name="Ankara", region=Region.CENTRAL_ANATOLIA),
    City(id=7, name="Antalya", region=Region.MEDITERRANEAN),
    City(id=16, name="Bursa", region=Region.MARMARA),
    City(id=21, name="Diyarbakır", region=Region.SOUTHEASTERN_ANATOLIA),
    City(id=34, name="İstanbul", region=Region.MARMARA),
    City(id=35, name="İzmir", region=Region.AEGEAN),
    City(id=42, name="Konya", region=Region.CENTRAL_ANATOLIA),
    City(id=61, name="Trabzon", region=Region.BLACK_SEA),
    City(id=63, name="Şanlıurfa", region=Region.SOUTHEASTERN_ANATOLIA),
    City(id=65, name="Van", region=Region.EASTERN_ANATOLIA),
)

_CITIES_BY_ID = MappingProxyType({city.id: city for city in CITIES})


def list_cities() -> list[City]:
    return list(CITIES)


def get_city(city_id: int) -> City:
    """Look up a city by id, raising LocationNotFoundError if unknown."""
    try:
        return _CITIES_BY_ID[city_id]
    except KeyError:
        raise LocationNotFoundError(city_id) from None


def get_insolation(city_id: int) -> float:
    """Peak-sun-hours per day for the region the city belongs to."""
    return INSOLATION_BY_REGION[get_city(city_id).region]


def get_direction_factor(orientation: Orientation) -> float:
    return DIRECTION_FACTOR[Orientation(orientation)]
