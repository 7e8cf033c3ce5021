"""Static catalogs of locations, operators and bus types."""

from __future__ import annotations

from typing import Dict, List, Optional

from .models import BusOperator, BusType, Location


_LOCATIONS = (
    Location(
        id="mumbai",
        name="Mumbai Central",
        city="Mumbai",
        state="Maharashtra",
        country="India",
        latitude=19.0760,
        longitude=72.8777,
    ),
    Location(
        id="pune",
        name="Pune Station",
        city="Pune",
        state="Maharashtra",
        country="India",
        latitude=18.5204,
        longitude=73.8567,
    ),
    Location(
        id="bangalore",
        name="Bangalore Majestic",
        city="Bangalore",
        state="Karnataka",
        country="India",
        latitude=12.9716,
        longitude=77.5946,
    ),
    Location(
        id="delhi",
        name="Delhi ISBT",
        city="Delhi",
        state="Delhi",
        country="India",
        latitude=28.7041,
        longitude=77.1025,
    ),
)

_OPERATORS = (
    BusOperator(id="redbus", name="RedBus", logo="redbus.png", rating=4.2, platform="redbus"),
    BusOperator(
        id="makemytrip", name="MakeMyTrip", logo="mmt.png", rating=4.0, platform="makemytrip"
    ),
    BusOperator(id="goibibo", name="Goibibo", logo="goibibo.png", rating=3.9, platform="goibibo"),
    BusOperator(id="abhibus", name="AbhiBus", logo="abhibus.png", rating=4.1, platform="abhibus"),
)

_BUS_TYPES = (
    BusType(
        id="ac_sleeper",
        name="AC Sleeper",
        seats=40,
        amenities=("AC", "Sleeper", "Blanket", "Pillow"),
        description="Air conditioned sleeper bus with comfortable berths",
    ),
    BusType(
        id="non_ac_seater",
        name="Non-AC Seater",
        seats=50,
        amenities=("Pushback Seats", "Charging Point"),
        description="Comfortable seater bus for day travel",
    ),
    BusType(
        id="volvo_ac",
        name="Volvo AC",
        seats=45,
        amenities=("AC", "WiFi", "Entertainment", "USB Charging"),
        description="Premium Volvo bus with luxury amenities",
    ),
)

_LOCATIONS_BY_CITY: Dict[str, Location] = {loc.city: loc for loc in _LOCATIONS}
_OPERATORS_BY_ID: Dict[str, BusOperator] = {op.id: op for op in _OPERATORS}


def get_sample_locations() -> List[Location]:
    return list(_LOCATIONS)


def get_sample_bus_types() -> List[BusType]:
    return list(_BUS_TYPES)


def lookup_location(city: str) -> Optional[Location]:
    """Return the location for an exact city name, or None."""
    return _LOCATIONS_BY_CITY.get(city)


def find_location(city: str) -> Location:
    """Return the location for a city, or the empty Location when unknown."""
    return _LOCATIONS_BY_CITY.get(city) or Location()


def get_operator(operator_id: str) -> BusOperator:
    return _OPERATORS_BY_ID[operator_id]
