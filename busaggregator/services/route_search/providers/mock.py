"""Synthetic providers that emulate live booking platforms.

Offers are anchored to the search date and jittered on price, seats and bus
class. Each search sleeps for a random latency before answering, and never
fails.
"""

from __future__ import annotations

import logging
import random
import time
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Tuple

from ..models import Price, RouteOffer, SearchCriteria
from ..sample_data import find_location, get_operator, get_sample_bus_types
from ..utils import DEFAULT_CURRENCY, format_duration
from .base import BaseRouteProvider

logger = logging.getLogger("route_search.mock")


class MockRouteProvider(BaseRouteProvider):
    """Configurable mock. Subclasses only override the class attributes."""

    name = "Mock"
    platform = "mock"
    id_prefix = "mock"
    operator_id = "redbus"
    booking_url = "https://example.com/book"

    latency_ms: Tuple[int, int] = (200, 700)
    route_count: Tuple[int, int] = (2, 4)
    base_price: Tuple[float, float] = (500.0, 1500.0)
    price_step = 100.0
    first_departure_hour = 6
    departure_step_hours = 4
    journey_minutes = 8 * 60
    seats: Tuple[int, int] = (5, 24)

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        latency_ms: Optional[Tuple[int, int]] = None,
        route_count: Optional[Tuple[int, int]] = None,
        name: Optional[str] = None,
    ) -> None:
        self.rng = rng or random.Random()
        if name is not None:
            self.name = name
        if latency_ms is not None:
            self.latency_ms = latency_ms
        if route_count is not None:
            self.route_count = route_count

    def _simulate_latency(self) -> None:
        low, high = self.latency_ms
        time.sleep(self.rng.uniform(low, high) / 1000)

    def _search_impl(self, criteria: SearchCriteria) -> Iterable[RouteOffer]:
        self._simulate_latency()

        from_loc = find_location(criteria.from_city)
        to_loc = find_location(criteria.to_city)
        operator = get_operator(self.operator_id)
        bus_types = get_sample_bus_types()
        day_start = datetime.combine(criteria.travel_date, datetime.min.time())
        journey = timedelta(minutes=self.journey_minutes)
        base_price = self.rng.uniform(*self.base_price)

        offers: List[RouteOffer] = []
        for index in range(self.rng.randint(*self.route_count)):
            departure = day_start + timedelta(
                hours=self.first_departure_hour + index * self.departure_step_hours
            )
            offers.append(
                RouteOffer(
                    id=f"{self.id_prefix}_{index + 1}",
                    from_location=from_loc,
                    to_location=to_loc,
                    operator=operator,
                    bus_type=self.rng.choice(bus_types),
                    departure_time=departure,
                    arrival_time=departure + journey,
                    duration=format_duration(journey),
                    price=Price(
                        amount=round(base_price + index * self.price_step, 2),
                        currency=DEFAULT_CURRENCY,
                        platform=self.name,
                    ),
                    available_seats=self.rng.randint(*self.seats),
                    booking_url=self.booking_url,
                )
            )

        logger.debug("%s generated %d mock offers", self.name, len(offers))
        return offers


class RedBusMockProvider(MockRouteProvider):
    name = "RedBus"
    platform = "redbus"
    id_prefix = "redbus"
    operator_id = "redbus"
    booking_url = "https://redbus.in/book/route123"
    avg_response_time = "300ms"


class MakeMyTripMockProvider(MockRouteProvider):
    name = "MakeMyTrip"
    platform = "makemytrip"
    id_prefix = "mmt"
    operator_id = "makemytrip"
    booking_url = "https://makemytrip.com/bus/book/xyz"
    avg_response_time = "450ms"

    latency_ms = (300, 900)
    route_count = (1, 4)
    base_price = (450.0, 1650.0)
    price_step = 150.0
    first_departure_hour = 7
    departure_step_hours = 3
    journey_minutes = 9 * 60
    seats = (3, 17)


class GoibiboMockProvider(MockRouteProvider):
    name = "Goibibo"
    platform = "goibibo"
    id_prefix = "goibibo"
    operator_id = "goibibo"
    booking_url = "https://goibibo.com/bus/booking/abc"
    avg_response_time = "325ms"

    latency_ms = (250, 650)
    base_price = (600.0, 1500.0)
    price_step = 80.0
    first_departure_hour = 8
    journey_minutes = 7 * 60 + 30
    seats = (8, 32)
