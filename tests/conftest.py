"""Shared fixtures for the route search tests."""

from datetime import date, datetime, timedelta
from typing import Callable
from unittest.mock import MagicMock

import pytest

from busaggregator.services.route_search.models import (
    BusOperator,
    BusType,
    Location,
    Price,
    RouteOffer,
    SearchCriteria,
)
from busaggregator.services.route_search.transport import RateLimitedTransport


@pytest.fixture()
def criteria() -> SearchCriteria:
    return SearchCriteria(
        from_city="Mumbai",
        to_city="Pune",
        travel_date=date(2025, 8, 21),
        passengers=2,
    )


@pytest.fixture()
def make_offer() -> Callable[..., RouteOffer]:
    """Factory for RouteOffer instances with a given price."""

    def _make(offer_id: str, amount: float, platform: str = "TestBus") -> RouteOffer:
        departure = datetime(2025, 8, 21, 6, 0)
        return RouteOffer(
            id=offer_id,
            from_location=Location(id="mumbai", city="Mumbai"),
            to_location=Location(id="pune", city="Pune"),
            operator=BusOperator(id="testbus", name="TestBus", platform=platform),
            bus_type=BusType(id="volvo_ac", name="Volvo AC", seats=45),
            departure_time=departure,
            arrival_time=departure + timedelta(hours=8),
            duration="8h 0m",
            price=Price(amount=amount, currency="INR", platform=platform),
            available_seats=10,
            booking_url=f"https://example.com/{offer_id}",
        )

    return _make


@pytest.fixture()
def mock_transport() -> MagicMock:
    return MagicMock(spec=RateLimitedTransport)
