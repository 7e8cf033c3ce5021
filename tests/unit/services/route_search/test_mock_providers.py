"""Test the synthetic route providers."""

import random
from datetime import date, datetime
from unittest.mock import patch

import pytest

from busaggregator.services.route_search.models import Location, SearchCriteria
from busaggregator.services.route_search.providers.mock import (
    GoibiboMockProvider,
    MakeMyTripMockProvider,
    RedBusMockProvider,
)


@pytest.mark.parametrize(
    "provider_cls", [RedBusMockProvider, MakeMyTripMockProvider, GoibiboMockProvider]
)
def test_mock_offers_are_anchored_to_search_date(provider_cls, criteria) -> None:
    provider = provider_cls(rng=random.Random(7), latency_ms=(0, 0), route_count=(2, 4))

    response = provider.search(criteria)

    assert response.error is None
    assert response.platform == provider.name
    assert 2 <= len(response.offers) <= 4
    for offer in response.offers:
        assert offer.departure_time.date() == criteria.travel_date
        assert offer.departure_time <= offer.arrival_time
        assert offer.price.currency == "INR"
        assert offer.price.platform == provider.name
        assert offer.operator.platform == provider.platform
        assert offer.from_location.city == "Mumbai"
        assert offer.to_location.city == "Pune"


def test_redbus_mock_schedule_and_pricing(criteria) -> None:
    provider = RedBusMockProvider(rng=random.Random(1), latency_ms=(0, 0), route_count=(3, 3))

    offers = provider.search(criteria).offers

    assert [offer.id for offer in offers] == ["redbus_1", "redbus_2", "redbus_3"]
    assert [offer.departure_time.hour for offer in offers] == [6, 10, 14]
    assert all(offer.duration == "8h 0m" for offer in offers)
    assert offers[1].price.amount == pytest.approx(offers[0].price.amount + 100, abs=0.01)
    assert 500 <= offers[0].price.amount <= 1500
    assert all(5 <= offer.available_seats <= 24 for offer in offers)


def test_goibibo_mock_duration_matches_schedule(criteria) -> None:
    provider = GoibiboMockProvider(rng=random.Random(3), latency_ms=(0, 0), route_count=(2, 2))

    offer = provider.search(criteria).offers[0]

    assert offer.departure_time == datetime(2025, 8, 21, 8, 0)
    assert offer.arrival_time == datetime(2025, 8, 21, 15, 30)
    assert offer.duration == "7h 30m"


def test_mock_unknown_city_yields_empty_location() -> None:
    provider = RedBusMockProvider(rng=random.Random(5), latency_ms=(0, 0))
    criteria = SearchCriteria(from_city="Atlantis", to_city="Pune", travel_date=date(2025, 8, 21))

    response = provider.search(criteria)

    assert response.error is None
    assert response.offers
    assert all(offer.from_location == Location() for offer in response.offers)


def test_mock_simulates_latency_within_bounds(criteria) -> None:
    provider = MakeMyTripMockProvider(rng=random.Random(11))

    with patch("busaggregator.services.route_search.providers.mock.time.sleep") as mock_sleep:
        provider.search(criteria)

    mock_sleep.assert_called_once()
    delay = mock_sleep.call_args.args[0]
    assert 0.3 <= delay <= 0.9


def test_mock_default_route_counts() -> None:
    assert RedBusMockProvider.route_count == (2, 4)
    assert MakeMyTripMockProvider.route_count == (1, 4)
    assert GoibiboMockProvider.route_count == (2, 4)
