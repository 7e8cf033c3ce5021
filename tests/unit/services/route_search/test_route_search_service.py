"""Test the route search service and provider registry wiring."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from busaggregator.services.route_search.aggregator import RouteAggregator
from busaggregator.services.route_search.models import (
    AggregationResult,
    AggregatorConfigurationError,
    ProviderWarning,
)
from busaggregator.services.route_search.providers.mock import (
    GoibiboMockProvider,
    MakeMyTripMockProvider,
    RedBusMockProvider,
)
from busaggregator.services.route_search.providers.redbus import RedBusRouteProvider
from busaggregator.services.route_search.providers.transport_api import (
    TransportApiRouteProvider,
)
from busaggregator.services.route_search.service import (
    RouteSearchService,
    build_default_providers,
    create_route_search_service,
    get_route_search_service,
)
from configs import Settings


@pytest.fixture()
def clean_env(monkeypatch):
    for key in (
        "ENABLE_MOCK_PROVIDERS",
        "REDBUS_API_KEY",
        "RAPIDAPI_KEY",
        "REDBUS_RATE_LIMIT_SECONDS",
        "STRICT_CITY_VALIDATION",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestRouteSearchService:
    """Test cases for RouteSearchService."""

    def setup_method(self) -> None:
        self.mock_aggregator = MagicMock(spec=RouteAggregator)
        self.mock_aggregator.providers = (RedBusMockProvider(), GoibiboMockProvider())
        self.service = RouteSearchService(self.mock_aggregator)

    def test_search_ranks_offers_and_fills_metadata(self, criteria, make_offer) -> None:
        self.mock_aggregator.search.return_value = AggregationResult(
            offers=[make_offer("b", 700), make_offer("a", 300)],
            warnings=[ProviderWarning(platform="Down", error="timeout")],
            reports=3,
        )

        result = self.service.search(criteria)

        self.mock_aggregator.search.assert_called_once_with(criteria)
        assert [route.id for route in result.routes] == ["a", "b"]
        assert result.total_found == 2
        assert result.search_id.startswith("search_")
        assert result.search_time >= 0
        assert result.warnings[0].platform == "Down"

    def test_search_ids_are_unique(self, criteria) -> None:
        self.mock_aggregator.search.return_value = AggregationResult()

        first = self.service.search(criteria)
        second = self.service.search(criteria)

        assert first.search_id != second.search_id

    def test_configuration_errors_propagate(self, criteria) -> None:
        self.mock_aggregator.search.side_effect = AggregatorConfigurationError("none")

        with pytest.raises(AggregatorConfigurationError):
            self.service.search(criteria)

    def test_list_cities(self) -> None:
        cities = self.service.list_cities()

        assert {"id": "mumbai", "name": "Mumbai", "state": "Maharashtra"} in cities
        assert len(cities) == 4

    def test_list_platforms(self) -> None:
        platforms = self.service.list_platforms()

        assert platforms == [
            {"name": "RedBus", "active": True, "avg_response_time": "300ms"},
            {"name": "Goibibo", "active": True, "avg_response_time": "325ms"},
        ]

    def test_unknown_cities_only_reported_in_strict_mode(self) -> None:
        assert self.service.unknown_cities("Atlantis", "Pune") == []

        strict = RouteSearchService(self.mock_aggregator, strict_cities=True)
        assert strict.unknown_cities("Atlantis", "Pune") == ["Atlantis"]


def test_default_registry_has_three_mocks(clean_env) -> None:
    providers = build_default_providers(Settings(_env_file=None))

    assert [type(provider) for provider in providers] == [
        RedBusMockProvider,
        MakeMyTripMockProvider,
        GoibiboMockProvider,
    ]


def test_live_providers_added_when_keys_are_set(clean_env) -> None:
    clean_env.setenv("REDBUS_API_KEY", "rb-key")
    clean_env.setenv("RAPIDAPI_KEY", "rapid-key")
    clean_env.setenv("REDBUS_RATE_LIMIT_SECONDS", "0.25")

    providers = build_default_providers(Settings(_env_file=None))

    assert [provider.name for provider in providers] == [
        "RedBus Mock",
        "MakeMyTrip",
        "Goibibo",
        "RedBus",
        "Transport API",
    ]
    redbus = providers[3]
    assert isinstance(redbus, RedBusRouteProvider)
    assert redbus.transport.config.rate_limit == 0.25
    assert isinstance(providers[4], TransportApiRouteProvider)
    assert providers[4].transport.config.rate_limit == 2.0


def test_disabled_mocks_without_keys_fail_at_search_time(clean_env, criteria) -> None:
    clean_env.setenv("ENABLE_MOCK_PROVIDERS", "false")

    service = create_route_search_service(Settings(_env_file=None))

    assert service.providers == []
    with pytest.raises(AggregatorConfigurationError):
        service.search(criteria)


def test_create_service_with_explicit_providers(clean_env) -> None:
    provider = RedBusMockProvider(latency_ms=(0, 0))

    service = create_route_search_service(Settings(_env_file=None), providers=[provider])

    assert service.providers == [provider]


def test_dependency_reads_service_from_app_state() -> None:
    service = MagicMock(spec=RouteSearchService)
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(route_search_service=service)))

    assert get_route_search_service(request) is service


@pytest.mark.parametrize(
    "env",
    [
        {},
        {"REDBUS_API_KEY": "rb-key"},
        {"RAPIDAPI_KEY": "rapid-key"},
        {"REDBUS_API_KEY": "rb-key", "RAPIDAPI_KEY": "rapid-key"},
    ],
)
def test_registered_provider_names_are_unique(clean_env, env) -> None:
    for key, value in env.items():
        clean_env.setenv(key, value)

    names = [provider.name for provider in build_default_providers(Settings(_env_file=None))]

    assert len(names) == len(set(names))


def test_redbus_mock_offers_are_stamped_with_its_own_name(clean_env, criteria) -> None:
    clean_env.setenv("REDBUS_API_KEY", "rb-key")

    mock = build_default_providers(Settings(_env_file=None))[0]
    mock.latency_ms = (0, 0)
    response = mock.search(criteria)

    assert response.platform == "RedBus Mock"
    assert {offer.price.platform for offer in response.offers} == {"RedBus Mock"}
