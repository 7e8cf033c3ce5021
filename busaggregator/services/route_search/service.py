"""High-level service that runs a search round and ranks the result."""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from fastapi import Request

from configs import Settings

from .aggregator import RouteAggregator
from .models import ProviderWarning, RouteOffer, SearchCriteria
from .providers.base import BaseRouteProvider
from .providers.mock import GoibiboMockProvider, MakeMyTripMockProvider, RedBusMockProvider
from .providers.redbus import RedBusRouteProvider
from .providers.transport_api import TransportApiRouteProvider
from .ranking import rank_by_price
from .sample_data import get_sample_locations, lookup_location

logger = logging.getLogger("route_search.service")


@dataclass(slots=True)
class RouteSearchResult:
    """Ranked offers plus metadata for one round."""

    search_id: str
    routes: List[RouteOffer] = field(default_factory=list)
    search_time: float = 0.0
    warnings: List[ProviderWarning] = field(default_factory=list)

    @property
    def total_found(self) -> int:
        return len(self.routes)


class RouteSearchService:
    """Coordinate a search round across all configured providers."""

    def __init__(self, aggregator: RouteAggregator, strict_cities: bool = False) -> None:
        self.aggregator = aggregator
        self.strict_cities = strict_cities

    @property
    def providers(self) -> List[BaseRouteProvider]:
        return list(self.aggregator.providers)

    def search(self, criteria: SearchCriteria) -> RouteSearchResult:
        """Run one aggregation round and rank its offers by price."""
        start = time.perf_counter()
        aggregated = self.aggregator.search(criteria)
        routes = rank_by_price(aggregated.offers)
        elapsed = time.perf_counter() - start

        result = RouteSearchResult(
            search_id=f"search_{uuid.uuid4().hex[:12]}",
            routes=routes,
            search_time=elapsed,
            warnings=list(aggregated.warnings),
        )
        logger.info(
            "Search %s found %d routes in %.2fs", result.search_id, result.total_found, elapsed
        )
        return result

    def unknown_cities(self, *cities: str) -> List[str]:
        """Cities missing from the location table, when strict checking is on."""
        if not self.strict_cities:
            return []
        return [city for city in cities if lookup_location(city) is None]

    def list_cities(self) -> List[Dict[str, str]]:
        return [
            {"id": loc.id, "name": loc.city, "state": loc.state}
            for loc in get_sample_locations()
        ]

    def list_platforms(self) -> List[Dict[str, Any]]:
        return [
            {
                "name": provider.name,
                "active": True,
                "avg_response_time": provider.avg_response_time,
            }
            for provider in self.aggregator.providers
        ]


def build_default_providers(settings: Settings) -> List[BaseRouteProvider]:
    """Mocks first when enabled, then every live API with a configured key."""
    providers: List[BaseRouteProvider] = []

    if settings.ENABLE_MOCK_PROVIDERS:
        # the live RedBus adapter owns the "RedBus" name when it is registered
        redbus_mock_name = "RedBus Mock" if settings.REDBUS_API_KEY else None
        providers.extend(
            [
                RedBusMockProvider(name=redbus_mock_name),
                MakeMyTripMockProvider(),
                GoibiboMockProvider(),
            ]
        )

    if settings.REDBUS_API_KEY:
        providers.append(
            RedBusRouteProvider(
                settings.REDBUS_API_KEY,
                timeout=settings.PROVIDER_TIMEOUT_SECONDS,
                rate_limit=settings.REDBUS_RATE_LIMIT_SECONDS,
                user_agent=settings.PROVIDER_USER_AGENT,
            )
        )

    if settings.RAPIDAPI_KEY:
        providers.append(
            TransportApiRouteProvider(
                settings.RAPIDAPI_KEY,
                timeout=settings.PROVIDER_TIMEOUT_SECONDS,
                rate_limit=settings.RAPIDAPI_RATE_LIMIT_SECONDS,
                user_agent=settings.PROVIDER_USER_AGENT,
            )
        )

    if not providers:
        logger.warning("No route providers configured; searches will fail.")
    return providers


def create_route_search_service(
    settings: Settings,
    providers: Optional[List[BaseRouteProvider]] = None,
) -> RouteSearchService:
    """Build the service wired with the configured providers."""
    aggregator = RouteAggregator(
        providers if providers is not None else build_default_providers(settings)
    )
    return RouteSearchService(aggregator, strict_cities=settings.STRICT_CITY_VALIDATION)


# Dependency for FastAPI
def get_route_search_service(request: Request) -> RouteSearchService:
    """Return the service the application factory stored on app.state."""
    service: RouteSearchService = request.app.state.route_search_service
    return service
