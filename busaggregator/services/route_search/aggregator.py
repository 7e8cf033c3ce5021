"""Fan one search out to every provider and merge what comes back."""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import List, Optional, Sequence

from .models import (
    AggregationResult,
    AggregatorConfigurationError,
    ProviderSearchResponse,
    ProviderWarning,
    SearchCriteria,
)
from .providers.base import BaseRouteProvider

logger = logging.getLogger("route_search.aggregator")


class RouteAggregator:
    """Query all registered providers concurrently with per-provider isolation.

    Each provider runs on its own worker and reports into its own future, so
    a round always yields exactly one report per provider. A failing
    provider contributes no offers and a warning; the round itself only
    fails when there is nothing to query.
    """

    def __init__(
        self,
        providers: Sequence[BaseRouteProvider],
        max_workers: Optional[int] = None,
    ) -> None:
        self.providers: Sequence[BaseRouteProvider] = tuple(providers)
        self.max_workers = max_workers

    def collect(self, criteria: SearchCriteria) -> List[ProviderSearchResponse]:
        """Run every provider and return their reports in registration order."""
        if not self.providers:
            raise AggregatorConfigurationError("No route providers configured.")

        workers = self.max_workers or len(self.providers)
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="route-search") as pool:
            futures: List[Future[ProviderSearchResponse]] = [
                pool.submit(provider.search, criteria) for provider in self.providers
            ]
            wait(futures)

        responses: List[ProviderSearchResponse] = []
        for provider, future in zip(self.providers, futures):
            exc = future.exception()
            if exc is not None:
                responses.append(
                    ProviderSearchResponse(
                        platform=provider.name,
                        error=str(exc) or exc.__class__.__name__,
                    )
                )
            else:
                responses.append(future.result())
        return responses

    def search(self, criteria: SearchCriteria) -> AggregationResult:
        """Execute one round and concatenate the successful providers' offers."""
        responses = self.collect(criteria)
        result = AggregationResult(reports=len(responses))

        for response in responses:
            if response.error is not None:
                logger.warning("%s error: %s", response.platform, response.error)
                result.warnings.append(
                    ProviderWarning(platform=response.platform, error=response.error)
                )
                continue
            result.offers.extend(response.offers)

        logger.info(
            "Round %s -> %s on %s: %d offers from %d providers (%d failed)",
            criteria.from_city,
            criteria.to_city,
            criteria.travel_date.isoformat(),
            len(result.offers),
            result.reports,
            len(result.warnings),
        )
        return result
