"""Concurrent bus route search across several booking providers."""

from .aggregator import RouteAggregator
from .models import (
    AggregationResult,
    AggregatorConfigurationError,
    ProviderSearchResponse,
    ProviderUnavailable,
    RecordConversionError,
    RouteOffer,
    RouteSearchError,
    SearchCriteria,
)
from .ranking import rank_by_price

__all__ = [
    "AggregationResult",
    "AggregatorConfigurationError",
    "ProviderSearchResponse",
    "ProviderUnavailable",
    "RecordConversionError",
    "RouteAggregator",
    "RouteOffer",
    "RouteSearchError",
    "SearchCriteria",
    "rank_by_price",
]
