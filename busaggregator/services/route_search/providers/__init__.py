"""Route providers: synthetic mocks and live API adapters."""

from .base import BaseApiRouteProvider, BaseRouteProvider
from .mock import (
    GoibiboMockProvider,
    MakeMyTripMockProvider,
    MockRouteProvider,
    RedBusMockProvider,
)
from .redbus import RedBusRouteProvider
from .transport_api import TransportApiRouteProvider

__all__ = [
    "BaseApiRouteProvider",
    "BaseRouteProvider",
    "GoibiboMockProvider",
    "MakeMyTripMockProvider",
    "MockRouteProvider",
    "RedBusMockProvider",
    "RedBusRouteProvider",
    "TransportApiRouteProvider",
]
