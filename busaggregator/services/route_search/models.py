"""Domain models for bus route search results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True, slots=True)
class SearchCriteria:
    """One search request: where from, where to, when and for how many."""

    from_city: str
    to_city: str
    travel_date: date
    passengers: int = 1

    def __post_init__(self) -> None:
        if not self.from_city or not self.to_city:
            raise ValueError("from_city and to_city are required")
        if self.passengers < 1:
            raise ValueError("passengers must be a positive integer")


@dataclass(frozen=True, slots=True)
class Location:
    """City or bus station. The default instance is the empty location."""

    id: str = ""
    name: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    latitude: float = 0.0
    longitude: float = 0.0

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "city": self.city,
            "state": self.state,
            "country": self.country,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


@dataclass(frozen=True, slots=True)
class BusOperator:
    """Bus company, tagged with the platform it was sold through."""

    id: str
    name: str
    logo: str = ""
    rating: float = 0.0
    platform: str = ""

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "logo": self.logo,
            "rating": self.rating,
            "platform": self.platform,
        }


@dataclass(frozen=True, slots=True)
class BusType:
    """Bus class descriptor."""

    id: str
    name: str
    seats: int = 0
    amenities: Tuple[str, ...] = ()
    description: str = ""

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "seats": self.seats,
            "amenities": list(self.amenities),
            "description": self.description,
        }


@dataclass(frozen=True, slots=True)
class Price:
    amount: float
    currency: str
    platform: str

    def as_dict(self) -> Dict[str, Any]:
        return {
            "amount": self.amount,
            "currency": self.currency,
            "platform": self.platform,
        }


@dataclass(frozen=True, slots=True)
class ProviderIdentity:
    """Name and platform tag stamped on every offer a provider emits."""

    name: str
    platform: str


@dataclass(frozen=True, slots=True)
class RouteOffer:
    """Single bus route offer normalized to the shared schema."""

    id: str
    from_location: Location
    to_location: Location
    operator: BusOperator
    bus_type: BusType
    departure_time: datetime
    arrival_time: datetime
    duration: str
    price: Price
    available_seats: int
    booking_url: str

    def as_dict(self) -> Dict[str, Any]:
        """Return a JSON friendly representation used by the HTTP layer."""

        return {
            "id": self.id,
            "from": self.from_location.as_dict(),
            "to": self.to_location.as_dict(),
            "operator": self.operator.as_dict(),
            "bus_type": self.bus_type.as_dict(),
            "departure_time": self.departure_time.isoformat(),
            "arrival_time": self.arrival_time.isoformat(),
            "duration": self.duration,
            "price": self.price.as_dict(),
            "available_seats": self.available_seats,
            "booking_url": self.booking_url,
        }


@dataclass(slots=True)
class ProviderSearchResponse:
    """Outcome of one provider for one round."""

    platform: str
    offers: List[RouteOffer] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class ProviderWarning:
    """Provider failure recorded during a round."""

    platform: str
    error: str


@dataclass(slots=True)
class AggregationResult:
    """Merged offers from every provider that answered successfully."""

    offers: List[RouteOffer] = field(default_factory=list)
    warnings: List[ProviderWarning] = field(default_factory=list)
    reports: int = 0


class RouteSearchError(RuntimeError):
    """Base class for route search failures."""


class ProviderUnavailable(RouteSearchError):
    """Raised when a provider cannot answer the current round at all."""

    def __init__(self, platform: str, message: str) -> None:
        super().__init__(message)
        self.platform = platform
        self.message = message


class RecordConversionError(RouteSearchError):
    """Raised when a single provider record cannot be mapped to a RouteOffer."""


class AggregatorConfigurationError(RouteSearchError):
    """Raised when a round cannot start, e.g. no providers are registered."""
