"""RedBus live API provider."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

from ..models import (
    BusOperator,
    BusType,
    Price,
    RecordConversionError,
    RouteOffer,
    SearchCriteria,
)
from ..transport import RateLimitedTransport, TransportConfig
from ..utils import (
    DEFAULT_CURRENCY,
    DEFAULT_USER_AGENT,
    coerce_amount,
    combine_with_rollover,
    parse_clock,
    slugify,
)
from .base import BaseApiRouteProvider

logger = logging.getLogger("route_search.redbus")


class RedBusRouteProvider(BaseApiRouteProvider):
    """Query the RedBus route search endpoint."""

    name = "RedBus"
    platform = "redbus"

    base_url = "https://api.redbus.com/v1"
    rate_limit = 1.0
    default_rating = 4.0
    _search_path = "/routes/search"
    _booking_url = "https://redbus.com/bus-tickets/{route_id}"
    _city_ids: Dict[str, str] = {
        "Mumbai": "MUMBAI001",
        "Pune": "PUNE001",
        "Bangalore": "BANGALORE001",
        "Delhi": "DELHI001",
    }

    def __init__(
        self,
        api_key: str,
        transport: Optional[RateLimitedTransport] = None,
        timeout: float = 30.0,
        rate_limit: Optional[float] = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        super().__init__(
            transport
            or RateLimitedTransport(
                TransportConfig(
                    base_url=self.base_url,
                    api_key=api_key,
                    user_agent=user_agent,
                    timeout=timeout,
                    rate_limit=self.rate_limit if rate_limit is None else rate_limit,
                )
            )
        )

    def city_id(self, city: str) -> str:
        """RedBus city code for a city name, empty when unknown."""
        return self._city_ids.get(city, "")

    def _search_impl(self, criteria: SearchCriteria) -> Iterable[RouteOffer]:
        payload = {
            "fromCityId": self.city_id(criteria.from_city),
            "toCityId": self.city_id(criteria.to_city),
            "departureDate": criteria.travel_date.isoformat(),
            "passengers": criteria.passengers,
        }
        raw = self._request("POST", self._search_path, body=payload)
        envelope = self._decode_envelope(raw)
        records = self._records(envelope, "data")
        logger.debug("RedBus returned %d records", len(records))
        return self._convert_records(records, criteria)

    def _convert_record(self, record: Any, criteria: SearchCriteria) -> RouteOffer:
        if not isinstance(record, dict):
            raise RecordConversionError(f"record is not an object: {record!r}")

        from_loc, to_loc = self._resolve_endpoints(criteria)
        route_id = self._require_str(record, "id")
        operator_name = self._require_str(record, "operatorName")
        bus_type_name = self._require_str(record, "busType")

        departure_at, arrival_at = combine_with_rollover(
            criteria.travel_date,
            parse_clock(record.get("departureTime")),
            parse_clock(record.get("arrivalTime")),
        )

        fare = coerce_amount(record.get("fare"))
        if fare is None:
            raise RecordConversionError(f"invalid fare: {record.get('fare')!r}")

        return RouteOffer(
            id=route_id,
            from_location=from_loc,
            to_location=to_loc,
            operator=BusOperator(
                id=slugify(operator_name),
                name=operator_name,
                rating=self.default_rating,
                platform=self.identity.name,
            ),
            bus_type=BusType(
                id=slugify(bus_type_name),
                name=bus_type_name,
                amenities=self._string_list(record, "amenities"),
                description=bus_type_name,
            ),
            departure_time=departure_at,
            arrival_time=arrival_at,
            duration=str(record.get("duration") or ""),
            price=Price(amount=fare, currency=DEFAULT_CURRENCY, platform=self.identity.name),
            available_seats=self._optional_int(record, "availableSeats"),
            booking_url=self._booking_url.format(route_id=route_id),
        )
