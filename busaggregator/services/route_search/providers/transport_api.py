"""Transport API (RapidAPI) live provider."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional
from urllib.parse import urlencode

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
    parse_timestamp,
    slugify,
)
from .base import BaseApiRouteProvider

logger = logging.getLogger("route_search.transport_api")


class TransportApiRouteProvider(BaseApiRouteProvider):
    """Query the RapidAPI hosted bus search endpoint."""

    name = "Transport API"
    platform = "rapidapi"

    base_url = "https://transport-api.p.rapidapi.com"
    rapidapi_host = "transport-api.p.rapidapi.com"
    rate_limit = 2.0
    default_rating = 3.8
    _search_path = "/bus/search"
    _booking_url = "https://example-booking.com/book/{route_id}"

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
        self.api_key = api_key

    def _search_impl(self, criteria: SearchCriteria) -> Iterable[RouteOffer]:
        params = urlencode(
            {
                "from": criteria.from_city,
                "to": criteria.to_city,
                "date": criteria.travel_date.isoformat(),
                "passengers": criteria.passengers,
            }
        )
        headers = {
            "X-RapidAPI-Host": self.rapidapi_host,
            "X-RapidAPI-Key": self.api_key,
        }
        raw = self._request("GET", f"{self._search_path}?{params}", headers=headers)
        envelope = self._decode_envelope(raw)
        records = self._records(envelope, "routes")
        logger.debug("Transport API returned %d records", len(records))
        return self._convert_records(records, criteria)

    def _convert_record(self, record: Any, criteria: SearchCriteria) -> RouteOffer:
        if not isinstance(record, dict):
            raise RecordConversionError(f"record is not an object: {record!r}")

        from_loc, to_loc = self._resolve_endpoints(criteria)
        route_id = self._require_str(record, "id")
        operator_name = self._require_str(record, "operator")
        bus_type_name = str(record.get("busType") or "")

        departure_at = parse_timestamp(record.get("departure"))
        arrival_at = parse_timestamp(record.get("arrival"))
        if arrival_at < departure_at:
            raise RecordConversionError(
                f"arrival {arrival_at.isoformat()} precedes departure {departure_at.isoformat()}"
            )

        amount = coerce_amount(record.get("price"))
        if amount is None:
            raise RecordConversionError(f"invalid price: {record.get('price')!r}")

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
            ),
            departure_time=departure_at,
            arrival_time=arrival_at,
            duration=str(record.get("duration") or ""),
            price=Price(amount=amount, currency=DEFAULT_CURRENCY, platform=self.identity.name),
            available_seats=self._optional_int(record, "availableSeats"),
            booking_url=self._booking_url.format(route_id=route_id),
        )
