"""Search endpoints.

Build one SearchCriteria from the request, run a round through the route
search service and answer with the ranked offers.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, timedelta
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from busaggregator.models.search_models import SearchRequestModel, SearchResponseModel
from busaggregator.services.route_search.models import (
    AggregatorConfigurationError,
    SearchCriteria,
)
from busaggregator.services.route_search.service import (
    RouteSearchService,
    get_route_search_service,
)

logger = logging.getLogger("api.search")

search_router = APIRouter(tags=["Search"])

INVALID_DATE_MESSAGE = "Invalid date format. Use YYYY-MM-DD"
_DATE_PREFIX = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_travel_date(value: Optional[str]) -> date:
    """Parse YYYY-MM-DD or an ISO-8601 timestamp; empty means tomorrow."""
    if not value:
        return date.today() + timedelta(days=1)

    text = value.strip()
    if not _DATE_PREFIX.match(text):
        raise ValueError(f"invalid travel date: {value!r}")
    day = datetime.strptime(text[:10], "%Y-%m-%d").date()
    if len(text) == 10:
        return day
    if text[10] not in "Tt ":
        raise ValueError(f"invalid travel date: {value!r}")
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    datetime.fromisoformat(text)
    return day


def _run_search(
    service: RouteSearchService,
    from_city: str,
    to_city: str,
    travel_date: date,
    passengers: int,
) -> SearchResponseModel:
    unknown = service.unknown_cities(from_city, to_city)
    if unknown:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown city: {', '.join(unknown)}",
        )

    criteria = SearchCriteria(
        from_city=from_city,
        to_city=to_city,
        travel_date=travel_date,
        passengers=passengers,
    )
    try:
        result = service.search(criteria)
    except AggregatorConfigurationError as exc:
        logger.error("Search could not start: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Search failed: {exc}",
        )

    return SearchResponseModel(
        status="success",
        message="Routes found successfully",
        search_id=result.search_id,
        routes=[route.as_dict() for route in result.routes],
        total_found=result.total_found,
        search_time=f"{result.search_time:.2f}s",
    )


@search_router.post(
    "/search",
    responses={
        200: {"model": SearchResponseModel, "description": "Successful Response"},
    },
)
def search_routes(
    payload: SearchRequestModel,
    service: RouteSearchService = Depends(get_route_search_service),
) -> SearchResponseModel:
    """
    Search every provider with a JSON body.

    Args:
        payload (SearchRequestModel): from_city and to_city are required,
        date defaults to tomorrow and passengers to 1.

    Returns:
        SearchResponseModel with the offers ranked by price.
    """
    if not payload.from_city or not payload.to_city:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="from_city and to_city are required",
        )

    try:
        travel_date = parse_travel_date(payload.date)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_DATE_MESSAGE)

    passengers = payload.passengers if payload.passengers and payload.passengers > 0 else 1
    return _run_search(service, payload.from_city, payload.to_city, travel_date, passengers)


@search_router.get("/routes")
def list_routes(
    from_city: Optional[str] = Query(default=None, alias="from"),
    to_city: Optional[str] = Query(default=None, alias="to"),
    travel_date: Optional[str] = Query(default=None, alias="date"),
    passengers: Optional[str] = Query(default=None),
    service: RouteSearchService = Depends(get_route_search_service),
) -> SearchResponseModel:
    """Search every provider with query parameters (from, to, date, passengers)."""
    if not from_city or not to_city:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="from and to parameters are required",
        )

    try:
        parsed_date = parse_travel_date(travel_date)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_DATE_MESSAGE)

    count = 1
    if passengers:
        try:
            count = max(int(passengers), 1)
        except ValueError:
            count = 1

    return _run_search(service, from_city, to_city, parsed_date, count)
