"""Read-only catalog endpoints: cities and booking platforms."""

from fastapi import APIRouter, Depends

from busaggregator.models.search_models import ApiResponse
from busaggregator.services.route_search.service import (
    RouteSearchService,
    get_route_search_service,
)

catalog_router = APIRouter(tags=["Catalog"])


@catalog_router.get("/cities")
def list_cities(
    service: RouteSearchService = Depends(get_route_search_service),
) -> ApiResponse:
    """Cities known to the location table."""
    return ApiResponse(
        status="success",
        message="Cities retrieved successfully",
        data=service.list_cities(),
    )


@catalog_router.get("/platforms")
def list_platforms(
    service: RouteSearchService = Depends(get_route_search_service),
) -> ApiResponse:
    """Booking platforms queried on every search."""
    return ApiResponse(
        status="success",
        message="Platforms retrieved successfully",
        data=service.list_platforms(),
    )
