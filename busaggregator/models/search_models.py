"""Request and response models for the search API."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class SearchRequestModel(BaseModel):
    """JSON body accepted by POST /search."""

    from_city: Optional[str] = Field(default=None, description="Origin city name, e.g. 'Mumbai'.")
    to_city: Optional[str] = Field(default=None, description="Destination city name.")
    date: Optional[str] = Field(
        default=None,
        description="Travel date as YYYY-MM-DD or an ISO-8601 timestamp. Defaults to tomorrow.",
    )
    passengers: Optional[int] = Field(
        default=None, description="Number of passengers. Defaults to 1."
    )


class ApiResponse(BaseModel):
    """Standard envelope for every non-search endpoint."""

    status: str = Field(..., description="'success' or 'error'.")
    message: str = Field(..., description="Human readable outcome.")
    data: Optional[Any] = None


class SearchResponseModel(BaseModel):
    """Data model for the response of the search endpoints."""

    status: str = Field(..., description="'success' when the round completed.")
    message: str
    search_id: str = Field(..., description="Identifier generated for this round.")
    routes: List[Dict[str, Any]] = Field(
        default_factory=list, description="Offers ranked by price, cheapest first."
    )
    total_found: int
    search_time: str = Field(..., description="Elapsed wall-clock time, e.g. '0.73s'.")
