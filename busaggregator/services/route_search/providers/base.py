"""Base classes for route search providers."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..models import (
    Location,
    ProviderIdentity,
    ProviderSearchResponse,
    ProviderUnavailable,
    RecordConversionError,
    RouteOffer,
    SearchCriteria,
)
from ..sample_data import lookup_location
from ..transport import RateLimitedTransport, TransportCallError

logger = logging.getLogger("route_search.provider")


class BaseRouteProvider(ABC):
    """Common behaviour for every route source, synthetic or live."""

    name: str
    platform: str
    avg_response_time: Optional[str] = None

    @property
    def identity(self) -> ProviderIdentity:
        return ProviderIdentity(name=self.name, platform=self.platform)

    def search(self, criteria: SearchCriteria) -> ProviderSearchResponse:
        """Public search entry point with error handling."""
        try:
            offers = list(self._search_impl(criteria))
            return ProviderSearchResponse(platform=self.name, offers=offers)
        except ProviderUnavailable as exc:
            logger.debug("Provider %s unavailable: %s", self.name, exc.message)
            return ProviderSearchResponse(platform=self.name, error=exc.message)
        except Exception:
            logger.exception("Unexpected error while searching %s", self.name)
            return ProviderSearchResponse(
                platform=self.name, error=f"{self.name} could not be reached."
            )

    @abstractmethod
    def _search_impl(self, criteria: SearchCriteria) -> Iterable[RouteOffer]:
        """Return offers for the given criteria."""
        raise NotImplementedError


class BaseApiRouteProvider(BaseRouteProvider):
    """Provider backed by a live HTTP API reached through a RateLimitedTransport."""

    def __init__(self, transport: RateLimitedTransport) -> None:
        self.transport = transport

    def _request(
        self,
        method: str,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> bytes:
        try:
            return self.transport.invoke(method, path, headers=headers, body=body)
        except TransportCallError as exc:
            raise ProviderUnavailable(self.name, f"{self.name} API error: {exc}") from exc

    def _decode_envelope(self, raw: bytes) -> Dict[str, Any]:
        try:
            envelope = json.loads(raw)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ProviderUnavailable(
                self.name, f"failed to parse {self.name} response: {exc}"
            ) from exc
        if not isinstance(envelope, dict):
            raise ProviderUnavailable(
                self.name, f"unexpected {self.name} response envelope"
            )
        return envelope

    def _records(self, envelope: Dict[str, Any], key: str) -> List[Any]:
        records = envelope.get(key)
        if records is None:
            return []
        if not isinstance(records, list):
            raise ProviderUnavailable(
                self.name, f"unexpected '{key}' field in {self.name} response"
            )
        return records

    def _convert_records(
        self,
        records: Iterable[Any],
        criteria: SearchCriteria,
    ) -> Iterable[RouteOffer]:
        """Map provider records, dropping the ones that do not convert."""
        for record in records:
            try:
                yield self._convert_record(record, criteria)
            except (RecordConversionError, KeyError, TypeError, ValueError) as exc:
                logger.debug("Skipping malformed %s record: %s", self.name, exc)

    @abstractmethod
    def _convert_record(self, record: Any, criteria: SearchCriteria) -> RouteOffer:
        """Convert one provider record to a RouteOffer."""
        raise NotImplementedError

    @staticmethod
    def _resolve_endpoints(criteria: SearchCriteria) -> tuple[Location, Location]:
        from_loc = lookup_location(criteria.from_city)
        to_loc = lookup_location(criteria.to_city)
        if from_loc is None or to_loc is None:
            raise RecordConversionError(
                f"no location match for {criteria.from_city} -> {criteria.to_city}"
            )
        return from_loc, to_loc

    @staticmethod
    def _require_str(record: Mapping[str, Any], key: str) -> str:
        value = record.get(key)
        if not isinstance(value, str) or not value.strip():
            raise RecordConversionError(f"missing or invalid '{key}'")
        return value.strip()

    @staticmethod
    def _optional_int(record: Mapping[str, Any], key: str) -> int:
        value = record.get(key, 0)
        if value is None:
            return 0
        if isinstance(value, bool) or not isinstance(value, int):
            raise RecordConversionError(f"invalid '{key}': {value!r}")
        return value

    @staticmethod
    def _string_list(record: Mapping[str, Any], key: str) -> tuple[str, ...]:
        value = record.get(key) or []
        if not isinstance(value, list):
            raise RecordConversionError(f"invalid '{key}': {value!r}")
        return tuple(str(item) for item in value)
