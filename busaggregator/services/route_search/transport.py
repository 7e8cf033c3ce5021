"""Rate limited HTTP transport shared by the live provider adapters.

Every provider instance owns its transport, so throttling state is never
shared between providers. Failures are classified and raised, never retried.
"""

from __future__ import annotations

import json
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import requests

from .models import RouteSearchError
from .utils import DEFAULT_HEADERS, DEFAULT_USER_AGENT


class TransportCallError(RouteSearchError):
    """Base exception for a failed outbound provider call."""


class EncodingError(TransportCallError):
    """The request body could not be serialized to JSON."""


class TransportError(TransportCallError):
    """Connection failure, timeout or unreadable response."""


class ProtocolError(TransportCallError):
    """The provider answered with a status outside 200-299."""

    def __init__(self, status: int, body: bytes) -> None:
        preview = body.decode("utf-8", errors="replace")[:200]
        super().__init__(f"API request failed with status {status}: {preview}")
        self.status = status
        self.body = body


@dataclass(frozen=True)
class TransportConfig:
    """Connection settings for one provider API."""

    base_url: str
    api_key: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 30.0
    rate_limit: float = 0.0  # minimum seconds between calls


class RateLimitedTransport:
    """Perform JSON HTTP calls spaced at least ``rate_limit`` seconds apart."""

    def __init__(
        self,
        config: TransportConfig,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()
        self.logger = logging.getLogger("route_search.transport")
        self._last_call: Optional[float] = None
        self._lock = threading.Lock()

    @property
    def last_call_time(self) -> Optional[float]:
        """Monotonic timestamp of the latest call slot, or None before any call."""
        return self._last_call

    def wait_for_slot(self) -> None:
        """Block until the configured interval has elapsed since the last call."""
        with self._lock:
            interval = self.config.rate_limit
            if interval > 0 and self._last_call is not None:
                elapsed = time.monotonic() - self._last_call
                if elapsed < interval:
                    delay = interval - elapsed
                    self.logger.debug("Rate limit: waiting %.3fs for %s", delay, self.config.base_url)
                    time.sleep(delay)
            # Recorded before the request goes out so overlapping calls keep their spacing.
            self._last_call = time.monotonic()

    def build_headers(self, headers: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """Default headers, then provider auth, then caller overrides."""
        merged = {**DEFAULT_HEADERS, "User-Agent": self.config.user_agent}
        if self.config.api_key:
            merged["X-API-Key"] = self.config.api_key
            merged["Authorization"] = f"Bearer {self.config.api_key}"
        if headers:
            merged.update(headers)
        return merged

    def invoke(
        self,
        method: str,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
    ) -> bytes:
        """Send one request and return the raw response body.

        Raises:
            EncodingError: ``body`` is not JSON serializable.
            TransportError: the request could not be completed.
            ProtocolError: the response status is not 2xx.
        """
        self.wait_for_slot()

        data: Optional[str] = None
        if body is not None:
            try:
                data = json.dumps(body)
            except (TypeError, ValueError) as exc:
                raise EncodingError(f"failed to marshal request body: {exc}") from exc

        url = self.config.base_url.rstrip("/") + path
        try:
            response = self.session.request(
                method,
                url,
                headers=self.build_headers(headers),
                data=data,
                timeout=self.config.timeout,
            )
        except requests.exceptions.RequestException as exc:
            self.logger.debug("Request to %s failed: %s", url, exc)
            raise TransportError(f"request failed: {exc}") from exc

        if not 200 <= response.status_code < 300:
            raise ProtocolError(response.status_code, response.content)

        return response.content
