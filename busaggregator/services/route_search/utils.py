"""Utilities shared by route search providers."""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time, timedelta
from typing import Any, Optional, Tuple


DEFAULT_CURRENCY = "INR"
DEFAULT_USER_AGENT = "BusAggregator/1.0"

DEFAULT_HEADERS = {
    "User-Agent": DEFAULT_USER_AGENT,
    "Content-Type": "application/json",
    "Accept": "application/json",
}


def normalize_whitespace(value: str) -> str:
    """Collapse repeated spaces and newlines."""
    return re.sub(r"\s+", " ", value).strip()


def slugify(value: str) -> str:
    """Turn display names such as 'AC Sleeper' into ids like 'ac_sleeper'."""
    return normalize_whitespace(value).lower().replace(" ", "_")


def parse_clock(value: Any) -> time:
    """Parse a 24h 'HH:MM' time of day. Raises ValueError on anything else."""
    if not isinstance(value, str):
        raise ValueError(f"expected HH:MM string, got {value!r}")
    return datetime.strptime(value.strip(), "%H:%M").time()


def parse_timestamp(value: Any) -> datetime:
    """Parse an RFC 3339 timestamp and keep its wall clock time.

    The offset is dropped so every offer carries naive provider-local
    datetimes, the same as offers built from plain times of day.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"expected RFC 3339 string, got {value!r}")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text).replace(tzinfo=None)


def combine_with_rollover(
    travel_date: date,
    departure: time,
    arrival: time,
) -> Tuple[datetime, datetime]:
    """Anchor departure/arrival times of day to the travel date.

    An arrival earlier in the day than the departure is an overnight
    journey, so the arrival moves to the next calendar day.
    """
    departure_at = datetime.combine(travel_date, departure.replace(second=0, microsecond=0))
    arrival_at = datetime.combine(travel_date, arrival.replace(second=0, microsecond=0))
    if arrival < departure:
        arrival_at += timedelta(days=1)
    return departure_at, arrival_at


def format_duration(delta: timedelta) -> str:
    """Render a journey length as '8h 0m'."""
    total_minutes = int(delta.total_seconds() // 60)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m"


def coerce_amount(value: Any) -> Optional[float]:
    """Return a fare as float, or None when it is not a finite, non-negative number."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        amount = float(value)
    except OverflowError:
        return None
    if not math.isfinite(amount) or amount < 0:
        return None
    return amount
