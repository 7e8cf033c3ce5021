"""Ordering of merged offers."""

from __future__ import annotations

from typing import Iterable, List

from .models import RouteOffer


def rank_by_price(offers: Iterable[RouteOffer]) -> List[RouteOffer]:
    """Cheapest first. Ties keep the order they arrived in."""
    return sorted(offers, key=lambda offer: offer.price.amount)
