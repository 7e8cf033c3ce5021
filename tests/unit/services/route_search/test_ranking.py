"""Test price ranking of merged offers."""

import random

from busaggregator.services.route_search.ranking import rank_by_price


def test_rank_orders_by_price_ascending(make_offer) -> None:
    offers = [make_offer("a", 900), make_offer("b", 450.5), make_offer("c", 1200)]

    ranked = rank_by_price(offers)

    assert [offer.id for offer in ranked] == ["b", "a", "c"]


def test_rank_keeps_arrival_order_on_ties(make_offer) -> None:
    offers = [
        make_offer("first", 500, platform="RedBus"),
        make_offer("cheap", 100),
        make_offer("second", 500, platform="Goibibo"),
        make_offer("third", 500, platform="MakeMyTrip"),
    ]

    ranked = rank_by_price(offers)

    assert [offer.id for offer in ranked] == ["cheap", "first", "second", "third"]


def test_rank_is_a_non_decreasing_permutation(make_offer) -> None:
    rng = random.Random(42)
    offers = [make_offer(f"o{i}", round(rng.uniform(100, 2000), 2)) for i in range(50)]

    ranked = rank_by_price(offers)

    amounts = [offer.price.amount for offer in ranked]
    assert all(low <= high for low, high in zip(amounts, amounts[1:]))
    assert sorted(offer.id for offer in ranked) == sorted(offer.id for offer in offers)


def test_rank_does_not_mutate_input(make_offer) -> None:
    offers = [make_offer("a", 3), make_offer("b", 1)]

    rank_by_price(offers)

    assert [offer.id for offer in offers] == ["a", "b"]


def test_rank_empty() -> None:
    assert rank_by_price([]) == []
