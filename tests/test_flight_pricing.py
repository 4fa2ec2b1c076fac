"""항공권 가격 추정 테스트."""

from __future__ import annotations

import asyncio
import random
from datetime import date

from destino_facil.core.cache import TTLCache
from destino_facil.core.flight_tables import DEAL_ORIGINS, GOOGLE_FLIGHTS_URL
from destino_facil.services.flight_pricing import (
    FlightPriceEstimator,
    base_price_for_distance,
    build_flight_search_url,
    fallback_base_price,
    route_factor,
)
from tests.mocks.sample_dataset import FakeClock, build_query_processor


def _estimator(tmp_path, *, variance: float = 0.0, fallback_variance: float = 0.0, month: int = 5, **kwargs):
    cache = kwargs.pop("cache", None)
    if cache is None:
        cache = TTLCache()
    processor = build_query_processor(tmp_path, cache=cache)
    estimator = FlightPriceEstimator(
        processor,
        cache,
        variance=variance,
        fallback_variance=fallback_variance,
        today=lambda: date(2024, month, 10),
        **kwargs,
    )
    return estimator, processor, cache


def test_short_domestic_route_uses_model_price(tmp_path) -> None:
    estimator, _, _ = _estimator(tmp_path)

    base = asyncio.run(estimator.base_price("São Paulo", "Rio de Janeiro"))

    # 150 (< 500 km) * 1.0 (Brazil) * 0.9 (popular route) * 0.85 (May)
    assert base.amount == 115
    assert base.is_fallback is False


def test_short_route_is_cheaper_than_long_haul(tmp_path) -> None:
    estimator, _, _ = _estimator(tmp_path)

    rio = asyncio.run(estimator.estimate("São Paulo", "Rio de Janeiro"))
    tokyo = asyncio.run(estimator.estimate("São Paulo", "Tokyo"))

    assert 0 < rio < tokyo


def test_unresolved_place_falls_back_to_name_heuristic(tmp_path) -> None:
    estimator, _, _ = _estimator(tmp_path)

    south_america = asyncio.run(estimator.base_price("São Paulo", "Gotham City"))
    international = asyncio.run(estimator.base_price("Atlantis", "Paris"))

    assert (south_america.amount, south_america.is_fallback) == (600, True)
    assert (international.amount, international.is_fallback) == (800, True)


def test_zero_coordinates_are_treated_as_unresolved(tmp_path) -> None:
    estimator, _, _ = _estimator(tmp_path)

    base = asyncio.run(estimator.base_price("Nowhere", "Paris"))

    assert base.is_fallback is True


def test_unexpected_model_error_still_returns_positive_price(tmp_path) -> None:
    estimator, processor, _ = _estimator(tmp_path)

    async def _boom(name: str):
        raise RuntimeError("dataset exploded")

    processor.find_destination = _boom

    assert asyncio.run(estimator.estimate("São Paulo", "Rio de Janeiro")) == 250


def test_variance_is_bounded_and_applied_per_read(tmp_path) -> None:
    estimator, _, _ = _estimator(tmp_path, variance=0.05, rng=random.Random(7))

    prices = [asyncio.run(estimator.estimate("São Paulo", "Rio de Janeiro")) for _ in range(20)]

    assert all(109 <= price <= 121 for price in prices)
    assert len(set(prices)) > 1


def test_base_price_is_cached_per_month(tmp_path) -> None:
    estimator, processor, cache = _estimator(tmp_path)
    asyncio.run(estimator.estimate("São Paulo", "Rio de Janeiro"))

    async def _unexpected(name: str):
        raise AssertionError("cached price should be reused")

    processor.find_destination = _unexpected

    assert "flight:sao paulo:rio de janeiro:5" in cache
    assert asyncio.run(estimator.estimate("são paulo", "RIO DE JANEIRO")) == 115


def test_season_changes_price(tmp_path) -> None:
    may, _, _ = _estimator(tmp_path, month=5)
    december, _, _ = _estimator(tmp_path, month=12)

    assert asyncio.run(may.estimate("São Paulo", "Tokyo")) < asyncio.run(december.estimate("São Paulo", "Tokyo"))


def test_deals_are_three_cheapest_ascending(tmp_path) -> None:
    estimator, _, _ = _estimator(tmp_path)

    deals = asyncio.run(estimator.get_deals("Paris"))

    assert len(deals) == 3
    assert [deal.price for deal in deals] == sorted(deal.price for deal in deals)
    assert all(deal.origin in DEAL_ORIGINS and deal.price > 0 for deal in deals)


def test_deals_skip_destination_as_origin(tmp_path) -> None:
    estimator, _, _ = _estimator(tmp_path)

    deals = asyncio.run(estimator.get_deals("São Paulo"))

    assert "São Paulo" not in {deal.origin for deal in deals}


def test_distance_tiers_extrapolate_beyond_last_tier() -> None:
    assert base_price_for_distance(0) == 150
    assert base_price_for_distance(500) == 150
    assert base_price_for_distance(501) == 250
    assert base_price_for_distance(25000) == 2500


def test_route_factor_is_symmetric_and_case_insensitive() -> None:
    assert route_factor("São Paulo", "Rio de Janeiro") == 0.9
    assert route_factor("RIO DE JANEIRO", "são paulo") == 0.9
    assert route_factor("Oslo", "Luxor") == 1.0


def test_fallback_decision_table() -> None:
    assert fallback_base_price("Rio", "Salvador") == 250
    assert fallback_base_price("London", "São Paulo") == 1200
    assert fallback_base_price("São Paulo", "Toronto") == 800
    assert fallback_base_price("Recife", "Lima") == 600
    assert fallback_base_price("Lima", "Quito") == 800


def test_fallback_groups_match_whole_words_only() -> None:
    assert fallback_base_price("Ontario", "Tokyo") == 800
    assert fallback_base_price("Marion", "Paris") == 800
    assert fallback_base_price("Jerome", "Rio") == 600
    assert fallback_base_price("rio de janeiro", "PARIS") == 1200


def test_build_flight_search_url() -> None:
    url = build_flight_search_url("São Paulo", "Paris", currency="BRL")

    assert url.startswith(f"{GOOGLE_FLIGHTS_URL}?q=flights+from+S%C3%A3o+Paulo+to+Paris")
    assert url.endswith("curr=BRL")


def test_fallback_price_expires_before_model_price(tmp_path) -> None:
    clock = FakeClock()
    estimator, _, cache = _estimator(tmp_path, cache=TTLCache(clock=clock), ttl_seconds=1800, fallback_ttl_seconds=60)

    asyncio.run(estimator.base_price("São Paulo", "Gotham City"))
    asyncio.run(estimator.base_price("São Paulo", "Rio de Janeiro"))
    clock.advance(61)

    assert "flight:sao paulo:gotham city:5" not in cache
    assert "flight:sao paulo:rio de janeiro:5" in cache
