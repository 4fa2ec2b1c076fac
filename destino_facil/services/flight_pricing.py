"""거리/지역/시즌/노선 모델 기반 왕복 항공권 가격 추정 서비스.

결정적인 기본 가격만 캐시하고, 표시용 무작위 변동(±)은 매 조회 시점에만 적용합니다.
좌표를 확인할 수 없으면 도시명 휴리스틱으로 대체하며, 어떤 경우에도 예외를 던지지 않습니다.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from datetime import date
from typing import Callable
from urllib.parse import quote_plus, urlencode

from destino_facil.core.cache import TTLCache
from destino_facil.core.errors import EstimationFallback
from destino_facil.core.flight_tables import (
    COUNTRY_TO_FLIGHT_REGION,
    DATASET_REGION_TO_FLIGHT_REGION,
    DEAL_COUNT,
    DEAL_DISCOUNT_TIERS,
    DEAL_ORIGINS,
    DEFAULT_DEAL_DISCOUNT,
    DEFAULT_FLIGHT_REGION,
    DISTANCE_PRICE_TIERS,
    EXTRA_PRICE_PER_1000_KM,
    FALLBACK_BRAZIL_ROUTE_PRICES,
    FALLBACK_CITY_GROUPS,
    FALLBACK_INTERNATIONAL_PRICE,
    FALLBACK_SOUTH_AMERICA_PRICE,
    GOOGLE_FLIGHTS_URL,
    POPULAR_ROUTES,
    REGION_FACTORS,
    SEASON_FACTORS,
)
from destino_facil.core.geo import haversine_km
from destino_facil.core.logger import get_logger
from destino_facil.schemas.destination import Destination
from destino_facil.schemas.flight import FlightDeal
from destino_facil.services.query_service import QueryProcessor, collation_key

logger = get_logger(__name__)

FLIGHT_CACHE_PREFIX = "flight:"


@dataclass(frozen=True, slots=True)
class BasePrice:
    """변동 적용 전 가격과 산출 경로."""

    amount: int
    is_fallback: bool


def base_price_for_distance(distance_km: float) -> float:
    """거리 구간별 기본 가격. 마지막 구간을 넘으면 1000km당 고정 금액을 더합니다."""
    for max_distance, price in DISTANCE_PRICE_TIERS:
        if distance_km <= max_distance:
            return float(price)

    last_distance, last_price = DISTANCE_PRICE_TIERS[-1]
    return last_price + (distance_km - last_distance) / 1000 * EXTRA_PRICE_PER_1000_KM


def route_factor(origin: str, destination: str) -> float:
    """인기 노선 계수. 양방향으로 조회하며 없으면 1.0입니다."""
    origin_key = origin.strip().casefold()
    destination_key = destination.strip().casefold()
    factor = POPULAR_ROUTES.get((origin_key, destination_key))
    if factor is None:
        factor = POPULAR_ROUTES.get((destination_key, origin_key), 1.0)
    return factor


def flight_region(destination: Destination) -> str:
    region = COUNTRY_TO_FLIGHT_REGION.get(destination.country_name)
    if region:
        return region
    info = destination.country_info
    for key in (info.subregion, info.region):
        if key in DATASET_REGION_TO_FLIGHT_REGION:
            return DATASET_REGION_TO_FLIGHT_REGION[key]
    return DEFAULT_FLIGHT_REGION


_CITY_GROUP_PATTERNS: dict[str, re.Pattern[str]] = {
    group: re.compile(r"\b(?:" + "|".join(re.escape(city) for city in cities) + r")\b", re.IGNORECASE)
    for group, cities in FALLBACK_CITY_GROUPS.items()
}


def _classify_city_group(name: str) -> str | None:
    """도시명이 단어 단위로 포함된 첫 그룹. "Ontario"는 "Rio"로 분류되지 않습니다."""
    for group, pattern in _CITY_GROUP_PATTERNS.items():
        if pattern.search(name):
            return group
    return None


def fallback_base_price(origin: str, destination: str) -> int:
    """좌표 없이 도시명만으로 고르는 대략적인 기본 가격."""
    origin_group = _classify_city_group(origin)
    destination_group = _classify_city_group(destination)

    if origin_group == "brazil":
        other_group = destination_group
    elif destination_group == "brazil":
        other_group = origin_group
    else:
        return FALLBACK_INTERNATIONAL_PRICE

    if other_group is None:
        return FALLBACK_SOUTH_AMERICA_PRICE
    return FALLBACK_BRAZIL_ROUTE_PRICES[other_group]


def deal_discount(origin: str, destination: str) -> float:
    popularity = route_factor(origin, destination)
    for max_factor, discount in DEAL_DISCOUNT_TIERS:
        if popularity <= max_factor:
            return discount
    return DEFAULT_DEAL_DISCOUNT


def build_flight_search_url(
    origin: str,
    destination: str,
    *,
    departure: date | None = None,
    return_date: date | None = None,
    adults: int = 1,
    currency: str | None = None,
) -> str:
    """Google Flights 검색 링크를 생성합니다."""
    params: list[tuple[str, str]] = [("q", f"flights from {origin} to {destination}")]
    if departure is not None:
        params.append(("tfs", departure.isoformat()))
        if return_date is not None:
            params.append(("tfd", return_date.isoformat()))
    if adults > 1:
        params.append(("tbs", f"pt:{adults}"))
    if currency:
        params.append(("curr", currency))
    return f"{GOOGLE_FLIGHTS_URL}?{urlencode(params, quote_via=quote_plus)}"


class FlightPriceEstimator:
    """왕복 항공권 가격 추정기."""

    def __init__(
        self,
        query: QueryProcessor,
        cache: TTLCache,
        *,
        ttl_seconds: float = 1800.0,
        fallback_ttl_seconds: float = 60.0,
        variance: float = 0.05,
        fallback_variance: float = 0.10,
        rng: random.Random | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._query = query
        self._cache = cache
        self._ttl_seconds = ttl_seconds
        self._fallback_ttl_seconds = min(fallback_ttl_seconds, ttl_seconds)
        self._variance = max(0.0, variance)
        self._fallback_variance = max(0.0, fallback_variance)
        self._rng = rng or random.Random()
        self._today = today

    async def estimate(self, origin: str, destination: str) -> int:
        """표시용 변동이 적용된 양수 정수 가격을 반환합니다."""
        base = await self.base_price(origin, destination)
        variance = self._fallback_variance if base.is_fallback else self._variance
        return self._apply_variance(base.amount, variance)

    async def base_price(self, origin: str, destination: str) -> BasePrice:
        """변동 적용 전의 결정적 가격. 같은 달 안에서는 캐시된 값을 사용합니다."""
        month = self._today().month
        key = f"{FLIGHT_CACHE_PREFIX}{collation_key(origin.strip())}:{collation_key(destination.strip())}:{month}"
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        try:
            base = BasePrice(amount=await self._model_price(origin, destination, month), is_fallback=False)
        except EstimationFallback as exc:
            logger.info("Flight estimate using name heuristic: %s", exc)
            base = BasePrice(amount=fallback_base_price(origin, destination), is_fallback=True)
        except Exception:
            logger.exception("Flight estimate model failed: origin=%s destination=%s", origin, destination)
            base = BasePrice(amount=fallback_base_price(origin, destination), is_fallback=True)

        # 휴리스틱 가격은 짧은 TTL로만 보관
        self._cache.set(key, base, self._fallback_ttl_seconds if base.is_fallback else self._ttl_seconds)
        return base

    async def get_deals(self, destination: str) -> list[FlightDeal]:
        """주요 출발 도시별 할인 가격 중 가장 저렴한 3개를 오름차순으로 반환합니다."""
        target = destination.strip().casefold()
        deals: list[FlightDeal] = []

        for origin in DEAL_ORIGINS:
            if origin.casefold() == target:
                continue
            price = await self.estimate(origin, destination)
            deal_price = max(1, round(price * deal_discount(origin, destination)))
            deals.append(FlightDeal(price=deal_price, origin=origin))

        deals.sort(key=lambda deal: deal.price)
        return deals[:DEAL_COUNT]

    async def _model_price(self, origin: str, destination: str, month: int) -> int:
        origin_place = await self._resolve(origin)
        destination_place = await self._resolve(destination)

        distance = haversine_km(
            origin_place.latitude,
            origin_place.longitude,
            destination_place.latitude,
            destination_place.longitude,
        )
        region_factor = (
            REGION_FACTORS[flight_region(origin_place)] + REGION_FACTORS[flight_region(destination_place)]
        ) / 2
        price = (
            base_price_for_distance(distance)
            * region_factor
            * route_factor(origin_place.name, destination_place.name)
            * SEASON_FACTORS[month]
        )
        return max(1, round(price))

    async def _resolve(self, name: str) -> Destination:
        place = await self._query.find_destination(name)
        if place is None:
            raise EstimationFallback(f"좌표를 찾을 수 없습니다: {name}")
        if place.latitude == 0.0 and place.longitude == 0.0:
            raise EstimationFallback(f"유효한 좌표가 없습니다: {name}")
        return place

    def _apply_variance(self, amount: int, variance: float) -> int:
        if variance <= 0:
            return amount
        factor = 1 + self._rng.uniform(-variance, variance)
        return max(1, round(amount * factor))
