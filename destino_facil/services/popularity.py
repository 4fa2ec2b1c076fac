"""기본 정렬에 쓰이는 여행지 인기도 점수 계산."""

from __future__ import annotations

from dataclasses import dataclass, field

from destino_facil.core.reference_tables import (
    CLIMATE_BONUSES,
    DEFAULT_REGION_POPULARITY_SCORE,
    FAMOUS_CITY_BONUS,
    FAMOUS_CITY_NAMES,
    POPULATION_BONUS_BREAKPOINTS,
    PRICE_TIER_BONUSES,
    REGION_POPULARITY_SCORES,
)
from destino_facil.schemas.destination import Destination


@dataclass(frozen=True, slots=True)
class PopularityWeights:
    """점수 계산 가중치 테이블."""

    region_scores: dict[str, int] = field(default_factory=lambda: dict(REGION_POPULARITY_SCORES))
    default_region_score: int = DEFAULT_REGION_POPULARITY_SCORE
    price_tier_bonuses: dict[str, int] = field(default_factory=lambda: dict(PRICE_TIER_BONUSES))
    climate_bonuses: dict[str, int] = field(default_factory=lambda: dict(CLIMATE_BONUSES))
    famous_cities: tuple[str, ...] = FAMOUS_CITY_NAMES
    famous_city_bonus: int = FAMOUS_CITY_BONUS
    population_breakpoints: tuple[tuple[int, int], ...] = POPULATION_BONUS_BREAKPOINTS


class PopularityScorer:
    """지역, 물가, 기후, 유명 도시 여부, 인구로 인기도 점수를 계산합니다."""

    def __init__(self, weights: PopularityWeights | None = None) -> None:
        self._weights = weights or PopularityWeights()
        self._breakpoints = sorted(self._weights.population_breakpoints, key=lambda item: item[0], reverse=True)

    def score(self, destination: Destination) -> int:
        weights = self._weights
        total = self._region_score(destination)
        total += weights.price_tier_bonuses.get(destination.price_tier, 0)
        total += weights.climate_bonuses.get(destination.climate, 0)

        name = destination.name.casefold()
        if any(famous.casefold() in name for famous in weights.famous_cities):
            total += weights.famous_city_bonus

        total += self._population_bonus(destination.population)
        return total

    def _region_score(self, destination: Destination) -> int:
        info = destination.country_info
        for key in (info.subregion, info.region, destination.region):
            if key and key in self._weights.region_scores:
                return self._weights.region_scores[key]
        return self._weights.default_region_score

    def _population_bonus(self, population: int) -> int:
        # 누적하지 않고 가장 높은 구간 하나만 적용
        for threshold, bonus in self._breakpoints:
            if population > threshold:
                return bonus
        return 0
