"""검색어/필터 기반 여행지 조회 서비스.

후보 도시 선택 -> 보강(캐시 사용) -> 필터 -> 정렬 -> 페이지네이션 순으로 처리하며,
결과가 없거나 데이터셋을 읽지 못해도 예외 대신 빈 페이지를 반환합니다.
"""

from __future__ import annotations

import asyncio
import math
import unicodedata
from collections.abc import Collection, Iterable
from typing import TypeVar

from destino_facil.core.cache import TTLCache
from destino_facil.core.errors import DataUnavailable, InvalidRequest
from destino_facil.core.geo import GeoPoint
from destino_facil.core.logger import get_logger
from destino_facil.core.reference_tables import COUNTRY_PRIORITIES, DEFAULT_COUNTRY_PRIORITY, NOTABLE_CITY_NAMES
from destino_facil.schemas.dataset import CityRecord, CountryRecord
from destino_facil.schemas.destination import Destination, NearbyCity
from destino_facil.schemas.query import FilterSpec, PageRequest, PageResult, SortBy
from destino_facil.services.dataset_loader import DatasetLoader
from destino_facil.services.enrichment import DestinationEnricher
from destino_facil.services.popularity import PopularityScorer

logger = get_logger(__name__)

T = TypeVar("T")

DESTINATION_CACHE_PREFIX = "destination:"


def collation_key(text: str) -> str:
    """악센트와 대소문자를 무시하는 정렬 키."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char)).casefold()


def paginate(items: list[T], page_number: int, page_size: int) -> tuple[list[T], int, int]:
    """`(현재 페이지 항목, 전체 항목 수, 전체 페이지 수)`를 반환합니다."""
    if page_number < 1 or page_size < 1:
        raise InvalidRequest(f"잘못된 페이지 요청입니다: page={page_number} size={page_size}")

    total_items = len(items)
    total_pages = math.ceil(total_items / page_size) if total_items else 0
    start = (page_number - 1) * page_size
    return items[start : start + page_size], total_items, total_pages


def matches_filters(destination: Destination, filters: FilterSpec) -> bool:
    """지정된 모든 필터 조건을 만족하는지 반환합니다."""
    if filters.region:
        needle = filters.region.casefold()
        info = destination.country_info
        haystacks = (destination.region, info.region, info.subregion, destination.country_name, info.name)
        if not any(needle in value.casefold() for value in haystacks if value):
            return False

    if filters.price_tier and destination.price_tier != filters.price_tier:
        return False

    if filters.climate and destination.climate != filters.climate:
        return False

    if filters.population_min is not None and destination.population < filters.population_min:
        return False

    if filters.population_max is not None and destination.population > filters.population_max:
        return False

    if filters.required_activities and not set(filters.required_activities) <= set(destination.activities):
        return False

    return True


def sort_destinations(
    destinations: Iterable[Destination],
    sort_by: SortBy,
    scorer: PopularityScorer,
) -> list[Destination]:
    """안정 정렬로 순서를 정합니다. 같은 값끼리는 입력 순서를 유지합니다."""
    if sort_by == "name":
        return sorted(destinations, key=lambda destination: collation_key(destination.name))
    if sort_by == "population":
        return sorted(destinations, key=lambda destination: destination.population, reverse=True)
    return sorted(destinations, key=scorer.score, reverse=True)


def _country_priority(country_name: str) -> int:
    return COUNTRY_PRIORITIES.get(country_name, DEFAULT_COUNTRY_PRIORITY)


class QueryProcessor:
    """여행지 페이지 조회를 담당합니다."""

    def __init__(
        self,
        loader: DatasetLoader,
        enricher: DestinationEnricher,
        scorer: PopularityScorer,
        cache: TTLCache,
        *,
        destination_ttl_seconds: float = 3600.0,
        max_candidates: int = 1000,
        load_timeout_seconds: float = 10.0,
    ) -> None:
        self._loader = loader
        self._enricher = enricher
        self._scorer = scorer
        self._cache = cache
        self._destination_ttl_seconds = destination_ttl_seconds
        self._max_candidates = max_candidates
        self._load_timeout_seconds = load_timeout_seconds

    async def get_page(
        self,
        request: PageRequest,
        favorite_ids: Collection[int] | None = None,
    ) -> PageResult[Destination]:
        """검색/필터/정렬 후 요청 페이지를 반환합니다."""
        try:
            destinations = await self._run_bounded(self._collect_destinations, request.search_term)
        except DataUnavailable as exc:
            logger.error("Destination query degraded to empty result: %s", exc)
            return PageResult[Destination].empty(request.page_number, request.page_size, data_unavailable=True)

        filters = request.filters or FilterSpec()
        filtered = [destination for destination in destinations if matches_filters(destination, filters)]
        ordered = sort_destinations(filtered, filters.sort_by, self._scorer)
        items, total_items, total_pages = paginate(ordered, request.page_number, request.page_size)

        logger.info(
            "Destination page built: term=%s candidates=%d filtered=%d page=%d/%d",
            request.search_term or "-",
            len(destinations),
            total_items,
            request.page_number,
            total_pages,
        )
        return PageResult[Destination](
            items=self._tag_favorites(items, favorite_ids),
            current_page=request.page_number,
            total_pages=total_pages,
            total_items=total_items,
            page_size=request.page_size,
        )

    async def get_destination(
        self,
        city_id: int,
        favorite_ids: Collection[int] | None = None,
    ) -> Destination | None:
        """도시 ID로 여행지 하나를 조회합니다. 없거나 데이터셋을 읽지 못하면 None입니다."""
        try:
            destination = await self._run_bounded(self._destination_by_id, city_id)
        except DataUnavailable as exc:
            logger.error("Destination lookup degraded: city_id=%s error=%s", city_id, exc)
            return None
        if destination is None:
            return None
        return self._tag_favorites([destination], favorite_ids)[0]

    async def find_destination(self, name: str) -> Destination | None:
        """도시명으로 가장 잘 일치하는 여행지를 조회합니다."""
        try:
            return await self._run_bounded(self._destination_by_name, name)
        except DataUnavailable as exc:
            logger.error("Destination lookup degraded: name=%s error=%s", name, exc)
            return None

    async def nearby_cities(
        self,
        destination: Destination,
        *,
        radius_km: float = 100.0,
        limit: int = 3,
    ) -> list[NearbyCity]:
        """반경 `radius_km` 안의 다른 도시를 가까운 순으로 최대 `limit`개 반환합니다.

        좌표가 (0, 0)인 여행지나 데이터셋을 읽지 못한 경우에는 빈 목록입니다.
        """
        if limit <= 0 or (destination.latitude == 0.0 and destination.longitude == 0.0):
            return []
        try:
            return await self._run_bounded(self._nearby, destination, radius_km, limit)
        except DataUnavailable as exc:
            logger.error("Nearby lookup degraded: city_id=%s error=%s", destination.id, exc)
            return []

    async def popular_names(self, limit: int = 10) -> list[str]:
        """기본 인기 후보 도시명 목록."""
        try:
            cities = await self._run_bounded(self._default_candidates)
        except DataUnavailable as exc:
            logger.error("Popular destinations unavailable: %s", exc)
            return []
        return [city.name for city in cities[: max(0, limit)]]

    async def _run_bounded(self, func, *args):
        try:
            return await asyncio.wait_for(asyncio.to_thread(func, *args), timeout=self._load_timeout_seconds)
        except asyncio.TimeoutError as exc:
            raise DataUnavailable(f"데이터셋 처리 시간이 초과되었습니다({self._load_timeout_seconds}s).") from exc

    def _collect_destinations(self, search_term: str) -> list[Destination]:
        candidates = self._search_candidates(search_term) if search_term else self._default_candidates()
        destinations: list[Destination] = []
        for city in candidates:
            country = self._loader.country_for(city)
            if country is None:
                continue
            destination = self._enrich_cached(city, country)
            if destination is not None:
                destinations.append(destination)
        return destinations

    def _enrich_cached(self, city: CityRecord, country: CountryRecord) -> Destination | None:
        key = f"{DESTINATION_CACHE_PREFIX}{city.id}:{country.id}"
        try:
            return self._cache.get_or_set(
                key,
                lambda: self._enricher.enrich(city, country),
                self._destination_ttl_seconds,
            )
        except ValueError as exc:
            logger.warning("Destination enrichment failed: city_id=%s name=%s error=%s", city.id, city.name, exc)
            return None

    def _search_candidates(self, search_term: str) -> list[CityRecord]:
        needle = search_term.casefold()
        locale = self._enricher.locale
        matches: list[CityRecord] = []

        for city in self._loader.load_cities():
            country = self._loader.country_for(city)
            fields = [city.name, city.state_name, city.country_name]
            if country is not None:
                fields.extend((country.name, country.localized_name(locale)))
            if any(value and needle in value.casefold() for value in fields):
                matches.append(city)
                if len(matches) >= self._max_candidates:
                    logger.info("Candidate cap reached: term=%s cap=%d", search_term, self._max_candidates)
                    break
        return matches

    def _default_candidates(self) -> list[CityRecord]:
        """수도와 주요 관광 도시. 같은 이름은 수도 > 국가 우선순위 순으로 하나만 남깁니다."""
        chosen: dict[str, tuple[CityRecord, CountryRecord]] = {}

        def _rank(city: CityRecord, country: CountryRecord) -> tuple[bool, int]:
            return self._loader.is_capital(city, country), _country_priority(country.name)

        for city in self._loader.load_cities():
            country = self._loader.country_for(city)
            if country is None:
                continue
            name_key = city.name.casefold()
            if not (self._loader.is_capital(city, country) or name_key in NOTABLE_CITY_NAMES):
                continue

            existing = chosen.get(name_key)
            if existing is None or _rank(city, country) > _rank(*existing):
                chosen[name_key] = (city, country)

        ordered = sorted(
            chosen.values(),
            key=lambda pair: (
                not self._loader.is_capital(pair[0], pair[1]),
                -_country_priority(pair[1].name),
                collation_key(pair[0].name),
            ),
        )
        return [city for city, _ in ordered[: self._max_candidates]]

    def _destination_by_id(self, city_id: int) -> Destination | None:
        city = self._loader.find_city_by_id(city_id)
        if city is None:
            return None
        country = self._loader.country_for(city)
        return self._enrich_cached(city, country) if country is not None else None

    def _destination_by_name(self, name: str) -> Destination | None:
        """이름이 정확히 같은 도시가 여럿이면 수도 > 인구 > 국가 우선순위 순으로 고릅니다."""
        needle = name.strip().casefold()
        exact: list[tuple[tuple[bool, int, int], Destination]] = []

        for city in self._loader.search_cities_by_name(name, limit=self._max_candidates):
            country = self._loader.country_for(city)
            if country is None:
                continue
            destination = self._enrich_cached(city, country)
            if destination is None:
                continue
            if city.name.casefold() == needle:
                rank = (self._loader.is_capital(city, country), destination.population, _country_priority(country.name))
                exact.append((rank, destination))
            elif exact:
                break
            else:
                return destination

        if not exact:
            return None
        return max(exact, key=lambda pair: pair[0])[1]

    def _nearby(self, destination: Destination, radius_km: float, limit: int) -> list[NearbyCity]:
        origin = GeoPoint(destination.latitude, destination.longitude)
        found: list[tuple[float, NearbyCity]] = []

        for city in self._loader.load_cities():
            if city.id == destination.id or (city.latitude == 0.0 and city.longitude == 0.0):
                continue
            distance = origin.distance_to(GeoPoint(city.latitude, city.longitude))
            if distance > radius_km:
                continue
            country = self._loader.country_for(city)
            nearby = NearbyCity(
                id=city.id,
                name=city.name,
                country_name=country.name if country is not None else (city.country_name or ""),
                distance_km=round(distance, 1),
            )
            found.append((distance, nearby))

        found.sort(key=lambda pair: pair[0])
        return [nearby for _, nearby in found[:limit]]

    @staticmethod
    def _tag_favorites(
        destinations: list[Destination],
        favorite_ids: Collection[int] | None,
    ) -> list[Destination]:
        if not favorite_ids:
            return destinations
        return [
            destination.model_copy(update={"is_favorite": True}) if destination.id in favorite_ids else destination
            for destination in destinations
        ]
