"""여행지 탐색 코어의 공개 진입점(facade)."""

from __future__ import annotations

from collections.abc import Collection

from destino_facil.core.cache import TTLCache
from destino_facil.core.config import Settings, get_settings
from destino_facil.core.errors import DataUnavailable
from destino_facil.core.logger import get_logger
from destino_facil.core.timeout_policy import get_timeout_policy
from destino_facil.schemas.destination import Destination, DestinationDetail
from destino_facil.schemas.flight import FlightDeal
from destino_facil.schemas.query import PageRequest, PageResult
from destino_facil.services.dataset_loader import DatasetLoader
from destino_facil.services.enrichment import DestinationEnricher
from destino_facil.services.flight_pricing import FlightPriceEstimator
from destino_facil.services.image_service import DestinationImageService, get_pexels_image_service
from destino_facil.services.popularity import PopularityScorer
from destino_facil.services.query_service import QueryProcessor

logger = get_logger(__name__)


class DiscoveryService:
    """조회, 항공권 추정, 이미지 조회를 하나의 캐시 위에서 묶어 제공합니다."""

    def __init__(
        self,
        loader: DatasetLoader,
        cache: TTLCache,
        query: QueryProcessor,
        flights: FlightPriceEstimator,
        images: DestinationImageService,
        *,
        nearby_radius_km: float = 100.0,
        nearby_limit: int = 3,
    ) -> None:
        self._loader = loader
        self._cache = cache
        self._query = query
        self._flights = flights
        self._images = images
        self._nearby_radius_km = nearby_radius_km
        self._nearby_limit = nearby_limit

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> DiscoveryService:
        """애플리케이션 설정으로 전체 구성 요소를 조립합니다."""
        resolved = settings or get_settings()
        timeout_policy = get_timeout_policy(resolved)

        cache = TTLCache(max_entries=resolved.CACHE_MAX_ENTRIES)
        loader = DatasetLoader.from_settings(resolved)
        query = QueryProcessor(
            loader,
            DestinationEnricher(
                resolved.DISPLAY_LOCALE,
                cold_latitude=resolved.CLIMATE_COLD_LATITUDE,
                temperate_latitude=resolved.CLIMATE_TEMPERATE_LATITUDE,
            ),
            PopularityScorer(),
            cache,
            destination_ttl_seconds=resolved.DESTINATION_CACHE_TTL_SECONDS,
            max_candidates=resolved.QUERY_MAX_CANDIDATES,
            load_timeout_seconds=timeout_policy.dataset_load_timeout_seconds,
        )
        flights = FlightPriceEstimator(
            query,
            cache,
            ttl_seconds=resolved.FLIGHT_CACHE_TTL_SECONDS,
            fallback_ttl_seconds=resolved.FLIGHT_FALLBACK_CACHE_TTL_SECONDS,
            variance=resolved.FLIGHT_PRICE_VARIANCE,
            fallback_variance=resolved.FLIGHT_FALLBACK_VARIANCE,
        )
        images = DestinationImageService(
            cache,
            primary=get_pexels_image_service(),
            ttl_seconds=resolved.IMAGE_CACHE_TTL_SECONDS,
        )
        return cls(
            loader,
            cache,
            query,
            flights,
            images,
            nearby_radius_km=resolved.NEARBY_RADIUS_KM,
            nearby_limit=resolved.NEARBY_LIMIT,
        )

    def preload(self, *, required: bool = False) -> bool:
        """데이터셋을 미리 읽습니다. `required`면 실패 시 예외를 그대로 전파합니다."""
        try:
            self._loader.load_countries()
        except DataUnavailable:
            if required:
                raise
            logger.warning("Dataset preload failed. Queries will return empty results until it is readable.")
            return False
        return True

    async def get_page(
        self,
        request: PageRequest,
        favorite_ids: Collection[int] | None = None,
    ) -> PageResult[Destination]:
        return await self._query.get_page(request, favorite_ids)

    async def get_destination_detail(
        self,
        city_id: int,
        favorite_ids: Collection[int] | None = None,
    ) -> DestinationDetail | None:
        destination = await self._query.get_destination(city_id, favorite_ids)
        if destination is None:
            return None
        images = await self._images.images_for(destination.name)
        nearby = await self._query.nearby_cities(
            destination,
            radius_km=self._nearby_radius_km,
            limit=self._nearby_limit,
        )
        return DestinationDetail(destination=destination, images=images, nearby=nearby)

    async def popular_destinations(self, limit: int = 10) -> list[str]:
        """검색어가 없을 때 보여줄 기본 인기 도시명."""
        return await self._query.popular_names(limit)

    async def estimate_flight_price(self, origin: str, destination: str) -> int:
        return await self._flights.estimate(origin, destination)

    async def get_flight_deals(self, destination: str) -> list[FlightDeal]:
        return await self._flights.get_deals(destination)

    def clear_cache(self) -> int:
        """보강/항공권/이미지 캐시를 모두 비웁니다. 여러 번 호출해도 안전합니다."""
        removed = len(self._cache)
        self._cache.clear()
        logger.info("Discovery cache cleared: removed=%d", removed)
        return removed
