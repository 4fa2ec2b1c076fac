"""여행지 목록/상세 조회 API."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from destino_facil.api.dependencies import get_discovery_service, get_favorites_store
from destino_facil.core.logger import get_logger
from destino_facil.schemas.destination import Destination, DestinationDetail, PopularDestinationsResponse
from destino_facil.schemas.query import PageRequest, PageResult
from destino_facil.services.discovery_service import DiscoveryService
from destino_facil.services.favorites import FavoritesStore

router = APIRouter(prefix="/api/v1/destinations", tags=["destinations"])
logger = get_logger(__name__)


def _favorite_ids(store: FavoritesStore, user_id: str | None) -> frozenset[int]:
    return store.favorite_ids(user_id) if user_id else frozenset()


@router.post("/search", response_model=PageResult[Destination])
async def search_destinations(
    request: PageRequest,
    user_id: str | None = Query(default=None, max_length=128),
    service: DiscoveryService = Depends(get_discovery_service),  # noqa: B008
    favorites: FavoritesStore = Depends(get_favorites_store),  # noqa: B008
) -> PageResult[Destination]:
    """검색어/필터/정렬 조건으로 여행지 페이지를 반환합니다."""
    logger.info(
        "Destination search requested: term=%s page=%d size=%d",
        request.search_term or "-",
        request.page_number,
        request.page_size,
    )
    return await service.get_page(request, _favorite_ids(favorites, user_id))


@router.get("/popular", response_model=PopularDestinationsResponse)
async def get_popular_destinations(
    limit: int = Query(default=10, ge=1, le=50),
    service: DiscoveryService = Depends(get_discovery_service),  # noqa: B008
) -> PopularDestinationsResponse:
    """기본 인기 여행지 이름 목록을 반환합니다."""
    return PopularDestinationsResponse(names=await service.popular_destinations(limit))


@router.get("/{city_id}", response_model=DestinationDetail)
async def get_destination(
    city_id: int,
    user_id: str | None = Query(default=None, max_length=128),
    service: DiscoveryService = Depends(get_discovery_service),  # noqa: B008
    favorites: FavoritesStore = Depends(get_favorites_store),  # noqa: B008
) -> DestinationDetail:
    """도시 ID로 여행지 상세, 이미지, 인근 도시를 반환합니다."""
    detail = await service.get_destination_detail(city_id, _favorite_ids(favorites, user_id))
    if detail is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="여행지를 찾을 수 없습니다.")
    return detail
