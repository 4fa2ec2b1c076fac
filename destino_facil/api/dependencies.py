"""API 의존성 모음."""

from functools import lru_cache

from fastapi import Header, HTTPException, status

from destino_facil.core.config import get_settings
from destino_facil.services.discovery_service import DiscoveryService
from destino_facil.services.favorites import FavoritesStore, InMemoryFavoritesStore


@lru_cache(maxsize=1)
def get_discovery_service() -> DiscoveryService:
    """프로세스 단위 탐색 서비스 싱글톤을 제공합니다."""
    return DiscoveryService.from_settings()


@lru_cache(maxsize=1)
def get_favorites_store() -> FavoritesStore:
    """프로세스 단위 즐겨찾기 저장소를 제공합니다."""
    return InMemoryFavoritesStore()


def require_admin_secret(
    x_admin_secret: str | None = Header(default=None, alias="x-admin-secret"),
) -> None:
    """관리용 엔드포인트의 시크릿 헤더를 검증한다."""
    settings = get_settings()
    if not settings.ADMIN_SECRET:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="관리자 시크릿 설정이 없습니다.",
        )

    if x_admin_secret != settings.ADMIN_SECRET:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="유효하지 않은 관리자 시크릿입니다.",
        )
