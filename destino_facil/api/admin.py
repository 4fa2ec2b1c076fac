"""운영용 관리 API."""

from fastapi import APIRouter, Depends

from destino_facil.api.dependencies import get_discovery_service, require_admin_secret
from destino_facil.services.discovery_service import DiscoveryService

router = APIRouter(prefix="/api/v1/admin", tags=["admin"], dependencies=[Depends(require_admin_secret)])


@router.post("/cache/clear")
def clear_cache(service: DiscoveryService = Depends(get_discovery_service)) -> dict:  # noqa: B008
    """탐색 캐시를 비웁니다."""
    return {"status": "ok", "removed": service.clear_cache()}
