"""사용자 즐겨찾기 API."""

from fastapi import APIRouter, Depends, Path

from destino_facil.api.dependencies import get_favorites_store
from destino_facil.services.favorites import FavoritesStore

router = APIRouter(prefix="/api/v1/users/{user_id}/favorites", tags=["favorites"])


@router.get("")
def list_favorites(
    user_id: str = Path(..., min_length=1, max_length=128),
    store: FavoritesStore = Depends(get_favorites_store),  # noqa: B008
) -> dict:
    return {"user_id": user_id, "destination_ids": sorted(store.favorite_ids(user_id))}


@router.put("/{destination_id}")
def add_favorite(
    destination_id: int,
    user_id: str = Path(..., min_length=1, max_length=128),
    store: FavoritesStore = Depends(get_favorites_store),  # noqa: B008
) -> dict:
    """즐겨찾기에 추가합니다. 이미 있으면 아무것도 바뀌지 않습니다."""
    return {"user_id": user_id, "destination_id": destination_id, "added": store.add(user_id, destination_id)}


@router.delete("/{destination_id}")
def remove_favorite(
    destination_id: int,
    user_id: str = Path(..., min_length=1, max_length=128),
    store: FavoritesStore = Depends(get_favorites_store),  # noqa: B008
) -> dict:
    return {"user_id": user_id, "destination_id": destination_id, "removed": store.remove(user_id, destination_id)}
