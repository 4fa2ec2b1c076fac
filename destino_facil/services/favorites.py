"""사용자 즐겨찾기 저장소."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections import defaultdict


class FavoritesStore(ABC):
    """사용자별 즐겨찾기 여행지 ID 집합을 관리하는 인터페이스."""

    @abstractmethod
    def add(self, user_id: str, destination_id: int) -> bool:
        """즐겨찾기를 추가합니다. 새로 추가된 경우 True."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, user_id: str, destination_id: int) -> bool:
        """즐겨찾기를 제거합니다. 실제로 제거된 경우 True."""
        raise NotImplementedError

    @abstractmethod
    def favorite_ids(self, user_id: str) -> frozenset[int]:
        raise NotImplementedError


class InMemoryFavoritesStore(FavoritesStore):
    """프로세스 메모리 기반 구현. 재시작하면 비워집니다."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._favorites: dict[str, set[int]] = defaultdict(set)

    def add(self, user_id: str, destination_id: int) -> bool:
        with self._lock:
            ids = self._favorites[user_id]
            if destination_id in ids:
                return False
            ids.add(destination_id)
            return True

    def remove(self, user_id: str, destination_id: int) -> bool:
        with self._lock:
            ids = self._favorites.get(user_id)
            if not ids or destination_id not in ids:
                return False
            ids.discard(destination_id)
            return True

    def favorite_ids(self, user_id: str) -> frozenset[int]:
        with self._lock:
            return frozenset(self._favorites.get(user_id, ()))
