"""만료 시간이 있는 프로세스 로컬 키/값 캐시."""

from __future__ import annotations

import math
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from cachetools import FIFOCache

T = TypeVar("T")
_MISSING = object()


@dataclass(frozen=True, slots=True)
class CacheEntry(Generic[T]):
    """저장된 값과 저장 시각, TTL(초)."""

    value: T
    stored_at: float
    ttl_seconds: float

    def is_expired(self, now: float) -> bool:
        return now - self.stored_at > self.ttl_seconds


class TTLCache:
    """항목별 TTL을 갖는 캐시.

    만료 항목은 조회/저장 시점에 지연 삭제되며 백그라운드 정리는 없습니다.
    `max_entries`를 지정하면 초과 시 가장 먼저 저장된 키부터 제거합니다(FIFO).
    같은 키에 다시 저장하면 새로 삽입된 것으로 취급합니다.
    """

    def __init__(
        self,
        max_entries: int | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries는 1 이상이어야 합니다.")
        self._max_entries = max_entries
        self._clock = clock
        self._entries: FIFOCache = FIFOCache(maxsize=max_entries if max_entries is not None else math.inf)
        self._lock = threading.Lock()

    @property
    def max_entries(self) -> int | None:
        return self._max_entries

    def get(self, key: str, default: Any = None) -> Any:
        """만료되지 않은 값을 반환합니다. 없거나 만료되었으면 `default`를 반환합니다."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return default
            if entry.is_expired(self._clock()):
                del self._entries[key]
                return default
            return entry.value

    def set(self, key: str, value: Any, ttl_seconds: float) -> None:
        """기존 항목 여부와 관계없이 값을 덮어씁니다."""
        if ttl_seconds < 0:
            raise ValueError("ttl_seconds는 0 이상이어야 합니다.")
        with self._lock:
            now = self._clock()
            if key not in self._entries and self._is_full():
                self._purge_expired(now)
            self._entries[key] = CacheEntry(value=value, stored_at=now, ttl_seconds=float(ttl_seconds))

    def get_or_set(self, key: str, factory: Callable[[], T], ttl_seconds: float) -> T:
        """캐시에 값이 있으면 반환하고, 없으면 `factory()` 결과를 저장 후 반환합니다."""
        cached = self.get(key, _MISSING)
        if cached is not _MISSING:
            return cached
        value = factory()
        self.set(key, value, ttl_seconds)
        return value

    def remove(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key, _MISSING) is not _MISSING

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _is_full(self) -> bool:
        return self._max_entries is not None and len(self._entries) >= self._max_entries

    def _purge_expired(self, now: float) -> None:
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]
