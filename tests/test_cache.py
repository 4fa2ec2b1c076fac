"""TTL 캐시 동작 테스트."""

from __future__ import annotations

import pytest

from destino_facil.core.cache import TTLCache
from tests.mocks.sample_dataset import FakeClock


def test_get_returns_value_until_ttl_elapses() -> None:
    clock = FakeClock()
    cache = TTLCache(clock=clock)
    cache.set("destination:1:75", "paris", ttl_seconds=60)

    clock.advance(60)
    assert cache.get("destination:1:75") == "paris"

    clock.advance(0.5)
    assert cache.get("destination:1:75") is None
    assert len(cache) == 0


def test_zero_ttl_is_fresh_only_at_store_time() -> None:
    clock = FakeClock()
    cache = TTLCache(clock=clock)
    cache.set("k", 1, ttl_seconds=0)

    assert cache.get("k") == 1
    clock.advance(0.001)
    assert "k" not in cache


def test_set_overwrites_existing_value_and_resets_age() -> None:
    clock = FakeClock()
    cache = TTLCache(clock=clock)
    cache.set("k", "old", ttl_seconds=10)
    clock.advance(8)
    cache.set("k", "new", ttl_seconds=10)
    clock.advance(8)

    assert cache.get("k") == "new"


def test_negative_ttl_is_rejected() -> None:
    with pytest.raises(ValueError):
        TTLCache().set("k", 1, ttl_seconds=-1)


def test_max_entries_evicts_oldest_insertion_first() -> None:
    cache = TTLCache(max_entries=2, clock=FakeClock())
    cache.set("a", 1, ttl_seconds=100)
    cache.set("b", 2, ttl_seconds=100)
    cache.set("c", 3, ttl_seconds=100)

    assert "a" not in cache
    assert cache.get("b") == 2
    assert cache.get("c") == 3
    assert len(cache) == 2


def test_full_cache_drops_expired_entries_before_evicting_live_ones() -> None:
    clock = FakeClock()
    cache = TTLCache(max_entries=2, clock=clock)
    cache.set("live", 1, ttl_seconds=100)
    cache.set("short", 2, ttl_seconds=1)
    clock.advance(5)

    cache.set("fresh", 3, ttl_seconds=100)

    assert cache.get("live") == 1
    assert cache.get("fresh") == 3


def test_get_or_set_calls_factory_once_while_fresh() -> None:
    cache = TTLCache(clock=FakeClock())
    calls: list[int] = []

    def _factory() -> str:
        calls.append(1)
        return "value"

    assert cache.get_or_set("k", _factory, ttl_seconds=30) == "value"
    assert cache.get_or_set("k", _factory, ttl_seconds=30) == "value"
    assert len(calls) == 1


def test_remove_and_clear_are_idempotent() -> None:
    cache = TTLCache(clock=FakeClock())
    cache.set("flight:a:b:1", 100, ttl_seconds=30)
    cache.set("images:paris", [], ttl_seconds=30)

    cache.remove("flight:a:b:1")
    cache.remove("flight:a:b:1")
    assert "flight:a:b:1" not in cache
    assert len(cache) == 1

    cache.clear()
    cache.clear()
    assert len(cache) == 0


def test_max_entries_must_be_positive() -> None:
    with pytest.raises(ValueError):
        TTLCache(max_entries=0)
