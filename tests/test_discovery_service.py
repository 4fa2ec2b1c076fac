"""탐색 facade 테스트."""

from __future__ import annotations

import asyncio

import pytest

from destino_facil.core.config import Settings
from destino_facil.core.errors import DataUnavailable
from destino_facil.schemas.query import PageRequest
from destino_facil.services.discovery_service import DiscoveryService
from tests.mocks.sample_dataset import SAMPLE_CITIES, write_sample_dataset


def _service(tmp_path, monkeypatch, **overrides) -> DiscoveryService:
    monkeypatch.setattr("destino_facil.services.discovery_service.get_pexels_image_service", lambda: None)
    return DiscoveryService.from_settings(Settings(DATASET_DIR=str(tmp_path), **overrides))


def test_get_page_and_detail(tmp_path, monkeypatch) -> None:
    write_sample_dataset(tmp_path)
    service = _service(tmp_path, monkeypatch)

    page = asyncio.run(service.get_page(PageRequest(search_term="Paris")))
    detail = asyncio.run(service.get_destination_detail(1, {1}))

    assert page.total_items == 2
    assert detail.destination.name == "Paris"
    assert detail.destination.is_favorite is True
    assert [image.id for image in detail.images] == ["placeholder"]
    assert detail.nearby == []
    assert asyncio.run(service.get_destination_detail(999)) is None


def test_flight_operations_return_positive_prices(tmp_path, monkeypatch) -> None:
    write_sample_dataset(tmp_path)
    service = _service(tmp_path, monkeypatch)

    assert asyncio.run(service.estimate_flight_price("São Paulo", "Tokyo")) > 0
    assert len(asyncio.run(service.get_flight_deals("Paris"))) == 3


def test_clearing_cache_does_not_change_destinations(tmp_path, monkeypatch) -> None:
    write_sample_dataset(tmp_path)
    service = _service(tmp_path, monkeypatch)
    request = PageRequest(page_size=100, search_term="a")
    before = [item.model_dump() for item in asyncio.run(service.get_page(request)).items]

    assert service.clear_cache() > 0
    assert service.clear_cache() == 0
    after = [item.model_dump() for item in asyncio.run(service.get_page(request)).items]

    assert before
    assert after == before


def test_preload_reports_missing_dataset(tmp_path, monkeypatch) -> None:
    service = _service(tmp_path, monkeypatch)

    assert service.preload() is False
    with pytest.raises(DataUnavailable):
        service.preload(required=True)


def test_detail_lists_nearby_cities_within_configured_radius(tmp_path, monkeypatch) -> None:
    gold_coast = {"id": 30, "name": "Gold Coast", "country_id": 14, "country_code": "AU", "latitude": "-28.00029", "longitude": "153.43088"}
    write_sample_dataset(tmp_path, cities=SAMPLE_CITIES + [gold_coast])

    wide = _service(tmp_path, monkeypatch)
    narrow = _service(tmp_path, monkeypatch, NEARBY_RADIUS_KM=10)

    nearby = asyncio.run(wide.get_destination_detail(10)).nearby
    assert [(city.id, city.country_name) for city in nearby] == [(30, "Australia")]
    assert 60 < nearby[0].distance_km < 80
    assert asyncio.run(narrow.get_destination_detail(10)).nearby == []


def test_popular_destinations_come_from_default_candidates(tmp_path, monkeypatch) -> None:
    write_sample_dataset(tmp_path)
    service = _service(tmp_path, monkeypatch)

    assert asyncio.run(service.popular_destinations(3)) == ["Washington", "Paris", "Tokyo"]
