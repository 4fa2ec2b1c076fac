"""정적 데이터셋 로더 테스트."""

from __future__ import annotations

import pytest

from destino_facil.core.errors import DataUnavailable
from destino_facil.services.dataset_loader import DatasetLoader
from tests.mocks.sample_dataset import build_loader, write_sample_dataset


def test_dataset_is_loaded_once_and_invalid_rows_are_skipped(tmp_path) -> None:
    loader = build_loader(tmp_path)

    cities = loader.load_cities()

    assert loader.is_loaded
    assert loader.load_cities() is cities
    assert {city.id for city in cities} == set(range(1, 16))


def test_unparsable_coordinates_become_zero(tmp_path) -> None:
    loader = build_loader(tmp_path)

    nowhere = loader.find_city_by_id(15)

    assert nowhere is not None
    assert (nowhere.latitude, nowhere.longitude) == (0.0, 0.0)
    assert loader.country_for(nowhere) is None


def test_find_country_by_iso2_or_iso3_is_case_insensitive(tmp_path) -> None:
    loader = build_loader(tmp_path)

    assert loader.find_country_by_code("fr").name == "France"
    assert loader.find_country_by_code("BRA").name == "Brazil"
    assert loader.find_country_by_code("xx") is None


def test_search_cities_by_name_puts_exact_matches_first(tmp_path) -> None:
    loader = build_loader(tmp_path)

    results = loader.search_cities_by_name("paris")

    assert [city.id for city in results] == [1, 3]
    assert loader.search_cities_by_name("") == []
    assert [city.name for city in loader.search_cities_by_name("rio", limit=1)] == ["Rio de Janeiro"]


def test_is_capital_uses_country_record(tmp_path) -> None:
    loader = build_loader(tmp_path)

    assert loader.is_capital(loader.find_city_by_id(1))
    assert not loader.is_capital(loader.find_city_by_id(3))


def test_missing_file_raises_data_unavailable(tmp_path) -> None:
    loader = DatasetLoader(tmp_path / "countries.json", tmp_path / "cities.json")

    with pytest.raises(DataUnavailable):
        loader.load_countries()
    assert not loader.is_loaded


def test_non_list_payload_raises_data_unavailable(tmp_path) -> None:
    loader = DatasetLoader(*write_sample_dataset(tmp_path, cities={"cities": []}))

    with pytest.raises(DataUnavailable):
        loader.load_cities()


def test_reset_forces_reload(tmp_path) -> None:
    loader = build_loader(tmp_path)
    first = loader.load_cities()

    loader.reset()

    assert not loader.is_loaded
    assert loader.load_cities() is not first
