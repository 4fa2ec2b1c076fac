"""여행지 보강 규칙 테스트."""

from __future__ import annotations

import pytest

from destino_facil.core.reference_tables import CITY_POPULATION_RANGES
from destino_facil.schemas.dataset import CityRecord, CountryRecord
from destino_facil.services.enrichment import (
    DestinationEnricher,
    estimate_population,
    estimate_price_tier,
    stable_fraction,
    translate_region,
)
from tests.mocks.sample_dataset import build_loader


def _enrich(tmp_path, city_id: int, enricher: DestinationEnricher | None = None):
    loader = build_loader(tmp_path)
    city = loader.find_city_by_id(city_id)
    return (enricher or DestinationEnricher()).enrich(city, loader.country_for(city))


def test_paris_is_enriched_from_reference_tables(tmp_path) -> None:
    paris = _enrich(tmp_path, 1)

    assert paris.population == 2161000
    assert paris.price_tier == "high"
    assert paris.climate == "temperate"
    assert paris.region == "Europa"
    assert paris.country_info.name == "França"
    assert paris.country_info.official_name == "France"
    assert paris.country_info.flag_url == "https://flagcdn.com/w320/fr.png"
    assert paris.activities == ["city"]
    assert paris.is_favorite is False


def test_hot_and_cold_destinations_get_climate_activities(tmp_path) -> None:
    miami = _enrich(tmp_path, 4)
    oslo = _enrich(tmp_path, 13)
    luxor = _enrich(tmp_path, 14)

    assert miami.climate == "hot"
    assert {"beach", "city"} <= set(miami.activities)
    assert oslo.climate == "cold"
    assert {"city", "mountain", "snow"} <= set(oslo.activities)
    assert oslo.country_info.currencies == []
    assert luxor.climate == "hot"
    assert "desert" in luxor.activities


def test_enrichment_is_deterministic(tmp_path) -> None:
    assert _enrich(tmp_path, 3) == _enrich(tmp_path, 3)


def test_unknown_city_population_stays_in_regional_range() -> None:
    country = CountryRecord(id=233, name="United States", iso2="US", capital="Washington", subregion="Northern America")
    city = CityRecord(id=3, name="Paris", country_id=233, country_code="US")
    low, high = CITY_POPULATION_RANGES["Northern America"]

    population = estimate_population(CityRecord(id=3, name="Smallville", country_id=233, country_code="US"), country)

    assert low <= population < high
    assert estimate_population(city, country) == 2161000


def test_price_tier_checks_region_and_subregion() -> None:
    def _country(region: str, subregion: str) -> CountryRecord:
        return CountryRecord(id=1, name="X", iso2="XX", region=region, subregion=subregion)

    assert estimate_price_tier(_country("Europe", "Western Europe")) == "high"
    assert estimate_price_tier(_country("Americas", "South America")) == "low"
    assert estimate_price_tier(_country("Asia", "Eastern Asia")) == "medium"
    assert estimate_price_tier(_country("Oceania", "")) == "high"


def test_climate_thresholds_partition_latitudes() -> None:
    enricher = DestinationEnricher(cold_latitude=50, temperate_latitude=30)

    assert enricher.estimate_climate(30.0) == "hot"
    assert enricher.estimate_climate(-30.01) == "temperate"
    assert enricher.estimate_climate(50.0) == "temperate"
    assert enricher.estimate_climate(-50.5) == "cold"


def test_invalid_climate_thresholds_are_rejected() -> None:
    with pytest.raises(ValueError):
        DestinationEnricher(cold_latitude=20, temperate_latitude=30)


def test_translate_region() -> None:
    assert translate_region("South America") == "América do Sul"
    assert translate_region("Atlantis") == "Atlantis"


def test_stable_fraction_is_in_unit_interval() -> None:
    value = stable_fraction("75:paris")

    assert 0.0 <= value < 1.0
    assert stable_fraction("75:paris") == value
