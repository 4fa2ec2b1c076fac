"""환경 변수 설정 보정 테스트."""

from __future__ import annotations

from destino_facil.core.config import get_settings


def test_numeric_settings_are_clamped(monkeypatch) -> None:
    monkeypatch.setenv("FLIGHT_PRICE_VARIANCE", "0.5")
    monkeypatch.setenv("FLIGHT_FALLBACK_VARIANCE", "-1")
    monkeypatch.setenv("CACHE_MAX_ENTRIES", "0")
    monkeypatch.setenv("QUERY_MAX_CANDIDATES", "not-a-number")
    monkeypatch.setenv("FLIGHT_CURRENCY_RATE", "-3")
    monkeypatch.setenv("NEARBY_LIMIT", "500")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.FLIGHT_PRICE_VARIANCE == 0.10
    assert settings.FLIGHT_FALLBACK_VARIANCE == 0.0
    assert settings.CACHE_MAX_ENTRIES == 1
    assert settings.QUERY_MAX_CANDIDATES == 1000
    assert settings.FLIGHT_CURRENCY_RATE == 1.0
    assert settings.NEARBY_LIMIT == 20
    get_settings.cache_clear()


def test_dataset_paths_follow_dataset_dir(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("DATASET_DIR", str(tmp_path))
    monkeypatch.setenv("CITIES_FILE", "cidades.json")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.countries_path == tmp_path / "countries.json"
    assert settings.cities_path == tmp_path / "cidades.json"
    get_settings.cache_clear()
