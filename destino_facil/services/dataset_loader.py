"""정적 국가/도시 데이터셋 로더.

JSON 파일을 프로세스(인스턴스)당 한 번만 읽어 메모리에 보관하고,
이후 호출에는 같은 리스트 객체를 그대로 반환합니다.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from destino_facil.core.config import Settings, get_settings
from destino_facil.core.errors import DataUnavailable
from destino_facil.core.logger import get_logger
from destino_facil.schemas.dataset import CityRecord, CountryRecord

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _read_json_list(path: Path) -> list[Any]:
    try:
        with path.open(encoding="utf-8") as fp:
            payload = json.load(fp)
    except (OSError, ValueError) as exc:
        raise DataUnavailable(f"데이터셋을 읽을 수 없습니다: {path} ({exc})") from exc

    if not isinstance(payload, list):
        raise DataUnavailable(f"데이터셋 형식이 올바르지 않습니다(list 아님): {path}")
    return payload


def _parse_records(raw_items: list[Any], model: type[RecordT], source: Path) -> list[RecordT]:
    records: list[RecordT] = []
    skipped = 0
    for raw in raw_items:
        try:
            records.append(model.model_validate(raw))
        except ValidationError:
            skipped += 1
    if skipped:
        logger.warning("Skipped invalid dataset rows: source=%s skipped=%d", source.name, skipped)
    return records


class DatasetLoader:
    """국가/도시 참조 데이터를 지연 로드하고 조회 기능을 제공합니다."""

    def __init__(self, countries_path: Path | str, cities_path: Path | str) -> None:
        self._countries_path = Path(countries_path)
        self._cities_path = Path(cities_path)
        self._lock = threading.Lock()
        self._countries: list[CountryRecord] | None = None
        self._cities: list[CityRecord] | None = None
        self._countries_by_id: dict[int, CountryRecord] = {}
        self._countries_by_code: dict[str, CountryRecord] = {}

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> DatasetLoader:
        """애플리케이션 설정의 데이터셋 경로로 로더를 생성합니다."""
        resolved = settings or get_settings()
        return cls(resolved.countries_path, resolved.cities_path)

    @property
    def is_loaded(self) -> bool:
        return self._countries is not None and self._cities is not None

    def load_countries(self) -> list[CountryRecord]:
        self._ensure_loaded()
        return self._countries  # type: ignore[return-value]

    def load_cities(self) -> list[CityRecord]:
        self._ensure_loaded()
        return self._cities  # type: ignore[return-value]

    def find_country_by_code(self, code: str) -> CountryRecord | None:
        """ISO2 또는 ISO3 코드(대소문자 무시)로 국가를 찾습니다."""
        self._ensure_loaded()
        return self._countries_by_code.get((code or "").strip().upper())

    def find_country_by_id(self, country_id: int) -> CountryRecord | None:
        self._ensure_loaded()
        return self._countries_by_id.get(country_id)

    def country_for(self, city: CityRecord) -> CountryRecord | None:
        """도시의 국가 레코드를 ID 우선, 코드 차선으로 찾습니다."""
        return self.find_country_by_id(city.country_id) or self.find_country_by_code(city.country_code)

    def is_capital(self, city: CityRecord, country: CountryRecord | None = None) -> bool:
        resolved = country or self.country_for(city)
        if resolved is None or not resolved.capital:
            return False
        return resolved.capital.casefold() == city.name.casefold()

    def search_cities_by_name(self, term: str, limit: int = 10) -> list[CityRecord]:
        """도시명 부분 일치 검색. 정확히 일치하는 도시가 먼저 옵니다."""
        needle = (term or "").strip().casefold()
        if not needle or limit <= 0:
            return []

        exact: list[CityRecord] = []
        partial: list[CityRecord] = []
        for city in self.load_cities():
            name = city.name.casefold()
            if name == needle:
                exact.append(city)
            elif needle in name:
                partial.append(city)
        return (exact + partial)[:limit]

    def find_city_by_id(self, city_id: int) -> CityRecord | None:
        return next((city for city in self.load_cities() if city.id == city_id), None)

    def reset(self) -> None:
        """메모리에 올린 데이터를 버립니다. 다음 호출 시 다시 읽습니다."""
        with self._lock:
            self._countries = None
            self._cities = None
            self._countries_by_id = {}
            self._countries_by_code = {}

    def _ensure_loaded(self) -> None:
        if self.is_loaded:
            return
        with self._lock:
            if self.is_loaded:
                return

            countries = _parse_records(_read_json_list(self._countries_path), CountryRecord, self._countries_path)
            cities = _parse_records(_read_json_list(self._cities_path), CityRecord, self._cities_path)

            by_code: dict[str, CountryRecord] = {}
            for country in countries:
                by_code.setdefault(country.iso2.upper(), country)
                if country.iso3:
                    by_code.setdefault(country.iso3.upper(), country)

            self._countries_by_id = {country.id: country for country in countries}
            self._countries_by_code = by_code
            self._cities = cities
            self._countries = countries
            logger.info("Dataset loaded: countries=%d cities=%d", len(countries), len(cities))
