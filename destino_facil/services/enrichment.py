"""도시/국가 원본 레코드를 표시용 Destination으로 보강하는 서비스.

보강은 `(city, country)`와 고정 참조 테이블만으로 결정되는 순수 함수입니다.
네트워크 호출이나 숨은 가변 상태가 없으므로 `(city_id, country_id)` 단위로 캐시할 수 있습니다.
"""

from __future__ import annotations

import hashlib

from destino_facil.core.reference_tables import (
    CAPITAL_POPULATION_RANGES,
    CITY_POPULATION_RANGES,
    DEFAULT_CAPITAL_POPULATION_RANGE,
    DEFAULT_CITY_POPULATION_RANGE,
    DESERT_SUBREGIONS,
    FLAG_URL_TEMPLATE,
    HIGH_COST_REGIONS,
    KNOWN_CITY_POPULATIONS,
    LOW_COST_REGIONS,
    MOUNTAIN_COUNTRY_CODES,
    REGION_TRANSLATIONS,
)
from destino_facil.schemas.dataset import CityRecord, CountryRecord
from destino_facil.schemas.destination import Activity, Climate, CountryInfo, Currency, Destination, PriceTier

DEFAULT_LOCALE = "pt-BR"
DEFAULT_COLD_LATITUDE = 50.0
DEFAULT_TEMPERATE_LATITUDE = 30.0
_URBAN_POPULATION = 1_000_000
_RURAL_POPULATION = 200_000


def translate_region(region: str, locale: str = DEFAULT_LOCALE) -> str:
    """영문 지역명을 로케일 표시명으로 바꿉니다. 매핑이 없으면 그대로 반환합니다."""
    return REGION_TRANSLATIONS.get(locale, {}).get(region, region)


def stable_fraction(key: str) -> float:
    """문자열에서 [0, 1) 구간의 결정적 값을 만듭니다."""
    digest = hashlib.sha256(key.encode("utf-8")).hexdigest()[:12]
    return int(digest, 16) / float(16**12)


def _lookup_range(
    country: CountryRecord,
    table: dict[str, tuple[int, int]],
    default: tuple[int, int],
) -> tuple[int, int]:
    for key in (country.subregion, country.region):
        if key and key in table:
            return table[key]
    return default


def estimate_population(city: CityRecord, country: CountryRecord) -> int:
    """알려진 도시는 고정값, 그 외에는 수도 여부와 지역 범위 안의 결정적 추정값."""
    known = KNOWN_CITY_POPULATIONS.get(city.name.casefold())
    if known is not None:
        return known

    is_capital = bool(country.capital) and country.capital.casefold() == city.name.casefold()
    if is_capital:
        low, high = _lookup_range(country, CAPITAL_POPULATION_RANGES, DEFAULT_CAPITAL_POPULATION_RANGE)
    else:
        low, high = _lookup_range(country, CITY_POPULATION_RANGES, DEFAULT_CITY_POPULATION_RANGE)

    fraction = stable_fraction(f"{country.id}:{city.name.casefold()}")
    return low + int((high - low) * fraction)


def estimate_price_tier(country: CountryRecord) -> PriceTier:
    regions = {country.region, country.subregion} - {""}
    if regions & HIGH_COST_REGIONS:
        return "high"
    if regions & LOW_COST_REGIONS:
        return "low"
    return "medium"


def build_flag_url(iso2: str) -> str:
    return FLAG_URL_TEMPLATE.format(iso2=iso2.strip().lower())


class DestinationEnricher:
    """`CityRecord` + `CountryRecord` -> `Destination` 변환기."""

    def __init__(
        self,
        locale: str = DEFAULT_LOCALE,
        *,
        cold_latitude: float = DEFAULT_COLD_LATITUDE,
        temperate_latitude: float = DEFAULT_TEMPERATE_LATITUDE,
    ) -> None:
        if not 0.0 <= temperate_latitude < cold_latitude <= 90.0:
            raise ValueError("기후 위도 기준은 0 <= temperate < cold <= 90 이어야 합니다.")
        self._locale = locale
        self._cold_latitude = float(cold_latitude)
        self._temperate_latitude = float(temperate_latitude)

    @property
    def locale(self) -> str:
        return self._locale

    def estimate_climate(self, latitude: float) -> Climate:
        """절대 위도로 기후를 구분합니다. 기준선은 전 구간을 빈틈없이 나눕니다."""
        lat_abs = abs(latitude)
        if lat_abs > self._cold_latitude:
            return "cold"
        if lat_abs > self._temperate_latitude:
            return "temperate"
        return "hot"

    def enrich(self, city: CityRecord, country: CountryRecord) -> Destination:
        population = estimate_population(city, country)
        climate = self.estimate_climate(city.latitude)
        currencies = [Currency(name=country.currency_name, symbol=country.currency_symbol)] if country.currency_name else []

        return Destination(
            id=city.id,
            name=city.name,
            country_name=country.name,
            region=translate_region(country.region, self._locale),
            population=population,
            latitude=city.latitude,
            longitude=city.longitude,
            country_info=CountryInfo(
                name=country.localized_name(self._locale),
                official_name=country.name,
                capital=country.capital,
                region=country.region,
                subregion=country.subregion,
                currencies=currencies,
                flag_url=build_flag_url(country.iso2),
            ),
            price_tier=estimate_price_tier(country),
            climate=climate,
            activities=_derive_activities(city, country, population, climate),
            is_favorite=False,
        )


def _derive_activities(
    city: CityRecord,
    country: CountryRecord,
    population: int,
    climate: Climate,
) -> list[Activity]:
    activities: list[Activity] = []
    is_capital = bool(country.capital) and country.capital.casefold() == city.name.casefold()
    hot_desert = climate == "hot" and country.subregion in DESERT_SUBREGIONS

    if climate == "hot":
        activities.append("beach")
    if is_capital or population >= _URBAN_POPULATION:
        activities.append("city")
    if country.iso2.upper() in MOUNTAIN_COUNTRY_CODES:
        activities.append("mountain")
    if climate == "cold":
        activities.append("snow")
    if hot_desert:
        activities.append("desert")
    if population < _RURAL_POPULATION:
        activities.append("rural")
    return activities
