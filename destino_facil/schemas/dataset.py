"""정적 국가/도시 참조 데이터셋 레코드 스키마."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from destino_facil.core.geo import parse_latitude, parse_longitude


class CountryRecord(BaseModel):
    """`countries.json`의 국가 한 건."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(..., description="국가 ID")
    name: str = Field(..., description="영문 국가명")
    iso2: str = Field(..., min_length=2, max_length=2, description="ISO 3166-1 alpha-2 코드")
    iso3: str = Field(default="", description="ISO 3166-1 alpha-3 코드")
    capital: str = Field(default="", description="수도명")
    region: str = Field(default="", description="영문 지역명")
    subregion: str = Field(default="", description="영문 하위 지역명")
    currency_name: str = Field(default="", description="통화명")
    currency_symbol: str = Field(default="", description="통화 기호")
    translations: dict[str, str] = Field(default_factory=dict, description="로케일별 국가명")

    @field_validator("capital", "region", "subregion", "currency_name", "currency_symbol", "iso3", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("translations", mode="before")
    @classmethod
    def _drop_empty_translations(cls, value: object) -> object:
        if not isinstance(value, dict):
            return {}
        return {str(key): str(name) for key, name in value.items() if name}

    def localized_name(self, locale: str) -> str:
        """로케일 번역명을 반환합니다. `pt-BR`가 없으면 `pt`, 그래도 없으면 영문명입니다."""
        if locale in self.translations:
            return self.translations[locale]
        language = locale.split("-")[0]
        return self.translations.get(language) or self.name


class CityRecord(BaseModel):
    """`cities.json`의 도시 한 건."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(..., description="도시 ID")
    name: str = Field(..., min_length=1, description="도시명")
    country_id: int = Field(..., description="국가 ID")
    country_code: str = Field(..., description="ISO2 국가 코드")
    latitude: float = Field(default=0.0, description="위도")
    longitude: float = Field(default=0.0, description="경도")
    state_name: str | None = Field(default=None, description="주/도 이름")
    country_name: str | None = Field(default=None, description="영문 국가명(데이터셋 제공 시)")

    @field_validator("latitude", mode="before")
    @classmethod
    def _parse_latitude(cls, value: object) -> float:
        return parse_latitude(value)

    @field_validator("longitude", mode="before")
    @classmethod
    def _parse_longitude(cls, value: object) -> float:
        return parse_longitude(value)

    @field_validator("country_code", mode="before")
    @classmethod
    def _upper_country_code(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value
