"""애플리케이션 전역 설정을 관리하는 모듈."""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_DATASET_DIR = str(Path(__file__).resolve().parent.parent / "data")


class Settings(BaseSettings):
    """환경 변수 기반 설정 모델."""

    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"
    DATASET_DIR: str = _DEFAULT_DATASET_DIR
    COUNTRIES_FILE: str = "countries.json"
    CITIES_FILE: str = "cities.json"
    DATASET_REQUIRED: bool = False
    DISPLAY_LOCALE: str = "pt-BR"
    CACHE_MAX_ENTRIES: int = 5000
    DESTINATION_CACHE_TTL_SECONDS: float = 3600.0
    FLIGHT_CACHE_TTL_SECONDS: float = 1800.0
    FLIGHT_FALLBACK_CACHE_TTL_SECONDS: float = 60.0
    IMAGE_CACHE_TTL_SECONDS: float = 86400.0
    QUERY_MAX_CANDIDATES: int = 1000
    NEARBY_RADIUS_KM: float = 100.0
    NEARBY_LIMIT: int = 3
    CLIMATE_COLD_LATITUDE: float = 50.0
    CLIMATE_TEMPERATE_LATITUDE: float = 30.0
    FLIGHT_PRICE_VARIANCE: float = 0.05
    FLIGHT_FALLBACK_VARIANCE: float = 0.10
    FLIGHT_CURRENCY: str = "BRL"
    FLIGHT_CURRENCY_RATE: float = 5.0
    PEXELS_API_KEY: str | None = None
    REQUEST_TIMEOUT_SECONDS: int = 30
    DATASET_LOAD_TIMEOUT_SECONDS: int = 10
    EXTERNAL_API_TIMEOUT_SECONDS: int = 10
    IMAGE_TIMEOUT_SECONDS: int = 5
    ADMIN_SECRET: str = ""
    DOCS_MODE: str = "disabled"
    EXPOSE_INTERNAL_ERRORS: bool = False
    CORS_ALLOW_ORIGINS: str = ""
    CORS_ALLOW_METHODS: str = "GET,POST,PUT,DELETE,OPTIONS"
    CORS_ALLOW_HEADERS: str = "Authorization,Content-Type,x-admin-secret"
    CORS_ALLOW_CREDENTIALS: bool = False
    SECURITY_HEADERS_ENABLED: bool = True
    TRUSTED_HOSTS: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("CACHE_MAX_ENTRIES", mode="before")
    @classmethod
    def _clamp_cache_max_entries(cls, value: object) -> int:
        try:
            numeric = int(value) if value is not None else 5000
        except (TypeError, ValueError):
            numeric = 5000
        return max(1, numeric)

    @field_validator("QUERY_MAX_CANDIDATES", mode="before")
    @classmethod
    def _clamp_query_max_candidates(cls, value: object) -> int:
        try:
            numeric = int(value) if value is not None else 1000
        except (TypeError, ValueError):
            numeric = 1000
        return min(10000, max(1, numeric))

    @field_validator("NEARBY_LIMIT", mode="before")
    @classmethod
    def _clamp_nearby_limit(cls, value: object) -> int:
        try:
            numeric = int(value) if value is not None else 3
        except (TypeError, ValueError):
            numeric = 3
        return min(20, max(0, numeric))

    @field_validator("FLIGHT_PRICE_VARIANCE", "FLIGHT_FALLBACK_VARIANCE", mode="before")
    @classmethod
    def _clamp_flight_variance(cls, value: object) -> float:
        try:
            numeric = float(value) if value is not None else 0.0
        except (TypeError, ValueError):
            numeric = 0.0
        return min(0.10, max(0.0, numeric))

    @field_validator("FLIGHT_CURRENCY_RATE", mode="before")
    @classmethod
    def _clamp_currency_rate(cls, value: object) -> float:
        try:
            numeric = float(value) if value is not None else 1.0
        except (TypeError, ValueError):
            numeric = 1.0
        return numeric if numeric > 0 else 1.0

    @property
    def countries_path(self) -> Path:
        return Path(self.DATASET_DIR) / self.COUNTRIES_FILE

    @property
    def cities_path(self) -> Path:
        return Path(self.DATASET_DIR) / self.CITIES_FILE


@lru_cache
def get_settings() -> Settings:
    """Settings 인스턴스를 반환한다. 최초 호출 시에만 생성되고 이후 캐싱된다."""
    return Settings()
