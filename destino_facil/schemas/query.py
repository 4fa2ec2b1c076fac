"""여행지 목록 조회(검색/필터/정렬/페이지네이션) 스키마."""

from __future__ import annotations

import re
from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from destino_facil.schemas.destination import Activity, Climate, PriceTier

T = TypeVar("T")

SortBy = Literal["name", "population", "popularity"]

MAX_PAGE_NUMBER = 1000
MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 12
MAX_SEARCH_TERM_LENGTH = 100
_UNSAFE_CHARACTERS = re.compile(r"[<>'\"&]")


def sanitize_search_term(term: str | None) -> str:
    """검색어를 정리합니다: 공백 제거, 길이 제한, 위험 문자 제거."""
    if not term:
        return ""
    return _UNSAFE_CHARACTERS.sub("", term.strip()[:MAX_SEARCH_TERM_LENGTH]).strip()


def _clamp_int(value: object, *, default: int, minimum: int, maximum: int) -> int:
    try:
        numeric = int(value) if value is not None else default
    except (TypeError, ValueError):
        numeric = default
    return min(maximum, max(minimum, numeric))


class FilterSpec(BaseModel):
    """여행지 필터. 지정된 조건은 모두 AND로 결합됩니다."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    region: str | None = Field(default=None, description="지역 또는 국가명 부분 일치(대소문자 무시)")
    price_tier: PriceTier | None = Field(default=None, description="물가 등급")
    climate: Climate | None = Field(default=None, description="기후 구분")
    population_min: int | None = Field(default=None, ge=0, description="최소 인구(포함)")
    population_max: int | None = Field(default=None, ge=0, description="최대 인구(포함)")
    required_activities: list[Activity] = Field(default_factory=list, description="모두 포함해야 하는 활동")
    sort_by: SortBy = Field(default="popularity", description="정렬 기준")

    @field_validator("region", mode="before")
    @classmethod
    def _normalize_region(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or None
        return value


class PageRequest(BaseModel):
    """페이지 요청. 범위를 벗어난 값은 거부하지 않고 허용 범위로 보정합니다."""

    model_config = ConfigDict(extra="forbid")

    page_number: int = Field(default=1, description="1부터 시작하는 페이지 번호")
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, description="페이지 크기(1~100)")
    filters: FilterSpec | None = Field(default=None, description="필터")
    search_term: str = Field(default="", description="자유 검색어")

    @field_validator("page_number", mode="before")
    @classmethod
    def _clamp_page_number(cls, value: object) -> int:
        return _clamp_int(value, default=1, minimum=1, maximum=MAX_PAGE_NUMBER)

    @field_validator("page_size", mode="before")
    @classmethod
    def _clamp_page_size(cls, value: object) -> int:
        return _clamp_int(value, default=DEFAULT_PAGE_SIZE, minimum=1, maximum=MAX_PAGE_SIZE)

    @field_validator("search_term", mode="before")
    @classmethod
    def _sanitize_search_term(cls, value: object) -> str:
        return sanitize_search_term(value if isinstance(value, str) else None)

    @model_validator(mode="after")
    def _swap_inverted_population_bounds(self) -> PageRequest:
        filters = self.filters
        if (
            filters is not None
            and filters.population_min is not None
            and filters.population_max is not None
            and filters.population_min > filters.population_max
        ):
            self.filters = filters.model_copy(
                update={"population_min": filters.population_max, "population_max": filters.population_min}
            )
        return self


class PageResult(BaseModel, Generic[T]):
    """페이지 단위 결과."""

    items: list[T] = Field(default_factory=list, description="현재 페이지 항목")
    current_page: int = Field(..., description="현재 페이지 번호")
    total_pages: int = Field(..., description="전체 페이지 수")
    total_items: int = Field(..., description="필터 적용 후 전체 항목 수")
    page_size: int = Field(..., description="페이지 크기")
    data_unavailable: bool = Field(default=False, description="참조 데이터셋을 읽지 못해 빈 결과인지 여부")

    @classmethod
    def empty(cls, page_number: int, page_size: int, *, data_unavailable: bool = False) -> PageResult[T]:
        return cls(
            items=[],
            current_page=page_number,
            total_pages=0,
            total_items=0,
            page_size=page_size,
            data_unavailable=data_unavailable,
        )
