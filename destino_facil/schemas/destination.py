"""보강된 여행지(Destination) 스키마."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PriceTier = Literal["low", "medium", "high"]
Climate = Literal["cold", "temperate", "hot"]
Activity = Literal["beach", "city", "mountain", "snow", "desert", "rural"]


class Currency(BaseModel):
    """국가 통화 정보."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="통화명")
    symbol: str = Field(default="", description="통화 기호")


class CountryInfo(BaseModel):
    """여행지에 포함되는 국가 요약 정보."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="표시 로케일로 번역된 국가명")
    official_name: str = Field(..., description="영문 국가명")
    capital: str = Field(default="", description="수도")
    region: str = Field(default="", description="영문 지역명")
    subregion: str = Field(default="", description="영문 하위 지역명")
    currencies: list[Currency] = Field(default_factory=list, description="통화 목록")
    flag_url: str = Field(..., description="국기 이미지 URL")


class Destination(BaseModel):
    """도시 + 국가 레코드에서 파생된 표시용 여행지."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="도시 ID")
    name: str = Field(..., description="도시명")
    country_name: str = Field(..., description="영문 국가명")
    region: str = Field(..., description="표시 로케일로 번역된 지역명")
    population: int = Field(..., ge=0, description="추정 인구")
    latitude: float = Field(..., description="위도")
    longitude: float = Field(..., description="경도")
    country_info: CountryInfo = Field(..., description="국가 정보")
    price_tier: PriceTier = Field(..., description="물가 등급")
    climate: Climate = Field(..., description="기후 구분")
    activities: list[Activity] = Field(default_factory=list, description="추천 활동")
    is_favorite: bool = Field(default=False, description="요청 사용자의 즐겨찾기 여부")


class DestinationImage(BaseModel):
    """여행지 이미지 한 장."""

    id: str = Field(..., description="이미지 식별자")
    url: str = Field(..., description="원본 이미지 URL")
    thumbnail: str = Field(..., description="썸네일 URL")
    alt: str = Field(default="", description="대체 텍스트")
    photographer: str | None = Field(default=None, description="작가명")
    photographer_url: str | None = Field(default=None, description="작가 프로필 URL")


class NearbyCity(BaseModel):
    """여행지 반경 안의 다른 도시."""

    id: int = Field(..., description="도시 ID")
    name: str = Field(..., description="도시명")
    country_name: str = Field(default="", description="영문 국가명")
    distance_km: float = Field(..., ge=0, description="여행지로부터의 거리(km)")


class DestinationDetail(BaseModel):
    """상세 조회 응답: 여행지 + 이미지 + 인근 도시."""

    destination: Destination = Field(..., description="여행지")
    images: list[DestinationImage] = Field(default_factory=list, description="이미지 목록")
    nearby: list[NearbyCity] = Field(default_factory=list, description="가까운 순 인근 도시")


class PopularDestinationsResponse(BaseModel):
    """기본 인기 여행지 이름 목록."""

    names: list[str] = Field(default_factory=list, description="인기 순 도시명")
