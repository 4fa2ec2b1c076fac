"""항공권 가격 추정 API 스키마."""

from pydantic import BaseModel, Field


class FlightDeal(BaseModel):
    """출발지별 할인 가격."""

    price: int = Field(..., gt=0, description="할인 적용 가격(통화 중립 정수)")
    origin: str = Field(..., description="출발 도시")


class FlightEstimateResponse(BaseModel):
    """가격 추정 응답."""

    origin: str = Field(..., description="출발지")
    destination: str = Field(..., description="도착지")
    price: int = Field(..., gt=0, description="표시 통화로 변환된 왕복 추정 가격")
    currency: str = Field(..., description="표시 통화 코드")
    search_url: str = Field(..., description="Google Flights 검색 링크")


class FlightDealsResponse(BaseModel):
    """특가 목록 응답."""

    destination: str = Field(..., description="도착지")
    currency: str = Field(..., description="표시 통화 코드")
    deals: list[FlightDeal] = Field(default_factory=list, description="가격 오름차순 특가 목록")
