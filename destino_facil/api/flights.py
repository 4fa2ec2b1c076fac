"""항공권 가격 추정 API."""

from fastapi import APIRouter, Depends, Query

from destino_facil.api.dependencies import get_discovery_service
from destino_facil.core.config import get_settings
from destino_facil.schemas.flight import FlightDeal, FlightDealsResponse, FlightEstimateResponse
from destino_facil.services.discovery_service import DiscoveryService
from destino_facil.services.flight_pricing import build_flight_search_url

router = APIRouter(prefix="/api/v1/flights", tags=["flights"])


def _to_display_currency(price: int) -> int:
    return max(1, round(price * get_settings().FLIGHT_CURRENCY_RATE))


@router.get("/estimate", response_model=FlightEstimateResponse)
async def estimate_flight(
    origin: str = Query(..., min_length=1, max_length=100),
    destination: str = Query(..., min_length=1, max_length=100),
    service: DiscoveryService = Depends(get_discovery_service),  # noqa: B008
) -> FlightEstimateResponse:
    """출발지-도착지 왕복 항공권 추정 가격을 반환합니다."""
    currency = get_settings().FLIGHT_CURRENCY
    price = await service.estimate_flight_price(origin, destination)
    return FlightEstimateResponse(
        origin=origin,
        destination=destination,
        price=_to_display_currency(price),
        currency=currency,
        search_url=build_flight_search_url(origin, destination, currency=currency),
    )


@router.get("/deals", response_model=FlightDealsResponse)
async def flight_deals(
    destination: str = Query(..., min_length=1, max_length=100),
    service: DiscoveryService = Depends(get_discovery_service),  # noqa: B008
) -> FlightDealsResponse:
    """주요 출발 도시 기준 특가 3건을 가격 오름차순으로 반환합니다."""
    deals = await service.get_flight_deals(destination)
    return FlightDealsResponse(
        destination=destination,
        currency=get_settings().FLIGHT_CURRENCY,
        deals=[FlightDeal(price=_to_display_currency(deal.price), origin=deal.origin) for deal in deals],
    )
