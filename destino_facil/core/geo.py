"""좌표 정규화와 대원 거리 계산을 위한 지리 유틸리티."""

from __future__ import annotations

import math
from dataclasses import dataclass

_MIN_LAT = -90.0
_MAX_LAT = 90.0
_MIN_LNG = -180.0
_MAX_LNG = 180.0
EARTH_RADIUS_KM = 6371.0


def parse_coordinate(value: object, minimum: float, maximum: float) -> float:
    """문자열/숫자 좌표를 float로 변환합니다. 파싱 불가 또는 범위 밖이면 0.0입니다."""
    try:
        numeric = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(numeric) or numeric < minimum or numeric > maximum:
        return 0.0
    return numeric


def parse_latitude(value: object) -> float:
    return parse_coordinate(value, _MIN_LAT, _MAX_LAT)


def parse_longitude(value: object) -> float:
    return parse_coordinate(value, _MIN_LNG, _MAX_LNG)


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """위경도 한 점."""

    latitude: float
    longitude: float

    def distance_to(self, other: GeoPoint) -> float:
        """다른 점까지의 대원 거리(km)를 반환합니다."""
        return haversine_km(self.latitude, self.longitude, other.latitude, other.longitude)


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Haversine 공식으로 두 좌표 사이의 거리(km)를 계산합니다."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)

    a = math.sin(d_lat / 2) ** 2 + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c
