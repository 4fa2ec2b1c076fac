"""좌표 파싱과 Haversine 거리 테스트."""

import math

from destino_facil.core.geo import GeoPoint, haversine_km, parse_latitude, parse_longitude


def test_haversine_is_symmetric_and_zero_for_same_point() -> None:
    paris = (48.85341, 2.3488)
    tokyo = (35.6895, 139.69171)

    assert haversine_km(*paris, *paris) == 0.0
    assert math.isclose(haversine_km(*paris, *tokyo), haversine_km(*tokyo, *paris))


def test_haversine_paris_to_london_is_about_344_km() -> None:
    distance = GeoPoint(48.85341, 2.3488).distance_to(GeoPoint(51.50853, -0.12574))

    assert 335 < distance < 350


def test_unparsable_or_out_of_range_coordinates_become_zero() -> None:
    assert parse_latitude("-23.5475") == -23.5475
    assert parse_latitude("abc") == 0.0
    assert parse_latitude(None) == 0.0
    assert parse_latitude("nan") == 0.0
    assert parse_latitude(91) == 0.0
    assert parse_longitude(-180.0) == -180.0
    assert parse_longitude("181") == 0.0
