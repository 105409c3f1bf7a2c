"""장소 간 직선 거리 계산을 위한 지리 유틸리티."""

from __future__ import annotations

import math

from app.schemas.trip import Coordinates, TripDestination

_EARTH_RADIUS_KM = 6371.0


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """두 좌표 간 직선 거리(km)를 반환합니다."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    # 대척점 부근에서는 부동소수점 오차로 a가 1을 약간 넘을 수 있다.
    a = min(1.0, max(0.0, a))
    return _EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def coordinates_distance(origin: Coordinates, target: Coordinates) -> float:
    """Coordinates 두 개 사이의 직선 거리(km)를 반환합니다."""
    return haversine_distance(origin.latitude, origin.longitude, target.latitude, target.longitude)


def destination_distance(origin: TripDestination, target: TripDestination) -> float | None:
    """두 장소 간 거리(km)를 반환합니다. 좌표가 없는 장소가 있으면 None."""
    if origin.coordinates is None or target.coordinates is None:
        return None
    return coordinates_distance(origin.coordinates, target.coordinates)
