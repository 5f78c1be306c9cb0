"""
Пространственные фильтры по текущим локациям.

Поведение совпадает с уже работающим сервисом, включая особенности:
- выбор левой/правой границы зависит от того, выходят ли границы за ±90;
- проверка долготы — через ИЛИ (при left < right в выборку попадают точки
  вне отрезка [left, right]);
- расстояние считается по евклидовой формуле прямо в градусах, без
  геодезической поправки, а радиус сравнивается с ним как есть.
"""

from __future__ import annotations

import math
from typing import Iterable

from src.core.locations.models import AreaBoundary, UserCurrentLocation


def resolve_longitude_bounds(boundary: AreaBoundary) -> tuple[float, float]:
    """
    Возвращает (left, right) для проверки долготы.

    Обе границы в пределах ±90: left — меньшая, right — большая.
    Иначе наоборот: left — большая, right — меньшая.
    """
    western = boundary.western_boundary
    eastern = boundary.eastern_boundary

    # TODO: уточнить у владельца продукта, нужна ли эта асимметрия
    if abs(western) <= 90 and abs(eastern) <= 90:
        if western < eastern:
            return western, eastern
        return eastern, western

    if western > eastern:
        return western, eastern
    return eastern, western


def is_in_area(location: UserCurrentLocation, boundary: AreaBoundary) -> bool:
    """Попадает ли локация в область (строгие неравенства по широте)."""
    left, right = resolve_longitude_bounds(boundary)
    point = location.current_location

    if not boundary.southern_boundary < point.latitude < boundary.northern_boundary:
        return False

    return point.longitude > left or point.longitude < right


def filter_in_area(
    locations: Iterable[UserCurrentLocation],
    boundary: AreaBoundary,
) -> list[UserCurrentLocation]:
    """Локации внутри области, в исходном порядке."""
    return [location for location in locations if is_in_area(location, boundary)]


def degree_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Евклидово расстояние между точками в градусах."""
    return math.sqrt((lat1 - lat2) ** 2 + (lon1 - lon2) ** 2)


def is_near(
    location: UserCurrentLocation,
    latitude: float,
    longitude: float,
    radius: float,
) -> bool:
    """Расстояние до точки строго меньше радиуса."""
    point = location.current_location
    return degree_distance(point.latitude, point.longitude, latitude, longitude) < radius


def filter_near(
    locations: Iterable[UserCurrentLocation],
    latitude: float,
    longitude: float,
    radius: float,
) -> list[UserCurrentLocation]:
    """Локации в радиусе от точки, в исходном порядке."""
    return [location for location in locations if is_near(location, latitude, longitude, radius)]
