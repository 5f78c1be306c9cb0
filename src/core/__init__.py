"""
Доменный слой (Core Domain).
Бизнес-логика поверх абстрактного хранилища.
"""

from src.core.locations import UserLocationRepository, UserCurrentLocation, GeoPoint, AreaBoundary

__all__ = [
    "UserLocationRepository",
    "UserCurrentLocation",
    "GeoPoint",
    "AreaBoundary",
]
