"""
Домен локаций пользователей.
Модели, кодек, пространственные фильтры и репозиторий в кэше.
"""

from src.core.locations.models import (
    GeoPoint,
    UserCurrentLocation,
    UserCurrentLocationUpdate,
    AreaBoundary,
)
from src.core.locations.exceptions import LocationDecodeError, LocationWriteError
from src.core.locations.repository import UserLocationRepository

__all__ = [
    "GeoPoint",
    "UserCurrentLocation",
    "UserCurrentLocationUpdate",
    "AreaBoundary",
    "LocationDecodeError",
    "LocationWriteError",
    "UserLocationRepository",
]
