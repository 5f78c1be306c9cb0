"""
Модели данных локаций пользователей.

Имена полей в JSON (camelCase) стабильны: в таком виде записи хранятся в кэше.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """База моделей с camelCase-алиасами (принимает и алиасы, и имена полей)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class GeoPoint(CamelModel):
    """Точка на карте (градусы)."""

    latitude: float = Field(0.0, ge=-90, le=90, description="Широта")
    longitude: float = Field(0.0, ge=-180, le=180, description="Долгота")


class UserCurrentLocation(CamelModel):
    """
    Текущая локация пользователя.

    Пустая запись (id="", точка 0/0, без времени) — модель по умолчанию
    для неуспешных операций.
    """

    id: str = Field("", description="Идентификатор пользователя")
    current_location: GeoPoint = Field(default_factory=GeoPoint, description="Текущая точка")
    time_at_location: datetime | None = Field(None, description="Время наблюдения (UTC)")

    def is_same_user(self, user_id: str) -> bool:
        """Сравнение идентификаторов без учёта регистра."""
        return self.id.casefold() == user_id.casefold()


class UserCurrentLocationUpdate(CamelModel):
    """DTO обновления локации."""

    id: str = Field(..., min_length=1, description="Идентификатор пользователя")
    current_location: GeoPoint


class AreaBoundary(CamelModel):
    """
    Прямоугольная область поиска.
    Порядок западной и восточной границ не фиксирован.
    """

    northern_boundary: float
    southern_boundary: float
    western_boundary: float
    eastern_boundary: float
