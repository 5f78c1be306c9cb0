"""
Сериализация локаций в строковое представление кэша (JSON).

Два варианта декодирования списков:
- decode_locations — строгий, пустое значение считается ошибкой;
- decode_locations_or_empty — терпимый, пустое значение даёт пустой список.
"""

from __future__ import annotations

from pydantic import TypeAdapter, ValidationError

from src.core.locations.exceptions import LocationDecodeError
from src.core.locations.models import UserCurrentLocation


_LIST_ADAPTER = TypeAdapter(list[UserCurrentLocation])


def _is_blank(payload: str | None) -> bool:
    return payload is None or not payload.strip()


def encode_location(location: UserCurrentLocation) -> str:
    """Сериализует одну запись."""
    return location.model_dump_json(by_alias=True)


def encode_locations(locations: list[UserCurrentLocation]) -> str:
    """Сериализует список записей (порядок сохраняется)."""
    return _LIST_ADAPTER.dump_json(locations, by_alias=True).decode("utf-8")


def decode_location(payload: str | None) -> UserCurrentLocation:
    """
    Строгое декодирование одной записи.

    Raises:
        LocationDecodeError: значение отсутствует, пустое или повреждено
    """
    if _is_blank(payload):
        raise LocationDecodeError("Пустое значение локации")

    try:
        return UserCurrentLocation.model_validate_json(payload)
    except ValidationError as e:
        raise LocationDecodeError(f"Повреждённое значение локации: {e}") from e


def decode_locations(payload: str | None) -> list[UserCurrentLocation]:
    """
    Строгое декодирование списка.

    Raises:
        LocationDecodeError: значение отсутствует, пустое или повреждено
    """
    if _is_blank(payload):
        raise LocationDecodeError("Пустое значение списка локаций")

    try:
        return _LIST_ADAPTER.validate_json(payload)
    except ValidationError as e:
        raise LocationDecodeError(f"Повреждённый список локаций: {e}") from e


def decode_locations_or_empty(payload: str | None) -> list[UserCurrentLocation]:
    """
    Терпимое декодирование списка: отсутствующее или пустое значение — пустой список.
    Непустое повреждённое значение по-прежнему ошибка.
    """
    if _is_blank(payload):
        return []
    return decode_locations(payload)
