"""
Репозиторий локаций пользователей в кэше.

Поддерживает три денормализованных представления:
- текущая локация пользователя:  <userId>-current-location
- история локаций пользователя:  <userId>-location-history
- текущие локации всех:          all-users-current-location

Запись идёт тремя последовательными шагами без транзакции и без отката.
Если шаг падает, предыдущие шаги остаются записанными. Параллельные
обновления не блокируются: общий список всех пользователей живёт по
правилу last-write-wins и может терять записи при гонке.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from src.common.constants import (
    ALL_USERS_CURRENT_LOCATION_KEY,
    USER_CURRENT_LOCATION_KEY_SUFFIX,
    USER_LOCATION_HISTORY_KEY_SUFFIX,
    TypeMsg,
)
from src.common.logger import log_error, log_info
from src.core.locations import codec, spatial
from src.core.locations.exceptions import LocationWriteError
from src.core.locations.models import AreaBoundary, GeoPoint, UserCurrentLocation
from src.infra.cache_store import CacheStore
from src.shared.models.common import OperationResult


def current_location_key(user_id: str) -> str:
    """Ключ текущей локации пользователя."""
    return f"{user_id}{USER_CURRENT_LOCATION_KEY_SUFFIX}"


def location_history_key(user_id: str) -> str:
    """Ключ истории локаций пользователя."""
    return f"{user_id}{USER_LOCATION_HISTORY_KEY_SUFFIX}"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserLocationRepository:
    """Репозиторий текущих локаций и истории перемещений."""

    def __init__(
        self,
        cache: CacheStore,
        history_limit: int | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """
        Инициализация репозитория.

        Args:
            cache: Хранилище (Dependency Injection)
            history_limit: Сколько последних записей истории хранить (None: все)
            clock: Источник времени UTC
        """
        if history_limit is not None and history_limit < 1:
            raise ValueError(f"history_limit должен быть >= 1, получено {history_limit}")

        self._cache = cache
        self._history_limit = history_limit
        self._clock = clock

    # =========================================================================
    # ЗАПИСЬ
    # =========================================================================

    async def set_current_location(
        self,
        user_id: str,
        location: GeoPoint,
    ) -> OperationResult[UserCurrentLocation]:
        """
        Обновляет локацию пользователя во всех трёх представлениях.

        Returns:
            OperationResult с созданной записью. При ошибке success=False,
            но запись всё равно возвращается (пустая, если её не удалось
            собрать), а уже выполненные шаги не откатываются.
        """
        user_location: UserCurrentLocation | None = None
        try:
            user_location = UserCurrentLocation(
                id=user_id,
                current_location=location,
                time_at_location=self._clock(),
            )
            await self._update_current_location(user_location)
            await self._update_location_history(user_location)
            await self._update_all_users_current_location(user_location)
        except Exception:
            await log_error(
                f"set_current_location - {user_id}",
                extra={"operation": "set_current_location", "user_id": user_id},
                exc_info=True,
            )
            return OperationResult[UserCurrentLocation](
                success=False,
                model=user_location if user_location is not None else UserCurrentLocation(),
            )

        await log_info(f"Локация пользователя {user_id} обновлена", type_msg=TypeMsg.DEBUG)
        return OperationResult[UserCurrentLocation](success=True, model=user_location)

    # =========================================================================
    # ЧТЕНИЕ
    # =========================================================================

    async def get_current_location(self, user_id: str) -> OperationResult[UserCurrentLocation]:
        """
        Текущая локация пользователя.
        Отсутствующий ключ считается ошибкой (success=False, пустая запись).
        """
        try:
            payload = await self._cache.get(current_location_key(user_id))
            user_location = codec.decode_location(payload)
        except Exception:
            await log_error(
                f"get_current_location - {user_id}",
                extra={"operation": "get_current_location", "user_id": user_id},
                exc_info=True,
            )
            return OperationResult[UserCurrentLocation](success=False, model=UserCurrentLocation())

        return OperationResult[UserCurrentLocation](success=True, model=user_location)

    async def get_location_history(self, user_id: str) -> OperationResult[list[UserCurrentLocation]]:
        """
        История локаций пользователя в порядке записи.
        Отсутствующий ключ считается ошибкой (success=False, пустой список).
        """
        try:
            payload = await self._cache.get(location_history_key(user_id))
            history = codec.decode_locations(payload)
        except Exception:
            await log_error(
                f"get_location_history - {user_id}",
                extra={"operation": "get_location_history", "user_id": user_id},
                exc_info=True,
            )
            return OperationResult[list[UserCurrentLocation]](success=False, model=[])

        return OperationResult[list[UserCurrentLocation]](success=True, model=history)

    async def get_all_current_locations(self) -> OperationResult[list[UserCurrentLocation]]:
        """
        Текущие локации всех пользователей.
        Отсутствующий ключ даёт пустой список, а не ошибку.
        """
        return await self._query_all("get_all_current_locations", lambda locations: locations)

    async def get_current_in_area(self, boundary: AreaBoundary) -> OperationResult[list[UserCurrentLocation]]:
        """Пользователи, чья текущая локация попадает в область."""
        return await self._query_all(
            "get_current_in_area",
            lambda locations: spatial.filter_in_area(locations, boundary),
        )

    async def get_current_near_location(
        self,
        latitude: float,
        longitude: float,
        radius: float,
    ) -> OperationResult[list[UserCurrentLocation]]:
        """
        Пользователи в радиусе от точки.
        Расстояние евклидово в градусах, радиус сравнивается с ним без перевода единиц.
        """
        return await self._query_all(
            "get_current_near_location",
            lambda locations: spatial.filter_near(locations, latitude, longitude, radius),
        )

    async def _query_all(
        self,
        operation: str,
        select: Callable[[list[UserCurrentLocation]], list[UserCurrentLocation]],
    ) -> OperationResult[list[UserCurrentLocation]]:
        try:
            locations = select(await self._get_all_users_current_location())
        except Exception:
            await log_error(operation, extra={"operation": operation}, exc_info=True)
            return OperationResult[list[UserCurrentLocation]](success=False, model=[])

        return OperationResult[list[UserCurrentLocation]](success=True, model=locations)

    # =========================================================================
    # ШАГИ ЗАПИСИ
    # =========================================================================

    async def _update_current_location(self, user_location: UserCurrentLocation) -> None:
        """Шаг 1: перезаписывает текущую локацию пользователя."""
        try:
            await self._cache.set(
                current_location_key(user_location.id),
                codec.encode_location(user_location),
            )
        except Exception as e:
            raise await self._write_error("_update_current_location", user_location.id) from e

    async def _update_location_history(self, user_location: UserCurrentLocation) -> None:
        """Шаг 2: дописывает запись в конец истории пользователя."""
        key = location_history_key(user_location.id)
        try:
            history = codec.decode_locations_or_empty(await self._cache.get(key))
            history.append(user_location)
            if self._history_limit is not None:
                history = history[-self._history_limit:]
            await self._cache.set(key, codec.encode_locations(history))
        except Exception as e:
            raise await self._write_error("_update_location_history", user_location.id) from e

    async def _update_all_users_current_location(self, user_location: UserCurrentLocation) -> None:
        """Шаг 3: заменяет запись пользователя в общем списке (удалить старую, добавить в конец)."""
        try:
            all_locations = await self._get_all_users_current_location()

            index = next(
                (i for i, item in enumerate(all_locations) if item.is_same_user(user_location.id)),
                -1,
            )
            if index > -1:
                del all_locations[index]

            all_locations.append(user_location)
            await self._cache.set(ALL_USERS_CURRENT_LOCATION_KEY, codec.encode_locations(all_locations))
        except Exception as e:
            raise await self._write_error("_update_all_users_current_location", user_location.id) from e

    async def _get_all_users_current_location(self) -> list[UserCurrentLocation]:
        """Читает общий список; отсутствующий ключ даёт пустой список."""
        try:
            payload = await self._cache.get(ALL_USERS_CURRENT_LOCATION_KEY)
            return codec.decode_locations_or_empty(payload)
        except Exception as e:
            raise await self._write_error("_get_all_users_current_location") from e

    async def _write_error(self, operation: str, user_id: str | None = None) -> LocationWriteError:
        """Логирует ошибку шага и возвращает обёртку для повторного броска."""
        error = LocationWriteError(operation, user_id)
        await log_error(
            str(error),
            extra={"operation": operation, "user_id": user_id},
            exc_info=True,
        )
        return error
