"""
FastAPI приложение Location API.

Endpoints:
- POST /api/v1/location - обновить локацию пользователя
- GET /api/v1/location - текущие локации всех пользователей
- GET /api/v1/location/area - пользователи в области
- GET /api/v1/location/nearby - пользователи в радиусе от точки
- GET /api/v1/location/{user_id} - текущая локация пользователя
- GET /api/v1/location/{user_id}/history - история локаций
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Query, status

from src.common.constants import TypeMsg
from src.common.logger import log_info
from src.core.locations.models import AreaBoundary, UserCurrentLocation, UserCurrentLocationUpdate
from src.core.locations.repository import UserLocationRepository
from src.infra.cache_store import CacheStore, get_cache
from src.services.location_api.dependencies import get_repository, init_repository, reset_repository
from src.shared.models.common import HealthStatus, OperationResult


SERVICE_NAME = "location_api"
SERVICE_VERSION = "1.0.0"


# === LIFESPAN ===

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Жизненный цикл приложения."""
    from src.common.logger import setup_logging
    from src.config import settings
    from src.infra.cache_store import close_cache, init_cache

    setup_logging()
    await init_cache(settings.cache.CACHE_BACKEND)
    init_repository(history_limit=settings.cache.LOCATION_HISTORY_LIMIT)
    await log_info(
        f"{settings.system.PROJECT_NAME}: {SERVICE_NAME} запущен (окружение: {settings.system.ENVIRONMENT})",
        type_msg=TypeMsg.INFO,
    )

    yield

    reset_repository()
    await close_cache()


# === APP ===

app = FastAPI(
    title="Location API",
    description="Текущие локации пользователей, история и пространственные запросы.",
    version=SERVICE_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# === HEALTH CHECK ===

@app.get("/health", response_model=HealthStatus, tags=["Health"])
async def health_check(cache: CacheStore = Depends(get_cache)) -> HealthStatus:
    """
    Проверка здоровья сервиса.
    Недоступное хранилище переводит статус в degraded.
    """
    cache_ok = await cache.health_check()
    return HealthStatus(
        status="healthy" if cache_ok else "degraded",
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
        dependencies={"cache": "ok" if cache_ok else "unavailable"},
    )


# === LOCATION ENDPOINTS ===

@app.post(
    "/api/v1/location",
    response_model=OperationResult[UserCurrentLocation],
    responses={503: {"description": "Хранилище недоступно"}},
    tags=["Location"],
    summary="Обновить локацию",
)
async def set_current_location(
    update: UserCurrentLocationUpdate,
    repository: UserLocationRepository = Depends(get_repository),
) -> OperationResult[UserCurrentLocation]:
    """
    Обновить текущую локацию пользователя.

    Пишет текущую локацию, историю и общий список. Частичная запись
    при ошибке не откатывается.
    """
    result = await repository.set_current_location(update.id, update.current_location)
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Не удалось сохранить локацию пользователя {update.id}",
        )
    return result


@app.get(
    "/api/v1/location",
    response_model=OperationResult[list[UserCurrentLocation]],
    tags=["Location"],
    summary="Текущие локации всех пользователей",
)
async def get_all_current_locations(
    repository: UserLocationRepository = Depends(get_repository),
) -> OperationResult[list[UserCurrentLocation]]:
    """Текущие локации всех известных пользователей."""
    return _list_or_503(await repository.get_all_current_locations())


@app.get(
    "/api/v1/location/area",
    response_model=OperationResult[list[UserCurrentLocation]],
    tags=["Location"],
    summary="Пользователи в области",
)
async def get_current_in_area(
    north: float = Query(...),
    south: float = Query(...),
    west: float = Query(...),
    east: float = Query(...),
    repository: UserLocationRepository = Depends(get_repository),
) -> OperationResult[list[UserCurrentLocation]]:
    """Пользователи, чья текущая локация попадает в область."""
    boundary = AreaBoundary(
        northern_boundary=north,
        southern_boundary=south,
        western_boundary=west,
        eastern_boundary=east,
    )
    return _list_or_503(await repository.get_current_in_area(boundary))


@app.get(
    "/api/v1/location/nearby",
    response_model=OperationResult[list[UserCurrentLocation]],
    tags=["Location"],
    summary="Пользователи рядом с точкой",
)
async def get_current_near_location(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    radius: int = Query(..., ge=0),
    repository: UserLocationRepository = Depends(get_repository),
) -> OperationResult[list[UserCurrentLocation]]:
    """Пользователи в радиусе от точки (радиус в градусах координат)."""
    return _list_or_503(await repository.get_current_near_location(lat, lon, radius))


@app.get(
    "/api/v1/location/{user_id}",
    response_model=OperationResult[UserCurrentLocation],
    responses={404: {"description": "Локация не найдена"}},
    tags=["Location"],
    summary="Текущая локация пользователя",
)
async def get_current_location(
    user_id: str,
    repository: UserLocationRepository = Depends(get_repository),
) -> OperationResult[UserCurrentLocation]:
    """Последняя известная локация пользователя."""
    result = await repository.get_current_location(user_id)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Локация не найдена")
    return result


@app.get(
    "/api/v1/location/{user_id}/history",
    response_model=OperationResult[list[UserCurrentLocation]],
    responses={404: {"description": "История не найдена"}},
    tags=["Location"],
    summary="История локаций пользователя",
)
async def get_location_history(
    user_id: str,
    repository: UserLocationRepository = Depends(get_repository),
) -> OperationResult[list[UserCurrentLocation]]:
    """Все сохранённые локации пользователя в порядке записи."""
    result = await repository.get_location_history(user_id)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="История не найдена")
    return result


def _list_or_503(result: OperationResult[list[UserCurrentLocation]]) -> OperationResult[list[UserCurrentLocation]]:
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Хранилище недоступно",
        )
    return result


# === STARTUP ===

if __name__ == "__main__":
    import uvicorn
    from src.config import settings

    uvicorn.run(
        app,
        host=settings.deployment.LOCATION_API_HOST,
        port=settings.deployment.LOCATION_API_PORT,
    )
