"""
Зависимости FastAPI для Location API.
"""

from __future__ import annotations

from src.core.locations.repository import UserLocationRepository
from src.infra.cache_store import get_cache

_repository: UserLocationRepository | None = None


def init_repository(history_limit: int | None = None) -> UserLocationRepository:
    """Создаёт репозиторий поверх инициализированного хранилища."""
    global _repository
    _repository = UserLocationRepository(get_cache(), history_limit=history_limit)
    return _repository


def reset_repository() -> None:
    global _repository
    _repository = None


def get_repository() -> UserLocationRepository:
    """Получить репозиторий."""
    if _repository is None:
        raise RuntimeError("Repository not initialized")
    return _repository
