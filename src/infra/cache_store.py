"""
Выбор хранилища кэша (Redis или память процесса) по конфигурации.
"""

from __future__ import annotations

from typing import Protocol

from src.common.constants import CacheBackend, TypeMsg
from src.common.logger import log_info
from src.infra.memory_cache import MemoryCache
from src.infra.redis_client import close_redis, init_redis


class CacheStore(Protocol):
    """
    Минимальный контракт внешнего хранилища.
    Строковые get/set без транзакций и атомарного compare-and-swap,
    плюс проверка доступности для /health.
    """

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> bool: ...

    async def health_check(self) -> bool: ...


_store: CacheStore | None = None
_backend: CacheBackend | None = None


async def init_cache(backend: CacheBackend | None = None) -> CacheStore:
    """
    Инициализирует хранилище.

    Args:
        backend: Реализация (если None, берётся CACHE_BACKEND из конфига)

    Returns:
        Готовое к работе хранилище
    """
    global _store, _backend

    if _store is not None:
        return _store

    if backend is None:
        from src.config import settings
        backend = settings.cache.CACHE_BACKEND

    if backend == CacheBackend.MEMORY:
        _store = MemoryCache()
    else:
        _store = await init_redis()

    _backend = CacheBackend(backend)
    await log_info(f"Хранилище локаций: {_backend.value}", type_msg=TypeMsg.INFO)
    return _store


def get_cache() -> CacheStore:
    """Возвращает инициализированное хранилище."""
    if _store is None:
        raise RuntimeError("Хранилище не инициализировано. Вызовите init_cache() сначала.")
    return _store


async def close_cache() -> None:
    """Закрывает хранилище."""
    global _store, _backend

    if _backend == CacheBackend.REDIS:
        await close_redis()

    _store = None
    _backend = None
