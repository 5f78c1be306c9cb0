"""
Инфраструктурный слой.
Работа с внешним хранилищем: Redis или память процесса.
"""

from src.infra.redis_client import RedisClient, get_redis
from src.infra.memory_cache import MemoryCache
from src.infra.cache_store import CacheStore, init_cache, get_cache, close_cache

__all__ = [
    "RedisClient",
    "get_redis",
    "MemoryCache",
    "CacheStore",
    "init_cache",
    "get_cache",
    "close_cache",
]
