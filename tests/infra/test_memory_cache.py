"""
Тесты для хранилища в памяти.
"""

from __future__ import annotations

import pytest

from src.infra.memory_cache import MemoryCache


class TestMemoryCache:
    """Тесты для MemoryCache."""

    @pytest.mark.asyncio
    async def test_get_missing(self, memory_cache: MemoryCache) -> None:
        assert await memory_cache.get("missing") is None

    @pytest.mark.asyncio
    async def test_set_and_get(self, memory_cache: MemoryCache) -> None:
        """Записанное значение читается обратно."""
        assert await memory_cache.set("key", "value") is True
        assert await memory_cache.get("key") == "value"

    @pytest.mark.asyncio
    async def test_set_overwrites(self, memory_cache: MemoryCache) -> None:
        """Повторная запись заменяет значение целиком."""
        await memory_cache.set("key", "first")
        await memory_cache.set("key", "second")

        assert await memory_cache.get("key") == "second"
        assert memory_cache.keys() == ["key"]

    @pytest.mark.asyncio
    async def test_health_check(self, memory_cache: MemoryCache) -> None:
        assert await memory_cache.health_check() is True

    def test_instances_are_isolated(self) -> None:
        """Каждый экземпляр — отдельное хранилище."""
        first = MemoryCache()
        first._data["key"] = "value"

        assert MemoryCache().keys() == []
