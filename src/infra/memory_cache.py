"""
Хранилище в памяти процесса.
Используется для разработки и тестов вместо Redis.
"""

from __future__ import annotations


class MemoryCache:
    """Строковое key-value хранилище в памяти процесса (без TTL и транзакций)."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    async def get(self, key: str) -> str | None:
        """Получает значение по ключу."""
        return self._data.get(key)

    async def set(self, key: str, value: str) -> bool:
        """Устанавливает значение."""
        self._data[key] = value
        return True

    async def health_check(self) -> bool:
        """Хранилище в памяти всегда доступно."""
        return True

    def keys(self) -> list[str]:
        """Список сохранённых ключей."""
        return list(self._data)
