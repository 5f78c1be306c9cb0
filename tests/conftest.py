"""
Общие фикстуры и настройки для тестов.
"""

from __future__ import annotations

import json
import os
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable
from unittest.mock import AsyncMock

import pytest

# Устанавливаем переменные окружения перед импортом модулей
os.environ.setdefault("REDIS_PASSWORD", "")
os.environ.setdefault("CACHE_BACKEND", "memory")

from src.core.locations.models import GeoPoint, UserCurrentLocation
from src.core.locations.repository import UserLocationRepository
from src.infra.memory_cache import MemoryCache


# =============================================================================
# ФИКСТУРЫ КОНФИГУРАЦИИ
# =============================================================================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Корневая директория проекта."""
    return Path(__file__).parent.parent


@pytest.fixture
def mock_config() -> dict[str, Any]:
    """Мок конфигурации для тестов."""
    return {
        "_comment_system": "Тестовая конфигурация",
        "PROJECT_NAME": "user_location_test",
        "VERSION": "1.0.0-test",
        "DEBUG": True,
        "LOG_LEVEL": "DEBUG",
        "ENVIRONMENT": "test",
        "LOCATION_API_HOST": "127.0.0.1",
        "LOCATION_API_PORT": 9090,
        "LOG_TO_FILE": False,
        "LOG_FILE_PATH": "logs/test.log",
        "LOG_FORMAT": "json",
        "LOG_MAX_BYTES": 1048576,
        "REDIS_HOST": "redis.test",
        "REDIS_PORT": 6380,
        "REDIS_DB": 1,
        "REDIS_PASSWORD": "",
        "REDIS_NAMESPACE": "locations_test",
        "REDIS_MAX_CONNECTIONS": 10,
        "REDIS_SOCKET_TIMEOUT": 2.5,
        "CACHE_BACKEND": "redis",
        "LOCATION_HISTORY_LIMIT": 100,
    }


@pytest.fixture
def temp_config_file(tmp_path: Path, mock_config: dict[str, Any]) -> Path:
    """Создаёт временный файл конфигурации."""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps(mock_config, ensure_ascii=False, indent=2), encoding="utf-8")
    return config_file


# =============================================================================
# ФИКСТУРЫ ИНФРАСТРУКТУРЫ
# =============================================================================

@pytest.fixture
def memory_cache() -> MemoryCache:
    """Хранилище в памяти (пустое)."""
    return MemoryCache()


@pytest.fixture
def mock_cache() -> AsyncMock:
    """Мок хранилища: пустые ключи, успешная запись."""
    cache = AsyncMock()
    cache.get = AsyncMock(return_value=None)
    cache.set = AsyncMock(return_value=True)
    return cache


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Часы, возвращающие возрастающее время с шагом в секунду."""
    start = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
    ticks = {"n": 0}

    def clock() -> datetime:
        now = start + timedelta(seconds=ticks["n"])
        ticks["n"] += 1
        return now

    return clock


@pytest.fixture
def repository(memory_cache: MemoryCache, fixed_clock: Callable[[], datetime]) -> UserLocationRepository:
    """Репозиторий поверх хранилища в памяти."""
    return UserLocationRepository(memory_cache, clock=fixed_clock)


# =============================================================================
# ФИКСТУРЫ МОДЕЛЕЙ
# =============================================================================

@pytest.fixture
def make_location() -> Callable[..., UserCurrentLocation]:
    """Фабрика записей локации."""

    def factory(
        user_id: str = "alice",
        latitude: float = 0.0,
        longitude: float = 0.0,
        time_at_location: datetime | None = None,
    ) -> UserCurrentLocation:
        return UserCurrentLocation(
            id=user_id,
            current_location=GeoPoint(latitude=latitude, longitude=longitude),
            time_at_location=time_at_location or datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        )

    return factory


@pytest.fixture
def sample_location_payload() -> dict[str, Any]:
    """Пример записи в том виде, в котором она лежит в кэше."""
    return {
        "id": "alice",
        "currentLocation": {"latitude": 51.5074, "longitude": -0.1278},
        "timeAtLocation": "2024-05-01T12:00:00Z",
    }
