"""
Общие константы и перечисления.
"""

from enum import Enum


class TypeMsg(str, Enum):
    """Типы сообщений для логирования."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class CacheBackend(str, Enum):
    """Реализации хранилища кэша."""
    REDIS = "redis"
    MEMORY = "memory"


# =============================================================================
# КЛЮЧИ КЭША
# =============================================================================

# Формат ключей совместим с уже сохранёнными данными, менять нельзя
ALL_USERS_CURRENT_LOCATION_KEY = "all-users-current-location"
USER_CURRENT_LOCATION_KEY_SUFFIX = "-current-location"
USER_LOCATION_HISTORY_KEY_SUFFIX = "-location-history"
