"""
Общие модели для всех сервисов.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field


T = TypeVar("T")


class OperationResult(BaseModel, Generic[T]):
    """
    Результат операции.

    Публичные операции не бросают исключений: при ошибке success=False,
    а model содержит модель по умолчанию (или частично заполненную запись).
    """

    success: bool = False
    model: T


class HealthStatus(BaseModel):
    """Статус здоровья сервиса."""

    service: str
    status: str = "healthy"  # healthy, degraded, unhealthy
    version: str | None = None
    dependencies: dict[str, str] = Field(default_factory=dict)
