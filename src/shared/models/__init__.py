"""
Общие Pydantic-модели.
"""

from src.shared.models.common import (
    OperationResult,
    HealthStatus,
)

__all__ = [
    "OperationResult",
    "HealthStatus",
]
