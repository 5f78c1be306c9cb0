"""
Общий код между сервисами.

Модули:
- models: общие Pydantic-модели (OperationResult, HealthStatus)
"""

__all__: list[str] = []
