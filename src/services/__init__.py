"""
Сервисы приложения.

Сервисы:
- location_api: HTTP доступ к текущим локациям, истории и пространственным запросам
"""

__all__: list[str] = []
