#!/usr/bin/env python3
"""
Entrypoint для Location API.

Запуск:
    python entrypoints/entrypoint_location_api.py

Порт по умолчанию: 8090 (LOCATION_API_PORT)
"""

import sys
from pathlib import Path

# Добавляем корневую директорию проекта в путь
project_root = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(project_root))

import uvicorn

from src.config import settings


def main() -> None:
    """Запустить Location API."""
    uvicorn.run(
        "src.services.location_api.app:app",
        host=settings.deployment.LOCATION_API_HOST,
        port=settings.deployment.LOCATION_API_PORT,
        reload=settings.system.DEBUG,
        log_level=settings.system.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
