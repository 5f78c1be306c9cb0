"""
Ошибки хранилища локаций.
"""

from __future__ import annotations


class LocationDecodeError(ValueError):
    """Сохранённое значение пустое или не разбирается как локация."""
    pass


class LocationWriteError(Exception):
    """
    Ошибка одного из шагов записи локации.

    Хранит имя шага и идентификатор пользователя; исходная ошибка
    доступна через __cause__.
    """

    def __init__(self, operation: str, user_id: str | None = None) -> None:
        self.operation = operation
        self.user_id = user_id
        message = f"{operation}: {user_id}" if user_id is not None else f"{operation}:"
        super().__init__(message)
