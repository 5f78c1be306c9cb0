"""
Location API — HTTP сервис локаций пользователей.

Обеспечивает:
- Приём текущей локации пользователя
- Чтение текущей локации и истории
- Поиск пользователей в области и в радиусе от точки
"""
