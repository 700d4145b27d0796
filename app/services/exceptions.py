"""
Исключения каталога.

Резолверы выбрасывают их вместо формирования ответа, а обработчик в main.py
переводит их в JSON-конверт {"error": {...}}.
"""
from typing import Optional


class CatalogError(Exception):
    """Базовая ошибка каталога с HTTP-статусом"""

    status_code: int = 500

    def __init__(self, message: str, code: Optional[str] = None, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.field = field

    def to_dict(self) -> dict:
        """Тело ошибки без пустых полей"""
        body = {"status": self.status_code, "code": self.code, "message": self.message, "field": self.field}
        return {key: value for key, value in body.items() if value is not None}


class ValidationError(CatalogError):
    """Некорректный параметр запроса"""
    status_code = 400


class NotFoundError(CatalogError):
    """Сущность не найдена"""
    status_code = 404
