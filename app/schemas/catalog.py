# app/schemas/catalog.py
from typing import List, Optional
from pydantic import BaseModel
from models.product import ProductRead
from models.category import CategoryRead


class Pagination(BaseModel):
    """Метаданные страницы"""
    currentPage: int
    currentPageSize: int
    totalPages: int
    totalRecords: int


class ProductPage(BaseModel):
    """Страница товаров"""
    rows: List[ProductRead]
    pagination: Pagination


class CategoryRows(BaseModel):
    """Список категорий"""
    rows: List[CategoryRead]


class ErrorDetail(BaseModel):
    """Тело ошибки"""
    status: int
    code: Optional[str] = None
    message: str
    field: Optional[str] = None


class ErrorResponse(BaseModel):
    """Ответ с ошибкой"""
    error: ErrorDetail
