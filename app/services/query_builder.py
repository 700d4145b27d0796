# app/services/query_builder.py
import math
import re
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from sqlalchemy import distinct
from sqlmodel import select, func, or_, and_

from models.product import Product
from models.product_category import ProductCategory
from models.category import Category

DIGITS = re.compile(r"[0-9]+")

# Верхняя граница 32-битного INTEGER; offset = (page - 1) * limit укладывается в BIGINT
MAX_QUERY_INT = 2 ** 31 - 1


def parse_positive_int(value: Optional[str], default: int) -> int:
    """
    Мягкий разбор параметра строки запроса.

    Отсутствующее, нечисловое, неположительное или больше MAX_QUERY_INT
    значение заменяется на default.
    """
    if value is None:
        return default
    value = str(value).strip()
    if not DIGITS.fullmatch(value):
        return default
    number = int(value)
    return number if 0 < number <= MAX_QUERY_INT else default


def total_pages(count: int, limit: int) -> int:
    """Количество страниц: ceil(count / limit)"""
    return math.ceil(count / limit)


@dataclass(frozen=True)
class PageRequest:
    """Запрошенная страница (номер страницы с 1)"""
    page: int = 1
    limit: int = 20

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def from_query(cls, page: Optional[str], limit: Optional[str], default_limit: int = 20) -> "PageRequest":
        return cls(
            page=parse_positive_int(page, 1),
            limit=parse_positive_int(limit, default_limit),
        )


def split_terms(query_string: Optional[str]) -> Tuple[str, ...]:
    """Разбивает поисковую строку на слова"""
    if not query_string:
        return ()
    return tuple(query_string.split())


def term_condition(term: str):
    """Регистронезависимое вхождение слова в название или описание (% и _ ищутся буквально)"""
    return or_(
        Product.name.icontains(term, autoescape=True),
        Product.description.icontains(term, autoescape=True)
    )


def search_condition(terms: Sequence[str], all_words: bool = False):
    """
    Условие поиска по нескольким словам.

    all_words=True - каждое слово должно встретиться (AND),
    иначе достаточно любого (OR). Для пустого списка возвращает None.
    """
    if not terms:
        return None
    conditions = [term_condition(term) for term in terms]
    if len(conditions) == 1:
        return conditions[0]
    return and_(*conditions) if all_words else or_(*conditions)


@dataclass
class ProductQuery:
    """
    Построитель запроса списка товаров.

    Возвращает пару (запрос строк страницы, запрос общего количества) с
    одинаковыми соединениями и фильтрами.
    """
    page: PageRequest
    description_length: int = 200
    terms: Tuple[str, ...] = ()
    all_words: bool = False
    category_id: Optional[int] = None
    department_id: Optional[int] = None

    def _apply_filters(self, query):
        if self.category_id is not None:
            query = query.join(
                ProductCategory, ProductCategory.product_id == Product.product_id
            ).where(
                ProductCategory.category_id == self.category_id
            )

        if self.department_id is not None:
            query = query.join(
                ProductCategory, ProductCategory.product_id == Product.product_id
            ).join(
                Category, ProductCategory.category_id == Category.category_id
            ).where(
                Category.department_id == self.department_id
            )

        condition = search_condition(self.terms, self.all_words)
        if condition is not None:
            query = query.where(condition)

        return query

    def rows_query(self):
        query = select(
            Product.product_id,
            Product.name,
            func.substr(Product.description, 1, self.description_length).label("description"),
            Product.price
        ).select_from(Product)

        query = self._apply_filters(query)

        # Товар может входить в несколько категорий отдела
        if self.department_id is not None:
            query = query.distinct()

        return query.order_by(Product.product_id).offset(self.page.offset).limit(self.page.limit)

    def count_query(self):
        query = select(func.count(distinct(Product.product_id))).select_from(Product)
        return self._apply_filters(query)
