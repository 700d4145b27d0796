from typing import List, Optional, Tuple

from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from models.product import Product
from models.department import Department
from models.category import Category
from models.attribute import AttributeValue
from models.product_category import ProductCategory
from services.query_builder import ProductQuery, MAX_QUERY_INT


def _valid_id(entity_id: int) -> bool:
    """Ключ вне диапазона INTEGER не может существовать в таблице"""
    return 0 <= entity_id <= MAX_QUERY_INT


class CatalogRepository:
    """Слой доступа к данным каталога (только чтение)"""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_products(self, query: ProductQuery) -> Tuple[list, int]:
        """Строки запрошенной страницы и общее число совпадений"""
        rows = self._session.exec(query.rows_query()).all()
        count = self._session.exec(query.count_query()).one()
        return list(rows), count

    def get_product(self, product_id: int) -> Optional[Product]:
        if not _valid_id(product_id):
            return None
        statement = select(Product).where(
            Product.product_id == product_id
        ).options(
            selectinload(Product.attributes).selectinload(AttributeValue.attribute_type)
        )
        return self._session.exec(statement).first()

    def list_departments(self) -> List[Department]:
        return list(self._session.exec(select(Department).order_by(Department.department_id)).all())

    def get_department(self, department_id: int) -> Optional[Department]:
        if not _valid_id(department_id):
            return None
        return self._session.get(Department, department_id)

    def list_categories(self, department_id: Optional[int] = None) -> List[Category]:
        statement = select(Category)
        if department_id is not None:
            statement = statement.where(Category.department_id == department_id)
        return list(self._session.exec(statement.order_by(Category.category_id)).all())

    def get_category(self, category_id: int) -> Optional[Category]:
        if not _valid_id(category_id):
            return None
        return self._session.get(Category, category_id)

    def get_product_category(self, product_id: int) -> Optional[Category]:
        """Первая (по id) категория, связанная с товаром"""
        if not _valid_id(product_id):
            return None
        statement = select(Category).join(
            ProductCategory, ProductCategory.category_id == Category.category_id
        ).where(
            ProductCategory.product_id == product_id
        ).order_by(Category.category_id)
        return self._session.exec(statement).first()
