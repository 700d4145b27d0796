from typing import List, Optional
import logging

from models.product import ProductRead, ProductDetail
from models.department import DepartmentRead
from models.category import CategoryRead, CategoryBrief
from repositories.catalog_repository import CatalogRepository
from schemas.catalog import Pagination, ProductPage, CategoryRows
from services.exceptions import NotFoundError
from services.query_builder import PageRequest, ProductQuery, parse_positive_int, split_terms, total_pages

logger = logging.getLogger(__name__)


class CatalogService:
    """
    Резолверы каталога.

    Работают через переданный репозиторий и выбрасывают NotFoundError,
    если сущность отсутствует.
    """

    def __init__(self, repository: CatalogRepository, default_limit: int = 20, default_description_length: int = 200):
        self.repository = repository
        self.default_limit = default_limit
        self.default_description_length = default_description_length

    def _page(self, page: Optional[str], limit: Optional[str]) -> PageRequest:
        return PageRequest.from_query(page, limit, self.default_limit)

    def _description_length(self, description_length: Optional[str]) -> int:
        return parse_positive_int(description_length, self.default_description_length)

    def _product_page(self, query: ProductQuery) -> ProductPage:
        rows, count = self.repository.find_products(query)
        return ProductPage(
            rows=[
                ProductRead(
                    product_id=r.product_id,
                    name=r.name,
                    description=r.description,
                    price=r.price
                ) for r in rows
            ],
            pagination=Pagination(
                currentPage=query.page.page,
                currentPageSize=query.page.limit,
                totalPages=total_pages(count, query.page.limit),
                totalRecords=count
            )
        )

    def get_all_products(
            self,
            page: Optional[str] = None,
            limit: Optional[str] = None,
            search: Optional[str] = None,
            description_length: Optional[str] = None
    ) -> ProductPage:
        """Постраничный список товаров с усечённым описанием"""
        # search ищет строку целиком, без разбиения на слова
        terms = (search.strip(),) if search and search.strip() else ()
        query = ProductQuery(
            page=self._page(page, limit),
            description_length=self._description_length(description_length),
            terms=terms
        )
        return self._product_page(query)

    def search_products(
            self,
            query_string: Optional[str] = None,
            all_words: Optional[str] = None,
            page: Optional[str] = None,
            limit: Optional[str] = None,
            description_length: Optional[str] = None
    ) -> ProductPage:
        """
        Поиск товаров по словам в названии и описании.

        all_words=on требует совпадения всех слов, любое другое значение - любого.
        """
        query = ProductQuery(
            page=self._page(page, limit),
            description_length=self._description_length(description_length),
            terms=split_terms(query_string),
            all_words=(all_words or "").strip().lower() == "on"
        )
        return self._product_page(query)

    def get_products_by_category(
            self,
            category_id: int,
            page: Optional[str] = None,
            limit: Optional[str] = None,
            description_length: Optional[str] = None
    ) -> ProductPage:
        self.get_category(category_id)
        query = ProductQuery(
            page=self._page(page, limit),
            description_length=self._description_length(description_length),
            category_id=category_id
        )
        return self._product_page(query)

    def get_products_by_department(
            self,
            department_id: int,
            page: Optional[str] = None,
            limit: Optional[str] = None,
            description_length: Optional[str] = None
    ) -> ProductPage:
        self._require_department(department_id)
        query = ProductQuery(
            page=self._page(page, limit),
            description_length=self._description_length(description_length),
            department_id=department_id
        )
        return self._product_page(query)

    def get_product(self, product_id: int) -> ProductDetail:
        product = self.repository.get_product(product_id)
        if product is None:
            logger.info(f"Product {product_id} not found")
            raise NotFoundError(f"Product with id {product_id} does not exist")
        return ProductDetail.model_validate(product)

    def get_all_departments(self) -> List[DepartmentRead]:
        return [DepartmentRead.model_validate(d) for d in self.repository.list_departments()]

    def get_department(self, department_id: int) -> DepartmentRead:
        department = self.repository.get_department(department_id)
        if department is None:
            logger.info(f"Department {department_id} not found")
            raise NotFoundError(f"Department with id {department_id} does not exist")
        return DepartmentRead.model_validate(department)

    def _require_department(self, department_id: int) -> None:
        if self.repository.get_department(department_id) is None:
            logger.info(f"Department {department_id} not found")
            raise NotFoundError(
                "Don't exist department with this ID",
                code="DEP_02",
                field="department_id"
            )

    def get_all_categories(self) -> CategoryRows:
        return CategoryRows(rows=[CategoryRead.model_validate(c) for c in self.repository.list_categories()])

    def get_category(self, category_id: int) -> CategoryRead:
        category = self.repository.get_category(category_id)
        if category is None:
            logger.info(f"Category {category_id} not found")
            raise NotFoundError(
                "Don't exist category with this ID.",
                code="CAT_01",
                field="category_id"
            )
        return CategoryRead.model_validate(category)

    def get_department_categories(self, department_id: int) -> CategoryRows:
        self._require_department(department_id)
        categories = self.repository.list_categories(department_id=department_id)
        return CategoryRows(rows=[CategoryRead.model_validate(c) for c in categories])

    def get_product_categories(self, product_id: int) -> CategoryBrief:
        category = self.repository.get_product_category(product_id)
        if category is None:
            logger.info(f"No category linked to product {product_id}")
            raise NotFoundError(
                f"product with product id {product_id} not found",
                code="PRO_01"
            )
        return CategoryBrief.model_validate(category)
