from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING

from models.product_category import ProductCategory

if TYPE_CHECKING:
    from models.department import Department
    from models.product import Product
else:
    from models.department import Department


class CategoryBase(SQLModel):
    """Базовая модель категории"""
    department_id: int = Field(foreign_key="department.department_id", index=True)
    name: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, max_length=1000)


class Category(CategoryBase, table=True):
    """Модель категории для БД"""
    category_id: Optional[int] = Field(default=None, primary_key=True)

    # Связи
    department: Optional["Department"] = Relationship(back_populates="categories")
    products: List["Product"] = Relationship(back_populates="categories", link_model=ProductCategory)


class CategoryRead(CategoryBase):
    """DTO для чтения категории"""
    category_id: int


class CategoryBrief(SQLModel):
    """Категория товара без описания"""
    category_id: int
    department_id: int
    name: str
