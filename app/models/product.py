from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING

from models.product_category import ProductCategory
from models.attribute import AttributeValue, AttributeValueRead, ProductAttribute

if TYPE_CHECKING:
    from models.category import Category
else:
    from models.category import Category


class ProductBase(SQLModel):
    """Базовая модель товара"""
    name: str = Field(max_length=100, index=True)
    description: Optional[str] = Field(default=None, max_length=1000)
    price: float = Field(default=0.0, ge=0)


class Product(ProductBase, table=True):
    """Модель товара для БД"""
    product_id: Optional[int] = Field(default=None, primary_key=True)

    # Связи
    categories: List["Category"] = Relationship(back_populates="products", link_model=ProductCategory)
    attributes: List[AttributeValue] = Relationship(back_populates="products", link_model=ProductAttribute)


class ProductRead(ProductBase):
    """DTO для чтения товара"""
    product_id: int


class ProductDetail(ProductRead):
    """Товар вместе со значениями атрибутов"""
    attributes: List[AttributeValueRead] = []
