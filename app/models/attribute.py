from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING

if TYPE_CHECKING:
    from models.product import Product


class ProductAttribute(SQLModel, table=True):
    """Связь товар-значение атрибута"""
    __tablename__ = "product_attribute"

    product_id: int = Field(foreign_key="product.product_id", primary_key=True)
    attribute_value_id: int = Field(foreign_key="attribute_value.attribute_value_id", primary_key=True)


class Attribute(SQLModel, table=True):
    """Тип атрибута (размер, цвет и т.д.)"""
    attribute_id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)

    values: List["AttributeValue"] = Relationship(back_populates="attribute_type")


class AttributeValue(SQLModel, table=True):
    """Значение атрибута"""
    __tablename__ = "attribute_value"

    attribute_value_id: Optional[int] = Field(default=None, primary_key=True)
    attribute_id: int = Field(foreign_key="attribute.attribute_id", index=True)
    value: str = Field(max_length=100)

    # Связи
    attribute_type: Optional[Attribute] = Relationship(back_populates="values")
    products: List["Product"] = Relationship(back_populates="attributes", link_model=ProductAttribute)


class AttributeRead(SQLModel):
    attribute_id: int
    name: str


class AttributeValueRead(SQLModel):
    """DTO значения атрибута вместе с его типом"""
    attribute_value_id: int
    value: str
    attribute_type: Optional[AttributeRead] = None
