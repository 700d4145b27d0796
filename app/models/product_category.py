from sqlmodel import SQLModel, Field


class ProductCategory(SQLModel, table=True):
    """Связь товар-категория (многие ко многим)"""
    __tablename__ = "product_category"

    product_id: int = Field(foreign_key="product.product_id", primary_key=True)
    category_id: int = Field(foreign_key="category.category_id", primary_key=True)
