from .products import router as products
from .departments import router as departments
from .categories import router as categories

__all__ = ["products", "departments", "categories"]
