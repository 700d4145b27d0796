from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING

if TYPE_CHECKING:
    from models.category import Category


class DepartmentBase(SQLModel):
    """Базовая модель отдела"""
    name: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, max_length=1000)


class Department(DepartmentBase, table=True):
    """Модель отдела для БД"""
    department_id: Optional[int] = Field(default=None, primary_key=True)

    # Связи
    categories: List["Category"] = Relationship(back_populates="department")


class DepartmentRead(DepartmentBase):
    """DTO для чтения отдела"""
    department_id: int
