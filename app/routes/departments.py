# app/routes/departments.py
from typing import List
from fastapi import APIRouter, Depends
from models.department import DepartmentRead
from schemas.catalog import ErrorResponse
from services.catalog_service import CatalogService
from .dependencies import get_catalog_service, integer_param

router = APIRouter(
    prefix="/departments",
    tags=["departments"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}
)


@router.get("", response_model=List[DepartmentRead])
async def get_all_departments(service: CatalogService = Depends(get_catalog_service)):
    """
    Получить список всех отделов
    """
    return service.get_all_departments()


@router.get("/{department_id}", response_model=DepartmentRead)
async def get_department(
        department_id: int = Depends(integer_param("department_id")),
        service: CatalogService = Depends(get_catalog_service)
):
    """
    Получить отдел по ID
    """
    return service.get_department(department_id)
