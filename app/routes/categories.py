# app/routes/categories.py
from fastapi import APIRouter, Depends
from models.category import CategoryRead, CategoryBrief
from schemas.catalog import CategoryRows, ErrorResponse
from services.catalog_service import CatalogService
from .dependencies import get_catalog_service, integer_param

router = APIRouter(
    prefix="/categories",
    tags=["categories"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}
)


@router.get("", response_model=CategoryRows)
async def get_all_categories(service: CatalogService = Depends(get_catalog_service)):
    """
    Получить все категории
    """
    return service.get_all_categories()


@router.get("/inProduct/{product_id}", response_model=CategoryBrief)
async def get_product_categories(
        product_id: int = Depends(integer_param("product_id")),
        service: CatalogService = Depends(get_catalog_service)
):
    """
    Категория товара
    """
    return service.get_product_categories(product_id)


@router.get("/inDepartment/{department_id}", response_model=CategoryRows)
async def get_department_categories(
        department_id: int = Depends(integer_param("department_id")),
        service: CatalogService = Depends(get_catalog_service)
):
    """
    Категории отдела
    """
    return service.get_department_categories(department_id)


@router.get("/{category_id}", response_model=CategoryRead)
async def get_category(
        category_id: int = Depends(integer_param("category_id")),
        service: CatalogService = Depends(get_catalog_service)
):
    """
    Получить категорию по ID
    """
    return service.get_category(category_id)
