# app/routes/products.py
from typing import Optional
from fastapi import APIRouter, Depends, Query
from models.product import ProductDetail
from schemas.catalog import ProductPage, ErrorResponse
from services.catalog_service import CatalogService
from .dependencies import get_catalog_service, integer_param

router = APIRouter(
    prefix="/products",
    tags=["products"],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}
)


@router.get("", response_model=ProductPage)
async def get_all_products(
        page: Optional[str] = Query(None, description="Номер страницы, с 1"),
        limit: Optional[str] = Query(None, description="Размер страницы"),
        search: Optional[str] = Query(None, description="Поиск по названию и описанию"),
        description_length: Optional[str] = Query(None, description="Максимальная длина описания"),
        service: CatalogService = Depends(get_catalog_service)
):
    """
    Получить постраничный список товаров
    """
    return service.get_all_products(page, limit, search, description_length)


@router.get("/search", response_model=ProductPage)
async def search_products(
        query_string: Optional[str] = Query(None, description="Строка поиска"),
        all_words: Optional[str] = Query("off", description="on - все слова, off - любое слово"),
        page: Optional[str] = Query(None),
        limit: Optional[str] = Query(None),
        description_length: Optional[str] = Query(None),
        service: CatalogService = Depends(get_catalog_service)
):
    """
    Поиск товаров
    """
    return service.search_products(query_string, all_words, page, limit, description_length)


@router.get("/inCategory/{category_id}", response_model=ProductPage)
async def get_products_by_category(
        category_id: int = Depends(integer_param("category_id")),
        page: Optional[str] = Query(None),
        limit: Optional[str] = Query(None),
        description_length: Optional[str] = Query(None),
        service: CatalogService = Depends(get_catalog_service)
):
    """
    Товары категории
    """
    return service.get_products_by_category(category_id, page, limit, description_length)


@router.get("/inDepartment/{department_id}", response_model=ProductPage)
async def get_products_by_department(
        department_id: int = Depends(integer_param("department_id")),
        page: Optional[str] = Query(None),
        limit: Optional[str] = Query(None),
        description_length: Optional[str] = Query(None),
        service: CatalogService = Depends(get_catalog_service)
):
    """
    Товары отдела (через категории)
    """
    return service.get_products_by_department(department_id, page, limit, description_length)


@router.get("/{product_id}", response_model=ProductDetail)
async def get_product(
        product_id: int = Depends(integer_param("product_id")),
        service: CatalogService = Depends(get_catalog_service)
):
    """
    Получить товар вместе с атрибутами
    """
    return service.get_product(product_id)
