import re
from typing import Callable
from fastapi import Depends, Request
from sqlmodel import Session
from database.config import get_settings
from database.database import get_session
from repositories.catalog_repository import CatalogRepository
from services.catalog_service import CatalogService
from services.exceptions import ValidationError

INTEGER_PARAM = re.compile(r"[0-9]+")


def integer_param(name: str) -> Callable[[Request], int]:
    """
    Зависимость, проверяющая, что параметр пути - целое число.

    Нечисловое значение прерывает запрос ошибкой 400 (PARAM_01) до обращения к БД.
    """

    def dependency(request: Request) -> int:
        value = request.path_params.get(name, "")
        if not INTEGER_PARAM.fullmatch(value):
            raise ValidationError("param is not a number", code="PARAM_01", field=name)
        return int(value)

    return dependency


def get_catalog_repository(session: Session = Depends(get_session)) -> CatalogRepository:
    return CatalogRepository(session)


def get_catalog_service(repository: CatalogRepository = Depends(get_catalog_repository)) -> CatalogService:
    settings = get_settings()
    return CatalogService(
        repository,
        default_limit=settings.DEFAULT_PAGE_LIMIT,
        default_description_length=settings.DEFAULT_DESCRIPTION_LENGTH
    )
