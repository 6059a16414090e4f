from typing import List

from fastapi import Depends, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.db.session import get_db
from app.schemas.criteria import ImageCriteria
from app.schemas.pagination import PageRequest, SortOrder
from app.service.IO.training_service import SqlTrainingService, TrainingService


def get_page_request(
    page: int = Query(0, ge=0, description="Номер страницы (с нуля)"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Размер страницы"),
    sort: List[str] = Query([], description="Сортировка: поле[,asc|desc]")
) -> PageRequest:
    """Параметры пагинации из query string"""
    try:
        sort_orders = [SortOrder.parse(value) for value in sort]
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return PageRequest(page=page, size=size, sort=sort_orders)


def get_image_criteria(request: Request) -> ImageCriteria:
    """Критерии фильтрации изображений из query string (name.contains=..., id.in=...)"""
    try:
        return ImageCriteria.from_query_params(request.query_params.multi_items())
    except ValidationError as e:
        raise RequestValidationError(
            [{**error, "loc": ("query", *error["loc"])} for error in e.errors(include_context=False)]
        )


def get_training_service(db: AsyncSession = Depends(get_db)) -> TrainingService:
    return SqlTrainingService(db)
