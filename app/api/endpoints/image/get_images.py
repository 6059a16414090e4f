from typing import List
from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession
from app.api.deps import get_image_criteria, get_page_request
from app.core.config import settings
from app.core.pagination import generate_pagination_headers
from app.schemas.criteria import ImageCriteria
from app.schemas.image import ImageDTO
from app.schemas.pagination import PageRequest
from app.service.IO.image_query_service import ImageQueryService
from app.db.session import get_db
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=List[ImageDTO])
async def get_all_images(
    request: Request,
    response: Response,
    criteria: ImageCriteria = Depends(get_image_criteria),
    page_request: PageRequest = Depends(get_page_request),
    db: AsyncSession = Depends(get_db)
):
    """Список изображений по критериям с пагинацией (X-Total-Count и Link в заголовках)"""
    logger.debug(f"REST request to get Images by criteria: {criteria}")
    query_service = ImageQueryService(db)

    page = await query_service.find_by_criteria(criteria, page_request)

    response.headers.update(generate_pagination_headers(
        page,
        f"{settings.API_PREFIX}/images",
        request.query_params.multi_items()
    ))
    return page.items

@router.get("/count", response_model=int)
async def count_images(
    criteria: ImageCriteria = Depends(get_image_criteria),
    db: AsyncSession = Depends(get_db)
):
    """Количество изображений по критериям"""
    logger.debug(f"REST request to count Images by criteria: {criteria}")
    query_service = ImageQueryService(db)
    return await query_service.count_by_criteria(criteria)
