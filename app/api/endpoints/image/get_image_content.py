from typing import Optional
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import settings
from app.schemas.image import ImageSize
from app.service.IO.image_service import ImageService
from app.db.session import get_db
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

def _image_response(blob: bytes, content_type: Optional[str]) -> Response:
    """Байты изображения с MIME-типом из БД (без определения по содержимому) и Cache-Control"""
    headers = {"Cache-Control": f"max-age={settings.image_cache_max_age_seconds}"}
    if content_type is not None:
        headers["Content-Type"] = content_type
    return Response(content=blob, headers=headers)

# /name/{name} объявлен раньше /{image_id}/content, иначе /name/content уйдет не туда
@router.get("/name/{name}")
async def get_image_content_by_name(
    name: str,
    db: AsyncSession = Depends(get_db)
):
    """Байты изображения по имени; всегда вариант LARGE"""
    logger.debug(f"REST request to get Image content by name : {name}")
    image_service = ImageService(db)

    image = await image_service.get_image_by_name(name)
    if image is None:
        return Response(status_code=404)

    # TODO: параметр size здесь не поддерживается, ждём решения продукта
    blob, content_type = image_service.get_image_variant(image, ImageSize.LARGE)
    return _image_response(blob, content_type)

@router.get("/{image_id}/content")
async def get_image_content(
    image_id: int,
    size: Optional[str] = Query(None, description="SMALL, MEDIUM или LARGE (по умолчанию LARGE)"),
    db: AsyncSession = Depends(get_db)
):
    """Байты изображения выбранного размера"""
    logger.debug(f"REST request to get Image content : {image_id}, size: {size}")
    image_service = ImageService(db)

    image = await image_service.get_image_by_id(image_id)
    if image is None:
        return Response(status_code=404)

    blob, content_type = image_service.get_image_variant(image, ImageSize.resolve(size))
    return _image_response(blob, content_type)
