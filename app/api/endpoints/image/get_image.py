from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.service.IO.image_service import ImageService
from app.db.session import get_db
from app.schemas.image import ImageDTO
from app.core.exceptions import ResourceNotFoundError
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/{image_id}", response_model=ImageDTO)
async def get_image(
    image_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Получить изображение (DTO) по ID"""
    logger.debug(f"REST request to get Image : {image_id}")
    image_service = ImageService(db)

    image_dto = await image_service.find_one(image_id)
    if image_dto is None:
        raise ResourceNotFoundError(f"Image with id {image_id} not found")
    return image_dto
