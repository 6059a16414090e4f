from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.exceptions import BadRequestAlertException
from app.core.header_util import create_entity_update_alert
from app.schemas.image import ImageDTO
from app.service.IO.image_service import ImageService
from app.db.session import get_db
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

ENTITY_NAME = "image"

@router.put("", response_model=ImageDTO)
async def update_image(
    image_dto: ImageDTO,
    response: Response,
    db: AsyncSession = Depends(get_db)
):
    """Обновление существующего изображения"""
    logger.debug(f"REST request to update Image : {image_dto.id}")
    if image_dto.id is None:
        raise BadRequestAlertException("Invalid id", ENTITY_NAME, "idnull")

    image_service = ImageService(db)

    try:
        result = await image_service.save(image_dto)
    except Exception as e:
        # В том числе NoResultFound, если записи с таким id нет
        logger.error(f"Unexpected error in update_image endpoint: {str(e)}")
        raise HTTPException(status_code=500, detail="Unexpected error occurred")

    response.headers.update(create_entity_update_alert(ENTITY_NAME, str(image_dto.id)))
    return result
