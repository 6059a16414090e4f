from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import settings
from app.core.exceptions import BadRequestAlertException
from app.core.header_util import create_entity_creation_alert
from app.schemas.image import ImageDTO
from app.service.IO.image_service import ImageService
from app.db.session import get_db
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

ENTITY_NAME = "image"

@router.post("", response_model=ImageDTO, status_code=201)
async def create_image(
    image_dto: ImageDTO,
    response: Response,
    db: AsyncSession = Depends(get_db)
):
    """Создание нового изображения; id во входных данных должен отсутствовать"""
    logger.debug(f"REST request to save Image : {image_dto.name}")
    if image_dto.id is not None:
        raise BadRequestAlertException("A new image cannot already have an ID", ENTITY_NAME, "idexists")

    image_service = ImageService(db)
    
    try:
        result = await image_service.save(image_dto)
    except Exception as e:
        logger.error(f"Unexpected error in create_image endpoint: {str(e)}")
        raise HTTPException(status_code=500, detail="Unexpected error occurred")

    response.headers["Location"] = f"{settings.API_PREFIX}/images/{result.id}"
    response.headers.update(create_entity_creation_alert(ENTITY_NAME, str(result.id)))
    return result
