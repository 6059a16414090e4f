from fastapi import APIRouter, HTTPException, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.header_util import create_entity_deletion_alert
from app.service.IO.image_service import ImageService
from app.db.session import get_db
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

ENTITY_NAME = "image"

@router.delete("/{image_id}")
async def remove_image(
    image_id: int,
    db: AsyncSession = Depends(get_db)
):
    """Удаление изображения по ID; 200 и для уже удаленной записи"""
    logger.debug(f"REST request to delete Image : {image_id}")
    image_service = ImageService(db)
    
    try:
        await image_service.delete(image_id)
    except Exception as e:
        logger.error(f"Unexpected error in remove_image endpoint: {str(e)}")
        raise HTTPException(status_code=500, detail="Unexpected error occurred")

    return Response(status_code=200, headers=create_entity_deletion_alert(ENTITY_NAME, str(image_id)))
