from fastapi import APIRouter, Depends, HTTPException, Response
from app.api.deps import get_training_service
from app.core.header_util import create_entity_deletion_alert
from app.service.IO.training_service import TrainingService
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

ENTITY_NAME = "training"

@router.delete("/{training_id}")
async def remove_training(
    training_id: int,
    training_service: TrainingService = Depends(get_training_service)
):
    """Удаление тренинга по ID"""
    logger.debug(f"REST request to delete Training : {training_id}")
    try:
        await training_service.delete(training_id)
    except Exception as e:
        logger.error(f"Unexpected error in remove_training endpoint: {str(e)}")
        raise HTTPException(status_code=500, detail="Unexpected error occurred")

    return Response(status_code=200, headers=create_entity_deletion_alert(ENTITY_NAME, str(training_id)))
